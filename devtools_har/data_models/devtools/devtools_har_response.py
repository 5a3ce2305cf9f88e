"""
devtools_har/data_models/devtools/devtools_har_response.py

Response with DevTools transfer size and network error.
"""

from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.base.har_response import HarResponse
from devtools_har.data_models.devtools.devtools_har_cookie import DevToolsHarCookie
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin
from devtools_har.utils.har_utils import Json, optional_int, optional_str


class DevToolsHarResponse(DevToolsMixin, HarResponse[DevToolsHarCookie]):
    """
    A HarResponse with DevTools cookies, the on-wire transfer size and the
    network error string (e.g. "net::ERR_ABORTED").
    """
    COOKIE_MODEL: ClassVar[type[HarCookie]] = DevToolsHarCookie

    transfer_size: int | None = Field(
        default=None,
        alias="_transferSize",
        description="Bytes transferred over the network, headers included",
    )
    error: str | None = Field(default=None, alias="_error", description="Network error reported by the browser")

    @classmethod
    def _devtools_fields_from_json(cls, json: Json) -> dict[str, Any]:
        return {
            "transfer_size": optional_int(json.get("_transferSize")),
            "error": optional_str(json.get("_error")),
        }

    @classmethod
    def _retype_nested(cls, fields: dict[str, Any]) -> dict[str, Any]:
        fields["cookies"] = [DevToolsHarCookie.from_base(cookie) for cookie in fields["cookies"]]
        return fields

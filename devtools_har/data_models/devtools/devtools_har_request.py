"""
devtools_har/data_models/devtools/devtools_har_request.py

Request carrying DevTools cookies.
"""

from typing import Any, ClassVar

from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.base.har_request import HarRequest
from devtools_har.data_models.devtools.devtools_har_cookie import DevToolsHarCookie
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin


class DevToolsHarRequest(DevToolsMixin, HarRequest[DevToolsHarCookie]):
    """
    A HarRequest whose cookies are DevToolsHarCookie. No extra fields of its own.
    """
    COOKIE_MODEL: ClassVar[type[HarCookie]] = DevToolsHarCookie

    @classmethod
    def _retype_nested(cls, fields: dict[str, Any]) -> dict[str, Any]:
        fields["cookies"] = [DevToolsHarCookie.from_base(cookie) for cookie in fields["cookies"]]
        return fields

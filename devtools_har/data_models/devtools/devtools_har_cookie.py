"""
devtools_har/data_models/devtools/devtools_har_cookie.py

Cookie with the DevTools `sameSite` attribute.
"""

from typing import Any

from pydantic import Field

from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.devtools.cookie_same_site import CookieSameSite
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin
from devtools_har.utils.har_utils import Json


class DevToolsHarCookie(DevToolsMixin, HarCookie):
    """
    A HarCookie plus its SameSite policy. Unrecognized policies parse to None.
    """
    same_site: CookieSameSite | None = Field(default=None, alias="sameSite", description="SameSite policy of the cookie")

    @classmethod
    def _devtools_fields_from_json(cls, json: Json) -> dict[str, Any]:
        return {"same_site": CookieSameSite.try_parse(json.get("sameSite"))}

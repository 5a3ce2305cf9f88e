"""
devtools_har/data_models/base/har_cookie.py

Cookie exchanged in a request or response.

Reference: http://www.softwareishard.com/blog/har-12-spec/#cookies
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_bool, optional_datetime, optional_str


class HarCookie(HarObject):
    """
    An HTTP cookie.

    `expires` holds the parsed timestamp; `expires_raw` keeps the source string
    so formats that cannot be regenerated (e.g. RFC 1123 dates) round-trip exactly.
    """
    RAW_DATE_FIELDS: ClassVar[dict[str, str]] = {"expires": "expires_raw"}

    name: str = Field(description="The name of the cookie")
    value: str = Field(description="The cookie value")
    path: str | None = Field(default=None, description="The path pertaining to the cookie")
    domain: str | None = Field(default=None, description="The host of the cookie")
    expires: datetime | None = Field(default=None, description="Cookie expiration time")
    expires_raw: str | None = Field(default=None, exclude=True, description="Original `expires` string")
    http_only: bool | None = Field(default=None, alias="httpOnly", description="Set if the cookie is HTTP only")
    secure: bool | None = Field(default=None, description="Set if the cookie was transmitted over SSL")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        name = optional_str(json.get("name"))
        expect(name is not None, f'{cls.__name__}: "name" is required')
        value = optional_str(json.get("value"))
        expect(value is not None, f'{cls.__name__}: "value" is required')

        fields = super()._fields_from_json(json)
        fields.update(
            name=name or "",
            value=value or "",
            path=optional_str(json.get("path")),
            domain=optional_str(json.get("domain")),
            expires=optional_datetime(json.get("expires")),
            expires_raw=optional_str(json.get("expires")),
            http_only=optional_bool(json.get("httpOnly")),
            secure=optional_bool(json.get("secure")),
        )
        return fields

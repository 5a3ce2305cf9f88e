"""
devtools_har/data_models/base/har_response.py

Detailed info about a response.

Reference: http://www.softwareishard.com/blog/har-12-spec/#response
"""

from typing import Any, ClassVar, Generic

from pydantic import Field

from devtools_har.data_models.base.har_content import HarContent
from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.base.har_header import HarHeader
from devtools_har.data_models.base.har_request import DEFAULT_HTTP_VERSION, CookieT
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_int, optional_str, parse_object_list


class HarResponse(HarObject, Generic[CookieT]):
    """
    A response, generic over its cookie type so extensions can carry richer cookies.
    """
    # model used to parse each element of "cookies"
    COOKIE_MODEL: ClassVar[type[HarCookie]] = HarCookie

    status: int = Field(description="Response status")
    status_text: str = Field(default="", alias="statusText", description="Response status description")
    http_version: str = Field(default=DEFAULT_HTTP_VERSION, alias="httpVersion", description="Response HTTP Version")
    cookies: list[CookieT] = Field(default_factory=list, description="List of cookie objects")
    headers: list[HarHeader] = Field(default_factory=list, description="List of header objects")
    content: HarContent = Field(default_factory=HarContent, description="Details about the response body")
    redirect_url: str = Field(default="", alias="redirectURL", description="Redirection target URL from the Location response header")
    headers_size: int = Field(
        default=-1,
        alias="headersSize",
        description="Total number of bytes from the start of the response message to the body, -1 if unknown",
    )
    body_size: int = Field(
        default=-1,
        alias="bodySize",
        description="Size of the received response body in bytes, -1 if unknown",
    )

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        status_raw = json.get("status")
        expect(
            isinstance(status_raw, int) and not isinstance(status_raw, bool),
            f'{cls.__name__}: "status" must be an integer, got {status_raw!r}',
        )
        status = optional_int(status_raw)
        status_text = optional_str(json.get("statusText"))
        expect(status_text is not None, f'{cls.__name__}: "statusText" is required')
        content = json.get("content")
        expect(isinstance(content, dict), f'{cls.__name__}: "content" must be a JSON object')
        http_version = optional_str(json.get("httpVersion"))
        headers_size = optional_int(json.get("headersSize"))
        body_size = optional_int(json.get("bodySize"))

        fields = super()._fields_from_json(json)
        fields.update(
            status=status if status is not None else 0,
            status_text=status_text or "",
            http_version=http_version if http_version is not None else DEFAULT_HTTP_VERSION,
            cookies=parse_object_list(json.get("cookies"), cls.COOKIE_MODEL.from_json, f'{cls.__name__}: "cookies"'),
            headers=parse_object_list(json.get("headers"), HarHeader.from_json, f'{cls.__name__}: "headers"'),
            content=HarContent.from_json(content) if isinstance(content, dict) else HarContent(),
            redirect_url=optional_str(json.get("redirectURL")) or "",
            headers_size=headers_size if headers_size is not None else -1,
            body_size=body_size if body_size is not None else -1,
        )
        return fields

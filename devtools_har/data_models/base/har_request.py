"""
devtools_har/data_models/base/har_request.py

Detailed info about a performed request.

Reference: http://www.softwareishard.com/blog/har-12-spec/#request
"""

from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import SplitResult, urlsplit

from pydantic import Field

from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.base.har_header import HarHeader, HarQueryParam
from devtools_har.data_models.base.har_post_data import HarPostData
from devtools_har.data_models.base.http_method import HttpMethod
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_int, optional_str, parse_object_list

DEFAULT_HTTP_VERSION = "HTTP/1.1"

CookieT = TypeVar("CookieT", bound=HarCookie)


class HarRequest(HarObject, Generic[CookieT]):
    """
    A request, generic over its cookie type so extensions can carry richer cookies.
    `url` is kept verbatim; `parsed_url` gives its components.
    """
    # model used to parse each element of "cookies"
    COOKIE_MODEL: ClassVar[type[HarCookie]] = HarCookie

    method: HttpMethod = Field(default=HttpMethod.GET, description="Request method")
    url: str = Field(description="Absolute URL of the request (fragments are not included)")
    http_version: str = Field(default=DEFAULT_HTTP_VERSION, alias="httpVersion", description="Request HTTP Version")
    cookies: list[CookieT] = Field(default_factory=list, description="List of cookie objects")
    headers: list[HarHeader] = Field(default_factory=list, description="List of header objects")
    query_string: list[HarQueryParam] = Field(
        default_factory=list,
        alias="queryString",
        description="List of query parameter objects",
    )
    post_data: HarPostData | None = Field(default=None, alias="postData", description="Posted data info")
    headers_size: int = Field(
        default=-1,
        alias="headersSize",
        description="Total number of bytes from the start of the request message to the body, -1 if unknown",
    )
    body_size: int = Field(default=-1, alias="bodySize", description="Size of the request body in bytes, -1 if unknown")

    @property
    def parsed_url(self) -> SplitResult:
        """The request URL split into its components."""
        return urlsplit(self.url)

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        method_raw = json.get("method")
        expect(method_raw is not None, f'{cls.__name__}: "method" is required')
        method = HttpMethod.try_parse(method_raw)
        expect(method_raw is None or method is not None, f'{cls.__name__}: unknown "method" {method_raw!r}')
        url = optional_str(json.get("url"))
        expect(url is not None, f'{cls.__name__}: "url" is required')
        post_data = json.get("postData")
        expect(
            post_data is None or isinstance(post_data, dict),
            f'{cls.__name__}: "postData" must be a JSON object',
        )
        http_version = optional_str(json.get("httpVersion"))
        headers_size = optional_int(json.get("headersSize"))
        body_size = optional_int(json.get("bodySize"))

        fields = super()._fields_from_json(json)
        fields.update(
            method=method or HttpMethod.GET,
            url=url or "",
            http_version=http_version if http_version is not None else DEFAULT_HTTP_VERSION,
            cookies=parse_object_list(json.get("cookies"), cls.COOKIE_MODEL.from_json, f'{cls.__name__}: "cookies"'),
            headers=parse_object_list(json.get("headers"), HarHeader.from_json, f'{cls.__name__}: "headers"'),
            query_string=parse_object_list(
                json.get("queryString"), HarQueryParam.from_json, f'{cls.__name__}: "queryString"',
            ),
            post_data=HarPostData.from_json(post_data) if isinstance(post_data, dict) else None,
            headers_size=headers_size if headers_size is not None else -1,
            body_size=body_size if body_size is not None else -1,
        )
        return fields

"""
devtools_har

Typed reading and writing of HAR 1.2 documents, with the Chrome DevTools extensions.

Usage:
    from devtools_har import DevToolsHarParser

    har = DevToolsHarParser.parse_file("capture.har")
    for entry in har.log.entries:
        print(entry.request.method, entry.request.url, entry.response.status)

    text = har.to_json_string(indent=2)
"""

__version__ = "0.1.0"

from devtools_har.config import Config
from devtools_har.data_models.base import (
    HarBrowser,
    HarCache,
    HarCacheEntry,
    HarContent,
    HarCookie,
    HarCreator,
    HarEntry,
    HarHeader,
    HarLog,
    HarNameVersion,
    HarPage,
    HarPageTimings,
    HarParam,
    HarPostData,
    HarQueryParam,
    HarRequest,
    HarResponse,
    HarRoot,
    HarTimings,
    HttpMethod,
)
from devtools_har.data_models.devtools import (
    CookieSameSite,
    DevToolsHarCookie,
    DevToolsHarEntry,
    DevToolsHarLog,
    DevToolsHarRequest,
    DevToolsHarResponse,
    DevToolsHarRoot,
    DevToolsHarTimings,
    DevToolsHarWebSocketMessage,
)
from devtools_har.data_models.har_object import HarObject
from devtools_har.har_parser import DevToolsHarParser, HarParser
from devtools_har.utils.exceptions import HarAnomalyError
from devtools_har.utils.har_utils import strict_parsing

__all__ = [
    "Config",
    "CookieSameSite",
    "DevToolsHarCookie",
    "DevToolsHarEntry",
    "DevToolsHarLog",
    "DevToolsHarParser",
    "DevToolsHarRequest",
    "DevToolsHarResponse",
    "DevToolsHarRoot",
    "DevToolsHarTimings",
    "DevToolsHarWebSocketMessage",
    "HarAnomalyError",
    "HarBrowser",
    "HarCache",
    "HarCacheEntry",
    "HarContent",
    "HarCookie",
    "HarCreator",
    "HarEntry",
    "HarHeader",
    "HarLog",
    "HarNameVersion",
    "HarObject",
    "HarPage",
    "HarPageTimings",
    "HarParam",
    "HarParser",
    "HarPostData",
    "HarQueryParam",
    "HarRequest",
    "HarResponse",
    "HarRoot",
    "HarTimings",
    "HttpMethod",
    "strict_parsing",
]

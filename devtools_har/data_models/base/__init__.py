"""
devtools_har/data_models/base/__init__.py

HAR 1.2 data models.
"""

from devtools_har.data_models.base.har_cache import HarCache, HarCacheEntry
from devtools_har.data_models.base.har_content import HarContent
from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.base.har_entry import HarEntry
from devtools_har.data_models.base.har_header import HarHeader, HarQueryParam
from devtools_har.data_models.base.har_log import HarLog
from devtools_har.data_models.base.har_name_version import HarBrowser, HarCreator, HarNameVersion
from devtools_har.data_models.base.har_page import HarPage, HarPageTimings
from devtools_har.data_models.base.har_post_data import HarParam, HarPostData
from devtools_har.data_models.base.har_request import HarRequest
from devtools_har.data_models.base.har_response import HarResponse
from devtools_har.data_models.base.har_root import HarRoot
from devtools_har.data_models.base.har_timings import HarTimings
from devtools_har.data_models.base.http_method import HttpMethod

__all__ = [
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
    "HarPage",
    "HarPageTimings",
    "HarParam",
    "HarPostData",
    "HarQueryParam",
    "HarRequest",
    "HarResponse",
    "HarRoot",
    "HarTimings",
    "HttpMethod",
]

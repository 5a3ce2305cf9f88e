"""
devtools_har/data_models/devtools/__init__.py

Chrome DevTools extensions of the HAR 1.2 models (the underscore-prefixed fields).
"""

from devtools_har.data_models.devtools.cookie_same_site import CookieSameSite
from devtools_har.data_models.devtools.devtools_har_cookie import DevToolsHarCookie
from devtools_har.data_models.devtools.devtools_har_entry import DevToolsHarEntry, DevToolsHarWebSocketMessage
from devtools_har.data_models.devtools.devtools_har_log import DevToolsHarLog
from devtools_har.data_models.devtools.devtools_har_request import DevToolsHarRequest
from devtools_har.data_models.devtools.devtools_har_response import DevToolsHarResponse
from devtools_har.data_models.devtools.devtools_har_root import DevToolsHarRoot
from devtools_har.data_models.devtools.devtools_har_timings import DevToolsHarTimings
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin

__all__ = [
    "CookieSameSite",
    "DevToolsHarCookie",
    "DevToolsHarEntry",
    "DevToolsHarLog",
    "DevToolsHarRequest",
    "DevToolsHarResponse",
    "DevToolsHarRoot",
    "DevToolsHarTimings",
    "DevToolsHarWebSocketMessage",
    "DevToolsMixin",
]

"""
devtools_har/data_models/base/http_method.py

HTTP request methods recognized in HAR request objects.
"""

from enum import StrEnum
from typing import Any, Self


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @classmethod
    def try_parse(cls, value: Any) -> Self | None:
        """Case-insensitive lookup; None for missing or unknown methods."""
        if value is None:
            return None
        upper = str(value).strip().upper()
        for method in cls:
            if method.value == upper:
                return method
        return None

"""
devtools_har/data_models/base/har_header.py

Name/value leaf objects: HTTP headers and query string parameters.

Reference: http://www.softwareishard.com/blog/har-12-spec/#headers
"""

from typing import Any

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_str


class _HarNameValue(HarObject):
    """
    Shared shape of headers and query parameters: both fields required.
    """
    name: str = Field(description="Name of the header or parameter")
    value: str = Field(description="Value of the header or parameter")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        name = optional_str(json.get("name"))
        expect(name is not None, f'{cls.__name__}: "name" is required')
        value = optional_str(json.get("value"))
        expect(value is not None, f'{cls.__name__}: "value" is required')

        fields = super()._fields_from_json(json)
        fields.update(name=name or "", value=value or "")
        return fields


class HarHeader(_HarNameValue):
    """
    An HTTP request or response header.
    """


class HarQueryParam(_HarNameValue):
    """
    A parameter parsed from the request query string.
    """

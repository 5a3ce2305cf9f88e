"""
devtools_har/data_models/base/har_name_version.py

Name/version pair used for the log creator and browser.

Reference: http://www.softwareishard.com/blog/har-12-spec/#creator
"""

from typing import Any

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_str


class HarNameVersion(HarObject):
    """
    Name and version of the application (creator) or browser that produced the log.
    """
    name: str = Field(description="Name of the application or browser")
    version: str = Field(description="Version of the application or browser")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        name = optional_str(json.get("name"))
        expect(name is not None, f'{cls.__name__}: "name" is required')
        version = optional_str(json.get("version"))
        expect(version is not None, f'{cls.__name__}: "version" is required')

        fields = super()._fields_from_json(json)
        fields.update(name=name or "", version=version or "")
        return fields


# HAR 1.2 names the same object shape twice
HarCreator = HarNameVersion
HarBrowser = HarNameVersion

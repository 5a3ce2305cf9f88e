"""
devtools_har/data_models/base/har_post_data.py

Posted data attached to a request, and its posted parameters.

Reference: http://www.softwareishard.com/blog/har-12-spec/#postData

`text` and `params` are described as mutually exclusive by HAR 1.2, but real
captures populate both; both are accepted and round-tripped as found.
"""

from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_str, parse_object_list

FALLBACK_MIME_TYPE = "application/octet-stream"


class HarParam(HarObject):
    """
    A posted parameter (form field or uploaded file).
    """
    name: str = Field(description="Name of the posted parameter")
    value: str | None = Field(default=None, description="Value of the posted parameter or content of a posted file")
    file_name: str | None = Field(default=None, alias="fileName", description="Name of a posted file")
    content_type: str | None = Field(default=None, alias="contentType", description="Content type of a posted file")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        name = optional_str(json.get("name"))
        expect(name is not None, f'{cls.__name__}: "name" is required')

        fields = super()._fields_from_json(json)
        fields.update(
            name=name or "",
            value=optional_str(json.get("value")),
            file_name=optional_str(json.get("fileName")),
            content_type=optional_str(json.get("contentType")),
        )
        return fields


class HarPostData(HarObject):
    """
    Posted data info: either raw `text` or a list of `params`, sometimes both.
    """
    OPTIONAL_LISTS: ClassVar[frozenset[str]] = frozenset({"params"})

    mime_type: str = Field(default=FALLBACK_MIME_TYPE, alias="mimeType", description="Mime type of posted data")
    params: list[HarParam] = Field(default_factory=list, description="List of posted parameters")
    text: str | None = Field(default=None, description="Plain text posted data")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        mime_type = optional_str(json.get("mimeType"))
        expect(mime_type is not None, f'{cls.__name__}: "mimeType" is required')

        fields = super()._fields_from_json(json)
        fields.update(
            mime_type=mime_type if mime_type is not None else FALLBACK_MIME_TYPE,
            params=parse_object_list(json.get("params"), HarParam.from_json, f'{cls.__name__}: "params"'),
            text=optional_str(json.get("text")),
        )
        return fields

"""
devtools_har/data_models/base/har_content.py

Details about the response body.

Reference: http://www.softwareishard.com/blog/har-12-spec/#content
"""

from typing import Any

from pydantic import Field

from devtools_har.data_models.base.har_post_data import FALLBACK_MIME_TYPE
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_int, optional_str


class HarContent(HarObject):
    """
    Response content. `size` is the uncompressed length; `compression` is the
    number of bytes saved when the payload was compressed on the wire.
    """
    size: int = Field(default=0, description="Length of the returned content in bytes")
    compression: int | None = Field(default=None, description="Number of bytes saved by compression")
    mime_type: str = Field(default=FALLBACK_MIME_TYPE, alias="mimeType", description="MIME type of the response text")
    text: str | None = Field(default=None, description="Response body, decoded or encoded per `encoding`")
    encoding: str | None = Field(default=None, description="Encoding used for `text`, e.g. base64")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        size = optional_int(json.get("size"))
        expect(size is not None, f'{cls.__name__}: "size" is required and must be numeric')
        mime_type = optional_str(json.get("mimeType"))
        expect(mime_type is not None, f'{cls.__name__}: "mimeType" is required')

        fields = super()._fields_from_json(json)
        fields.update(
            size=size if size is not None else 0,
            compression=optional_int(json.get("compression")),
            mime_type=mime_type if mime_type is not None else FALLBACK_MIME_TYPE,
            text=optional_str(json.get("text")),
            encoding=optional_str(json.get("encoding")),
        )
        return fields

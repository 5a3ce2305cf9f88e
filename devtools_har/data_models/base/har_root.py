"""
devtools_har/data_models/base/har_root.py

Top-level HAR document: {"log": {...}}.
"""

import json
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import Field

from devtools_har.data_models.base.har_log import HarLog
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect

LogT = TypeVar("LogT", bound=HarLog)


class HarRoot(HarObject, Generic[LogT]):
    """
    The HAR document, generic over its log type.
    """
    # model used to parse "log"
    LOG_MODEL: ClassVar[type[HarLog]] = HarLog

    log: LogT = Field(description="The exported log")

    def to_json_string(self, include_nulls: bool = False, indent: int | None = None) -> str:
        """
        Encode the document as JSON text.
        Args:
            include_nulls: See HarObject.to_json.
            indent: Passed to json.dumps.
        Returns:
            str: The JSON document.
        """
        return json.dumps(self.to_json(include_nulls=include_nulls), ensure_ascii=False, indent=indent)

    @classmethod
    def _fields_from_json(cls, json_obj: Json) -> dict[str, Any]:
        log = json_obj.get("log")
        expect(isinstance(log, dict), f'{cls.__name__}: "log" must be a JSON object')

        fields = super()._fields_from_json(json_obj)
        fields.update(log=cls.LOG_MODEL.from_json(log if isinstance(log, dict) else {}))
        return fields

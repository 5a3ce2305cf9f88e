"""
devtools_har/data_models/har_object.py

Base class for all HAR objects.

Every modeled HAR type carries an optional comment and an open bag of
vendor fields, and implements the same from_json / to_json / copy_with
contract on top of the helpers in devtools_har.utils.har_utils.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from devtools_har.utils.har_utils import (
    Json,
    apply_null_policy,
    collect_custom,
    format_datetime,
    normalize_number,
    optional_str,
)


class HarObject(BaseModel):
    """
    Base class for all HAR objects that expose `comment` and custom fields.

    Subclasses declare their JSON keys as pydantic field aliases. Everything in
    a source object that is not a declared key ends up in `custom` and is
    written back verbatim after the declared fields.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # parsed datetime field -> field holding the verbatim source string
    RAW_DATE_FIELDS: ClassVar[dict[str, str]] = {}
    # list fields dropped from compact output when empty
    OPTIONAL_LISTS: ClassVar[frozenset[str]] = frozenset()

    comment: str | None = Field(
        default=None,
        description="A comment provided by the user or the application",
    )
    custom: dict[str, Any] = Field(
        default_factory=dict,
        exclude=True,
        description="Unrecognized (vendor) fields of the source object, keyed by their original JSON name",
    )

    @classmethod
    def json_keys(cls) -> frozenset[str]:
        """
        JSON keys this model parses into typed fields.
        Derived from the concrete class, so extension fields are included.
        """
        return frozenset(
            info.alias or name
            for name, info in cls.model_fields.items()
            if not info.exclude
        )

    @classmethod
    def from_json(cls, json: Json) -> Self:
        """
        Deserialize from a decoded JSON object.
        Malformed input never raises outside strict mode; see har_utils.expect.
        """
        return cls(**cls._fields_from_json(json))

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        """
        Build constructor keyword arguments from a decoded JSON object.
        Subclasses extend the returned dict with their own fields.
        """
        return {
            "comment": optional_str(json.get("comment")),
            "custom": collect_custom(json, cls.json_keys()),
        }

    def to_json(self, include_nulls: bool = False) -> Json:
        """
        Serialize to a JSON-compatible dict.
        Args:
            include_nulls: Emit every declared field, with None for absent values,
                instead of omitting them.
        Returns:
            Json: Declared fields in declaration order, then comment, then vendor fields.
        """
        data: Json = {}
        for name, info in type(self).model_fields.items():
            if info.exclude or name == "comment":
                continue
            if name in self.OPTIONAL_LISTS and not include_nulls and not getattr(self, name):
                continue
            data[info.alias or name] = self._field_to_json(name, include_nulls)
        data["comment"] = self.comment

        data = dict(apply_null_policy(data, include_nulls=include_nulls))
        # vendor fields are spliced in unmodified, nulls included; they never shadow a declared key
        declared = type(self).json_keys()
        data.update((key, value) for key, value in self.custom.items() if key not in declared)
        return data

    def _field_to_json(self, name: str, include_nulls: bool) -> Any:
        raw_name = self.RAW_DATE_FIELDS.get(name)
        if raw_name is not None:
            raw_value = getattr(self, raw_name)
            if raw_value is not None:
                return raw_value
        return to_json_value(getattr(self, name), include_nulls)

    def copy_with(self, **overrides: Any) -> Self:
        """
        Return a copy with the given fields replaced.
        Unspecified fields keep their value (nested objects are shared, not copied)
        and the result is always of the receiver's concrete type.
        Overriding a parsed date drops its raw source string unless that is overridden too.
        """
        fields = type(self).model_fields
        unknown = sorted(set(overrides) - set(fields))
        if unknown:
            raise TypeError(f"{type(self).__name__}.copy_with() got unexpected fields: {unknown}")

        for parsed_name, raw_name in self.RAW_DATE_FIELDS.items():
            if parsed_name in overrides and raw_name not in overrides:
                overrides[raw_name] = None

        values = {name: getattr(self, name) for name in fields}
        values.update(overrides)
        return type(self)(**values)


def to_json_value(value: Any, include_nulls: bool = False) -> Any:
    """Convert a typed field value to its JSON representation."""
    if isinstance(value, HarObject):
        return value.to_json(include_nulls=include_nulls)
    if isinstance(value, list):
        return [to_json_value(item, include_nulls) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, float):
        return normalize_number(value)
    return value

"""
devtools_har/data_models/devtools/devtools_mixin.py

Shared behavior of the DevTools extension models.

An extension model subclasses its base HAR model through DevToolsMixin:

    class DevToolsHarCookie(DevToolsMixin, HarCookie):
        same_site: CookieSameSite | None = Field(default=None, alias="sameSite")

The base model parses its own fields, the mixin adds the extension fields read
from the same JSON object, and `custom` is collected against the concrete
class's keys so extension fields never leak into it.
"""

from typing import Any, Self

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json


class DevToolsMixin:
    """
    Must precede the base model in the list of bases.
    """

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        fields = super()._fields_from_json(json)
        fields.update(cls._devtools_fields_from_json(json))
        return fields

    @classmethod
    def _devtools_fields_from_json(cls, json: Json) -> dict[str, Any]:
        """Parse the extension-only fields. All of them are optional."""
        return {}

    @classmethod
    def _retype_nested(cls, fields: dict[str, Any]) -> dict[str, Any]:
        """Convert nested base entities to their extension models (used by from_base)."""
        return fields

    @classmethod
    def from_base(cls, base: HarObject, **overrides: Any) -> Self:
        """
        Wrap an already-parsed base entity as this extension model.

        Extension keys that the base parse collected into `custom` are lifted
        out and parsed into the typed fields, so wrapping a base entity gives
        the same result as parsing the source JSON at the extension type.
        Args:
            base: The base-layer entity, e.g. a HarCookie for DevToolsHarCookie.
            **overrides: Field values to set on the result.
        Returns:
            The extension entity.
        """
        if isinstance(base, cls) and not overrides:
            return base

        fields = {name: getattr(base, name) for name in type(base).model_fields}
        extension_keys = cls.json_keys() - type(base).json_keys()
        custom = dict(base.custom)
        lifted = {key: custom.pop(key) for key in list(custom) if key in extension_keys}
        fields["custom"] = custom
        if not isinstance(base, cls):
            fields.update(cls._devtools_fields_from_json(lifted))

        fields = cls._retype_nested(fields)
        fields.update(overrides)
        return cls(**fields)

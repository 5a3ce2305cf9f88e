"""
devtools_har/data_models/devtools/devtools_har_log.py

Log whose entries are DevToolsHarEntry.
"""

from typing import Any, ClassVar

from devtools_har.data_models.base.har_entry import HarEntry
from devtools_har.data_models.base.har_log import HarLog
from devtools_har.data_models.devtools.devtools_har_entry import DevToolsHarEntry
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin


class DevToolsHarLog(DevToolsMixin, HarLog[DevToolsHarEntry]):
    ENTRY_MODEL: ClassVar[type[HarEntry]] = DevToolsHarEntry

    @classmethod
    def _retype_nested(cls, fields: dict[str, Any]) -> dict[str, Any]:
        fields["entries"] = [DevToolsHarEntry.from_base(entry) for entry in fields["entries"]]
        return fields

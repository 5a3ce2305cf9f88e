"""
devtools_har/data_models/devtools/devtools_har_root.py

HAR document exported by browser DevTools.
"""

from typing import Any, ClassVar

from devtools_har.data_models.base.har_log import HarLog
from devtools_har.data_models.base.har_root import HarRoot
from devtools_har.data_models.devtools.devtools_har_log import DevToolsHarLog
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin


class DevToolsHarRoot(DevToolsMixin, HarRoot[DevToolsHarLog]):
    LOG_MODEL: ClassVar[type[HarLog]] = DevToolsHarLog

    @classmethod
    def _retype_nested(cls, fields: dict[str, Any]) -> dict[str, Any]:
        fields["log"] = DevToolsHarLog.from_base(fields["log"])
        return fields

"""
devtools_har/data_models/devtools/devtools_har_timings.py

Timings with the DevTools breakdown of the "blocked" phase.
"""

from typing import Any

from pydantic import Field

from devtools_har.data_models.base.har_timings import HarTimings
from devtools_har.data_models.devtools.devtools_mixin import DevToolsMixin
from devtools_har.utils.har_utils import Json, optional_float


class DevToolsHarTimings(DevToolsMixin, HarTimings):
    """
    HarTimings plus the queueing and proxy parts of `blocked`, in milliseconds.
    """
    blocked_queueing: float | None = Field(
        default=None,
        alias="_blocked_queueing",
        description="Time spent queued by the browser before the request could start",
    )
    blocked_proxy: float | None = Field(
        default=None,
        alias="_blocked_proxy",
        description="Time spent negotiating with a proxy",
    )

    @classmethod
    def _devtools_fields_from_json(cls, json: Json) -> dict[str, Any]:
        return {
            "blocked_queueing": optional_float(json.get("_blocked_queueing")),
            "blocked_proxy": optional_float(json.get("_blocked_proxy")),
        }

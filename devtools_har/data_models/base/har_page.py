"""
devtools_har/data_models/base/har_page.py

Exported pages and their load timings.

Reference: http://www.softwareishard.com/blog/har-12-spec/#pages
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import EPOCH, Json, expect, optional_datetime, optional_float, optional_str


class HarPageTimings(HarObject):
    """
    Page load milestones in milliseconds since the page load started; -1 when not applicable.
    """
    on_content_load: float | None = Field(
        default=None,
        alias="onContentLoad",
        description="Milliseconds until the page content was loaded (DOMContentLoaded)",
    )
    on_load: float | None = Field(
        default=None,
        alias="onLoad",
        description="Milliseconds until the page was loaded (onLoad)",
    )

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        fields = super()._fields_from_json(json)
        fields.update(
            on_content_load=optional_float(json.get("onContentLoad")),
            on_load=optional_float(json.get("onLoad")),
        )
        return fields


class HarPage(HarObject):
    """
    A page (browsing context) that groups entries. Entries point at it via `pageref`.
    """
    RAW_DATE_FIELDS: ClassVar[dict[str, str]] = {"started_date_time": "started_date_time_raw"}

    started_date_time: datetime = Field(alias="startedDateTime", description="Date and time stamp for the beginning of the page load")
    started_date_time_raw: str | None = Field(default=None, exclude=True, description="Original `startedDateTime` string")
    id: str = Field(description="Unique identifier of a page within the log, referenced by entries")
    title: str = Field(default="", description="Page title")
    page_timings: HarPageTimings = Field(
        default_factory=HarPageTimings,
        alias="pageTimings",
        description="Detailed timing info about page load",
    )

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        started_raw = optional_str(json.get("startedDateTime"))
        expect(started_raw is not None, f'{cls.__name__}: "startedDateTime" is required')
        started = optional_datetime(started_raw)
        expect(
            started_raw is None or started is not None,
            f'{cls.__name__}: "startedDateTime" must be a valid date: {started_raw!r}',
        )
        page_id = optional_str(json.get("id"))
        expect(page_id is not None, f'{cls.__name__}: "id" is required')
        title = optional_str(json.get("title"))
        expect(title is not None, f'{cls.__name__}: "title" is required')
        page_timings = json.get("pageTimings")
        expect(isinstance(page_timings, dict), f'{cls.__name__}: "pageTimings" must be a JSON object')

        fields = super()._fields_from_json(json)
        fields.update(
            started_date_time=started or EPOCH,
            started_date_time_raw=started_raw,
            id=page_id or "",
            title=title or "",
            page_timings=HarPageTimings.from_json(page_timings) if isinstance(page_timings, dict) else HarPageTimings(),
        )
        return fields

"""
devtools_har/data_models/base/har_entry.py

A single exported HTTP transaction.

Reference: http://www.softwareishard.com/blog/har-12-spec/#entries
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.base.har_cache import HarCache
from devtools_har.data_models.base.har_request import HarRequest
from devtools_har.data_models.base.har_response import HarResponse
from devtools_har.data_models.base.har_timings import HarTimings
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import EPOCH, Json, expect, optional_datetime, optional_float, optional_str


class HarEntry(HarObject):
    """
    One request/response pair with its cache and timing info.

    The nested request, response and timings are parsed with the models named
    by the class-level factories, so an extension only swaps the factories.
    """
    RAW_DATE_FIELDS: ClassVar[dict[str, str]] = {"started_date_time": "started_date_time_raw"}
    REQUEST_MODEL: ClassVar[type[HarRequest]] = HarRequest
    RESPONSE_MODEL: ClassVar[type[HarResponse]] = HarResponse
    TIMINGS_MODEL: ClassVar[type[HarTimings]] = HarTimings

    pageref: str | None = Field(default=None, description="Reference to the parent page (its `id`)")
    started_date_time: datetime = Field(alias="startedDateTime", description="Date and time stamp of the request start")
    started_date_time_raw: str | None = Field(default=None, exclude=True, description="Original `startedDateTime` string")
    total_time: float = Field(alias="time", description="Total elapsed time of the request in milliseconds")
    request: HarRequest = Field(description="Detailed info about the request")
    response: HarResponse = Field(description="Detailed info about the response")
    cache: HarCache = Field(default_factory=HarCache, description="Info about cache usage")
    timings: HarTimings = Field(description="Detailed timing info about request/response round trip")
    server_ip_address: str | None = Field(
        default=None,
        alias="serverIPAddress",
        description="IP address of the server that was connected (result of DNS resolution)",
    )
    connection: str | None = Field(default=None, description="Unique ID of the parent TCP/IP connection")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        started_raw = optional_str(json.get("startedDateTime"))
        expect(started_raw is not None, f'{cls.__name__}: "startedDateTime" is required')
        started = optional_datetime(started_raw)
        expect(
            started_raw is None or started is not None,
            f'{cls.__name__}: "startedDateTime" must be a valid date: {started_raw!r}',
        )
        total_time = optional_float(json.get("time"))
        expect(total_time is not None, f'{cls.__name__}: "time" is required and must be numeric')

        request = json.get("request")
        expect(isinstance(request, dict), f'{cls.__name__}: "request" must be a JSON object')
        response = json.get("response")
        expect(isinstance(response, dict), f'{cls.__name__}: "response" must be a JSON object')
        cache = json.get("cache")
        expect(isinstance(cache, dict), f'{cls.__name__}: "cache" must be a JSON object')
        timings = json.get("timings")
        expect(isinstance(timings, dict), f'{cls.__name__}: "timings" must be a JSON object')

        fields = super()._fields_from_json(json)
        fields.update(
            pageref=optional_str(json.get("pageref")),
            started_date_time=started or EPOCH,
            started_date_time_raw=started_raw,
            total_time=total_time if total_time is not None else 0.0,
            request=(
                cls.REQUEST_MODEL.from_json(request) if isinstance(request, dict)
                else cls.REQUEST_MODEL(url="")
            ),
            response=(
                cls.RESPONSE_MODEL.from_json(response) if isinstance(response, dict)
                else cls.RESPONSE_MODEL(status=0)
            ),
            cache=HarCache.from_json(cache) if isinstance(cache, dict) else HarCache(),
            timings=(
                cls.TIMINGS_MODEL.from_json(timings) if isinstance(timings, dict)
                else cls.TIMINGS_MODEL(send=0, wait=0, receive=0)
            ),
            server_ip_address=optional_str(json.get("serverIPAddress")),
            connection=optional_str(json.get("connection")),
        )
        return fields

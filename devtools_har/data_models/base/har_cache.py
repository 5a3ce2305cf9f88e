"""
devtools_har/data_models/base/har_cache.py

Cache state before and after a request.

Reference: http://www.softwareishard.com/blog/har-12-spec/#cache
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import (
    EPOCH,
    Json,
    expect,
    optional_datetime,
    optional_int,
    optional_str,
)


class HarCacheEntry(HarObject):
    """
    State of a cache entry.
    """
    RAW_DATE_FIELDS: ClassVar[dict[str, str]] = {
        "expires": "expires_raw",
        "last_access": "last_access_raw",
    }

    expires: datetime | None = Field(default=None, description="Expiration time of the cache entry")
    expires_raw: str | None = Field(default=None, exclude=True, description="Original `expires` string")
    last_access: datetime = Field(alias="lastAccess", description="The last time the cache entry was opened")
    last_access_raw: str | None = Field(default=None, exclude=True, description="Original `lastAccess` string")
    e_tag: str = Field(alias="eTag", description="Etag")
    hit_count: int = Field(default=0, alias="hitCount", description="The number of times the cache entry has been opened")

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        last_access_raw = optional_str(json.get("lastAccess"))
        expect(last_access_raw is not None, f'{cls.__name__}: "lastAccess" is required')
        last_access = optional_datetime(last_access_raw)
        expect(
            last_access_raw is None or last_access is not None,
            f'{cls.__name__}: "lastAccess" must be a valid date: {last_access_raw!r}',
        )
        e_tag = optional_str(json.get("eTag"))
        expect(e_tag is not None, f'{cls.__name__}: "eTag" is required')
        hit_count = optional_int(json.get("hitCount"))

        fields = super()._fields_from_json(json)
        fields.update(
            expires=optional_datetime(json.get("expires")),
            expires_raw=optional_str(json.get("expires")),
            last_access=last_access or EPOCH,
            last_access_raw=last_access_raw,
            e_tag=e_tag or "",
            hit_count=hit_count if hit_count is not None else 0,
        )
        return fields


class HarCache(HarObject):
    """
    Info about a request coming from the browser cache. Both entries are optional.
    """
    before_request: HarCacheEntry | None = Field(
        default=None,
        alias="beforeRequest",
        description="State of the cache entry before the request",
    )
    after_request: HarCacheEntry | None = Field(
        default=None,
        alias="afterRequest",
        description="State of the cache entry after the request",
    )

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        before_request = json.get("beforeRequest")
        after_request = json.get("afterRequest")

        fields = super()._fields_from_json(json)
        fields.update(
            before_request=HarCacheEntry.from_json(before_request) if isinstance(before_request, dict) else None,
            after_request=HarCacheEntry.from_json(after_request) if isinstance(after_request, dict) else None,
        )
        return fields

"""
devtools_har/data_models/base/har_log.py

The root of the exported data.

Reference: http://www.softwareishard.com/blog/har-12-spec/#log
"""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import Field

from devtools_har.data_models.base.har_entry import HarEntry
from devtools_har.data_models.base.har_name_version import HarBrowser, HarCreator
from devtools_har.data_models.base.har_page import HarPage
from devtools_har.data_models.har_object import HarObject
from devtools_har.utils.har_utils import Json, expect, optional_str, parse_object_list

DEFAULT_HAR_VERSION = "1.2"

EntryT = TypeVar("EntryT", bound=HarEntry)


class HarLog(HarObject, Generic[EntryT]):
    """
    The log: creator info, pages and entries, generic over the entry type.
    Pages and entries are siblings linked only by `HarEntry.pageref`.
    """
    # model used to parse each element of "entries"
    ENTRY_MODEL: ClassVar[type[HarEntry]] = HarEntry
    OPTIONAL_LISTS: ClassVar[frozenset[str]] = frozenset({"pages"})

    version: str = Field(default=DEFAULT_HAR_VERSION, description="Version number of the format")
    creator: HarCreator = Field(description="Name and version info of the log creator application")
    browser: HarBrowser | None = Field(default=None, description="Name and version info of the used browser")
    pages: list[HarPage] = Field(default_factory=list, description="List of all exported (tracked) pages")
    entries: list[EntryT] = Field(default_factory=list, description="List of all exported (tracked) requests")

    def entries_for_page(self, page_id: str) -> list[EntryT]:
        """Entries whose `pageref` points at the given page id, in log order."""
        return [entry for entry in self.entries if entry.pageref == page_id]

    @classmethod
    def _fields_from_json(cls, json: Json) -> dict[str, Any]:
        for key in ("version", "creator", "entries"):
            expect(key in json, f'{cls.__name__}: "{key}" is required')
        version = optional_str(json.get("version"))
        creator = json.get("creator")
        expect(creator is None or isinstance(creator, dict), f'{cls.__name__}: "creator" must be a JSON object')
        browser = json.get("browser")

        fields = super()._fields_from_json(json)
        fields.update(
            version=version if version is not None else DEFAULT_HAR_VERSION,
            creator=HarCreator.from_json(creator) if isinstance(creator, dict) else HarCreator(name="", version=""),
            browser=HarBrowser.from_json(browser) if isinstance(browser, dict) else None,
            pages=parse_object_list(json.get("pages"), HarPage.from_json, f'{cls.__name__}: "pages"'),
            entries=parse_object_list(json.get("entries"), cls.ENTRY_MODEL.from_json, f'{cls.__name__}: "entries"'),
        )
        return fields

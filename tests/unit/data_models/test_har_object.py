"""
tests/unit/data_models/test_har_object.py

Tests for the behavior every HAR model shares: null policy, number
normalization, vendor fields, raw date preservation and copy_with.
"""

import json
from datetime import datetime, timezone
from typing import Any

import pytest
from pydantic import ValidationError

from devtools_har.data_models.base.har_cache import HarCache, HarCacheEntry
from devtools_har.data_models.base.har_content import HarContent
from devtools_har.data_models.base.har_cookie import HarCookie
from devtools_har.data_models.base.har_entry import HarEntry
from devtools_har.data_models.base.har_log import HarLog
from devtools_har.data_models.base.har_name_version import HarCreator
from devtools_har.data_models.base.har_page import HarPage, HarPageTimings
from devtools_har.data_models.base.har_request import HarRequest
from devtools_har.data_models.base.har_response import HarResponse
from devtools_har.data_models.base.har_timings import HarTimings
from devtools_har.data_models.base.http_method import HttpMethod
from devtools_har.data_models.devtools.cookie_same_site import CookieSameSite
from devtools_har.data_models.devtools.devtools_har_cookie import DevToolsHarCookie
from devtools_har.data_models.devtools.devtools_har_entry import DevToolsHarEntry, DevToolsHarWebSocketMessage
from devtools_har.data_models.devtools.devtools_har_request import DevToolsHarRequest
from devtools_har.data_models.devtools.devtools_har_response import DevToolsHarResponse
from devtools_har.data_models.devtools.devtools_har_timings import DevToolsHarTimings
from devtools_har.data_models.har_object import HarObject


def make_entry() -> HarEntry:
    """A minimal entry built in code."""
    return HarEntry(
        started_date_time=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        total_time=120,
        request=HarRequest(url="https://api.example.com/v1/vehicles", body_size=0),
        response=HarResponse(status=200, status_text="OK", content=HarContent(size=0), body_size=0),
        cache=HarCache(),
        timings=HarTimings(send=0, wait=0, receive=0),
    )


class TestNullPolicy:
    """Test cases for compact vs. include_nulls output."""

    def test_compact_omits_absent_fields(self) -> None:
        """Absent optional fields are not emitted in compact mode."""
        cookie = HarCookie(name="sid", value="abc")
        assert cookie.to_json() == {"name": "sid", "value": "abc"}

    def test_include_nulls_emits_every_declared_field(self) -> None:
        """include_nulls emits all declared keys, with None for absent ones."""
        cookie = HarCookie(name="sid", value="abc")
        assert cookie.to_json(include_nulls=True) == {
            "name": "sid",
            "value": "abc",
            "path": None,
            "domain": None,
            "expires": None,
            "httpOnly": None,
            "secure": None,
            "comment": None,
        }

    def test_verbose_keys_are_superset_of_compact(self) -> None:
        """Every key of the compact output also appears in the verbose output."""
        entry = make_entry()
        compact = entry.to_json()
        verbose = entry.to_json(include_nulls=True)
        assert set(compact) <= set(verbose)
        assert len(verbose) > len(compact)
        assert set(compact["request"]) <= set(verbose["request"])

    def test_optional_lists_dropped_only_when_empty_and_compact(self) -> None:
        """An empty log.pages is omitted in compact output but kept with include_nulls."""
        log = HarLog(creator=HarCreator(name="test", version="1"))
        assert "pages" not in log.to_json()
        assert log.to_json(include_nulls=True)["pages"] == []
        assert log.to_json()["entries"] == []

    def test_output_order_is_declared_fields_then_comment_then_custom(self) -> None:
        """Declared fields first, then comment, then vendor fields."""
        cookie = HarCookie.from_json({"_x": 1, "comment": "c", "value": "v", "name": "n"})
        assert list(cookie.to_json()) == ["name", "value", "comment", "_x"]


class TestNumbers:
    """Test cases for number normalization on output."""

    def test_whole_float_is_written_as_int(self) -> None:
        """A whole-valued float field serializes as an integer."""
        timings = HarTimings.from_json({"send": 42.0, "wait": 42.5, "receive": 0})
        output = timings.to_json()
        assert output["send"] == 42
        assert isinstance(output["send"], int)
        assert output["wait"] == 42.5

    def test_entry_time_normalized(self) -> None:
        """Entry time given as int in code comes back as an int."""
        assert make_entry().to_json()["time"] == 120


class TestVendorFields:
    """Test cases for custom (vendor) fields."""

    def test_vendor_fields_survive_round_trip(self) -> None:
        """Unmodeled keys are kept and written back unchanged."""
        source = {"name": "n", "value": "v", "_tool": {"nested": [1, 2]}, "_flag": None}
        cookie = HarCookie.from_json(source)
        assert cookie.custom == {"_tool": {"nested": [1, 2]}, "_flag": None}
        assert cookie.to_json() == source

    def test_vendor_nulls_kept_in_compact_mode(self) -> None:
        """The null policy never touches vendor values."""
        cookie = HarCookie.from_json({"name": "n", "value": "v", "_gone": None})
        assert "_gone" in cookie.to_json()

    def test_custom_never_shadows_declared_key(self) -> None:
        """A declared key placed in custom by hand does not overwrite the typed value."""
        cookie = HarCookie(name="sid", value="abc", custom={"name": "shadow", "comment": "x", "_tool": 1})
        assert cookie.to_json() == {"name": "sid", "value": "abc", "_tool": 1}

    def test_declared_keys_never_in_custom(self) -> None:
        """Keys parsed into typed fields are not duplicated in custom."""
        cookie = HarCookie.from_json({"name": "n", "value": "v", "httpOnly": True, "comment": "c"})
        assert cookie.custom == {}

    def test_json_keys_use_aliases(self) -> None:
        """json_keys lists the JSON names, not the Python attribute names."""
        keys = HarRequest.json_keys()
        assert {"httpVersion", "queryString", "postData", "comment"} <= keys
        assert "custom" not in keys
        assert "http_version" not in keys


class TestRawDates:
    """Test cases for verbatim date preservation."""

    def test_rfc_1123_expires_round_trips_exactly(self) -> None:
        """A cookie expiry in RFC 1123 format is written back byte for byte."""
        cookie = HarCookie.from_json({"name": "sid", "value": "abc", "expires": "Sun, 15 Jul 2012 10:00:00 GMT"})
        assert cookie.expires is not None
        assert cookie.expires.year == 2012
        assert cookie.to_json()["expires"] == "Sun, 15 Jul 2012 10:00:00 GMT"

    def test_microsecond_expires_round_trips(self) -> None:
        """A date set in code with sub-millisecond precision survives serialization."""
        expires = datetime(2024, 1, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)
        cookie = HarCookie(name="a", value="b", expires=expires)
        assert HarCookie.from_json(cookie.to_json()).expires == expires

    def test_unparseable_date_kept_verbatim(self) -> None:
        """An optional date that cannot be parsed is still written back."""
        cookie = HarCookie.from_json({"name": "sid", "value": "abc", "expires": "Session"})
        assert cookie.expires is None
        assert cookie.to_json()["expires"] == "Session"

    def test_date_built_in_code_is_canonical(self) -> None:
        """Without a raw string the canonical ISO form is written."""
        assert make_entry().to_json()["startedDateTime"] == "2024-05-01T10:00:00.000Z"


class TestCopyWith:
    """Test cases for copy_with."""

    def test_replaces_given_fields_only(self) -> None:
        """Unspecified fields keep their values."""
        cookie = HarCookie(name="a", value="1", path="/")
        updated = cookie.copy_with(value="2")
        assert updated.value == "2"
        assert updated.name == "a"
        assert updated.path == "/"
        assert cookie.value == "1"

    def test_shares_nested_objects(self) -> None:
        """Nested objects are shared, not deep-copied."""
        entry = make_entry()
        updated = entry.copy_with(total_time=5)
        assert updated.request is entry.request
        assert updated.total_time == 5

    def test_keeps_comment_and_custom(self) -> None:
        """comment and vendor fields are carried over."""
        cookie = HarCookie.from_json({"name": "n", "value": "v", "comment": "c", "_x": 1})
        updated = cookie.copy_with(name="m")
        assert updated.comment == "c"
        assert updated.custom == {"_x": 1}

    def test_overriding_date_drops_raw_string(self) -> None:
        """A replaced date is written in canonical form, not the stale raw string."""
        cookie = HarCookie.from_json({"name": "sid", "value": "abc", "expires": "Sun, 15 Jul 2012 10:00:00 GMT"})
        updated = cookie.copy_with(expires=datetime(2030, 1, 1, tzinfo=timezone.utc))
        assert updated.to_json()["expires"] == "2030-01-01T00:00:00.000Z"

    def test_unknown_field_raises(self) -> None:
        """Unknown field names are rejected."""
        with pytest.raises(TypeError, match="nope"):
            HarCookie(name="a", value="b").copy_with(nope=1)

    def test_values_are_validated(self) -> None:
        """Overrides go through model validation."""
        with pytest.raises(ValidationError):
            HarCookie(name="a", value="b").copy_with(http_only="definitely")

    def test_models_are_frozen(self) -> None:
        """Attribute assignment is rejected; copy_with is the way to change a value."""
        request = HarRequest(url="https://example.com/")
        with pytest.raises(ValidationError):
            request.method = HttpMethod.POST


CONSTRUCTED_MODELS = [
    HarCookie(
        name="sid",
        value="abc",
        path="/",
        expires=datetime(2024, 1, 1, 10, 0, 0, 123456, tzinfo=timezone.utc),
        http_only=True,
        secure=False,
    ),
    HarCacheEntry(
        expires=datetime(2025, 6, 1, tzinfo=timezone.utc),
        last_access=datetime(2024, 1, 1, 8, 30, 0, 500000, tzinfo=timezone.utc),
        e_tag='"v1"',
        hit_count=2,
    ),
    make_entry().copy_with(
        started_date_time=datetime(2024, 5, 1, 10, 0, 0, 250500, tzinfo=timezone.utc),
        total_time=120.5,
    ),
    HarPage(
        started_date_time=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        id="page_1",
        title="Home",
        page_timings=HarPageTimings(on_content_load=310.2, on_load=512.7),
    ),
    DevToolsHarEntry(
        started_date_time=datetime(2024, 5, 2, 8, 30, 0, 600001, tzinfo=timezone.utc),
        total_time=30,
        request=DevToolsHarRequest(
            url="wss://app.example.com/live",
            cookies=[DevToolsHarCookie(name="session", value="xyz", same_site=CookieSameSite.LAX)],
        ),
        response=DevToolsHarResponse(status=101, status_text="Switching Protocols", transfer_size=129),
        cache=HarCache(),
        timings=DevToolsHarTimings(send=0, wait=30, receive=0, blocked_queueing=1.5),
        initiator={"type": "script"},
        resource_type="websocket",
        web_socket_messages=[DevToolsHarWebSocketMessage(type="send", time=1714638600.5, opcode=1)],
    ),
]


def typed_values(model: HarObject) -> dict[str, Any]:
    """Field values of a model, without the raw date strings (those only record the source text)."""
    raw_fields = set(model.RAW_DATE_FIELDS.values())
    return {name: getattr(model, name) for name in type(model).model_fields if name not in raw_fields}


class TestConstructedRoundTrip:
    """Test cases for serializing entities built in code and parsing them back."""

    @pytest.mark.parametrize("model", CONSTRUCTED_MODELS, ids=lambda model: type(model).__name__)
    def test_field_values_survive(self, model: HarObject) -> None:
        """from_json(to_json(e)) has the same field values as e."""
        back = type(model).from_json(json.loads(json.dumps(model.to_json())))
        assert type(back) is type(model)
        assert typed_values(back) == typed_values(model)
        assert back.to_json() == model.to_json()

    @pytest.mark.parametrize("model", CONSTRUCTED_MODELS, ids=lambda model: type(model).__name__)
    def test_raw_dates_record_canonical_text(self, model: HarObject) -> None:
        """After the round trip each raw date holds the canonical text that was written."""
        back = type(model).from_json(model.to_json())
        for parsed_name, raw_name in model.RAW_DATE_FIELDS.items():
            assert getattr(model, raw_name) is None
            expected = model.to_json()[type(model).model_fields[parsed_name].alias or parsed_name]
            assert getattr(back, raw_name) == expected

    def test_absent_frame_data_stays_absent(self) -> None:
        """A WebSocket frame without data is written back without a data key."""
        message = DevToolsHarWebSocketMessage.from_json({"type": "receive", "time": 1.5, "opcode": 9})
        assert message.data is None
        assert message.to_json() == {"type": "receive", "time": 1.5, "opcode": 9}

"""
devtools_har/utils/har_utils.py

Primitive coercion helpers for HAR JSON processing.

Contains:
- apply_null_policy: Order-preserving null pruning
- normalize_number: Whole-valued floats back to integers
- collect_custom: Vendor-field collection
- optional_*: Tolerant scalar coercion (never raise)
- parse_object_list: Lenient list-of-objects parsing
- expect / strict_parsing: Anomaly signalling and the validation mode switch
"""

import json
import math
from collections.abc import Callable, Collection, Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, TypeVar

from devtools_har.config import Config
from devtools_har.utils.exceptions import HarAnomalyError
from devtools_har.utils.logger import get_logger

logger = get_logger(name=__name__)

# a decoded JSON object
Json = dict[str, Any]

T = TypeVar("T")

# substituted for required dates that are missing or unparseable
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# Null policy and numbers _________________________________________________________________________

def apply_null_policy(json_obj: Mapping[str, Any], include_nulls: bool = False) -> Mapping[str, Any]:
    """
    Apply the null-field policy to a JSON mapping.
    Args:
        json_obj: Mapping that may contain None values.
        include_nulls: When True the mapping is returned unchanged.
    Returns:
        The original mapping, or a new dict without the None-valued keys (key order kept).
    """
    if include_nulls:
        return json_obj
    return {key: value for key, value in json_obj.items() if value is not None}


def normalize_number(value: int | float | None) -> int | float | None:
    """
    Re-represent a whole-valued float as an int, so 42.0 serializes as 42.
    Fractional, non-finite and non-float values are returned unchanged.
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


# Vendor fields ___________________________________________________________________________________

def collect_custom(json_obj: Mapping[str, Any], claimed_keys: Collection[str] = ()) -> Json:
    """
    Collect every key of a decoded JSON object that no typed field claims.
    Values are kept verbatim so they survive a parse/serialize cycle unchanged.
    Args:
        json_obj: The source JSON object.
        claimed_keys: JSON keys already parsed into typed fields.
    Returns:
        Json: A new dict of the unclaimed keys, in source order.
    """
    return {key: value for key, value in json_obj.items() if key not in claimed_keys}


# Tolerant scalar coercion ________________________________________________________________________

def optional_str(value: Any) -> str | None:
    """Coerce any JSON value to a string; None stays None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return json.dumps(normalize_number(value))
    return json.dumps(value, ensure_ascii=False) if isinstance(value, (dict, list)) else str(value)


def optional_float(value: Any) -> float | None:
    """Parse a number or a numeric string as float; None when not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (ValueError, OverflowError):
        return None
    # NaN and infinities have no JSON encoding
    return number if math.isfinite(number) else None


def optional_int(value: Any) -> int | None:
    """Parse a number or a numeric string, truncated to int; None when not a finite number."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = optional_float(value)
    return int(number) if number is not None else None


def optional_bool(value: Any) -> bool | None:
    """Accept real booleans and case-insensitive "true"/"false" strings only."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return None


def optional_datetime(value: Any) -> datetime | None:
    """
    Tolerantly parse a timestamp. Never raises.
    ISO-8601 is tried first, then RFC 1123 / RFC 2822 (the usual cookie "expires" format).
    Args:
        value: Value of unknown type, usually a string.
    Returns:
        The parsed datetime, or None on missing input or parse failure.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def format_datetime(value: datetime) -> str:
    """
    Canonical ISO-8601 encoding with "Z" for UTC.
    Milliseconds are written unless the value carries sub-millisecond precision,
    in which case all six fractional digits are kept.
    """
    timespec = "milliseconds" if value.microsecond % 1000 == 0 else "microseconds"
    encoded = value.isoformat(timespec=timespec)
    if encoded.endswith("+00:00"):
        encoded = encoded[:-len("+00:00")] + "Z"
    return encoded


# Lists ___________________________________________________________________________________________

def parse_object_list(value: Any, factory: Callable[[Json], T], context: str = "list") -> list[T]:
    """
    Parse a JSON array of objects with the given factory.
    Elements that are not JSON objects are dropped without any signal.
    A present value that is not an array is an anomaly and yields [].
    """
    if value is None:
        return []
    expect(isinstance(value, list), f'{context} must be a JSON array, got {type(value).__name__}')
    if not isinstance(value, list):
        return []
    return [factory(item) for item in value if isinstance(item, dict)]


# Anomalies _______________________________________________________________________________________

def expect(condition: bool, message: str) -> None:
    """
    Check a structural expectation about HAR input.
    Raises HarAnomalyError in strict mode; otherwise logs the anomaly at DEBUG
    and lets the caller substitute its default.
    """
    if condition:
        return
    if Config.STRICT_PARSING:
        raise HarAnomalyError(message)
    logger.debug("HAR anomaly: %s", message)


@contextmanager
def strict_parsing(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch the validation mode.

    Usage:
        with strict_parsing():
            HarParser.parse(text)  # raises HarAnomalyError on malformed input
    """
    previous = Config.STRICT_PARSING
    Config.STRICT_PARSING = enabled
    try:
        yield
    finally:
        Config.STRICT_PARSING = previous

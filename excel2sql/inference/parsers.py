"""
Locale-invariant parse checks for cell text.

Each ``is_*`` check takes trimmed text and returns True when the text parses as
the type. Checks never raise: a failed check only disqualifies a candidate type.
"""

import math
import re
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from excel2sql.typing import DataType

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
BYTE_MAX = 255

NULL_MARKER = "NULL"

_GUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_BYTE_PATTERN = re.compile(r"^\+?[0-9]+$")

_TIME_FORMATS = [
    "",
    " %H:%M",
    " %H:%M:%S",
    " %H:%M:%S.%f",
    " %I:%M %p",
    " %I:%M:%S %p",
]

_DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
]

DATETIME_FORMATS = [date + time for date in _DATE_FORMATS for time in _TIME_FORMATS] + [
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
]


def is_null_marker(text: str | None) -> bool:
    """Check whether a cell is the case-insensitive ``NULL`` marker."""
    return text is not None and text.strip().upper() == NULL_MARKER


def is_blank(text: str | None) -> bool:
    """Check whether a cell is absent or whitespace-only."""
    return text is None or not text.strip()


def is_guid(text: str) -> bool:
    """Check for the hyphenated 8-4-4-4-12 UUID form."""
    return bool(_GUID_PATTERN.match(text))


def parse_datetime(text: str) -> datetime | None:
    """
    Parse text against the supported date and date-time formats.

    Args:
        text: Trimmed cell text

    Returns:
        The parsed datetime, or None when no format matches
    """
    # Bare numbers are never dates
    if not text or _FLOAT_PATTERN.match(text):
        return None

    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def is_datetime(text: str) -> bool:
    return parse_datetime(text) is not None


def is_integer(text: str) -> bool:
    """Check for a 32-bit signed decimal integer."""
    if not _INTEGER_PATTERN.match(text):
        return False
    return INT32_MIN <= int(text) <= INT32_MAX


def is_decimal(text: str) -> bool:
    """Check for a fixed-point base-10 number without exponent or digit grouping."""
    return bool(_DECIMAL_PATTERN.match(text))


def is_float(text: str) -> bool:
    """Check for a finite binary floating point number, exponent allowed."""
    if not _FLOAT_PATTERN.match(text):
        return False
    return math.isfinite(float(text))


def is_boolean(text: str) -> bool:
    return text.lower() in ("true", "false")


def is_byte(text: str) -> bool:
    """Check for an unsigned integer in 0..255."""
    if not _BYTE_PATTERN.match(text):
        return False
    return int(text) <= BYTE_MAX


def is_string(text: str) -> bool:
    return True


# Candidate checks in inference precedence order; String always succeeds
TYPE_CHECKS: list[tuple[DataType, Callable[[str], bool]]] = [
    (DataType.GUID, is_guid),
    (DataType.DATETIME, is_datetime),
    (DataType.INTEGER, is_integer),
    (DataType.DECIMAL, is_decimal),
    (DataType.FLOAT, is_float),
    (DataType.BOOLEAN, is_boolean),
    (DataType.BYTE, is_byte),
    (DataType.STRING, is_string),
]


def parse_value(data_type: DataType, text: str) -> Any:
    """
    Convert cell text to the native Python value for a data type.

    Public helper behind TypedValue.value, exported from excel2sql.inference for
    library callers.

    Args:
        data_type: The inferred column type
        text: Cell text that passed the type's check

    Returns:
        int, Decimal, float, bool, uuid.UUID, datetime or str

    Raises:
        ValueError: If the text does not parse as the data type
    """
    stripped = text.strip()

    if data_type in (DataType.INTEGER, DataType.BYTE):
        return int(stripped)
    if data_type == DataType.DECIMAL:
        return Decimal(stripped)
    if data_type == DataType.FLOAT:
        return float(stripped)
    if data_type == DataType.BOOLEAN:
        if not is_boolean(stripped):
            raise ValueError(f"Not a boolean: {text!r}")
        return stripped.lower() == "true"
    if data_type == DataType.GUID:
        return uuid.UUID(stripped)
    if data_type == DataType.DATETIME:
        parsed = parse_datetime(stripped)
        if parsed is None:
            raise ValueError(f"Not a date/time: {text!r}")
        return parsed
    return text

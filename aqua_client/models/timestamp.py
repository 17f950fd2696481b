"""Timestamp adapter for the fixed-width ``YYYYMMDDHHMMSS`` wire format.

The Aqua server sends revision timestamps as 14-digit strings such as
``"20240115093000"``. The format carries no timezone indicator; this
module always interprets the value as UTC and always renders UTC, so a
decode followed by an encode reproduces the original string.

Usage:
    parse_timestamp("20240115093000")
    # datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    format_timestamp(parse_timestamp("20240115093000"))
    # "20240115093000"
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

from aqua_client.errors import FormatError

TIMESTAMP_LAYOUT = "%Y%m%d%H%M%S"
TIMESTAMP_LENGTH = 14

_DIGITS = re.compile(r"[0-9]{14}")


def parse_timestamp(value: object) -> datetime:
    """Parse a wire timestamp into an aware UTC datetime.

    Surrounding quote characters and whitespace are stripped first, so
    a raw JSON token such as ``'"20240115093000"'`` is accepted as well.
    Integer tokens are accepted via their decimal representation.

    Args:
        value: The raw timestamp token.

    Returns:
        The parsed datetime with ``tzinfo=timezone.utc``.

    Raises:
        FormatError: If the value is not exactly 14 ASCII digits or does
            not name a valid calendar date and time.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise FormatError(value, "timestamp must be a string")

    text = str(value).strip().strip('"').strip()
    if len(text) != TIMESTAMP_LENGTH:
        raise FormatError(value, f"expected {TIMESTAMP_LENGTH} characters")
    if not _DIGITS.fullmatch(text):
        raise FormatError(value, "expected only digits")

    try:
        parsed = datetime.strptime(text, TIMESTAMP_LAYOUT)
    except ValueError as exc:
        raise FormatError(value, str(exc)) from exc
    return parsed.replace(tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the fixed-width wire format.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"{value.hour:02d}{value.minute:02d}{value.second:02d}"
    )


# Pydantic field type: decodes with parse_timestamp, encodes with format_timestamp
AquaTimestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]

"""
Value parsing helpers shared by the search adapters and the sorter.

Source records carry money as display strings ("$45,000") and timestamps as
ISO-8601 strings ("2024-01-15T10:00:00Z"). Every place that needs a number or
a datetime goes through these functions so matching and sorting agree on the
edge cases.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Optional, Union

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_NUMBER = re.compile(r"^-?\d*\.?\d+")


def parse_money(value: Optional[Union[str, int, float]]) -> float:
    """
    Convert a currency-formatted value to a float.

    Currency symbols, thousands separators and any other non-numeric
    characters are stripped first. Malformed or empty input yields 0.0.

    Examples:
        "$45,000"   -> 45000.0
        "AED 1.5"   -> 1.5
        "n/a"       -> 0.0
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    cleaned = _NON_NUMERIC.sub("", value)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into a timezone-aware datetime.

    Naive values are taken as UTC. Returns None when the value is missing
    or cannot be parsed.
    """
    if not value:
        return None
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, OverflowError):
        logger.debug(f"Unparsable timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def timestamp_or_zero(value: Optional[str]) -> float:
    """Epoch seconds for an ISO-8601 string, 0.0 when unparsable."""
    parsed = parse_timestamp(value)
    return parsed.timestamp() if parsed else 0.0


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime in UTC as ``YYYY-MM-DDTHH:MM:SS[.fff]Z``.

    Whole seconds have no fraction. Sub-second values use milliseconds
    (``.100Z``, the JavaScript ``toISOString`` form) unless the value has
    finer precision, in which case all six digits are kept.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)

    rendered = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        if value.microsecond % 1000 == 0:
            rendered += f".{value.microsecond // 1000:03d}"
        else:
            rendered += f".{value.microsecond:06d}"
    return rendered + "Z"


def to_utc_naive(value: str) -> datetime:
    """Parse an ISO-8601 string for storage in a naive UTC DateTime column."""
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}")
    return parsed.astimezone(timezone.utc).replace(tzinfo=None)


def format_amount(amount: float) -> str:
    """Format an amount with thousands separators: 50000 -> '50,000', 1234.5 -> '1,234.5'."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}".rstrip("0").rstrip(".")

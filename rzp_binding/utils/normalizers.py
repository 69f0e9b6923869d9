"""
Parameter normalization helpers shared by the resource wrappers.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Dict, Mapping, Optional


def normalize_date(value: Any) -> Any:
    """
    Convert a date-like value to Unix epoch seconds.

    Args:
        value: int epoch seconds, float, numeric string, ISO-8601 string,
            datetime or date. Naive datetimes and dates are read as UTC.

    Returns:
        Integer epoch seconds. Values that cannot be interpreted are returned
        unchanged and left for the API to reject.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else value
    if isinstance(value, datetime):
        return _datetime_to_epoch(value)
    if isinstance(value, date):
        return _datetime_to_epoch(datetime(value.year, value.month, value.day))
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        parsed = _parse_iso(text)
        if parsed is not None:
            return _datetime_to_epoch(parsed)
    return value


def normalize_notes(notes: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Flatten ``{"key": value}`` into ``{"notes[key]": value}``."""
    if not notes:
        return {}
    return {f"notes[{key}]": value for key, value in notes.items()}


def coerce_int(value: Any, default: int) -> int:
    """Numeric coercion with a fallback for missing, zero or non-numeric input."""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or int(number) == 0:
        return default
    return int(number)


def _parse_iso(text: str) -> Optional[datetime]:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _datetime_to_epoch(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())

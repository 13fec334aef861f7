from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..core.constants import COHORT_SPAN_YEARS
from ..core.exceptions import ValidationError


def parse_iso_date(value: Any) -> date:
    """Parse YYYY-MM-DD string into date.

    A ``datetime`` is truncated to its date; attendance keys never carry a time.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def join_year_range(start_year: Any) -> str | None:
    """Build the cohort label, e.g. ``2024`` -> ``"2024-2027"``."""

    if start_year is None or str(start_year).strip() == "":
        return None
    try:
        start = int(str(start_year).strip())
    except ValueError:
        raise ValidationError(f"Invalid start year: {start_year!r}")
    return f"{start}-{start + COHORT_SPAN_YEARS}"


def iso(value: date | datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()

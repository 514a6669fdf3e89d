"""
Calendar window normalization.

A window for ``months`` covers ``months`` complete calendar months before the
reference month plus the reference month itself, oldest first. Missing months
are filled with zero totals; entries whose label does not parse are ignored.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date

from clover_reader.schemas import MonthlyEntry, Summary

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_NUMBERS = {name.lower(): i + 1 for i, name in enumerate(MONTH_ABBREVIATIONS)}

_LABEL_RE = re.compile(r"([A-Za-z]{3}) ([0-9]{2})")

# Two-digit years up to this value map to 20xx, above it to 19xx
_TWO_DIGIT_YEAR_PIVOT = 49


def shift_months(d: date, months: int) -> date:
    """Shift the first day of d's month by N calendar months."""
    year = d.year + (d.month - 1 + months) // 12
    month = (d.month - 1 + months) % 12 + 1

    return date(year, month, 1)


def try_parse_month_label(label: str) -> date | None:
    """
    Parse an exact "MMM yy" label (e.g. "Jan 26") into the first day of that month.

    Anything else ("January 2026", "2026-01", "Jan 2026", "") returns None.
    """
    if not isinstance(label, str):
        return None

    m = _LABEL_RE.fullmatch(label)
    if m is None:
        return None

    month = _MONTH_NUMBERS.get(m.group(1).lower())
    if month is None:
        return None

    yy = int(m.group(2))
    year = 2000 + yy if yy <= _TWO_DIGIT_YEAR_PIVOT else 1900 + yy
    return date(year, month, 1)


def format_month_label(d: date) -> str:
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.year % 100:02d}"


def window_months(months: int, reference_date: date) -> list[date]:
    """First days of the months + 1 calendar months ending at reference_date's month."""
    if months < 0:
        raise ValueError("months must be >= 0")

    anchor = reference_date.replace(day=1)
    return [shift_months(anchor, -offset) for offset in range(months, -1, -1)]


def derive_window(
    entries: Iterable[MonthlyEntry],
    months: int,
    reference_date: date | None = None,
) -> list[MonthlyEntry]:
    """
    Normalize entries into a gapless window of exactly months + 1 entries.

    Input entries are never modified; matching entries are copied with their
    new index, absent months get a zero-valued entry.
    """
    today = reference_date or date.today()

    by_month: dict[tuple[int, int], MonthlyEntry] = {}
    for entry in entries:
        parsed = try_parse_month_label(entry.month)
        if parsed is None:
            continue
        # first entry for a calendar month wins
        by_month.setdefault((parsed.year, parsed.month), entry)

    result: list[MonthlyEntry] = []
    for index, target in enumerate(window_months(months, today), start=1):
        match = by_month.get((target.year, target.month))
        if match is not None:
            result.append(match.model_copy(update={"index": index}))
        else:
            result.append(
                MonthlyEntry(index=index, month=format_month_label(target), summary=Summary())
            )

    return result

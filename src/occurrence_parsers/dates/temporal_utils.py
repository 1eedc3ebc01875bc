"""Comparing, merging and projecting partial temporal values."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, datetime, timedelta, timezone

from occurrence_parsers.models.temporal import PartialTemporal


def best_resolution(
    first: PartialTemporal | None, second: PartialTemporal | None
) -> PartialTemporal | None:
    """Return the more specific of two values that do not contradict.

    e.g. ``2005-01`` and ``2005-01-01`` give ``2005-01-01``.  If either side
    is ``None`` the other is returned.  A field present on both sides with
    different values makes the pair contradictory and ``None`` is returned.
    On equal resolution *second* wins.
    """
    if first is None:
        return second
    if second is None:
        return first
    if first.conflicts_with(second):
        return None
    if first.resolution > second.resolution:
        return first
    return second


def represents_same_ymd(first: PartialTemporal | None, second: PartialTemporal | None) -> bool:
    """True if both values are complete dates on the same year, month and day.

    Time of day and offset are ignored.
    """
    if first is None or second is None:
        return False
    if not first.is_complete_date or not second.is_complete_date:
        return False
    return first.same_ymd(second)


def to_instant(value: PartialTemporal | None, ignore_offset: bool = False) -> datetime | None:
    """Project *value* onto an absolute UTC instant.

    Missing fields default to the start of the period: a year-month becomes
    the first of the month at midnight, a year becomes January 1.  Without an
    offset (or with ``ignore_offset``) local time is taken as UTC.
    """
    if value is None or value.year is None:
        return None
    if not MINYEAR <= value.year <= MAXYEAR:
        return None

    if value.has_time:
        tz = timezone.utc
        if not ignore_offset and value.has_offset:
            tz = timezone(timedelta(seconds=value.offset_seconds))
        local = datetime(
            value.year, value.month, value.day,
            value.hour, value.minute or 0, value.second or 0,
            tzinfo=tz,
        )
        try:
            return local.astimezone(timezone.utc)
        except OverflowError:
            return None

    return datetime(value.year, value.month or 1, value.day or 1, tzinfo=timezone.utc)

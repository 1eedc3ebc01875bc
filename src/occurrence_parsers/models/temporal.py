"""Partial temporal values and format hints.

A date string found on a specimen label rarely carries a full timestamp.
``PartialTemporal`` holds whatever subset of year, month, day, time and
offset was actually present, and nothing more.  Its ``resolution`` is the
number of calendar fields (year, month, day) known, which is what callers use
to decide which of two compatible values is more specific.
"""

from __future__ import annotations

import calendar
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DateFormatHint(StrEnum):
    """Closed set of tags narrowing which patterns are tried."""

    NONE = "none"
    Y = "y"
    YM = "ym"
    YMD = "ymd"
    YMDT = "ymdt"
    DMY = "dmy"
    MDY = "mdy"
    HAN = "han"

    @classmethod
    def coerce(cls, value: DateFormatHint | str | None) -> DateFormatHint:
        """Map ``None`` and unknown tags to ``NONE``."""
        if value is None:
            return cls.NONE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NONE


class TemporalKind(StrEnum):
    YEAR = "year"
    YEAR_MONTH = "year_month"
    DATE = "date"
    DATE_TIME = "date_time"
    DATE_TIME_OFFSET = "date_time_offset"


def days_in_month(year: int, month: int) -> int:
    """Length of *month* in the proleptic Gregorian calendar."""
    if month == 2:
        return 29 if calendar.isleap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


class PartialTemporal(BaseModel):
    """A date/time value where only some fields are known."""

    model_config = ConfigDict(frozen=True)

    year: int | None = None
    month: int | None = Field(default=None, ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)
    hour: int | None = Field(default=None, ge=0, le=23)
    minute: int | None = Field(default=None, ge=0, le=59)
    second: int | None = Field(default=None, ge=0, le=59)
    offset_seconds: int | None = Field(default=None, ge=-18 * 3600, le=18 * 3600)

    @model_validator(mode="after")
    def _check_fields(self) -> PartialTemporal:
        if self.day is not None and self.month is None:
            raise ValueError("day requires month")
        if self.month is not None and self.year is None:
            raise ValueError("month requires year")
        time_fields = (self.hour, self.minute, self.second, self.offset_seconds)
        if any(f is not None for f in time_fields):
            if self.day is None:
                raise ValueError("time fields require a complete date")
            if self.hour is None:
                raise ValueError("minute, second and offset require hour")
        if self.day is not None and self.day > days_in_month(self.year, self.month):
            raise ValueError(f"day {self.day} out of range for {self.year}-{self.month:02d}")
        return self

    @classmethod
    def of(
        cls,
        year: int | None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        offset_seconds: int | None = None,
    ) -> PartialTemporal:
        return cls(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            offset_seconds=offset_seconds,
        )

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def resolution(self) -> int:
        """Number of year/month/day fields present (0..3)."""
        return sum(f is not None for f in (self.year, self.month, self.day))

    @property
    def is_complete_date(self) -> bool:
        return self.resolution == 3

    @property
    def has_time(self) -> bool:
        return self.hour is not None

    @property
    def has_offset(self) -> bool:
        return self.offset_seconds is not None

    @property
    def kind(self) -> TemporalKind | None:
        if self.has_offset:
            return TemporalKind.DATE_TIME_OFFSET
        if self.has_time:
            return TemporalKind.DATE_TIME
        if self.day is not None:
            return TemporalKind.DATE
        if self.month is not None:
            return TemporalKind.YEAR_MONTH
        if self.year is not None:
            return TemporalKind.YEAR
        return None

    def ymd(self) -> tuple[int | None, int | None, int | None]:
        return self.year, self.month, self.day

    def same_ymd(self, other: PartialTemporal) -> bool:
        """True when year, month and day each match or are absent on both sides."""
        return self.ymd() == other.ymd()

    def conflicts_with(self, other: PartialTemporal) -> bool:
        """True when a calendar field present on both sides differs."""
        for mine, theirs in zip(self.ymd(), other.ymd()):
            if mine is not None and theirs is not None and mine != theirs:
                return True
        return False

    def isoformat(self) -> str:
        """Canonical string form at the value's own granularity."""
        if self.year is None:
            return ""
        text = f"{self.year:04d}"
        if self.month is not None:
            text += f"-{self.month:02d}"
        if self.day is not None:
            text += f"-{self.day:02d}"
        if self.hour is not None:
            text += f"T{self.hour:02d}:{self.minute or 0:02d}:{self.second or 0:02d}"
        if self.offset_seconds is not None:
            sign = "-" if self.offset_seconds < 0 else "+"
            hours, rest = divmod(abs(self.offset_seconds), 3600)
            text += f"{sign}{hours:02d}:{rest // 60:02d}"
        return text

    def __str__(self) -> str:
        return self.isoformat()

"""Test data factories for building temporal values and matchers."""
from occurrence_parsers.dates.pattern import FormatPatternMatcher
from occurrence_parsers.models.temporal import DateFormatHint, PartialTemporal


def make_year(year: int = 2003) -> PartialTemporal:
    return PartialTemporal.of(year)


def make_year_month(year: int = 2003, month: int = 2) -> PartialTemporal:
    return PartialTemporal.of(year, month)


def make_date(year: int = 2003, month: int = 2, day: int = 15) -> PartialTemporal:
    return PartialTemporal.of(year, month, day)


def make_date_time(
    year: int = 2003,
    month: int = 2,
    day: int = 15,
    hour: int = 10,
    minute: int = 20,
    second: int = 30,
    offset_seconds: int | None = None,
) -> PartialTemporal:
    return PartialTemporal.of(year, month, day, hour, minute, second, offset_seconds)


def make_matcher(
    pattern: str,
    hint: DateFormatHint = DateFormatHint.NONE,
    separator: str | None = None,
    alternates: str = "",
    base_year: int | None = None,
) -> FormatPatternMatcher:
    return FormatPatternMatcher(
        pattern=pattern,
        hint=hint,
        separator=separator,
        alternate_separators=alternates,
        base_year=base_year,
    )

"""Test merging, comparing and projecting partial temporal values."""
from datetime import datetime, timezone
from occurrence_parsers.dates.temporal_utils import best_resolution, represents_same_ymd, to_instant
from occurrence_parsers.models.temporal import PartialTemporal
from tests.factories import make_date, make_date_time, make_year, make_year_month


class TestBestResolution:
    def test_both_absent(self):
        assert best_resolution(None, None) is None

    def test_one_absent(self):
        assert best_resolution(make_year(), None) == make_year()
        assert best_resolution(None, make_date()) == make_date()

    def test_higher_resolution_wins(self):
        assert best_resolution(make_year_month(), make_date()) == make_date()
        assert best_resolution(make_date(), make_year()) == make_date()

    def test_month_conflict(self):
        assert best_resolution(make_date(month=2), make_date(month=3)) is None

    def test_year_conflict(self):
        assert best_resolution(make_year(2003), make_year_month(2004, 2)) is None

    def test_tie_returns_second(self):
        second = make_date_time()
        assert best_resolution(make_date(), second) is second


class TestRepresentsSameYmd:
    def test_incomplete_side(self):
        assert not represents_same_ymd(make_year(2003), make_date(2003, 1, 1))

    def test_absent_side(self):
        assert not represents_same_ymd(None, make_date())

    def test_time_ignored(self):
        assert represents_same_ymd(make_date(), make_date_time(offset_seconds=3600))

    def test_different_day(self):
        assert not represents_same_ymd(make_date(day=15), make_date(day=16))


class TestToInstant:
    def test_absent(self):
        assert to_instant(None) is None

    def test_empty_value(self):
        assert to_instant(PartialTemporal()) is None

    def test_year_month(self):
        assert to_instant(make_year_month()) == datetime(2003, 2, 1, tzinfo=timezone.utc)

    def test_year(self):
        assert to_instant(make_year()) == datetime(2003, 1, 1, tzinfo=timezone.utc)

    def test_date(self):
        assert to_instant(make_date()) == datetime(2003, 2, 15, tzinfo=timezone.utc)

    def test_local_time_taken_as_utc(self):
        assert to_instant(make_date_time()) == datetime(2003, 2, 15, 10, 20, 30, tzinfo=timezone.utc)

    def test_offset_applied(self):
        value = make_date_time(1978, 12, 21, 2, 12, 43, offset_seconds=3600)
        assert to_instant(value) == datetime(1978, 12, 21, 1, 12, 43, tzinfo=timezone.utc)

    def test_offset_ignored(self):
        value = make_date_time(1978, 12, 21, 2, 12, 43, offset_seconds=3600)
        assert to_instant(value, ignore_offset=True) == datetime(1978, 12, 21, 2, 12, 43, tzinfo=timezone.utc)

    def test_result_is_utc(self):
        instant = to_instant(make_date_time(offset_seconds=-19800))
        assert instant.tzinfo == timezone.utc
        assert instant.hour == 15

    def test_year_outside_datetime_range(self):
        assert to_instant(make_year(0)) is None

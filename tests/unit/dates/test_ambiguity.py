"""Test ambiguity groups."""
import pytest
from occurrence_parsers.dates.ambiguity import AmbiguityGroup, MultiParseOutcome
from occurrence_parsers.models.temporal import DateFormatHint, PartialTemporal
from tests.factories import make_matcher


@pytest.fixture
def dotted():
    day_first = make_matcher("d.M.uuuu", DateFormatHint.DMY)
    month_first = make_matcher("M.d.uuuu", DateFormatHint.MDY)
    return AmbiguityGroup(matchers=(day_first, month_first), preferred=day_first, name="dotted")


@pytest.fixture
def slashed():
    return AmbiguityGroup(matchers=(
        make_matcher("d/M/uuuu", DateFormatHint.DMY),
        make_matcher("M/d/uuuu", DateFormatHint.MDY),
    ))


class TestEvaluate:
    def test_both_readings(self, dotted):
        outcome = dotted.evaluate("01.02.2003")
        assert outcome.match_count == 2
        assert outcome.preferred == PartialTemporal.of(2003, 2, 1)
        assert outcome.others == (PartialTemporal.of(2003, 1, 2),)
        assert outcome.result == PartialTemporal.of(2003, 1, 2)
        assert not outcome.all_equal()

    def test_only_preferred(self, dotted):
        outcome = dotted.evaluate("13.02.2003")
        assert outcome.match_count == 1
        assert outcome.preferred == PartialTemporal.of(2003, 2, 13)
        assert outcome.others == ()

    def test_only_other(self, dotted):
        outcome = dotted.evaluate("02.13.2003")
        assert outcome.match_count == 1
        assert outcome.preferred is None
        assert outcome.others == (PartialTemporal.of(2003, 2, 13),)

    def test_agreeing_readings_with_preferred(self, dotted):
        outcome = dotted.evaluate("02.02.2003")
        assert outcome.match_count == 2
        assert outcome.preferred == PartialTemporal.of(2003, 2, 2)
        assert not outcome.all_equal()

    def test_agreeing_readings_without_preferred(self, slashed):
        outcome = slashed.evaluate("02/02/2003")
        assert outcome.match_count == 2
        assert outcome.all_equal()

    def test_no_preferred_member(self, slashed):
        outcome = slashed.evaluate("01/02/2003")
        assert outcome.match_count == 2
        assert outcome.preferred is None
        assert len(outcome.others) == 2

    def test_no_match(self, dotted):
        assert dotted.evaluate("2003-02-01") == MultiParseOutcome()

    def test_preferred_must_be_member(self):
        with pytest.raises(ValueError):
            AmbiguityGroup(
                matchers=(make_matcher("d.M.uuuu"),),
                preferred=make_matcher("M.d.uuuu"),
            )


class TestAllEqual:
    def test_single_value_is_not_all_equal(self):
        assert not MultiParseOutcome(match_count=1, others=(PartialTemporal.of(2003),)).all_equal()

    def test_every_value_compared(self):
        a, b = PartialTemporal.of(2003, 2, 2), PartialTemporal.of(2003, 3, 2)
        outcome = MultiParseOutcome(match_count=3, others=(a, b, a))
        assert not outcome.all_equal()

    def test_preferred_value_excludes_outcome(self):
        a = PartialTemporal.of(2003, 2, 2)
        outcome = MultiParseOutcome(match_count=3, preferred=a, others=(a, a))
        assert not outcome.all_equal()

    def test_others_agree(self):
        a = PartialTemporal.of(2003, 2, 2)
        assert MultiParseOutcome(match_count=2, others=(a, a)).all_equal()

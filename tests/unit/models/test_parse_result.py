"""Test the parse result envelope."""
from occurrence_parsers.models.parse_result import (
    OccurrenceIssue, ParseConfidence, ParseResult, ParseStatus,
)
from tests.factories import make_date


class TestParseResult:
    def test_success(self):
        r = ParseResult.success(ParseConfidence.PROBABLE, make_date())
        assert r.status == ParseStatus.SUCCESS
        assert r.is_successful
        assert r.confidence == ParseConfidence.PROBABLE
        assert r.payload == make_date()
        assert r.issues == frozenset()

    def test_fail_has_no_confidence(self):
        r = ParseResult.fail()
        assert not r.is_successful
        assert r.confidence is None
        assert r.payload is None

    def test_fail_with_issues(self):
        r = ParseResult.fail(issues=[OccurrenceIssue.COORDINATE_INVALID, OccurrenceIssue.COORDINATE_INVALID])
        assert r.issues == {OccurrenceIssue.COORDINATE_INVALID}

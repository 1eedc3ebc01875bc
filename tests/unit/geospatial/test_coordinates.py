"""Test latitude/longitude parsing."""
from occurrence_parsers.geospatial.coordinates import LatLng, parse_lat_lng
from occurrence_parsers.models.parse_result import OccurrenceIssue, ParseConfidence, ParseStatus


class TestParseLatLng:
    def test_valid(self):
        r = parse_lat_lng("45.5", "-120.25")
        assert r.status == ParseStatus.SUCCESS
        assert r.confidence == ParseConfidence.DEFINITE
        assert r.payload == LatLng(lat=45.5, lng=-120.25)
        assert r.issues == frozenset()

    def test_comma_decimal(self):
        assert parse_lat_lng("45,5", "10").payload == LatLng(lat=45.5, lng=10.0)

    def test_both_blank(self):
        r = parse_lat_lng(None, "")
        assert r.status == ParseStatus.FAIL
        assert r.issues == frozenset()

    def test_invalid(self):
        r = parse_lat_lng("north", "10")
        assert r.status == ParseStatus.FAIL
        assert r.issues == {OccurrenceIssue.COORDINATE_INVALID}

    def test_one_missing(self):
        assert parse_lat_lng("10", None).issues == {OccurrenceIssue.COORDINATE_INVALID}

    def test_rounded(self):
        r = parse_lat_lng("10.123456789", "20")
        assert r.confidence == ParseConfidence.DEFINITE
        assert r.payload.lat == 10.12346
        assert r.issues == {OccurrenceIssue.COORDINATE_ROUNDED}

    def test_custom_decimals(self):
        r = parse_lat_lng("10.126", "20", decimals=2)
        assert r.payload.lat == 10.13

    def test_halves_round_up(self):
        r = parse_lat_lng("10.5", "-20.5", decimals=0)
        assert r.payload == LatLng(lat=11.0, lng=-20.0)
        assert r.issues == {OccurrenceIssue.COORDINATE_ROUNDED}

    def test_zero_zero(self):
        r = parse_lat_lng("0", "0.0")
        assert r.status == ParseStatus.SUCCESS
        assert r.confidence == ParseConfidence.POSSIBLE
        assert r.issues == {OccurrenceIssue.ZERO_COORDINATE}

    def test_presumed_swapped(self):
        r = parse_lat_lng("95", "45")
        assert r.status == ParseStatus.FAIL
        assert r.payload == LatLng(lat=95.0, lng=45.0)
        assert r.issues == {OccurrenceIssue.PRESUMED_SWAPPED_COORDINATE}

    def test_out_of_range(self):
        r = parse_lat_lng("200", "10")
        assert r.status == ParseStatus.FAIL
        assert r.payload is None
        assert r.issues == {OccurrenceIssue.COORDINATE_OUT_OF_RANGE}

    def test_longitude_out_of_range(self):
        assert parse_lat_lng("10", "181").issues == {OccurrenceIssue.COORDINATE_OUT_OF_RANGE}

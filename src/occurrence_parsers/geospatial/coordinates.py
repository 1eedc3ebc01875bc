"""Decimal latitude/longitude parsing with range and swap checks."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from occurrence_parsers.models.parse_result import OccurrenceIssue, ParseConfidence, ParseResult
from occurrence_parsers.utils.logging import get_logger
from occurrence_parsers.utils.number_parsing import parse_double

logger = get_logger(__name__)

# ~1m precision; nothing on a specimen label is legitimately finer
DEFAULT_DECIMALS = 5


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


def _round_half_up(value: float, decimals: int) -> float:
    # Halves round up, towards positive infinity; round() would round them to even.
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def _in_range(lat: float, lng: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lng <= 180


def parse_lat_lng(
    latitude: str | None,
    longitude: str | None,
    decimals: int = DEFAULT_DECIMALS,
) -> ParseResult[LatLng]:
    """Parse decimal latitude and longitude strings.

    Problems are reported as issues on the result.  A failed result carries
    no payload, except for presumed swapped coordinates where the values as
    given are returned so the caller can decide whether to swap them.
    """
    if not latitude and not longitude:
        return ParseResult.fail()

    lat = parse_double(latitude)
    lng = parse_double(longitude)
    if lat is None or lng is None:
        return ParseResult.fail(issues=[OccurrenceIssue.COORDINATE_INVALID])

    issues: set[OccurrenceIssue] = set()
    rounded_lat, rounded_lng = _round_half_up(lat, decimals), _round_half_up(lng, decimals)
    if rounded_lat != lat or rounded_lng != lng:
        issues.add(OccurrenceIssue.COORDINATE_ROUNDED)
    lat, lng = rounded_lat, rounded_lng

    if lat == 0 and lng == 0:
        issues.add(OccurrenceIssue.ZERO_COORDINATE)
        return ParseResult.success(ParseConfidence.POSSIBLE, LatLng(lat=0.0, lng=0.0), issues)

    if _in_range(lat, lng):
        return ParseResult.success(ParseConfidence.DEFINITE, LatLng(lat=lat, lng=lng), issues)

    if not -90 <= lat <= 90 and _in_range(lng, lat):
        issues.add(OccurrenceIssue.PRESUMED_SWAPPED_COORDINATE)
        logger.debug("coordinate_presumed_swapped", lat=lat, lng=lng)
        return ParseResult.fail(payload=LatLng(lat=lat, lng=lng), issues=issues)

    issues.add(OccurrenceIssue.COORDINATE_OUT_OF_RANGE)
    return ParseResult.fail(issues=issues)

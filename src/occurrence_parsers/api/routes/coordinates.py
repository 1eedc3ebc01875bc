"""Coordinate parsing API routes."""
from __future__ import annotations
from fastapi import APIRouter, Request
from ...geospatial.coordinates import parse_lat_lng

router = APIRouter()


@router.get("")
async def parse_coordinate(request: Request, lat: str | None = None, lng: str | None = None):
    """Parse a decimal latitude/longitude pair."""
    decimals = request.app.state.settings.coordinate_decimals
    result = parse_lat_lng(lat, lng, decimals=decimals)
    return {
        "input": {"lat": lat, "lng": lng},
        "status": result.status.value,
        "confidence": result.confidence.value if result.confidence else None,
        "payload": result.payload.model_dump() if result.payload is not None else None,
        "issues": sorted(issue.value for issue in result.issues),
    }

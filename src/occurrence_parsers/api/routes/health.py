"""Health check endpoint."""
from __future__ import annotations
from fastapi import APIRouter
from ...dates.numerical_parser import NumericalDateParser

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check, including the size of the loaded date catalog."""
    parser = NumericalDateParser.default()
    return {
        "status": "ok",
        "service": "occurrence-parsers-api",
        "date_patterns": len(parser.matchers),
        "ambiguity_groups": len(parser.groups),
    }

"""Date parsing API routes."""
from __future__ import annotations
from functools import lru_cache
from fastapi import APIRouter, Body, HTTPException, Query, Request
from ...dates.numerical_parser import NumericalDateParser, parse_ymd
from ...models.parse_result import ParseResult
from ...models.temporal import DateFormatHint, PartialTemporal

router = APIRouter()

MAX_BATCH = 1000


@lru_cache(maxsize=32)
def _base_year_parser(base_year: int) -> NumericalDateParser:
    return NumericalDateParser.with_base_year(base_year)


def _select_parser(request: Request, base_year: int | None) -> NumericalDateParser:
    if base_year is None:
        base_year = request.app.state.settings.date_base_year
    if base_year is None:
        return NumericalDateParser.default()
    try:
        return _base_year_parser(base_year)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def serialize_result(text: str | None, result: ParseResult[PartialTemporal]) -> dict:
    payload = None
    if result.payload is not None:
        payload = result.payload.model_dump(exclude_none=True)
        payload["iso"] = result.payload.isoformat()
    return {
        "input": text,
        "status": result.status.value,
        "confidence": result.confidence.value if result.confidence else None,
        "payload": payload,
        "issues": sorted(issue.value for issue in result.issues),
    }


@router.get("")
async def parse_date(
    request: Request,
    value: str = Query(..., description="Date string to parse"),
    hint: DateFormatHint = DateFormatHint.NONE,
    base_year: int | None = Query(None, ge=1),
):
    """Parse a single numeric date string."""
    parser = _select_parser(request, base_year)
    return serialize_result(value, parser.parse(value, hint))


@router.post("")
async def parse_dates(
    request: Request,
    values: list[str] = Body(...),
    hint: DateFormatHint = DateFormatHint.NONE,
    base_year: int | None = Query(None, ge=1),
):
    """Parse a batch of numeric date strings, preserving order."""
    if len(values) > MAX_BATCH:
        raise HTTPException(status_code=422, detail=f"At most {MAX_BATCH} values per request")
    parser = _select_parser(request, base_year)
    return [serialize_result(v, parser.parse(v, hint)) for v in values]


@router.get("/ymd")
async def parse_date_fields(
    year: str | None = None,
    month: str | None = None,
    day: str | None = None,
):
    """Parse separately supplied year, month and day."""
    result = parse_ymd(year, month, day)
    return serialize_result("-".join(p for p in (year, month, day) if p), result)

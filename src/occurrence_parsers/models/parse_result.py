"""Two-level parse result envelope shared by every parser.

A parse either succeeds with a confidence, or fails.  Either way it may carry
diagnostic issues, and a failed parse may still carry a payload when the
parser recognised the input but refuses to vouch for it (e.g. presumed
swapped coordinates).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ParseStatus(StrEnum):
    SUCCESS = "success"
    FAIL = "fail"


class ParseConfidence(StrEnum):
    DEFINITE = "definite"
    PROBABLE = "probable"
    POSSIBLE = "possible"


class OccurrenceIssue(StrEnum):
    COORDINATE_INVALID = "coordinate_invalid"
    COORDINATE_ROUNDED = "coordinate_rounded"
    COORDINATE_OUT_OF_RANGE = "coordinate_out_of_range"
    PRESUMED_SWAPPED_COORDINATE = "presumed_swapped_coordinate"
    ZERO_COORDINATE = "zero_coordinate"


class ParseResult(BaseModel, Generic[T]):
    """Outcome of a single parse call."""

    model_config = ConfigDict(frozen=True)

    status: ParseStatus
    confidence: ParseConfidence | None = None
    payload: T | None = None
    issues: frozenset[OccurrenceIssue] = Field(default_factory=frozenset)

    @classmethod
    def success(
        cls,
        confidence: ParseConfidence,
        payload: T,
        issues: Iterable[OccurrenceIssue] = (),
    ) -> ParseResult[T]:
        return cls(
            status=ParseStatus.SUCCESS,
            confidence=confidence,
            payload=payload,
            issues=frozenset(issues),
        )

    @classmethod
    def fail(
        cls,
        payload: T | None = None,
        issues: Iterable[OccurrenceIssue] = (),
    ) -> ParseResult[T]:
        return cls(status=ParseStatus.FAIL, payload=payload, issues=frozenset(issues))

    @property
    def is_successful(self) -> bool:
        return self.status == ParseStatus.SUCCESS

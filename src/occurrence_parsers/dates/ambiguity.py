"""Groups of patterns that compete for the same input layout."""

from __future__ import annotations

from dataclasses import dataclass, field

from occurrence_parsers.dates.pattern import FormatPatternMatcher
from occurrence_parsers.models.temporal import PartialTemporal


@dataclass(frozen=True)
class MultiParseOutcome:
    """Raw facts about how many members of a group matched an input."""

    match_count: int = 0
    preferred: PartialTemporal | None = None
    others: tuple[PartialTemporal, ...] = ()
    result: PartialTemporal | None = None

    def values(self) -> list[PartialTemporal]:
        """Every value produced, preferred first."""
        found = [self.preferred] if self.preferred is not None else []
        return found + list(self.others)

    def all_equal(self) -> bool:
        """True when no preferred member matched and several others agree on Y/M/D.

        A preferred reading settles the outcome on its own, so it never
        takes part in this check.
        """
        if self.preferred is not None or len(self.others) < 2:
            return False
        first = self.others[0]
        return all(first.same_ymd(v) for v in self.others[1:])


@dataclass(frozen=True)
class AmbiguityGroup:
    """Matchers sharing a layout but not a field order.

    At most one member is preferred: the locale-conventional reading used to
    break ties.  The group never resolves anything itself.
    """

    matchers: tuple[FormatPatternMatcher, ...]
    preferred: FormatPatternMatcher | None = None
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.preferred is not None and self.preferred not in self.matchers:
            raise ValueError("Preferred matcher must be a member of the group")

    def evaluate(self, text: str) -> MultiParseOutcome:
        # No short-circuit: the number of successful readings is the point.
        count = 0
        preferred: PartialTemporal | None = None
        others: list[PartialTemporal] = []
        last: PartialTemporal | None = None
        for matcher in self.matchers:
            value = matcher.try_match(text)
            if value is None:
                continue
            count += 1
            last = value
            if matcher is self.preferred:
                preferred = value
            else:
                others.append(value)
        return MultiParseOutcome(
            match_count=count,
            preferred=preferred,
            others=tuple(others),
            result=last,
        )

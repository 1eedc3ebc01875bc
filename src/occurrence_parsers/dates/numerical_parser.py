"""Numerical date parser with ambiguity resolution.

Only numeric dates are handled (``2003-02-15``, ``15.2.2003``, ``20030215``);
month names and free text are out of scope.  Months are numbered from 1.

Parsing runs in two passes.  The definite pass tries every unambiguous
pattern and returns the first hit.  The ambiguity pass, only reached when no
hint was given, runs every ambiguity group to completion and counts how many
readings the input admits:

* none: fail
* exactly one: definite
* several from groups without a preferred reading, all on the same Y/M/D: definite
* several that disagree: probable if a preferred reading exists, else fail

Instances are immutable and safe to share.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache

import structlog

from occurrence_parsers.dates import catalog
from occurrence_parsers.dates.ambiguity import AmbiguityGroup
from occurrence_parsers.dates.pattern import CHAR_HYPHEN, FormatPatternMatcher
from occurrence_parsers.models.parse_result import ParseConfidence, ParseResult
from occurrence_parsers.models.temporal import DateFormatHint, PartialTemporal

logger = structlog.get_logger(__name__)

# Strict ISO-style matcher for pre-split year/month/day fields.
YMD_FIELDS_MATCHER = FormatPatternMatcher(
    pattern="y[-M[-d]]",
    hint=DateFormatHint.YMD,
)


def _index_by_hint(
    matchers: tuple[FormatPatternMatcher, ...],
    groups: tuple[AmbiguityGroup, ...],
) -> dict[DateFormatHint, tuple[FormatPatternMatcher, ...]]:
    index: dict[DateFormatHint, list[FormatPatternMatcher]] = {}
    for matcher in matchers:
        index.setdefault(matcher.hint, []).append(matcher)
    for group in groups:
        for matcher in group.matchers:
            index.setdefault(matcher.hint, []).append(matcher)
    return {hint: tuple(found) for hint, found in index.items()}


class NumericalDateParser:
    """Parse numeric date strings into :class:`PartialTemporal` values.

    Use :meth:`default` for the shared instance, or :meth:`with_base_year`
    when 2-digit years must be understood.
    """

    def __init__(
        self,
        matchers: tuple[FormatPatternMatcher, ...],
        groups: tuple[AmbiguityGroup, ...],
        base_year: int | None = None,
    ):
        self._matchers = matchers
        self._groups = groups
        self._by_hint = _index_by_hint(matchers, groups)
        self.base_year = base_year

    @classmethod
    def default(cls) -> NumericalDateParser:
        """The shared parser without 2-digit-year support."""
        return _default_parser()

    @classmethod
    def with_base_year(cls, base_year: int) -> NumericalDateParser:
        """A parser that also reads 2-digit years.

        2-digit years resolve into ``[base_year, base_year + 99]``.  The base
        year may not lie in the future.
        """
        if base_year > date.today().year:
            raise ValueError(f"Base year {base_year} is after the current year")
        matchers = catalog.build_matchers(catalog.UNAMBIGUOUS_ROWS) + catalog.build_matchers(
            catalog.TWO_DIGIT_YEAR_UNAMBIGUOUS_ROWS, base_year
        )
        groups = catalog.build_groups(catalog.AMBIGUITY_FAMILIES) + catalog.build_groups(
            catalog.TWO_DIGIT_YEAR_FAMILIES, base_year
        )
        return cls(matchers, groups, base_year=base_year)

    @property
    def matchers(self) -> tuple[FormatPatternMatcher, ...]:
        return self._matchers

    @property
    def groups(self) -> tuple[AmbiguityGroup, ...]:
        return self._groups

    def matchers_for(self, hint: DateFormatHint | str | None) -> tuple[FormatPatternMatcher, ...]:
        """Candidates for *hint*; the full unambiguous catalog when unindexed."""
        return self._by_hint.get(DateFormatHint.coerce(hint), self._matchers)

    def parse(
        self, text: str | None, hint: DateFormatHint | str | None = None
    ) -> ParseResult[PartialTemporal]:
        if text is None or not text.strip():
            return ParseResult.fail()
        hint = DateFormatHint.coerce(hint)

        for matcher in self.matchers_for(hint):
            value = matcher.try_match(text)
            if value is not None:
                return ParseResult.success(ParseConfidence.DEFINITE, value)

        # A hint restricts the search space: no ambiguity pass.
        if hint is not DateFormatHint.NONE:
            return ParseResult.fail()

        return self._resolve_ambiguity(text)

    def _resolve_ambiguity(self, text: str) -> ParseResult[PartialTemporal]:
        total = 0
        last_success: PartialTemporal | None = None
        last_preferred: PartialTemporal | None = None
        all_equal = False

        for group in self._groups:
            outcome = group.evaluate(text)
            if outcome.match_count == 0:
                continue
            total += outcome.match_count
            last_success = outcome.result

            if all_equal:
                logger.warning(
                    "ambiguity_config_all_equal_overwritten",
                    input=text,
                    group=group.name,
                )
            all_equal = outcome.all_equal()

            if outcome.preferred is not None:
                if last_preferred is not None:
                    logger.warning(
                        "ambiguity_config_multiple_preferred",
                        input=text,
                        group=group.name,
                    )
                last_preferred = outcome.preferred

        if total == 1:
            return ParseResult.success(ParseConfidence.DEFINITE, last_success)
        if total > 1:
            if all_equal:
                return ParseResult.success(ParseConfidence.DEFINITE, last_success)
            if last_preferred is not None:
                return ParseResult.success(ParseConfidence.PROBABLE, last_preferred)

        logger.debug("date_parse_failed", input=text, matches=total)
        return ParseResult.fail()


@lru_cache(maxsize=1)
def _default_parser() -> NumericalDateParser:
    return NumericalDateParser(
        catalog.build_matchers(catalog.UNAMBIGUOUS_ROWS),
        catalog.build_groups(catalog.AMBIGUITY_FAMILIES),
    )


def _field_text(value: str | int | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, int):
        return str(value)
    value = value.strip()
    return value or None


def parse_ymd(
    year: str | int | None,
    month: str | int | None,
    day: str | int | None,
) -> ParseResult[PartialTemporal]:
    """Parse separately supplied year, month and day.

    A day without a month is refused rather than guessed at.  Success is
    always definite: once fields are split there is nothing ambiguous left.
    """
    for value in (year, month, day):
        if value is not None and (isinstance(value, bool) or not isinstance(value, (str, int))):
            return ParseResult.fail()

    year_text, month_text, day_text = _field_text(year), _field_text(month), _field_text(day)
    if month_text is None and day_text is not None:
        return ParseResult.fail()

    joined = CHAR_HYPHEN.join(p for p in (year_text, month_text, day_text) if p is not None)
    value = YMD_FIELDS_MATCHER.try_match(joined)
    if value is None:
        return ParseResult.fail()
    return ParseResult.success(ParseConfidence.DEFINITE, value)


def parse(
    text: str | None, hint: DateFormatHint | str | None = None
) -> ParseResult[PartialTemporal]:
    """Parse *text* with the shared default parser."""
    return NumericalDateParser.default().parse(text, hint)

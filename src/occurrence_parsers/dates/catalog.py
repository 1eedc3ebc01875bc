"""Pattern catalog as plain data.

Rows are read once into matchers by :mod:`numerical_parser`.  Order matters:
the unambiguous rows are tried first to last and the first hit wins.
"""

from __future__ import annotations

from typing import NamedTuple

from occurrence_parsers.dates.ambiguity import AmbiguityGroup
from occurrence_parsers.dates.pattern import CHAR_HYPHEN, CHAR_MINUS, FormatPatternMatcher
from occurrence_parsers.models.temporal import DateFormatHint


class PatternRow(NamedTuple):
    pattern: str
    hint: DateFormatHint
    separator: str | None = None
    alternates: str = ""
    preferred: bool = False


class FamilyRow(NamedTuple):
    name: str
    members: tuple[PatternRow, ...]


H = DateFormatHint

UNAMBIGUOUS_ROWS: tuple[PatternRow, ...] = (
    PatternRow("uuuuMMdd", H.YMD),
    PatternRow("uuuu-M-d[ HH:mm:ss]", H.YMDT, CHAR_HYPHEN, CHAR_MINUS + "."),
    PatternRow("uuuu-M-d'T'HH[:mm[:ss]]", H.YMDT),
    PatternRow("uuuu-M-d'T'HHmm[ss]", H.YMDT),
    PatternRow("uuuu-M-d'T'HH:mm:ssZ", H.YMDT),
    PatternRow("uuuu-M-d'T'HH:mm:ssxxx", H.YMDT),  # 1978-12-21T02:12:43+01:00
    PatternRow("uuuu-M-d'T'HH:mm:ss'Z'", H.YMDT),
    PatternRow("uuuu-M", H.YM),
    PatternRow("uuuu", H.Y),
    PatternRow("uuuu年MM月dd日", H.HAN),
    PatternRow("uuuu年M月d日", H.HAN),
)

# Only available once a base year is known.
TWO_DIGIT_YEAR_UNAMBIGUOUS_ROWS: tuple[PatternRow, ...] = (
    PatternRow("uu年M月d日", H.HAN),
)

# Mostly the split between FR/GB/ES day-first and US month-first.
AMBIGUITY_FAMILIES: tuple[FamilyRow, ...] = (
    FamilyRow("dotted", (
        PatternRow("d.M.uuuu", H.DMY, preferred=True),  # DE, DK, NO
        PatternRow("M.d.uuuu", H.MDY),
    )),
    FamilyRow("slashed", (
        PatternRow("d/M/uuuu", H.DMY, "/", CHAR_HYPHEN + CHAR_MINUS),
        PatternRow("M/d/uuuu", H.MDY, "/", CHAR_HYPHEN + CHAR_MINUS),
    )),
    FamilyRow("compact", (
        PatternRow("ddMMuuuu", H.DMY),
        PatternRow("MMdduuuu", H.MDY),
    )),
    # not official anywhere but seen in the wild
    FamilyRow("backslashed", (
        PatternRow("d\\M\\uuuu", H.DMY, "\\", "_"),
        PatternRow("M\\d\\uuuu", H.MDY, "\\", "_"),
    )),
)

TWO_DIGIT_YEAR_FAMILIES: tuple[FamilyRow, ...] = (
    FamilyRow("dotted-2y", (
        PatternRow("d.M.uu", H.DMY, preferred=True),
        PatternRow("M.d.uu", H.MDY),
    )),
    FamilyRow("slashed-2y", (
        PatternRow("d/M/uu", H.DMY, "/", CHAR_HYPHEN + CHAR_MINUS),
        PatternRow("M/d/uu", H.MDY, "/", CHAR_HYPHEN + CHAR_MINUS),
    )),
    FamilyRow("compact-2y", (
        PatternRow("ddMMuu", H.DMY),
        PatternRow("MMdduu", H.MDY),
    )),
    FamilyRow("backslashed-2y", (
        PatternRow("d\\M\\uu", H.DMY, "\\", "_"),
        PatternRow("M\\d\\uu", H.MDY, "\\", "_"),
    )),
)


def build_matcher(row: PatternRow, base_year: int | None = None) -> FormatPatternMatcher:
    return FormatPatternMatcher(
        pattern=row.pattern,
        hint=row.hint,
        separator=row.separator,
        alternate_separators=row.alternates,
        base_year=base_year,
    )


def build_matchers(
    rows: tuple[PatternRow, ...], base_year: int | None = None
) -> tuple[FormatPatternMatcher, ...]:
    return tuple(build_matcher(row, base_year) for row in rows)


def build_group(family: FamilyRow, base_year: int | None = None) -> AmbiguityGroup:
    matchers = []
    preferred = None
    for row in family.members:
        matcher = build_matcher(row, base_year)
        matchers.append(matcher)
        if row.preferred:
            if preferred is not None:
                raise ValueError(f"Family {family.name!r} has more than one preferred pattern")
            preferred = matcher
    return AmbiguityGroup(matchers=tuple(matchers), preferred=preferred, name=family.name)


def build_groups(
    families: tuple[FamilyRow, ...], base_year: int | None = None
) -> tuple[AmbiguityGroup, ...]:
    return tuple(build_group(family, base_year) for family in families)

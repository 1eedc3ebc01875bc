"""Single-pattern numeric date matcher.

Patterns are written in a small DSL close to the usual date-format letters:

==========  ===========================================================
``uuuu``    4-digit year
``uu``      2-digit year, resolved against a base year (required)
``y``       2-4 digit year, taken literally
``M/MM``    month, 1-2 digits / exactly 2 digits
``d/dd``    day of month, 1-2 digits / exactly 2 digits
``HH``      hour of day (00-23)
``mm``      minute
``ss``      second
``Z``       numeric offset ``+HHMM``
``xxx``     numeric offset ``+HH:MM``
``'...'``   quoted literal; ``'Z'`` is read as a UTC designator
``[...]``   optional section, may be nested
==========  ===========================================================

Any other character is matched literally.  Digits are ASCII only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from pydantic import ValidationError

from occurrence_parsers.models.temporal import DateFormatHint, PartialTemporal

# ISO 8601 specifies a Unicode minus, with a hyphen as an alternative.
CHAR_HYPHEN = "-"
CHAR_MINUS = "−"

_FIELD_REGEX: dict[tuple[str, int], str] = {
    ("u", 4): r"(?P<year>\d{4})",
    ("u", 2): r"(?P<year2>\d{2})",
    ("y", 1): r"(?P<year>\d{2,4})",
    ("M", 1): r"(?P<month>\d{1,2})",
    ("M", 2): r"(?P<month>\d{2})",
    ("d", 1): r"(?P<day>\d{1,2})",
    ("d", 2): r"(?P<day>\d{2})",
    ("H", 2): r"(?P<hour>\d{2})",
    ("m", 2): r"(?P<minute>\d{2})",
    ("s", 2): r"(?P<second>\d{2})",
    ("Z", 1): r"(?P<offset_basic>[+-]\d{4})",
    ("x", 3): r"(?P<offset_ext>[+-]\d{2}:\d{2})",
}

_OFFSET_MAX_SECONDS = 18 * 3600


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a pattern template into an anchored regular expression.

    Raises ``ValueError`` for unknown letters, unbalanced brackets or
    unterminated quotes; those are authoring errors in a catalog.
    """
    parts: list[str] = []
    depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            end = pattern.find("'", i + 1)
            if end < 0:
                raise ValueError(f"Unterminated quote in pattern {pattern!r}")
            literal = pattern[i + 1:end]
            if literal == "":
                parts.append(re.escape("'"))
            elif literal == "Z":
                parts.append(r"(?P<zulu>Z)")
            else:
                parts.append(re.escape(literal))
            i = end + 1
        elif ch == "[":
            depth += 1
            parts.append("(?:")
            i += 1
        elif ch == "]":
            if depth == 0:
                raise ValueError(f"Unbalanced ']' in pattern {pattern!r}")
            depth -= 1
            parts.append(")?")
            i += 1
        elif ch.isascii() and ch.isalpha():
            run = 1
            while i + run < n and pattern[i + run] == ch:
                run += 1
            key = (ch, run)
            if key not in _FIELD_REGEX:
                raise ValueError(f"Unsupported field {ch * run!r} in pattern {pattern!r}")
            parts.append(_FIELD_REGEX[key])
            i += run
        else:
            parts.append(re.escape(ch))
            i += 1
    if depth:
        raise ValueError(f"Unbalanced '[' in pattern {pattern!r}")
    return re.compile("".join(parts), re.ASCII)


def _parse_offset(text: str) -> int | None:
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if minutes > 59:
        return None
    seconds = hours * 3600 + minutes * 60
    if seconds > _OFFSET_MAX_SECONDS:
        return None
    return sign * seconds


def resolve_two_digit_year(value: int, base_year: int) -> int:
    """Map a 2-digit year into the window ``[base_year, base_year + 99]``."""
    return base_year + (value - base_year) % 100


@dataclass(frozen=True)
class FormatPatternMatcher:
    """One literal pattern, able to turn a matching string into a value.

    ``alternate_separators`` lists characters rewritten to ``separator``
    before matching, so a Unicode minus or an underscore can stand in for the
    pattern's own separator.
    """

    pattern: str
    hint: DateFormatHint
    separator: str | None = None
    alternate_separators: str = ""
    base_year: int | None = None
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _translation: dict[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", compile_pattern(self.pattern))
        if "year2" in self.regex.groupindex and self.base_year is None:
            raise ValueError(f"Pattern {self.pattern!r} needs a base year")
        if self.alternate_separators and not self.separator:
            raise ValueError(f"Pattern {self.pattern!r} has alternates but no separator")
        translation = {ord(ch): self.separator for ch in self.alternate_separators}
        object.__setattr__(self, "_translation", translation)

    @property
    def uses_two_digit_year(self) -> bool:
        return "year2" in self.regex.groupindex

    def normalize(self, text: str) -> str:
        if not self._translation:
            return text
        return text.translate(self._translation)

    def try_match(self, text: str | None) -> PartialTemporal | None:
        """Return the value *text* denotes under this pattern, or ``None``."""
        if not text:
            return None
        m = self.regex.fullmatch(self.normalize(text))
        if m is None:
            return None
        groups = m.groupdict()

        if groups.get("year2") is not None:
            year = resolve_two_digit_year(int(groups["year2"]), self.base_year)
        elif groups.get("year") is not None:
            year = int(groups["year"])
        else:
            return None

        values: dict[str, int | None] = {"year": year}
        for name in ("month", "day", "hour", "minute", "second"):
            raw = groups.get(name)
            values[name] = int(raw) if raw is not None else None

        if values["hour"] is not None:
            if values["minute"] is None:
                values["minute"] = 0
            if values["second"] is None:
                values["second"] = 0

        offset: int | None = None
        if groups.get("offset_basic") is not None:
            offset = _parse_offset(groups["offset_basic"])
            if offset is None:
                return None
        elif groups.get("offset_ext") is not None:
            offset = _parse_offset(groups["offset_ext"])
            if offset is None:
                return None
        elif groups.get("zulu") is not None:
            offset = 0

        try:
            return PartialTemporal(offset_seconds=offset, **values)
        except ValidationError:
            return None

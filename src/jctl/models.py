"""Data models for jctl."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ── Wildcard outcomes ───────────────────────────────────────────────────


class Verdict(str, Enum):
    """Three-way result of matching a target against a wildcard."""

    matched = "matched"
    not_matched = "not_matched"
    syntax_error = "syntax_error"


class ErrorKind(str, Enum):
    """The ways a wildcard pattern can be malformed."""

    trailing_backslash = "trailing_backslash"
    unclosed_class = "unclosed_class"
    invalid_range = "invalid_range"

    @property
    def description(self) -> str:
        return _ERROR_DESCRIPTIONS[self]


_ERROR_DESCRIPTIONS = {
    ErrorKind.trailing_backslash: "'\\' occurred at end of string (expected another character)",
    ErrorKind.unclosed_class: "expected ']' to close character class",
    ErrorKind.invalid_range: "character range not closed in character class",
}


@dataclass(frozen=True)
class Outcome:
    """The result of matching a target string against a wildcard.

    ``error`` is set only when ``verdict`` is :attr:`Verdict.syntax_error`.
    Outcomes cannot be used as booleans; ask for :attr:`matched` or
    :attr:`is_error` explicitly so a malformed pattern is never taken for
    a successful match.
    """

    verdict: Verdict
    error: ErrorKind | None = None

    @classmethod
    def syntax_error(cls, kind: ErrorKind) -> Outcome:
        return cls(Verdict.syntax_error, kind)

    @property
    def matched(self) -> bool:
        return self.verdict is Verdict.matched

    @property
    def is_error(self) -> bool:
        return self.verdict is Verdict.syntax_error

    def __bool__(self) -> bool:
        raise TypeError(
            "Outcome has no truth value; use .matched or .is_error instead"
        )


MATCHED = Outcome(Verdict.matched)
NOT_MATCHED = Outcome(Verdict.not_matched)


@dataclass(frozen=True)
class FragmentMatch:
    """Positions reached by matching one rigid fragment.

    On success ``pattern_pos`` points just past the fragment and
    ``target_pos`` just past the consumed target bytes.  For failures and
    syntax errors the positions carry no meaning.
    """

    pattern_pos: int
    target_pos: int
    outcome: Outcome


# ── Graph ───────────────────────────────────────────────────────────────


class SortOrder(str, Enum):
    """Order in which graph rows are printed.

    Values are the letters accepted by the ``-o`` option.
    """

    name = "n"
    lines_increasing = "l"
    lines_decreasing = "L"


class WildcardExpansion(str, Enum):
    """When command line arguments are expanded as wildcards by jctl itself."""

    auto = "auto"
    always = "always"
    never = "never"


@dataclass
class GraphEntry:
    """A single file shown in the graph."""

    path: str
    name_length: int
    dir_length: int = 0
    line_count: int = 0
    from_wildcard: bool = False


@dataclass
class Settings:
    """Tunable behaviour, usually loaded from YAML."""

    sort: SortOrder | None = None
    bars: int = 25
    max_entries: int = 1024
    expand_wildcards: WildcardExpansion = WildcardExpansion.auto
    strict_patterns: bool = False

"""Glob-style wildcard matching.

Syntax:

- ``*`` matches any sequence of bytes, including none.
- ``?`` matches exactly one byte, whatever it is.
- ``[abc]`` matches one of ``a``, ``b`` or ``c``; ``[a-f]`` anything from
  ``a`` through ``f`` (reversed bounds are accepted); ``[^a-f]`` anything
  else.  ``-`` is literal right after ``[`` or ``[^``, and ``^`` is
  literal anywhere except first.
- ``\\*``, ``\\?``, ``\\[``, ``\\]``, ``\\\\`` match the character after the
  backslash, inside classes too.
- Every other byte matches itself.

A wildcard is a sequence of rigid fragments (``?`` and ``[...]`` never
match more or less than one byte) separated by stars.  Each fragment is
searched for at the first target offset where it fits.  Since fragments
are rigid, finding each one at its earliest position never has to be
undone, so matching costs at most O(len(pattern) * len(target)).
"""

from __future__ import annotations

import logging
import os

from .errors import PatternSyntaxError
from .models import MATCHED, NOT_MATCHED, ErrorKind, FragmentMatch, Outcome

logger = logging.getLogger(__name__)

__all__ = ["check", "looks_like_pattern", "match", "match_fragment"]

_STAR = ord("*")
_QUESTION = ord("?")
_BACKSLASH = ord("\\")
_OPEN = ord("[")
_CLOSE = ord("]")
_CARET = ord("^")
_DASH = ord("-")

# ``?`` and ``\`` are not in this set even though match() supports them.
_PATTERN_BYTES = frozenset(b"*^[]")


class _Malformed(Exception):
    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return os.fsencode(value)
    return bytes(value)


def _read_class(pattern: bytes, p: int, byte: int | None) -> tuple[int, bool]:
    """Parse a character class whose body starts at ``pattern[p]``.

    Returns the position after the closing ``]`` and whether ``byte``
    satisfies the class.
    """
    end = len(pattern)
    negated = False
    if p < end and pattern[p] == _CARET:
        negated = True
        p += 1

    member = False
    while p >= end or pattern[p] != _CLOSE:
        if p < end and pattern[p] == _BACKSLASH:
            p += 1
        if p >= end:
            raise _Malformed(ErrorKind.unclosed_class)
        if p + 1 < end and pattern[p + 1] == _DASH:
            lower = pattern[p]
            p += 2
            if p < end and pattern[p] == _CLOSE:
                raise _Malformed(ErrorKind.invalid_range)
            if p < end and pattern[p] == _BACKSLASH:
                p += 1
            if p >= end:
                raise _Malformed(ErrorKind.unclosed_class)
            upper = pattern[p]
            p += 1
            if lower > upper:
                lower, upper = upper, lower
            if byte is not None and lower <= byte <= upper:
                member = True
        else:
            if pattern[p] == byte:
                member = True
            p += 1

    if byte is None:
        return p + 1, False
    return p + 1, member != negated


def _read_atom(pattern: bytes, p: int, byte: int | None) -> tuple[int, bool]:
    """Consume the atom at ``pattern[p]`` and test it against ``byte``.

    ``byte`` is ``None`` once the target is exhausted: the atom is still
    parsed, so syntax errors surface, but it never matches.
    """
    c = pattern[p]
    if c == _BACKSLASH:
        if p + 1 >= len(pattern):
            raise _Malformed(ErrorKind.trailing_backslash)
        return p + 2, pattern[p + 1] == byte
    if c == _QUESTION:
        return p + 1, byte is not None
    if c == _OPEN:
        return _read_class(pattern, p + 1, byte)
    return p + 1, c == byte


def match_fragment(
    pattern: bytes,
    pattern_pos: int,
    target: bytes,
    target_pos: int,
    target_end: int,
) -> FragmentMatch:
    """Match the fragment at ``pattern_pos`` against a prefix of the target.

    The fragment runs up to the next unescaped ``*`` or the end of the
    pattern.  Target bytes are only read below ``target_end``.  On success
    the returned positions point just past the fragment and the consumed
    target bytes; whatever remains of the target is the caller's concern.
    """
    p, t = pattern_pos, target_pos
    end = len(pattern)
    try:
        while p < end and pattern[p] != _STAR:
            if t >= target_end:
                # Out of target: keep parsing so a malformed tail is reported.
                while p < end and pattern[p] != _STAR:
                    p, _ = _read_atom(pattern, p, None)
                return FragmentMatch(p, t, NOT_MATCHED)
            p, hit = _read_atom(pattern, p, target[t])
            if not hit:
                return FragmentMatch(p, t, NOT_MATCHED)
            t += 1
    except _Malformed as exc:
        return FragmentMatch(p, t, Outcome.syntax_error(exc.kind))
    return FragmentMatch(p, t, MATCHED)


def _match(pattern: bytes, target: bytes, target_end: int) -> Outcome:
    end = len(pattern)
    p = t = 0

    # A leading fragment is anchored to the start of the target.
    if not pattern.startswith(b"*"):
        frag = match_fragment(pattern, 0, target, 0, target_end)
        if not frag.outcome.matched:
            return frag.outcome
        p, t = frag.pattern_pos, frag.target_pos

    while p < end:
        while p < end and pattern[p] == _STAR:
            p += 1
        if p == end:
            return MATCHED

        for start in range(t, target_end + 1):
            frag = match_fragment(pattern, p, target, start, target_end)
            if frag.outcome.is_error:
                return frag.outcome
            if frag.outcome.matched:
                break
        else:
            return NOT_MATCHED

        if frag.pattern_pos == end and frag.target_pos != target_end:
            # The last fragment matched too early (``*a`` against "parka"
            # found the first a).  It has to sit at the very end instead.
            consumed = frag.target_pos - start
            return match_fragment(
                pattern, p, target, target_end - consumed, target_end
            ).outcome

        p, t = frag.pattern_pos, frag.target_pos

    return MATCHED if t == target_end else NOT_MATCHED


def match(
    pattern: str | bytes,
    target: str | bytes,
    target_len: int | None = None,
) -> Outcome:
    """Match ``target`` against the wildcard ``pattern``.

    Strings are compared as bytes in the filesystem encoding.  Only the
    first ``target_len`` bytes of the target are considered (all of them
    by default).

    Returns an :class:`~jctl.models.Outcome`; a malformed pattern gives a
    syntax-error outcome rather than a non-match.
    """
    pat = _as_bytes(pattern)
    tgt = _as_bytes(target)
    if target_len is None:
        target_len = len(tgt)
    elif not 0 <= target_len <= len(tgt):
        raise ValueError(
            f"target_len must be between 0 and {len(tgt)}, got {target_len}"
        )

    outcome = _match(pat, tgt, target_len)
    if outcome.is_error:
        logger.debug(
            "[wildcard.syntax] pattern=%r kind=%s", pattern, outcome.error.value
        )
    return outcome


def check(pattern: str | bytes, target: str | bytes) -> bool:
    """Return whether ``target`` matches ``pattern``.

    Raises :class:`~jctl.errors.PatternSyntaxError` for malformed patterns.
    """
    outcome = match(pattern, target)
    if outcome.is_error:
        text = pattern if isinstance(pattern, str) else os.fsdecode(pattern)
        raise PatternSyntaxError(text, outcome.error)
    return outcome.matched


def looks_like_pattern(candidate: str | bytes) -> bool:
    """Return True if ``candidate`` contains any of ``*``, ``^``, ``[`` or ``]``.

    Used to decide whether a command line argument is a wildcard to expand
    or a literal file name.  ``?`` and ``\\`` do not count, so ``a?b`` is
    treated as a literal name.
    """
    return not _PATTERN_BYTES.isdisjoint(_as_bytes(candidate))

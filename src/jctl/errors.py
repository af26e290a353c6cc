"""Error hierarchy for jctl."""

from __future__ import annotations

from typing import Any

from .models import ErrorKind

__all__ = [
    "JctlError",
    "PatternSyntaxError",
    "TooManyEntriesError",
    "ConfigError",
]


class JctlError(Exception):
    """Base error for all jctl errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PatternSyntaxError(JctlError):
    """Raised when a wildcard pattern is malformed."""

    def __init__(self, pattern: str, kind: ErrorKind) -> None:
        super().__init__(
            code="PATTERN_SYNTAX",
            message=f"invalid wildcard '{pattern}': {kind.description}",
            details={"pattern": pattern, "kind": kind.value},
        )
        self.pattern = pattern
        self.kind = kind


class TooManyEntriesError(JctlError):
    """Raised when more files are registered than the graph allows."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code="TOO_MANY_ENTRIES",
            message=f"too many files (limit is {limit})",
            details={"limit": limit},
        )
        self.limit = limit


class ConfigError(JctlError):
    """Raised when settings are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(code="CONFIG_INVALID", message=message)

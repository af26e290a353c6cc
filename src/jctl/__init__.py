"""jctl: line count graphs with built-in wildcard matching."""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import ConfigError, JctlError, PatternSyntaxError, TooManyEntriesError
from .graph import Graph
from .loader import load_settings, load_settings_from_str
from .models import (
    ErrorKind,
    FragmentMatch,
    GraphEntry,
    Outcome,
    Settings,
    SortOrder,
    Verdict,
    WildcardExpansion,
)
from .wildcard import check, looks_like_pattern, match, match_fragment

__all__ = [
    "ConfigError",
    "ErrorKind",
    "FragmentMatch",
    "Graph",
    "GraphEntry",
    "JctlError",
    "Outcome",
    "PatternSyntaxError",
    "Settings",
    "SortOrder",
    "TooManyEntriesError",
    "Verdict",
    "WildcardExpansion",
    "check",
    "load_settings",
    "load_settings_from_str",
    "looks_like_pattern",
    "match",
    "match_fragment",
]

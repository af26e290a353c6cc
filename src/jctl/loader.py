"""YAML/dict loader for jctl settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models import Settings, SortOrder, WildcardExpansion

_KNOWN_KEYS = frozenset(
    {"sort", "bars", "max_entries", "expand_wildcards", "strict_patterns"}
)


def _parse_sort(raw: Any) -> SortOrder | None:
    if raw is None:
        return None
    try:
        return SortOrder(str(raw))
    except ValueError:
        raise ConfigError(f"undefined sortorder '{raw}'") from None


def _parse_positive_int(key: str, raw: Any, default: int) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {raw!r}")
    return raw


def _parse_expansion(raw: Any) -> WildcardExpansion:
    if raw is None:
        return WildcardExpansion.auto
    try:
        return WildcardExpansion(raw)
    except ValueError:
        choices = ", ".join(e.value for e in WildcardExpansion)
        raise ConfigError(
            f"'expand_wildcards' must be one of {choices}, got {raw!r}"
        ) from None


def load_settings_from_dict(data: dict[str, Any]) -> Settings:
    """Build :class:`Settings` from a raw dictionary (e.g. parsed YAML)."""
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(map(str, unknown))}")
    strict = data.get("strict_patterns", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"'strict_patterns' must be true or false, got {strict!r}")
    defaults = Settings()
    return Settings(
        sort=_parse_sort(data.get("sort")),
        bars=_parse_positive_int("bars", data.get("bars"), defaults.bars),
        max_entries=_parse_positive_int(
            "max_entries", data.get("max_entries"), defaults.max_entries
        ),
        expand_wildcards=_parse_expansion(data.get("expand_wildcards")),
        strict_patterns=strict,
    )


def load_settings_from_str(text: str) -> Settings:
    """Parse settings from a YAML string.  An empty document gives defaults."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML: {exc}") from exc
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError("Expected a YAML mapping at the top level")
    return load_settings_from_dict(data)


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file on disk."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file '{p}': {exc.strerror}") from exc
    return load_settings_from_str(text)

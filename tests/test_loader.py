"""Tests for the settings loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from jctl import (
    ConfigError,
    Settings,
    SortOrder,
    WildcardExpansion,
    load_settings,
    load_settings_from_str,
)


class TestLoader:
    YAML_DOC = """\
sort: L
bars: 40
max_entries: 10
expand_wildcards: always
strict_patterns: true
"""

    def test_load_from_string(self) -> None:
        settings = load_settings_from_str(self.YAML_DOC)
        assert settings.sort == SortOrder.lines_decreasing
        assert settings.bars == 40
        assert settings.max_entries == 10
        assert settings.expand_wildcards == WildcardExpansion.always
        assert settings.strict_patterns is True

    def test_missing_keys_take_defaults(self) -> None:
        settings = load_settings_from_str("sort: n\n")
        assert settings.sort == SortOrder.name
        assert settings.bars == 25
        assert settings.max_entries == 1024
        assert settings.expand_wildcards == WildcardExpansion.auto
        assert settings.strict_patterns is False

    def test_empty_document_gives_defaults(self) -> None:
        assert load_settings_from_str("") == Settings()

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "jctl.yaml"
        path.write_text(self.YAML_DOC, encoding="utf-8")
        assert load_settings(path).bars == 40

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "nope.yaml")


class TestLoaderRejects:
    @pytest.mark.parametrize(
        "doc, fragment",
        [
            ("colour: red\n", "Unknown setting"),
            ("sort: x\n", "undefined sortorder 'x'"),
            ("bars: 0\n", "'bars' must be a positive integer"),
            ("bars: yes\n", "'bars' must be a positive integer"),
            ("max_entries: many\n", "'max_entries' must be a positive integer"),
            ("expand_wildcards: sometimes\n", "'expand_wildcards' must be one of"),
            ("strict_patterns: 1\n", "'strict_patterns' must be true or false"),
            ("- sort\n", "Expected a YAML mapping"),
            ("sort: [n\n", "Invalid YAML"),
        ],
    )
    def test_invalid_documents(self, doc: str, fragment: str) -> None:
        with pytest.raises(ConfigError) as info:
            load_settings_from_str(doc)
        assert fragment in info.value.message
        assert info.value.code == "CONFIG_INVALID"

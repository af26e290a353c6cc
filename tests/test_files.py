"""Tests for file helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from jctl import files
from jctl.files import DirEntry, count_lines, file_exists, list_directory


def _write(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


class TestCountLines:
    def test_lf(self, tmp_path: Path) -> None:
        assert count_lines(_write(tmp_path / "f", b"a\nb\nc")) == 3

    def test_crlf_counts_once(self, tmp_path: Path) -> None:
        assert count_lines(_write(tmp_path / "f", b"a\r\nb\r\nc")) == 3

    def test_cr(self, tmp_path: Path) -> None:
        assert count_lines(_write(tmp_path / "f", b"a\rb\rc")) == 3

    def test_mixed_terminators(self, tmp_path: Path) -> None:
        assert count_lines(_write(tmp_path / "f", b"a\r\n\r\nb\nc\rd")) == 5

    def test_blank_lines_count(self, tmp_path: Path) -> None:
        assert count_lines(_write(tmp_path / "f", b"\n\n")) == 3

    def test_empty_file_has_one_line(self, tmp_path: Path) -> None:
        assert count_lines(_write(tmp_path / "f", b"")) == 1

    def test_unreadable_file_is_zero(self, tmp_path: Path) -> None:
        assert count_lines(tmp_path / "missing") == 0
        assert count_lines(tmp_path) == 0

    def test_crlf_split_across_chunks(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(files, "_CHUNK_SIZE", 2)
        assert count_lines(_write(tmp_path / "f", b"a\r\nb\r\nc")) == 3
        assert count_lines(_write(tmp_path / "g", b"a\r\rb\n\nc")) == 5

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "f", b"x\ny")
        assert count_lines(str(path)) == 2


class TestFileExists:
    def test_regular_file(self, tmp_path: Path) -> None:
        assert file_exists(_write(tmp_path / "f", b"")) is True

    def test_directory_and_missing(self, tmp_path: Path) -> None:
        assert file_exists(tmp_path) is False
        assert file_exists(tmp_path / "nope") is False


class TestListDirectory:
    def test_sorted_entries_with_dir_flag(self, tmp_path: Path) -> None:
        _write(tmp_path / "b.txt", b"")
        _write(tmp_path / "a.txt", b"")
        (tmp_path / "sub").mkdir()
        assert list(list_directory(tmp_path)) == [
            DirEntry("a.txt"),
            DirEntry("b.txt"),
            DirEntry("sub", is_dir=True),
        ]

    def test_missing_directory_yields_nothing(self, tmp_path: Path) -> None:
        assert list(list_directory(tmp_path / "missing")) == []

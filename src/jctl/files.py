"""File and directory helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class DirEntry:
    """One name found in a directory."""

    name: str
    is_dir: bool = False


def count_lines(path: str | Path) -> int:
    """Return the line count of the file at ``path``.

    CR, LF and CRLF each end a line.  A file always has at least one line,
    so the count is one more than the number of line breaks.  Returns 0
    when the file cannot be read.
    """
    breaks = 0
    pending_cr = False
    try:
        with Path(path).open("rb") as fh:
            for chunk in iter(partial(fh.read, _CHUNK_SIZE), b""):
                breaks += chunk.count(b"\n") + chunk.count(b"\r") - chunk.count(b"\r\n")
                # A CRLF split across two chunks was counted twice.
                if pending_cr and chunk.startswith(b"\n"):
                    breaks -= 1
                pending_cr = chunk.endswith(b"\r")
    except OSError as exc:
        logger.debug("[jctl.lines] path=%s unreadable: %s", path, exc)
        return 0
    return breaks + 1


def file_exists(path: str | Path) -> bool:
    """Return True when ``path`` names an existing regular file."""
    return Path(path).is_file()


def list_directory(path: str | Path = ".") -> Iterator[DirEntry]:
    """Yield the entries of the directory at ``path``, sorted by name.

    An unreadable directory yields nothing.
    """
    try:
        with os.scandir(path) as it:
            entries = [DirEntry(e.name, e.is_dir()) for e in it]
    except OSError as exc:
        logger.warning("[jctl.listdir] cannot read directory %s: %s", path, exc)
        return
    yield from sorted(entries, key=lambda e: e.name)

"""Line count graph: registration, wildcard expansion, sorting and rendering."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from .errors import PatternSyntaxError, TooManyEntriesError
from .files import count_lines, file_exists, list_directory
from .models import GraphEntry, Settings, SortOrder, WildcardExpansion
from .wildcard import looks_like_pattern, match

logger = logging.getLogger(__name__)


class Graph:
    """Collects files and renders their line counts as a bar chart.

    Arguments are registered one at a time.  Wildcards are expanded by the
    graph itself when the shell does not do it (Windows) or when forced by
    the settings.  Each file is counted once, however many arguments name
    it.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._entries: list[GraphEntry] = []
        self._paths: set[str] = set()
        self._total = 0
        self._name_width = 0
        # Widest text in front of a base name: directory plus separator.
        self._prefix_width = 0

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def entries(self) -> list[GraphEntry]:
        """Return the registered entries in their current order."""
        return list(self._entries)

    @property
    def total_lines(self) -> int:
        return self._total

    @property
    def expands_wildcards(self) -> bool:
        mode = self._settings.expand_wildcards
        if mode is WildcardExpansion.auto:
            return os.name == "nt"
        return mode is WildcardExpansion.always

    def exists(self, path: str) -> bool:
        """Return True if ``path`` is already registered.

        Paths are compared after normalization, so ``a.txt``, ``./a.txt``
        and ``dir/../a.txt`` name the same entry.
        """
        return os.path.normpath(path) in self._paths

    # ── Registration ─────────────────────────────────────────────────

    def register(self, argument: str) -> int:
        """Register a command line argument and return how many files it added."""
        if self.expands_wildcards and looks_like_pattern(argument):
            return self._register_wildcard(argument)
        return self._register_literal(argument)

    def _register_literal(self, path: str) -> int:
        if self.exists(path):
            logger.debug("[jctl.skip] path=%s reason=duplicate", path)
            return 0
        if os.path.isdir(path):
            logger.debug("[jctl.skip] path=%s reason=directory", path)
            return 0
        if not file_exists(path):
            logger.debug("[jctl.skip] path=%s reason=missing", path)
            return 0

        directory, sep, name = path.rpartition("/")
        self._add(path, len(name), len(directory) if sep else 0, from_wildcard=False)
        return 1

    def _register_wildcard(self, argument: str) -> int:
        directory, sep, pattern = argument.rpartition("/")
        listing = (directory or "/") if sep else "."

        added = 0
        for entry in list_directory(listing):
            if entry.is_dir:
                continue
            outcome = match(pattern, entry.name)
            if outcome.is_error:
                if self._settings.strict_patterns:
                    raise PatternSyntaxError(argument, outcome.error)
                logger.warning(
                    "invalid wildcard '%s': %s", argument, outcome.error.description
                )
                return added
            if not outcome.matched:
                continue

            path = f"{directory}/{entry.name}" if sep else entry.name
            if self.exists(path):
                continue
            self._add(
                path,
                len(entry.name),
                len(directory) if sep else 0,
                from_wildcard=True,
            )
            added += 1

        if not added:
            logger.debug("[jctl.wildcard] pattern=%s matched nothing", argument)
        return added

    def _add(
        self, path: str, name_length: int, dir_length: int, *, from_wildcard: bool
    ) -> None:
        if len(self._entries) >= self._settings.max_entries:
            raise TooManyEntriesError(self._settings.max_entries)

        lines = count_lines(path)
        self._entries.append(
            GraphEntry(
                path=path,
                name_length=name_length,
                dir_length=dir_length,
                line_count=lines,
                from_wildcard=from_wildcard,
            )
        )
        self._paths.add(os.path.normpath(path))
        self._total += lines
        self._name_width = max(self._name_width, name_length)
        self._prefix_width = max(self._prefix_width, len(path) - name_length)
        logger.debug(
            "[jctl.register] path=%s lines=%d wildcard=%s", path, lines, from_wildcard
        )

    # ── Output ───────────────────────────────────────────────────────

    def sort(self, order: SortOrder | None) -> None:
        """Reorder entries.  ``None`` keeps registration order."""
        if order is None:
            return
        if order is SortOrder.name:
            self._entries.sort(key=lambda e: os.fsencode(e.path))
        elif order is SortOrder.lines_increasing:
            self._entries.sort(key=lambda e: e.line_count)
        else:
            self._entries.sort(key=lambda e: e.line_count, reverse=True)

    def render(self) -> str:
        """Return the graph as text, one row per entry plus a total row."""
        bars = self._settings.bars
        count_width = len(str(self._total))

        rows = []
        for e in self._entries:
            # Right-align the directory part so base names line up.
            lead = self._prefix_width - (len(e.path) - e.name_length)
            percent = e.line_count * 100 // self._total if self._total else 0
            filled = percent * bars // 100
            unit = "line  [" if e.line_count == 1 else "lines ["
            rows.append(
                f"{' ' * lead}{e.path}{' ' * (self._name_width - e.name_length)}"
                f" | {e.line_count:<{count_width}} {unit}"
                f"{'=' * filled}{' ' * (bars - filled)}] {percent}%"
            )

        plural = "" if self._total == 1 else "s"
        indent = " " * (self._name_width + self._prefix_width)
        rows.append(f"{indent}   {self._total} line{plural}")
        return "\n".join(rows) + "\n"

    def run(self, arguments: Iterable[str], order: SortOrder | None = None) -> str:
        """Register every argument, sort and render.

        ``order`` overrides the sort order from the settings.
        """
        for argument in arguments:
            self.register(argument)
        self.sort(order if order is not None else self._settings.sort)
        return self.render()

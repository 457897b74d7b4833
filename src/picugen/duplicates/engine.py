"""
Output modes and grouping of files by identical digest.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, TextIO

from picugen.discovery import ResultRecord


class OutputMode(Enum):
    """How results are emitted for one invocation."""

    DIRECT = "direct"
    GROUPED = "grouped"
    GROUPED_FILTERED = "grouped_filtered"

    @classmethod
    def from_flags(cls, group_same: bool, only_same: bool) -> "OutputMode":
        if only_same:
            return cls.GROUPED_FILTERED
        if group_same:
            return cls.GROUPED
        return cls.DIRECT

    @property
    def buffered(self) -> bool:
        return self is not OutputMode.DIRECT


@dataclass
class OutputStats:
    """Summary of what a writer emitted."""

    records: int = 0
    errors: int = 0
    groups: int = 0
    lines: int = 0


class DigestGrouper:
    """Map each digest (or error text) to the paths that produced it."""

    def __init__(self) -> None:
        self._groups: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def add(self, record: ResultRecord) -> None:
        self._groups.setdefault(record.digest, []).append(record.path)

    def extend(self, records: Iterable[ResultRecord]) -> None:
        for record in records:
            self.add(record)

    def groups(self, only_same: bool = False) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(digest, paths)`` pairs, optionally only those with duplicates."""
        for digest, paths in self._groups.items():
            if only_same and len(paths) < 2:
                continue
            yield digest, list(paths)

    def clear(self) -> None:
        self._groups.clear()


class ResultWriter:
    """Emit result lines directly or after grouping them by digest."""

    def __init__(self, mode: OutputMode, stream: Optional[TextIO] = None) -> None:
        self.mode = mode
        self.stream = stream or sys.stdout
        self.grouper: Optional[DigestGrouper] = DigestGrouper() if mode.buffered else None
        self.stats = OutputStats()

    def write(self, record: ResultRecord) -> None:
        self.stats.records += 1
        if record.failed:
            self.stats.errors += 1
        if self.grouper is not None:
            self.grouper.add(record)
            return
        self._emit(record.format_line())

    def write_all(self, records: Iterable[ResultRecord]) -> OutputStats:
        for record in records:
            self.write(record)
        self.flush()
        return self.stats

    def flush(self) -> None:
        """Emit buffered groups; a no-op in direct mode."""
        if self.grouper is None:
            return
        only_same = self.mode is OutputMode.GROUPED_FILTERED
        for digest, paths in self.grouper.groups(only_same=only_same):
            self.stats.groups += 1
            for path in paths:
                self._emit(f"{digest}  {path}")
        self.grouper.clear()

    def _emit(self, line: str) -> None:
        print(line, file=self.stream)
        self.stats.lines += 1

"""
Glob expansion and per-file digest records.
"""

from __future__ import annotations

import glob
import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Iterator, Optional

from picugen.config import HashSettings
from picugen.hashing import Digest, hash_path


@dataclass(frozen=True)
class ResultRecord:
    """Digest (or error text) produced for one subject."""

    digest: str
    path: str
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def format_line(self) -> str:
        return f"{self.digest}  {self.path}"


class Scanner:
    """Expand glob patterns and hash every matching path in order."""

    def __init__(
        self,
        settings: HashSettings,
        digest: Digest,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings
        self.digest = digest
        self.logger = logger or logging.getLogger("picugen.scanner")

    def expand(self, pattern: str) -> list[str]:
        """Return the sorted matches for one pattern; no match is not an error."""
        # Ordered directory level by directory level, so "a/x" precedes "a-b/x".
        matches = sorted(
            glob.glob(pattern, include_hidden=True), key=lambda path: PurePath(path).parts
        )
        if not matches:
            self.logger.debug("Pattern matched nothing: %s", pattern)
        return matches

    def scan(self, patterns: Iterable[str]) -> Iterator[ResultRecord]:
        """Yield one record per matched path, pattern by pattern."""
        for pattern in patterns:
            for path in self.expand(pattern):
                yield self.hash_one(path)

    def hash_one(self, path: str) -> ResultRecord:
        """Hash a single path, turning open and read failures into a record."""
        try:
            value = hash_path(self.digest, self.settings.salt, path, self.settings.chunk_size)
        except OSError as exc:
            message = str(exc)
            self.logger.warning("Hashing error for %s: %s", path, message)
            return ResultRecord(digest=message, path=path, error=message)
        finally:
            self.digest.reset()
        self.logger.debug("Hashed %s with %s", path, self.digest.name)
        return ResultRecord(digest=value, path=path)

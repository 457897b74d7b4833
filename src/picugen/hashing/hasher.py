"""
Streaming digest pipeline for strings and files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Callable, Iterable, Union

DEFAULT_CHUNK_SIZE = 32 * 1024


class Digest:
    """Reusable streaming digest bound to one algorithm."""

    def __init__(self, name: str, factory: Callable[[], Any]) -> None:
        self.name = name
        self._factory = factory
        self._state = factory()

    @property
    def digest_size(self) -> int:
        return self._state.digest_size

    def update(self, data: bytes) -> None:
        self._state.update(data)

    def digest(self) -> bytes:
        return self._state.digest()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def reset(self) -> None:
        """Discard accumulated input, as if freshly constructed."""
        self._state = self._factory()


def _to_bytes(value: Union[str, bytes]) -> bytes:
    # Undecodable argv bytes arrive surrogate-escaped; restore them verbatim.
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    return value


def join_words(words: Iterable[str]) -> str:
    """Join command-line words into the literal string they represent."""
    return " ".join(words)


def hash_string(digest: Digest, salt: Union[str, bytes], text: Union[str, bytes]) -> str:
    """Hash ``salt`` followed by ``text`` and return lowercase hex."""
    digest.reset()
    digest.update(_to_bytes(salt))
    digest.update(_to_bytes(text))
    return digest.hexdigest()


def hash_file(
    digest: Digest,
    salt: Union[str, bytes],
    source: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Hash ``salt`` followed by the full contents of ``source``.

    Read errors propagate to the caller; whatever was fed before the failure
    is dropped on the next reset.
    """
    digest.reset()
    digest.update(_to_bytes(salt))
    while True:
        data = source.read(chunk_size)
        if not data:
            break
        digest.update(data)
    return digest.hexdigest()


def hash_path(
    digest: Digest,
    salt: Union[str, bytes],
    path: Union[str, Path],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Open ``path`` in binary mode and hash its contents."""
    with Path(path).open("rb") as handle:
        return hash_file(digest, salt, handle, chunk_size)

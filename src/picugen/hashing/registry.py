"""
Algorithm registry mapping user-facing names to digest constructors.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

import crcmod
from Crypto.Hash import MD4, RIPEMD160

from picugen.hashing.checksums import FNV, Adler32
from picugen.hashing.hasher import Digest

DEFAULT_ALGORITHM = "sha256"


class InvalidAlgorithmError(ValueError):
    """Raised when an algorithm name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid algorithm: {name}")
        self.name = name


@dataclass(frozen=True)
class Algorithm:
    """Registry entry describing how to build one digest primitive."""

    name: str
    description: str
    factory: Callable[[bytes], Any]
    alias_of: Optional[str] = None

    @property
    def canonical_name(self) -> str:
        return self.alias_of or self.name


@lru_cache(maxsize=None)
def _crc_template(poly: int, width: int) -> crcmod.Crc:
    # Register starts and ends inverted, so the CRC of empty input is zero.
    return crcmod.Crc(poly, initCrc=0, rev=True, xorOut=(1 << width) - 1)


def _crc(poly: int, width: int) -> Callable[[bytes], Any]:
    return lambda key: _crc_template(poly, width).new()


def _hmac(digestmod: Callable[..., Any]) -> Callable[[bytes], Any]:
    return lambda key: hmac.new(key, digestmod=digestmod)


def _plain(constructor: Callable[[], Any]) -> Callable[[bytes], Any]:
    return lambda key: constructor()


_ALGORITHMS = [
    Algorithm("adler32", "Adler-32 checksum (RFC 1950)", _plain(Adler32)),
    Algorithm(
        "crc32ieee",
        "CRC-32 using the IEEE polynomial (0xedb88320)",
        _crc(0x104C11DB7, 32),
    ),
    Algorithm(
        "crc32castagnoli",
        "CRC-32 using the Castagnoli polynomial (0x82f63b78)",
        _crc(0x11EDC6F41, 32),
    ),
    Algorithm(
        "crc32koopman",
        "CRC-32 using the Koopman polynomial (0xeb31d82e)",
        _crc(0x1741B8CD7, 32),
    ),
    Algorithm(
        "crc64iso",
        "CRC-64 using the ISO polynomial (0xD800000000000000)",
        _crc(0x1000000000000001B, 64),
    ),
    Algorithm(
        "crc64ecma",
        "CRC-64 using the ECMA polynomial (0xC96C5795D7870F42)",
        _crc(0x142F0E1EBA9EA3693, 64),
    ),
    Algorithm("fnv32", "32-bit FNV-1", _plain(lambda: FNV(32))),
    Algorithm("fnv32a", "32-bit FNV-1a", _plain(lambda: FNV(32, alternate=True))),
    Algorithm("fnv64", "64-bit FNV-1", _plain(lambda: FNV(64))),
    Algorithm("fnv64a", "64-bit FNV-1a", _plain(lambda: FNV(64, alternate=True))),
    Algorithm("hmacmd5", "HMAC using MD5 (requires -k <key>)", _hmac(hashlib.md5)),
    Algorithm("hmacsha1", "HMAC using SHA-1 (requires -k <key>)", _hmac(hashlib.sha1)),
    Algorithm("hmacsha256", "HMAC using SHA-256 (requires -k <key>)", _hmac(hashlib.sha256)),
    Algorithm("hmacsha512", "HMAC using SHA-512 (requires -k <key>)", _hmac(hashlib.sha512)),
    Algorithm("md4", "MD4 hash (RFC 1320)", _plain(MD4.new)),
    Algorithm("md5", "MD5 hash (RFC 1321)", _plain(hashlib.md5)),
    Algorithm("ripemd160", "RIPEMD-160 hash", _plain(RIPEMD160.new)),
    Algorithm("sha1", "SHA-1 hash (RFC 3174)", _plain(hashlib.sha1)),
    Algorithm("sha224", "SHA-224 hash (FIPS 180-2)", _plain(hashlib.sha224)),
    Algorithm("sha256", "SHA-256 hash (FIPS 180-2)", _plain(hashlib.sha256)),
    Algorithm("sha384", "SHA-384 hash (FIPS 180-2)", _plain(hashlib.sha384)),
    Algorithm("sha512", "SHA-512 hash (FIPS 180-2)", _plain(hashlib.sha512)),
]

_ALIASES = {
    "crc32": (
        "crc32ieee",
        "32-bit cyclic redundancy check (CRC-32) checksum (defaults to IEEE polynomial)",
    ),
    "crc64": (
        "crc64iso",
        "64-bit cyclic redundancy check (CRC-64) checksum (defaults to ISO polynomial)",
    ),
    "fnv": ("fnv32", "FNV-1 non-cryptographic hash (defaults to fnv32)"),
    "hmac": (
        "hmacsha256",
        "Keyed-Hash Message Authentication Code (HMAC) (requires -k <key>) (defaults to SHA-256)",
    ),
}


def _build_registry() -> Dict[str, Algorithm]:
    registry = {algorithm.name: algorithm for algorithm in _ALGORITHMS}
    for alias, (target, description) in _ALIASES.items():
        base = registry[target]
        registry[alias] = Algorithm(
            name=alias,
            description=description,
            factory=base.factory,
            alias_of=target,
        )
    return registry


REGISTRY: Dict[str, Algorithm] = _build_registry()


def lookup(name: str) -> Algorithm:
    """Return the registry entry for a case-insensitive algorithm name."""
    normalized = name.strip().lower()
    try:
        return REGISTRY[normalized]
    except KeyError:
        raise InvalidAlgorithmError(name) from None


def resolve(name: str, key: bytes = b"") -> Digest:
    """Build a streaming digest for the named algorithm.

    ``key`` is only used by the HMAC variants. An empty key is valid and
    produces the standard empty-key HMAC.
    """
    algorithm = lookup(name)
    factory = algorithm.factory
    return Digest(algorithm.name, lambda: factory(key))


def describe(name: str) -> str:
    """Return the help text for an algorithm name."""
    return lookup(name).description


def canonical_name(name: str) -> str:
    """Return the canonical entry an alias points at."""
    return lookup(name).canonical_name


def list_names() -> list[str]:
    """Return every accepted algorithm name in lexicographic order."""
    return sorted(REGISTRY)

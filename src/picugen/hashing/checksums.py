"""
Non-cryptographic checksums exposed through the hashlib object interface.
"""

from __future__ import annotations

import zlib

FNV_PARAMETERS = {
    32: (0x811C9DC5, 0x01000193),
    64: (0xCBF29CE484222325, 0x00000100000001B3),
}


class Adler32:
    """Adler-32 checksum (RFC 1950) backed by zlib."""

    name = "adler32"
    digest_size = 4

    def __init__(self, data: bytes = b"") -> None:
        self._value = zlib.adler32(b"")
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        self._value = zlib.adler32(data, self._value)

    def digest(self) -> bytes:
        return self._value.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()


class FNV:
    """FNV-1 and FNV-1a hashes in 32 and 64 bit widths."""

    def __init__(self, bits: int = 32, alternate: bool = False) -> None:
        if bits not in FNV_PARAMETERS:
            raise ValueError(f"Unsupported FNV width: {bits}")
        offset_basis, prime = FNV_PARAMETERS[bits]
        self.bits = bits
        self.alternate = alternate
        self.name = f"fnv{bits}{'a' if alternate else ''}"
        self.digest_size = bits // 8
        self._prime = prime
        self._mask = (1 << bits) - 1
        self._value = offset_basis

    def update(self, data: bytes) -> None:
        value = self._value
        prime = self._prime
        mask = self._mask
        if self.alternate:
            for byte in data:
                value = ((value ^ byte) * prime) & mask
        else:
            for byte in data:
                value = ((value * prime) & mask) ^ byte
        self._value = value

    def digest(self) -> bytes:
        return self._value.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

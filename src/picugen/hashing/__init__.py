"""
Algorithm registry and digest pipeline.
"""

from .hasher import DEFAULT_CHUNK_SIZE, Digest, hash_file, hash_path, hash_string, join_words
from .registry import (
    DEFAULT_ALGORITHM,
    Algorithm,
    InvalidAlgorithmError,
    canonical_name,
    describe,
    list_names,
    resolve,
)

__all__ = [
    "Algorithm",
    "DEFAULT_ALGORITHM",
    "DEFAULT_CHUNK_SIZE",
    "Digest",
    "InvalidAlgorithmError",
    "canonical_name",
    "describe",
    "hash_file",
    "hash_path",
    "hash_string",
    "join_words",
    "list_names",
    "resolve",
]

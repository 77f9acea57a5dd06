"""Fast hashing for non-cryptographic use cases.

xxhash keys the compiled-template cache; SHA256 is available where a
stable, widely reproducible digest is needed.
"""

from typing import Protocol
from enum import Enum
import hashlib

import xxhash


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"  # Fast, non-cryptographic (cache keys)
    SHA256 = "sha256"


class Hasher(Protocol):
    """Protocol for hash implementations."""

    def digest(self, data: bytes) -> str:
        """Compute hex digest of data."""
        ...


class XXHasher:
    """Ultra-fast non-cryptographic hasher."""

    def digest(self, data: bytes) -> str:
        return xxhash.xxh64(data).hexdigest()


class SHA256Hasher:
    """Secure cryptographic hasher."""

    def digest(self, data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()


_HASHERS: dict[Algorithm, Hasher] = {
    Algorithm.XXHASH64: XXHasher(),
    Algorithm.SHA256: SHA256Hasher(),
}


def create_hasher(algorithm: Algorithm = Algorithm.XXHASH64) -> Hasher:
    """
    Get hasher instance.

    Raises:
        ValueError: If algorithm is unknown
    """
    try:
        return _HASHERS[Algorithm(algorithm)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown algorithm: {algorithm}") from None


def hash_string(
    text: str,
    algorithm: Algorithm = Algorithm.XXHASH64,
    truncate: int | None = None
) -> str:
    """
    Hash string to hex digest.

    Args:
        text: String to hash
        algorithm: Hash algorithm (default: xxhash64 for speed)
        truncate: Optional length to truncate digest (e.g., 16 for cache keys)

    Returns:
        Hex digest string
    """
    digest = create_hasher(algorithm).digest(text.encode("utf-8"))

    if truncate:
        return digest[:truncate]
    return digest


__all__ = [
    "Algorithm",
    "Hasher",
    "create_hasher",
    "hash_string",
]

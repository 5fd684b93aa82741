"""Supported SHA-2 digest algorithms."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any

from shamv.errors import UnsupportedAlgorithmError


class DigestAlgorithm(str, Enum):
    """Closed set of SHA-2 variants accepted on the command line."""

    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Return the digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Return the length of the lowercase hex rendering."""
        return self.digest_size * 2

    def new(self) -> Any:
        """Return a fresh hash state for this algorithm."""
        return hashlib.new(self.value)


_DIGEST_SIZES = {
    DigestAlgorithm.SHA224: 28,
    DigestAlgorithm.SHA256: 32,
    DigestAlgorithm.SHA384: 48,
    DigestAlgorithm.SHA512: 64,
}

DEFAULT_ALGORITHM = DigestAlgorithm.SHA256


def resolve_algorithm(name: str | None) -> DigestAlgorithm:
    """Map a user-supplied algorithm name to a digest algorithm.

    Args:
        name: Exact, case-sensitive algorithm name. Empty or missing values
            select the default.

    Returns:
        DigestAlgorithm: The matching algorithm.

    Raises:
        UnsupportedAlgorithmError: If the name is not recognized.
    """

    if not name:
        return DEFAULT_ALGORITHM
    try:
        return DigestAlgorithm(name)
    except ValueError as exc:
        raise UnsupportedAlgorithmError(name) from exc


__all__ = ["DigestAlgorithm", "DEFAULT_ALGORITHM", "resolve_algorithm"]

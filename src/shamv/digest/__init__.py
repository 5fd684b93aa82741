"""Digest selection and file hashing."""

from .algorithms import DEFAULT_ALGORITHM, DigestAlgorithm, resolve_algorithm
from .engine import DigestEngine, HashComputer

__all__ = [
    "DEFAULT_ALGORITHM",
    "DigestAlgorithm",
    "DigestEngine",
    "HashComputer",
    "resolve_algorithm",
]

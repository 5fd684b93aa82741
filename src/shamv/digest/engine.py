"""Content hashing for files awaiting a rename."""

from __future__ import annotations

import logging
from pathlib import Path

from shamv.errors import DigestError, display_path

from .algorithms import DigestAlgorithm

LOGGER = logging.getLogger(__name__)


class DigestEngine:
    """Reusable hash state for a single algorithm.

    The engine is fed once per file and reset on finalization, so one instance
    can hash an entire batch.
    """

    def __init__(self, algorithm: DigestAlgorithm) -> None:
        self._algorithm = algorithm
        self._state = algorithm.new()

    @property
    def algorithm(self) -> DigestAlgorithm:
        return self._algorithm

    def update(self, data: bytes) -> None:
        self._state.update(data)

    def finalize_reset(self) -> bytes:
        """Return the digest of everything fed so far and reset the state."""
        digest = self._state.digest()
        self._state = self._algorithm.new()
        return digest

    def hexdigest_reset(self) -> str:
        """Return the lowercase hex digest and reset the state."""
        return self.finalize_reset().hex()


class HashComputer:
    """Compute content digests for files on disk."""

    def __init__(self, engine: DigestEngine) -> None:
        self.engine = engine

    def compute(self, path: Path) -> str:
        """Return the lowercase hex digest of the file contents.

        Args:
            path: File to hash. The whole file is read into memory.

        Returns:
            str: Hex digest produced by the engine's algorithm.

        Raises:
            DigestError: If the path cannot be opened or read as a regular file.
        """

        try:
            with path.open("rb") as handle:
                content = handle.read()
        except OSError as exc:
            reason = exc.strerror or str(exc)
            name = display_path(path.name)
            raise DigestError(f"error calculating digest for: {name}: {reason}") from exc

        self.engine.update(content)
        digest = self.engine.hexdigest_reset()
        LOGGER.debug(
            "%s %s (%d bytes) -> %s",
            self.engine.algorithm.value,
            display_path(path),
            len(content),
            digest,
        )
        return digest


__all__ = ["DigestEngine", "HashComputer"]

"""Planner for content-addressed renames."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from shamv.digest import HashComputer
from shamv.errors import MissingFileError

from .models import RenameOperation, RenamePlan

LOGGER = logging.getLogger(__name__)


def extension_of(path: Path) -> Optional[str]:
    """Return the single trailing extension of ``path`` without its dot.

    ``archive.tar.gz`` yields ``gz``; dotfiles such as ``.bashrc`` and names
    ending in a bare dot have no extension.
    """

    suffix = path.suffix
    if len(suffix) <= 1:
        return None
    return suffix[1:]


def derive_destination(path: Path, digest_hex: str) -> Path:
    """Return ``path`` with its final component replaced by the digest name.

    Args:
        path: Original file path.
        digest_hex: Lowercase hex digest of the file contents.

    Returns:
        Path: ``<digest>.<ext>`` or ``<digest>`` in the original directory.
    """

    extension = extension_of(path)
    if extension is None:
        return path.with_name(digest_hex)
    return path.with_name(f"{digest_hex}.{extension}")


class RenamePlanner:
    """Validate, hash, and derive destinations for a batch of paths."""

    def __init__(self, hasher: HashComputer) -> None:
        self.hasher = hasher

    def validate(self, paths: Iterable[Path]) -> list[Path]:
        """Confirm every path exists, stopping at the first missing one.

        A path whose status cannot be read counts as missing.

        Raises:
            MissingFileError: For the first path that does not exist.
        """

        checked: list[Path] = []
        for path in paths:
            if not os.path.exists(path):
                raise MissingFileError(path)
            checked.append(path)
        return checked

    def digest(self, path: Path) -> str:
        return self.hasher.compute(path)

    def build_plan(self, paths: Iterable[Path]) -> RenamePlan:
        """Produce a rename plan for the given paths.

        All paths are validated before any is hashed, and all are hashed before
        destinations are derived, so a failure in either phase yields no plan.

        Args:
            paths: Files to rename, in command-line order.

        Returns:
            RenamePlan: One operation per path, in input order.

        Raises:
            MissingFileError: If any path does not exist.
            DigestError: If an existing path cannot be read.
        """

        checked = self.validate(paths)
        digests = [self.digest(path) for path in checked]

        algorithm = self.hasher.engine.algorithm
        plan = RenamePlan(algorithm=algorithm)
        for path, digest_hex in zip(checked, digests):
            plan.operations.append(
                RenameOperation(
                    source=path,
                    destination=derive_destination(path, digest_hex),
                    digest=digest_hex,
                )
            )
        LOGGER.info("Planned %d rename(s) using %s", len(plan.operations), algorithm.value)
        return plan


__all__ = ["RenamePlanner", "derive_destination", "extension_of"]

"""Rename plan data models."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from shamv.digest import DigestAlgorithm


class RenameOperation(BaseModel):
    """Represents a content-addressed rename of one file.

    Attributes:
        source: Original file path.
        destination: Path named after the content digest, in the same directory.
        digest: Lowercase hex digest of the file contents.
    """

    source: Path
    destination: Path
    digest: str


class RenamePlan(BaseModel):
    """Ordered rename operations computed with a single algorithm."""

    algorithm: DigestAlgorithm
    operations: List[RenameOperation] = Field(default_factory=list)


class RenameFailure(BaseModel):
    """A rename that could not be applied."""

    source: Path
    destination: Path
    message: str


class RenameReport(BaseModel):
    """Outcome of applying a rename plan.

    Attributes:
        dry_run: Whether the plan was only previewed.
        previewed: Operations shown without touching the filesystem.
        renamed: Operations applied successfully.
        skipped: Operations whose source already carries its content-addressed name.
        failures: Operations that failed, in plan order.
    """

    dry_run: bool = False
    previewed: List[RenameOperation] = Field(default_factory=list)
    renamed: List[RenameOperation] = Field(default_factory=list)
    skipped: List[RenameOperation] = Field(default_factory=list)
    failures: List[RenameFailure] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)


__all__ = ["RenameOperation", "RenamePlan", "RenameFailure", "RenameReport"]

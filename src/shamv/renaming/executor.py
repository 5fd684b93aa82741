"""Executor for rename plans."""

from __future__ import annotations

import logging
import os
from typing import Literal

from shamv.errors import RenameError, display_path

from .models import RenameFailure, RenameOperation, RenamePlan, RenameReport

LOGGER = logging.getLogger(__name__)

ConflictPolicy = Literal["fail", "overwrite"]


class RenameExecutor:
    """Apply rename plans one operation at a time.

    A failed rename is recorded in the report and does not stop the batch.
    """

    def __init__(self, on_conflict: ConflictPolicy = "fail") -> None:
        self.on_conflict = on_conflict

    def apply(self, plan: RenamePlan, dry_run: bool = False) -> RenameReport:
        """Apply the given plan.

        Args:
            plan: Plan computed by the planner.
            dry_run: When true, report every operation as previewed and leave
                the filesystem untouched.

        Returns:
            RenameReport: Per-operation outcomes in plan order.
        """

        report = RenameReport(dry_run=dry_run)
        if dry_run:
            report.previewed.extend(plan.operations)
            return report

        for operation in plan.operations:
            if operation.source == operation.destination:
                LOGGER.info(
                    "%s already carries its content digest name", display_path(operation.source)
                )
                report.skipped.append(operation)
                continue
            try:
                self._rename(operation)
            except RenameError as exc:
                LOGGER.debug("Rename of %s failed: %s", display_path(operation.source), exc)
                report.failures.append(
                    RenameFailure(
                        source=operation.source,
                        destination=operation.destination,
                        message=str(exc),
                    )
                )
                continue
            report.renamed.append(operation)

        return report

    def _rename(self, operation: RenameOperation) -> None:
        source = operation.source
        destination = operation.destination
        name = display_path(source.name)
        try:
            if self.on_conflict == "overwrite":
                source.replace(destination)
                return
            if os.path.lexists(destination):
                raise RenameError(
                    f"error renaming file {name}: "
                    f"destination already exists: {display_path(destination)}"
                )
            source.rename(destination)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise RenameError(f"error renaming file {name}: {reason}") from exc


__all__ = ["ConflictPolicy", "RenameExecutor"]

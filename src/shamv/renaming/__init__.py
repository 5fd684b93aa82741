"""Content-addressed rename planning and execution."""

from .executor import ConflictPolicy, RenameExecutor
from .models import RenameFailure, RenameOperation, RenamePlan, RenameReport
from .planner import RenamePlanner, derive_destination, extension_of

__all__ = [
    "ConflictPolicy",
    "RenameExecutor",
    "RenameFailure",
    "RenameOperation",
    "RenamePlan",
    "RenamePlanner",
    "RenameReport",
    "derive_destination",
    "extension_of",
]

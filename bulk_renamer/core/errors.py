"""
errors.py - Engine Error Types

Contains:
- RenamerError: base class for every engine error
- DirectoryUnreadable: listing the target directory failed
- RenameFailed: a single rename step failed, processing halted
- PlanConflict: real execution refused because the plan has errors
- InvalidTimestamp: a modification time cannot be rendered as a date
- InvalidTransition: a run was driven out of order
"""

from pathlib import Path
from typing import List, Optional


class RenamerError(Exception):
    """Base class for rename engine errors"""


class DirectoryUnreadable(RenamerError):
    """Directory listing failed (permissions, removed mid-run, ...)"""

    def __init__(self, directory: Path, cause: OSError):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Cannot read directory {directory}: {cause}")


class RenameFailed(RenamerError):
    """A rename step failed; renames applied before it stay committed"""

    def __init__(self, old_name: str, new_name: str, cause: OSError, report=None):
        self.old_name = old_name
        self.new_name = new_name
        self.cause = cause
        # ExecutionReport of the pairs applied before the failure
        self.report = report
        super().__init__(f"Failed to rename {old_name} -> {new_name}: {cause}")


class PlanConflict(RenamerError):
    """Plan carries validation errors and cannot be executed"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(
            f"Rename plan has {len(self.errors)} error(s): " + "; ".join(self.errors)
        )


class InvalidTimestamp(RenamerError):
    """Modification time outside the range the platform can convert to a date"""

    def __init__(self, name: str, mtime: float, cause: Exception):
        self.name = name
        self.mtime = mtime
        self.cause = cause
        super().__init__(f"Cannot format modification date of {name} ({mtime}): {cause}")


class InvalidTransition(RenamerError):
    """Run state machine was driven out of order"""

    def __init__(self, current, target, hint: Optional[str] = None):
        self.current = current
        self.target = target
        msg = f"Cannot move from {current.value} to {target.value}"
        if hint:
            msg += f" ({hint})"
        super().__init__(msg)

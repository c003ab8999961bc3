"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply a plan strictly in order, failing fast on the first error
- Two-step rename through a temporary name for case-only changes
- dry_run support
"""

from pathlib import Path
from typing import Callable, Collection, Optional
import errno
import logging
import os
import uuid

from .errors import PlanConflict, RenameFailed
from .models_fs import ExecutionReport, RenameOptions, RenamePair, RenamePlan, RunState

logger = logging.getLogger(__name__)


def _generate_temp_name(directory: Path, reserved: Collection[str], prefix: str) -> str:
    """Generate a temporary filename unused on disk and in the plan"""
    while True:
        name = f"{prefix}{os.getpid()}-{uuid.uuid4().hex[:8]}"
        if name not in reserved and not os.path.lexists(directory / name):
            return name


def _ensure_free(dst: Path) -> None:
    # os.rename silently replaces an existing file on POSIX
    if os.path.lexists(dst):
        raise FileExistsError(errno.EEXIST, "Destination already exists", str(dst))


def _swap_via_temp(src: Path, dst: Path, temp: Path) -> None:
    """
    old -> temp -> new

    Case-insensitive filesystems treat old and new as the same path, so a
    direct rename would be a no-op or an error.
    """
    os.rename(src, temp)
    try:
        _ensure_free(dst)
        os.rename(temp, dst)
    except OSError:
        # Put the file back under its original name before reporting
        try:
            os.rename(temp, src)
        except OSError as restore_error:
            logger.error("Could not restore %s to %s: %s", temp.name, src.name, restore_error)
        raise


def _apply_pair(
    directory: Path,
    pair: RenamePair,
    reserved: Collection[str],
    options: RenameOptions,
) -> None:
    src = directory / pair.old_name
    dst = directory / pair.new_name

    if pair.is_case_only_change:
        temp = directory / _generate_temp_name(directory, reserved, options.temp_prefix)
        logger.debug("Case-only rename %s via %s", pair, temp.name)
        _swap_via_temp(src, dst, temp)
    else:
        _ensure_free(dst)
        os.rename(src, dst)


def execute_rename(
    plan: RenamePlan,
    dry_run: bool = False,
    options: Optional[RenameOptions] = None,
    line_callback: Optional[Callable[[str], None]] = None,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
) -> ExecutionReport:
    """
    Execute rename plan

    Args:
        plan: Rename plan
        dry_run: Whether to preview only
        options: Rename options
        line_callback: Receives each "old -> new" line as it is produced
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution report

    Raises:
        PlanConflict: real run of a plan that carries validation errors
        RenameFailed: a rename step failed; earlier renames stay applied
    """
    if options is None:
        options = RenameOptions()

    report = ExecutionReport(preview=dry_run)
    total = plan.renamed_count

    if dry_run:
        for i, pair in enumerate(plan):
            line = report.record(pair)
            if line_callback:
                line_callback(line)
            if progress_callback:
                progress_callback(i + 1, total, f"[Preview] {line}")
        report.state = RunState.DRY_RUN_REPORTED
        return report

    if plan.errors:
        raise PlanConflict(list(plan.errors))

    if plan.pairs and plan.directory is None:
        raise ValueError("Plan has no target directory")

    reserved = set(plan.target_names)

    for i, pair in enumerate(plan):
        try:
            _apply_pair(plan.directory, pair, reserved, options)
        except OSError as e:
            report.state = RunState.FAILED
            logger.info("Rename failed after %d of %d: %s: %s", i, total, pair, e)
            raise RenameFailed(pair.old_name, pair.new_name, e, report) from e

        logger.debug("Renamed %s", pair)
        line = report.record(pair)
        if line_callback:
            line_callback(line)
        if progress_callback:
            progress_callback(i + 1, total, line)

    report.state = RunState.COMPLETED
    logger.info("Renamed %d file(s) in %s", report.renamed_count, plan.directory)
    return report

"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Run the selected strategy over the enumerated files
- Drop no-op pairs (old name == new name), keep enumeration order
- Detect invalid target names and target collisions
- Output RenamePlan
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set
import logging

from .models_fs import (
    FileEntry, RenamePair, RenamePlan, RenameOptions, StrategyConfig,
)
from .name_rules import compute_names
from .scan_files import get_existing_names
from .text_match import ascii_lower, is_valid_filename

logger = logging.getLogger(__name__)


class CollisionTracker:
    """Tracks which names are taken while a plan is replayed in order

    Names on disk are freed as their files are renamed away; names claimed as
    targets stay claimed for the rest of the plan.
    """

    def __init__(self, case_insensitive: bool = True):
        """
        Initialize collision tracker

        Args:
            case_insensitive: Whether names differing only by ASCII case collide
        """
        self.case_insensitive = case_insensitive
        self.occupied: Set[str] = set()
        self.targets: Set[str] = set()

    def _normalize(self, name: str) -> str:
        """Normalize filename for comparison"""
        if self.case_insensitive:
            return ascii_lower(name)
        return name

    def add_existing(self, names: Iterable[str]) -> None:
        """Add names present on disk before the plan runs"""
        self.occupied.update(self._normalize(n) for n in names)

    def check(self, pair: RenamePair) -> Optional[str]:
        """
        Apply one pair to the tracked state

        Returns:
            Error message if the target is already taken, otherwise None
        """
        self.occupied.discard(self._normalize(pair.old_name))
        key = self._normalize(pair.new_name)

        if key in self.targets:
            return f"{pair}: another file is renamed to the same name"
        if key in self.occupied:
            return f"{pair}: target name already exists"

        self.targets.add(key)
        return None


def validate_plan(
    pairs: List[RenamePair],
    existing_names: Iterable[str],
    case_insensitive: bool = True,
) -> List[str]:
    """
    Validate rename pairs

    Args:
        pairs: Pairs in execution order (no-ops already removed)
        existing_names: Names present in the directory before execution
        case_insensitive: Whether to fold ASCII case when comparing names

    Returns:
        Error list
    """
    errors = []

    tracker = CollisionTracker(case_insensitive=case_insensitive)
    tracker.add_existing(existing_names)

    for pair in pairs:
        valid, error = is_valid_filename(pair.new_name)
        if not valid:
            errors.append(f"{pair}: {error}")
            continue

        conflict = tracker.check(pair)
        if conflict:
            errors.append(conflict)

    return errors


def build_plan(
    entries: List[FileEntry],
    config: StrategyConfig,
    directory: Optional[Path] = None,
    options: Optional[RenameOptions] = None,
) -> RenamePlan:
    """
    Generate rename plan

    Args:
        entries: Enumerated files, in enumeration order
        config: Strategy config selecting the rename strategy
        directory: Directory the plan applies to; when given, every name in it
            (hidden files and subdirectories included) counts as occupied
        options: Rename options

    Returns:
        Rename plan
    """
    if options is None:
        options = RenameOptions()

    raw_pairs = compute_names(entries, config)
    pairs = [pair for pair in raw_pairs if not pair.is_same]

    if directory is not None:
        existing = get_existing_names(directory)
    else:
        existing = {f.name for f in entries}

    errors = validate_plan(pairs, existing, options.case_insensitive_detect)

    plan = RenamePlan(pairs=tuple(pairs), directory=directory, errors=tuple(errors))
    logger.info(
        "Planned %d rename(s) out of %d file(s) with %s",
        plan.renamed_count, len(entries), type(config).__name__,
    )
    for error in errors:
        logger.info("Plan error: %s", error)
    return plan

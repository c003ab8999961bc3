"""
models_fs.py - Core Data Structure Definitions

Contains:
- FileEntry: Snapshot of one enumerated file
- RenamePair: Single rename (old name -> new name)
- RenamePlan: Ordered, immutable batch of renames
- Strategy configs: SequentialConfig, DatePrefixConfig, FindReplaceConfig, LowercaseConfig
- ExecutionReport: Outcome of executing (or previewing) a plan
- RenameOptions: Run-wide options
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union
from enum import Enum
import platform

from .text_match import ascii_lower


class Mode(Enum):
    """Rename mode enumeration (CLI tokens)"""
    SEQ = "seq"            # Sequential numbering
    DATE = "date"          # Modification date prefix
    REPLACE = "replace"    # Literal find/replace
    LOWER = "lower"        # ASCII lowercase


class RunState(Enum):
    """Per-run state machine"""
    IDLE = "idle"
    ENUMERATED = "enumerated"
    PLANNED = "planned"
    DRY_RUN_REPORTED = "dry_run_reported"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.DRY_RUN_REPORTED, RunState.COMPLETED, RunState.FAILED)


@dataclass(frozen=True)
class FileEntry:
    """File snapshot, taken once per invocation"""
    name: str                       # Filename (with suffix)
    path: Path                      # Full path
    mtime: float                    # Modification time (timestamp)


@dataclass(frozen=True)
class RenamePair:
    """Single rename operation inside one directory"""
    old_name: str
    new_name: str

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.old_name == self.new_name

    @property
    def is_case_only_change(self) -> bool:
        """Whether the names differ only by ASCII letter case"""
        return (self.old_name != self.new_name and
                ascii_lower(self.old_name) == ascii_lower(self.new_name))

    def __str__(self) -> str:
        return f"{self.old_name} -> {self.new_name}"


@dataclass(frozen=True)
class SequentialConfig:
    """Sequential numbering: <zero padded counter>-<name>"""
    start: int = 1
    pad: int = 3

    def __post_init__(self):
        if self.pad < 0:
            raise ValueError(f"Padding width cannot be negative: {self.pad}")


@dataclass(frozen=True)
class DatePrefixConfig:
    """Modification date prefix: YYYY-MM-DD-<name>"""


@dataclass(frozen=True)
class FindReplaceConfig:
    """Literal substring replacement"""
    find: str
    replace: str

    def __post_init__(self):
        if not self.find:
            raise ValueError("Find string cannot be empty")


@dataclass(frozen=True)
class LowercaseConfig:
    """ASCII lowercase"""


StrategyConfig = Union[SequentialConfig, DatePrefixConfig, FindReplaceConfig, LowercaseConfig]


def config_for_mode(
    mode: Mode,
    start: int = 1,
    pad: int = 3,
    find: str = "",
    replace: str = "",
) -> StrategyConfig:
    """Build the strategy config matching a mode"""
    if mode == Mode.SEQ:
        return SequentialConfig(start=start, pad=pad)
    elif mode == Mode.DATE:
        return DatePrefixConfig()
    elif mode == Mode.REPLACE:
        return FindReplaceConfig(find=find, replace=replace)
    elif mode == Mode.LOWER:
        return LowercaseConfig()
    raise ValueError(f"Unknown mode: {mode}")


def is_case_insensitive_fs() -> bool:
    """Detect if current filesystem is case-insensitive"""
    return platform.system() in ("Windows", "Darwin")


@dataclass
class RenameOptions:
    """Rename options configuration"""
    # Case-insensitive collision detection (Windows/macOS default to insensitive)
    case_insensitive_detect: bool = field(default_factory=is_case_insensitive_fs)

    # Prefix of the intermediate name used for case-only renames
    temp_prefix: str = ".bulk-rename-tmp-"


@dataclass(frozen=True)
class RenamePlan:
    """Batch rename plan (never mutated once built)"""
    pairs: Tuple[RenamePair, ...] = ()
    directory: Optional[Path] = None
    errors: Tuple[str, ...] = ()

    @property
    def renamed_count(self) -> int:
        return len(self.pairs)

    @property
    def is_empty(self) -> bool:
        return not self.pairs

    @property
    def target_names(self) -> List[str]:
        return [pair.new_name for pair in self.pairs]

    def __iter__(self):
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass
class ExecutionReport:
    """Rename execution result"""
    preview: bool = False
    applied: List[RenamePair] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    state: RunState = RunState.EXECUTING

    @property
    def renamed_count(self) -> int:
        return len(self.applied)

    def record(self, pair: RenamePair) -> str:
        """Record one previewed or applied pair, return its output line"""
        line = str(pair)
        self.applied.append(pair)
        self.lines.append(line)
        return line

    def summary(self) -> str:
        """Generate summary"""
        verb = "Previewed" if self.preview else "Renamed"
        return f"{verb} {self.renamed_count} file(s) [{self.state.value}]"

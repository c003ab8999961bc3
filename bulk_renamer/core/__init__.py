"""
core - Bulk Renamer Core Module

Provides directory scanning, rename plan generation and execution.
"""

from .models_fs import (
    FileEntry,
    RenamePair,
    RenamePlan,
    RenameOptions,
    ExecutionReport,
    Mode,
    RunState,
    StrategyConfig,
    SequentialConfig,
    DatePrefixConfig,
    FindReplaceConfig,
    LowercaseConfig,
    config_for_mode,
)

from .errors import (
    RenamerError,
    DirectoryUnreadable,
    RenameFailed,
    PlanConflict,
    InvalidTimestamp,
    InvalidTransition,
)

from .scan_files import (
    scan_directory,
    get_existing_names,
)

from .name_rules import (
    compute_names,
    sequential_names,
    date_prefix_names,
    find_replace_names,
    lowercase_names,
)

from .plan_rename import (
    build_plan,
    validate_plan,
)

from .exec_rename import (
    execute_rename,
)

from .run_rename import (
    RenameRun,
)

from .safety_checks import (
    check_directory,
    check_writable,
)

__all__ = [
    # Data models
    "FileEntry",
    "RenamePair",
    "RenamePlan",
    "RenameOptions",
    "ExecutionReport",
    "Mode",
    "RunState",
    "StrategyConfig",
    "SequentialConfig",
    "DatePrefixConfig",
    "FindReplaceConfig",
    "LowercaseConfig",
    "config_for_mode",

    # Errors
    "RenamerError",
    "DirectoryUnreadable",
    "RenameFailed",
    "PlanConflict",
    "InvalidTimestamp",
    "InvalidTransition",

    # Scanning
    "scan_directory",
    "get_existing_names",

    # Strategies
    "compute_names",
    "sequential_names",
    "date_prefix_names",
    "find_replace_names",
    "lowercase_names",

    # Planning
    "build_plan",
    "validate_plan",

    # Execution
    "execute_rename",
    "RenameRun",

    # Safety checks
    "check_directory",
    "check_writable",
]

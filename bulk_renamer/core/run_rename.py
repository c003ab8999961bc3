"""
run_rename.py - Single Run Driver

Chains scanning, planning and execution for one invocation and tracks the
run state:

    IDLE -> ENUMERATED -> PLANNED -> DRY_RUN_REPORTED
                                  -> EXECUTING -> COMPLETED | FAILED

All state lives on the RenameRun instance; separate runs share nothing.
"""

from pathlib import Path
from typing import Callable, List, Optional

from .errors import InvalidTransition, RenamerError
from .exec_rename import execute_rename
from .models_fs import (
    ExecutionReport, FileEntry, RenameOptions, RenamePlan, RunState, StrategyConfig,
)
from .plan_rename import build_plan
from .scan_files import scan_directory


class RenameRun:
    """One rename invocation over one directory snapshot"""

    def __init__(
        self,
        directory: Path,
        config: StrategyConfig,
        options: Optional[RenameOptions] = None,
    ):
        self.directory = Path(directory)
        self.config = config
        self.options = options or RenameOptions()
        self.state = RunState.IDLE
        self.entries: List[FileEntry] = []
        self.plan: Optional[RenamePlan] = None
        self.report: Optional[ExecutionReport] = None

    def _require(self, expected: RunState, target: RunState) -> None:
        if self.state != expected:
            hint = "run already finished" if self.state.is_terminal else f"run must be {expected.value}"
            raise InvalidTransition(self.state, target, hint=hint)

    def scan(self) -> List[FileEntry]:
        """Take the directory snapshot"""
        self._require(RunState.IDLE, RunState.ENUMERATED)
        try:
            self.entries = scan_directory(self.directory)
        except RenamerError:
            self.state = RunState.FAILED
            raise
        self.state = RunState.ENUMERATED
        return self.entries

    def build(self) -> RenamePlan:
        """Compute the rename plan from the snapshot"""
        self._require(RunState.ENUMERATED, RunState.PLANNED)
        try:
            self.plan = build_plan(self.entries, self.config, self.directory, self.options)
        except RenamerError:
            self.state = RunState.FAILED
            raise
        self.state = RunState.PLANNED
        return self.plan

    def execute(
        self,
        dry_run: bool = False,
        line_callback: Optional[Callable[[str], None]] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
    ) -> ExecutionReport:
        """Preview or apply the plan"""
        target = RunState.DRY_RUN_REPORTED if dry_run else RunState.EXECUTING
        self._require(RunState.PLANNED, target)

        if not dry_run:
            self.state = RunState.EXECUTING

        try:
            self.report = execute_rename(
                self.plan,
                dry_run=dry_run,
                options=self.options,
                line_callback=line_callback,
                progress_callback=progress_callback,
            )
        except RenamerError as e:
            self.state = RunState.FAILED
            self.report = getattr(e, "report", None)
            raise

        self.state = self.report.state
        return self.report

    def run(
        self,
        dry_run: bool = False,
        line_callback: Optional[Callable[[str], None]] = None,
    ) -> ExecutionReport:
        """Scan, plan and execute in one go"""
        self.scan()
        self.build()
        return self.execute(dry_run=dry_run, line_callback=line_callback)

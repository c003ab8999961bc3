"""
gui_workers.py - GUI Worker Threads

Runs scanning, planning and execution off the UI thread
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtCore import QThread, Signal, QObject

from ..core import (
    scan_directory, build_plan, execute_rename,
    FileEntry, RenamePlan, RenameOptions, RenamerError, StrategyConfig,
)


class ScanWorker(QThread):
    """Directory scanning worker thread"""

    # Signals
    finished = Signal(list)         # Complete, returns FileEntry list
    error = Signal(str)             # Error message

    def __init__(self, directory: Path, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.directory = directory

    def run(self):
        try:
            files = scan_directory(self.directory)
        except RenamerError as e:
            self.error.emit(str(e))
            return
        self.finished.emit(files)


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        files: List[FileEntry],
        config: StrategyConfig,
        directory: Path,
        options: Optional[RenameOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.files = files
        self.config = config
        self.directory = directory
        self.options = options or RenameOptions()

    def run(self):
        try:
            plan = build_plan(self.files, self.config, self.directory, self.options)
        except RenamerError as e:
            self.error.emit(str(e))
            return
        self.finished.emit(plan)


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # ExecutionReport
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plan: RenamePlan,
        dry_run: bool = False,
        options: Optional[RenameOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan
        self.dry_run = dry_run
        self.options = options or RenameOptions()

    def run(self):
        def progress_callback(current: int, total: int, msg: str):
            self.progress.emit(current, total, msg)

        try:
            report = execute_rename(
                self.plan,
                dry_run=self.dry_run,
                options=self.options,
                progress_callback=progress_callback,
            )
        except RenamerError as e:
            self.error.emit(str(e))
            return
        self.finished.emit(report)

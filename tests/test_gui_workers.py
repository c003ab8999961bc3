"""Tests for the GUI worker threads (run synchronously, no window)"""

import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from bulk_renamer.core import LowercaseConfig, RenamePair, RenamePlan, RunState
from bulk_renamer.gui.gui_workers import ScanWorker, PlanWorker, RenameWorker
from conftest import make_files, listing

pytestmark = pytest.mark.gui


def test_scan_worker_emits_entries(qt_app, work_dir):
    make_files(work_dir, "b.txt", "a.txt")
    received = []

    worker = ScanWorker(work_dir)
    worker.finished.connect(received.append)
    worker.run()

    assert [f.name for f in received[0]] == ["a.txt", "b.txt"]


def test_scan_worker_reports_error(qt_app, tmp_path):
    errors = []

    worker = ScanWorker(tmp_path / "missing")
    worker.error.connect(errors.append)
    worker.run()

    assert len(errors) == 1
    assert "Cannot read directory" in errors[0]


def test_plan_and_rename_workers(qt_app, work_dir):
    make_files(work_dir, "A.TXT", "b.txt")
    plans, reports, progress = [], [], []

    scan = ScanWorker(work_dir)
    files = []
    scan.finished.connect(files.append)
    scan.run()

    planner = PlanWorker(files[0], LowercaseConfig(), work_dir)
    planner.finished.connect(plans.append)
    planner.run()

    assert plans[0].target_names == ["a.txt"]

    renamer = RenameWorker(plans[0])
    renamer.finished.connect(reports.append)
    renamer.progress.connect(lambda *args: progress.append(args))
    renamer.run()

    assert reports[0].state == RunState.COMPLETED
    assert progress == [(1, 1, "A.TXT -> a.txt")]
    assert listing(work_dir) == ["a.txt", "b.txt"]


def test_rename_worker_reports_conflict(qt_app, work_dir):
    make_files(work_dir, "a")
    errors = []
    plan = RenamePlan(pairs=(RenamePair("a", "b"),), directory=work_dir, errors=("clash",))

    worker = RenameWorker(plan)
    worker.error.connect(errors.append)
    worker.run()

    assert len(errors) == 1
    assert listing(work_dir) == ["a"]

"""Tests for the main window panel (workers run synchronously, no event loop)"""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from bulk_renamer import __version__
from bulk_renamer.gui.gui_entry import create_application
from bulk_renamer.gui.gui_mainwindow import RenamePanel
from bulk_renamer.gui.gui_workers import ScanWorker, PlanWorker
from conftest import make_files

pytestmark = pytest.mark.gui


@pytest.fixture
def panel(qt_app, monkeypatch):
    monkeypatch.setattr(ScanWorker, "start", ScanWorker.run)
    monkeypatch.setattr(PlanWorker, "start", PlanWorker.run)
    widget = RenamePanel()
    yield widget
    widget.deleteLater()


@pytest.fixture
def previewed(panel, tmp_path):
    """Panel with 'first' scanned and a lowercase plan previewed"""
    first = tmp_path / "first"
    first.mkdir()
    make_files(first, "A.TXT")

    panel.dir_edit.setText(str(first))
    panel._do_scan()
    panel.mode_combo.setCurrentIndex(3)
    panel._do_preview()
    return panel, first


def test_preview_plans_against_scanned_directory(previewed):
    panel, first = previewed

    assert panel.directory == first
    assert panel.plan.directory == first
    assert panel.plan.target_names == ["a.txt"]
    assert panel.execute_btn.isEnabled()


def test_editing_path_discards_scan_and_plan(previewed, tmp_path):
    panel, _ = previewed
    second = tmp_path / "second"
    second.mkdir()
    make_files(second, "A.TXT")

    panel.dir_edit.setText(str(second))

    assert panel.plan is None
    assert panel.files == []
    assert panel.directory is None
    assert not panel.preview_btn.isEnabled()
    assert not panel.execute_btn.isEnabled()

    panel._do_preview()
    assert panel.plan is None


@pytest.mark.parametrize("change", [
    lambda p: p.mode_combo.setCurrentIndex(0),
    lambda p: p.start_spin.setValue(5),
    lambda p: p.pad_spin.setValue(2),
    lambda p: p.find_edit.setText("A"),
    lambda p: p.replace_edit.setText("b"),
], ids=["mode", "start", "pad", "find", "replace"])
def test_changing_settings_discards_plan(previewed, change):
    panel, _ = previewed

    change(panel)

    assert panel.plan is None
    assert not panel.execute_btn.isEnabled()
    assert panel.preview_btn.isEnabled()


def test_plan_built_before_edit_is_ignored(previewed, monkeypatch):
    panel, _ = previewed
    stale = panel.plan
    monkeypatch.setattr(PlanWorker, "start", lambda self: None)

    panel._do_preview()
    panel.start_spin.setValue(7)
    panel._on_plan_finished(stale)

    assert panel.plan is None
    assert not panel.execute_btn.isEnabled()


def test_create_application_reuses_instance(qt_app):
    app = create_application([])

    assert app is qt_app
    assert app.applicationName() == "Bulk Renamer"
    assert app.applicationVersion() == __version__

"""
gui_mainwindow.py - GUI Main Window

One panel covering every mode: scan a directory, pick a mode, preview the
plan in a table, then execute it.
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QComboBox, QSpinBox, QStackedWidget,
    QTableWidget, QTableWidgetItem, QProgressBar, QFileDialog, QMessageBox,
    QHeaderView, QGroupBox,
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    FileEntry, RenamePlan, ExecutionReport, Mode, StrategyConfig,
    config_for_mode, check_directory,
)
from .gui_workers import ScanWorker, PlanWorker, RenameWorker

MODE_LABELS = [
    (Mode.SEQ, "Sequential Numbering (001-file.jpg)"),
    (Mode.DATE, "Date Prefix (2024-01-15-file.jpg)"),
    (Mode.REPLACE, "Find / Replace"),
    (Mode.LOWER, "Lowercase"),
]


class RenamePanel(QWidget):
    """Scan, preview and execute panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.files: List[FileEntry] = []
        # Directory the current file list was scanned from
        self.directory: Optional[Path] = None
        self.plan: Optional[RenamePlan] = None
        self.scan_worker: Optional[ScanWorker] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None
        self._inputs_changed = False

        self._init_ui()
        self._connect_invalidation()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Directory settings group
        dir_group = QGroupBox("Directory Settings")
        dir_layout = QGridLayout(dir_group)

        dir_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select target directory (non-recursive)...")
        dir_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        dir_layout.addWidget(self.browse_btn, 0, 2)

        self.scan_btn = QPushButton("Scan")
        self.scan_btn.clicked.connect(self._do_scan)
        dir_layout.addWidget(self.scan_btn, 1, 0, 1, 3)

        layout.addWidget(dir_group)

        # Mode settings group
        mode_group = QGroupBox("Rename Mode")
        mode_layout = QVBoxLayout(mode_group)

        self.mode_combo = QComboBox()
        for _, label in MODE_LABELS:
            self.mode_combo.addItem(label)
        mode_layout.addWidget(self.mode_combo)

        self.mode_stack = QStackedWidget()
        self.mode_stack.addWidget(self._build_seq_page())
        self.mode_stack.addWidget(QLabel("Prefix each file with its modification date."))
        self.mode_stack.addWidget(self._build_replace_page())
        self.mode_stack.addWidget(QLabel("Map ASCII uppercase letters to lowercase."))
        self.mode_combo.currentIndexChanged.connect(self.mode_stack.setCurrentIndex)
        mode_layout.addWidget(self.mode_stack)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        self.preview_btn.setEnabled(False)
        mode_layout.addWidget(self.preview_btn)

        layout.addWidget(mode_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _connect_invalidation(self):
        self.dir_edit.textChanged.connect(self._on_directory_changed)
        self.mode_combo.currentIndexChanged.connect(self._invalidate_plan)
        self.start_spin.valueChanged.connect(self._invalidate_plan)
        self.pad_spin.valueChanged.connect(self._invalidate_plan)
        self.find_edit.textChanged.connect(self._invalidate_plan)
        self.replace_edit.textChanged.connect(self._invalidate_plan)

    def _invalidate_plan(self, *args):
        """Drop the previewed plan once any input it was built from changes"""
        self._inputs_changed = True
        self.execute_btn.setEnabled(False)
        if self.plan is None:
            return
        self.plan = None
        for i in range(self.table.rowCount()):
            self.table.setItem(i, 1, QTableWidgetItem(""))
            self.table.setItem(i, 2, QTableWidgetItem(""))
        self.status_label.setText("Settings changed, preview again")

    def _on_directory_changed(self, text: str):
        """A new path needs a new scan"""
        self._invalidate_plan()
        if self.directory is None:
            return
        self.directory = None
        self.files = []
        self.table.setRowCount(0)
        self.preview_btn.setEnabled(False)
        self.status_label.setText("Directory changed, scan again")

    def _build_seq_page(self) -> QWidget:
        page = QWidget()
        page_layout = QGridLayout(page)

        page_layout.addWidget(QLabel("Start Number:"), 0, 0)
        self.start_spin = QSpinBox()
        self.start_spin.setRange(0, 999999)
        self.start_spin.setValue(1)
        page_layout.addWidget(self.start_spin, 0, 1)

        page_layout.addWidget(QLabel("Padding Digits:"), 1, 0)
        self.pad_spin = QSpinBox()
        self.pad_spin.setRange(0, 10)
        self.pad_spin.setValue(3)
        self.pad_spin.setSpecialValueText("No Padding")
        page_layout.addWidget(self.pad_spin, 1, 1)
        return page

    def _build_replace_page(self) -> QWidget:
        page = QWidget()
        page_layout = QGridLayout(page)

        page_layout.addWidget(QLabel("Find:"), 0, 0)
        self.find_edit = QLineEdit()
        self.find_edit.setPlaceholderText("Literal substring to find")
        page_layout.addWidget(self.find_edit, 0, 1)

        page_layout.addWidget(QLabel("Replace with:"), 1, 0)
        self.replace_edit = QLineEdit()
        self.replace_edit.setPlaceholderText("Replacement string")
        page_layout.addWidget(self.replace_edit, 1, 1)
        return page

    def _current_mode(self) -> Mode:
        return MODE_LABELS[self.mode_combo.currentIndex()][0]

    def _current_config(self) -> Optional[StrategyConfig]:
        """Build the strategy config from the form, or warn and return None"""
        mode = self._current_mode()
        if mode == Mode.REPLACE:
            if not self.find_edit.text():
                QMessageBox.warning(self, "Warning", "Please enter the string to find")
                return None
            if not self.replace_edit.text():
                QMessageBox.warning(self, "Warning", "Please enter the replacement string")
                return None
        return config_for_mode(
            mode,
            start=self.start_spin.value(),
            pad=self.pad_spin.value(),
            find=self.find_edit.text(),
            replace=self.replace_edit.text(),
        )

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _do_scan(self):
        """Execute scan"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        valid, error = check_directory(Path(directory))
        if not valid:
            QMessageBox.warning(self, "Warning", error)
            return

        self.scan_btn.setEnabled(False)
        self.scan_btn.setText("Scanning...")
        self.preview_btn.setEnabled(False)
        self.execute_btn.setEnabled(False)
        self.plan = None
        self.files = []
        self.directory = Path(directory)

        self.scan_worker = ScanWorker(self.directory)
        self.scan_worker.finished.connect(self._on_scan_finished)
        self.scan_worker.error.connect(self._on_scan_error)
        self.scan_worker.start()

    @Slot(list)
    def _on_scan_finished(self, files: List[FileEntry]):
        """Scan complete"""
        self.scan_btn.setEnabled(True)
        self.scan_btn.setText("Scan")
        if self.directory is None:
            # Path was edited while scanning
            return
        self.files = files

        self.table.setRowCount(len(files))
        for i, f in enumerate(files):
            self.table.setItem(i, 0, QTableWidgetItem(f.name))
            self.table.setItem(i, 1, QTableWidgetItem(""))
            self.table.setItem(i, 2, QTableWidgetItem(""))

        if files:
            self.preview_btn.setEnabled(True)
            self.status_label.setText(f"Found {len(files)} files")
        else:
            self.status_label.setText("No files found")

    @Slot(str)
    def _on_scan_error(self, error: str):
        """Scan error"""
        self.scan_btn.setEnabled(True)
        self.scan_btn.setText("Scan")
        QMessageBox.critical(self, "Error", f"Scan failed: {error}")

    def _do_preview(self):
        """Generate preview"""
        if not self.files or self.directory is None:
            return

        config = self._current_config()
        if config is None:
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Generating...")
        self.execute_btn.setEnabled(False)
        self._inputs_changed = False

        self.plan_worker = PlanWorker(self.files, config, self.directory)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.preview_btn.setEnabled(bool(self.files))
        self.preview_btn.setText("Preview")
        if self._inputs_changed:
            # Form was edited while the plan was being built
            return
        self.plan = plan

        pair_map = {pair.old_name: pair for pair in plan}
        for i, f in enumerate(self.files):
            pair = pair_map.get(f.name)
            if pair is None:
                self.table.setItem(i, 1, QTableWidgetItem(f.name))
                status = QTableWidgetItem("No Change")
                status.setForeground(QColor(150, 150, 150))
            elif any(err.startswith(f"{pair}:") for err in plan.errors):
                self.table.setItem(i, 1, QTableWidgetItem(pair.new_name))
                status = QTableWidgetItem("Conflict")
                status.setForeground(QColor(200, 0, 0))
            else:
                self.table.setItem(i, 1, QTableWidgetItem(pair.new_name))
                status = QTableWidgetItem("Case Only" if pair.is_case_only_change else "Will Rename")
                status.setForeground(QColor(0, 150, 0))
            self.table.setItem(i, 2, status)

        if plan.errors:
            QMessageBox.warning(self, "Warning", "\n".join(plan.errors))
            self.status_label.setText(f"{len(plan.errors)} conflict(s), cannot execute")
        elif plan.is_empty:
            self.status_label.setText("No files need renaming")
        else:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(f"Will perform {plan.renamed_count} rename operations")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(bool(self.files))
        self.preview_btn.setText("Preview")
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or self.plan.is_empty:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.plan.renamed_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.scan_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, self.plan.renamed_count)

        self.rename_worker = RenameWorker(self.plan, dry_run=False)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    def _reset_after_execute(self):
        self.execute_btn.setText("Execute Rename")
        self.scan_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        self.files = []
        self.plan = None
        self.table.setRowCount(0)

    @Slot(object)
    def _on_rename_finished(self, report: ExecutionReport):
        """Execution complete"""
        self._reset_after_execute()
        QMessageBox.information(self, "Complete", report.summary())
        self.status_label.setText("Complete")
        # Show the directory as it is now
        self._do_scan()

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error; renames applied before it stay in place"""
        self._reset_after_execute()
        QMessageBox.critical(self, "Error", f"Execution failed: {error}\n\nEarlier renames were kept.")
        self.status_label.setText("Failed")
        self._do_scan()


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Bulk Renamer")
        self.setMinimumSize(800, 600)

        self.panel = RenamePanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")

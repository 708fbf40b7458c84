"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the chart and the station
controls.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (File -> Open, Reload, Export) and the
   background loader to the ProjectState and the widgets.
"""
import os

from typing import Optional
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QFileDialog, QMessageBox, QProgressBar
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
import logging

from boundarylayer.controller.workers import LoadWorker
from boundarylayer.model.extraction import ExtractionReport
from boundarylayer.model.state import ProjectState
from boundarylayer.view.panels.station_panel import StationControlPanel
from boundarylayer.view.widgets.thickness_plot import ThicknessPlotWidget


logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Boundary Layer Visualization"


class MainWindow(QMainWindow):
    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project: ProjectState = project_state
        self.load_worker: Optional[LoadWorker] = None

        self.update_window_title()
        self.resize(1000, 750)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. HEADER ---
        title = QLabel(f"<h2>{VISIBLE_APP_NAME}</h2>")
        title.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(title)

        subtitle = QLabel("Interactive visualization of boundary layer thickness")
        subtitle.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(subtitle)

        # --- 2. CHART ---
        self.plot = ThicknessPlotWidget()
        self.plot.setMinimumHeight(300)
        main_layout.addWidget(self.plot, 1)

        # --- 3. CONTROLS ---
        self.station_panel = StationControlPanel(self.project)
        main_layout.addWidget(self.station_panel)

        # --- STATUS BAR ---
        self.progress = QProgressBar()
        self.progress.setVisible(False)
        self.progress.setMaximumWidth(200)
        self.statusBar().addPermanentWidget(self.progress)

        # --- SIGNAL CONNECTIONS ---
        self.station_panel.station_changed.connect(self.on_station_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.refresh_ui_from_state()

    def _create_actions(self) -> None:
        self.act_open = QAction("Open CSV...", self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_reload = QAction("Reload", self)
        self.act_reload.setShortcut("F5")
        self.act_reload.triggered.connect(self.on_file_reload)

        self.act_export_image = QAction("Export Chart Image...", self)
        self.act_export_image.triggered.connect(self.on_export_image)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_reload)
        file_menu.addSeparator()
        file_menu.addAction(self.act_export_image)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---
    def update_window_title(self) -> None:
        """Updates the window title based on the loaded data file."""
        filename = self.project.data_path if self.project.data_path else "No data"
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{os.path.basename(filename)}]")

    def refresh_ui_from_state(self) -> None:
        """
        After a load, the State is updated, but the Widgets are old.
        We need to force the Widgets to read from the State again.
        """
        self.station_panel.load_from_state()
        self.update_plot()
        self.update_window_title()

        has_points = bool(self.project.points)
        self.act_export_image.setEnabled(has_points)
        self.act_reload.setEnabled(self.project.data_path is not None)

    def update_plot(self) -> None:
        self.plot.set_points(self.project.filtered_points)
        self.plot.set_station(self.project.view.selected_station)

    def on_station_changed(self, station: float) -> None:
        """Called when user scrubs the station slider."""
        self.update_plot()

    # --- LOADING ---

    def start_load(self, filepath: str) -> None:
        """Read and extract `filepath` on a background thread."""
        if self.load_worker is not None and self.load_worker.isRunning():
            logger.warning(f"A load is already running; ignoring request for {filepath}")
            return

        self.project.data_path = filepath
        self.act_open.setEnabled(False)
        self.act_reload.setEnabled(False)
        self.progress.setVisible(True)
        self.progress.setRange(0, 100)
        self.progress.setValue(0)

        self.load_worker = LoadWorker(filepath, self.project.free_stream_velocity)
        self.load_worker.progress_updated.connect(self.on_load_progress)
        self.load_worker.results_ready.connect(self.on_results_ready)  # THREAD SAFE
        self.load_worker.error_occurred.connect(self.on_load_error)
        self.load_worker.finished.connect(self.on_load_finished)
        self.load_worker.start()

    def on_load_progress(self, percent: int, msg: str) -> None:
        self.progress.setValue(percent)
        self.statusBar().showMessage(msg)

    def on_results_ready(self, samples: list, report: ExtractionReport) -> None:
        """
        THREAD SAFE: Handle results from worker thread.
        This runs in the main thread via Qt's signal/slot mechanism.
        """
        self.project.apply_results(samples, report)
        self.refresh_ui_from_state()
        self.statusBar().showMessage(
            f"{len(self.project.samples)} samples, {len(self.project.points)} stations, "
            f"{len(self.project.skipped_stations)} skipped"
        )

    def on_load_error(self, msg: str) -> None:
        self.project.clear_results()
        self.refresh_ui_from_state()
        self.statusBar().showMessage("Loading failed.")
        QMessageBox.critical(self, "Loading Error", f"Could not load velocity samples:\n{msg}")

    def on_load_finished(self) -> None:
        self.progress.setVisible(False)
        self.act_open.setEnabled(True)
        self.act_reload.setEnabled(self.project.data_path is not None)
        if self.load_worker is not None:
            self.load_worker.deleteLater()
            self.load_worker = None

    # --- FILE SLOTS ---

    def on_file_open(self) -> None:
        fname, _ = QFileDialog.getOpenFileName(
            self, "Open Velocity Samples", "", "CSV Files (*.csv);;All Files (*)"
        )
        if fname:
            self.start_load(fname)

    def on_file_reload(self) -> None:
        if self.project.data_path:
            self.start_load(self.project.data_path)

    def on_export_image(self) -> None:
        """Export the current chart as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Chart as Image",
            "boundary_layer.png",
            "PNG Image (*.png);;JPEG Image (*.jpg)"
        )

        if not file_path:
            return

        try:
            self.plot.export_image(file_path)
        except Exception as e:
            logger.exception("Failed to export plot")
            QMessageBox.critical(self, "Export Error", f"Could not export the chart:\n{str(e)}")

    def closeEvent(self, event, /) -> None:
        """Stop playback and wait for a running loader before closing."""
        self.station_panel.timer.stop()
        if self.load_worker is not None and self.load_worker.isRunning():
            self.load_worker.wait()
        event.accept()

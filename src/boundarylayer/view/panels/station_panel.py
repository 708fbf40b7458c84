from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QPushButton, QSlider, QHBoxLayout, QGroupBox, QSpinBox, QStyle
)
from PySide6.QtCore import Qt, Signal, QTimer
import logging

from boundarylayer.model.readout import SliderBounds, build_readout, slider_bounds
from boundarylayer.model.state import ProjectState


logger = logging.getLogger(__name__)


class StationControlPanel(QWidget):
    # Signal: selected station after a slider move
    station_changed = Signal(float)

    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project = project_state
        self.bounds: SliderBounds = slider_bounds(self.project.points)

        # Animation Timer
        self.timer = QTimer()
        self.timer.setInterval(100)
        self.timer.timeout.connect(self.advance_frame)

        layout = QVBoxLayout(self)

        # --- Station Selection ---
        grp_station = QGroupBox("Station")
        l_station = QVBoxLayout(grp_station)

        self.lbl_station = QLabel()
        l_station.addWidget(self.lbl_station)

        hbox_play = QHBoxLayout()

        self.btn_play = QPushButton()
        self.btn_play.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))
        self.btn_play.clicked.connect(self.toggle_play)
        hbox_play.addWidget(self.btn_play)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.valueChanged.connect(self.on_slider_changed)
        hbox_play.addWidget(self.slider)

        l_station.addLayout(hbox_play)

        # FPS Control
        hbox_fps = QHBoxLayout()
        hbox_fps.addWidget(QLabel("Animation speed:"))
        self.spin_fps = QSpinBox()
        self.spin_fps.setRange(1, 60)
        self.spin_fps.setValue(10)
        self.spin_fps.setSuffix(" FPS")
        self.spin_fps.valueChanged.connect(self.on_fps_changed)
        hbox_fps.addWidget(self.spin_fps)
        hbox_fps.addStretch()
        l_station.addLayout(hbox_fps)

        self.on_fps_changed(self.spin_fps.value())

        layout.addWidget(grp_station)

        # --- Information ---
        grp_info = QGroupBox("Information")
        l_info = QVBoxLayout(grp_info)

        l_info.addWidget(QLabel("• Blue line shows the boundary layer thickness up to current x-position"))
        self.info_labels = [QLabel() for _ in range(4)]
        for lbl in self.info_labels:
            l_info.addWidget(lbl)

        layout.addWidget(grp_info)
        layout.addStretch()

        self.load_from_state()

    def load_from_state(self) -> None:
        """Syncs slider range and read-out from ProjectState (after a load)."""
        self.timer.stop()
        self.update_play_icon()

        self.bounds = slider_bounds(self.project.points)

        # Re-ranging must not overwrite the selected station
        self.slider.blockSignals(True)
        self.slider.setRange(0, self.bounds.tick_count)
        self.slider.setValue(self.bounds.index_of(self.project.view.selected_station))
        self.slider.blockSignals(False)

        has_points = bool(self.project.points)
        self.slider.setEnabled(has_points)
        self.btn_play.setEnabled(has_points)

        self.update_readout()

    def on_fps_changed(self, value: int) -> None:
        """Update timer interval based on FPS."""
        if value > 0:
            self.timer.setInterval(1000 // value)

    def on_slider_changed(self, index: int) -> None:
        station = self.bounds.value_at(index)
        self.project.view.set_selected_station(station)
        self.update_readout()
        self.station_changed.emit(station)

    def update_readout(self) -> None:
        readout = build_readout(self.project)
        self.lbl_station.setText(f"Select x-position: {readout.selected_station}")
        for lbl, line in zip(self.info_labels, readout.lines()):
            lbl.setText(f"• {line}")

    # --- ANIMATION LOGIC ---

    def toggle_play(self) -> None:
        if self.timer.isActive():
            self.timer.stop()
        else:
            # If at the end, restart from 0
            if self.slider.value() >= self.slider.maximum():
                self.slider.setValue(0)
            self.timer.start()

        self.update_play_icon()

    def advance_frame(self) -> None:
        current = self.slider.value()
        if current < self.slider.maximum():
            self.slider.setValue(current + 1)
        else:
            self.timer.stop()
            self.update_play_icon()

    def update_play_icon(self) -> None:
        if self.timer.isActive():
            self.btn_play.setIcon(self.style().standardIcon(QStyle.SP_MediaPause))
        else:
            self.btn_play.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))

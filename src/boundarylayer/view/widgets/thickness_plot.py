"""Line chart of boundary layer thickness over streamwise position."""
from __future__ import annotations

import logging
from typing import Sequence, TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    import numpy.typing as npt
    from boundarylayer.model.samples import BoundaryLayerPoint


logger = logging.getLogger(__name__)


class ThicknessPlotWidget(pg.PlotWidget):
    """Draws delta(x) up to the selected station, with a hover read-out."""

    LINE_COLOR = '#60A5FA'
    MARKER_COLOR = '#9CA3AF'

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._x: npt.NDArray[np.float64] = np.empty(0)
        self._delta: npt.NDArray[np.float64] = np.empty(0)

        self.setBackground('w')
        self.showGrid(x=True, y=True, alpha=0.3)
        self.setLabel('bottom', 'x-position', color='black')
        self.setLabel('left', 'Boundary Layer Thickness (δ)', color='black')
        self.getAxis('bottom').setPen('k')
        self.getAxis('left').setPen('k')
        self.getAxis('bottom').setTextPen('k')
        self.getAxis('left').setTextPen('k')

        self.curve = self.plot([], [], pen=pg.mkPen(color=self.LINE_COLOR, width=2))

        self.station_marker = pg.InfiniteLine(
            pos=0.0,
            angle=90,
            pen=pg.mkPen(color=self.MARKER_COLOR, width=1, style=Qt.PenStyle.DashLine),
        )
        self.addItem(self.station_marker)

        self.tooltip = pg.TextItem('', color='k', fill=(255, 255, 255, 200), anchor=(0, 1))
        self.tooltip.setZValue(10)
        self.tooltip.hide()
        self.addItem(self.tooltip, ignoreBounds=True)

        self.scene().sigMouseMoved.connect(self._on_mouse_moved)

    def set_points(self, points: Sequence[BoundaryLayerPoint]) -> None:
        """Replace the drawn line with the given (already filtered) points."""
        self._x = np.array([p.x for p in points], dtype=float)
        self._delta = np.array([p.delta for p in points], dtype=float)
        self.curve.setData(self._x, self._delta)
        if not points:
            self.tooltip.hide()

    def set_station(self, x: float) -> None:
        self.station_marker.setPos(x)

    def _on_mouse_moved(self, pos) -> None:
        """Show x and delta of the point nearest to the cursor."""
        if self._x.size == 0 or not self.getPlotItem().sceneBoundingRect().contains(pos):
            self.tooltip.hide()
            return

        mouse_point = self.getPlotItem().vb.mapSceneToView(pos)
        idx = int(np.argmin(np.abs(self._x - mouse_point.x())))
        x, delta = self._x[idx], self._delta[idx]

        self.tooltip.setText(f"x = {x:g}\ndelta: {delta:.4f}")
        self.tooltip.setPos(x, delta)
        self.tooltip.show()

    def export_image(self, file_path: str) -> None:
        """Export the current chart as an image file."""
        exporter = ImageExporter(self.getPlotItem())
        exporter.parameters()['width'] = 1920  # High resolution
        exporter.export(file_path)
        logger.info(f"Plot exported to {file_path}")

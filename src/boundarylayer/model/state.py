"""
Project State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the loaded samples, the extracted boundary
   layer points and the selected station in one place.
2. Decoupling: Views read from this object; the loader worker results and
   the slider write to it.

Classes:
    ViewState: The selected station and the views derived from it.
    ProjectState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence

from boundarylayer.config import FREE_STREAM_VELOCITY, STATION_TOLERANCE
from boundarylayer.model.extraction import ExtractionReport
from boundarylayer.model.samples import BoundaryLayerPoint, VelocitySample

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    """
    Holds the user-selected station.
    Everything else shown on screen is derived from it on demand.
    """
    selected_station: float = 0.0

    def set_selected_station(self, x: float) -> None:
        # No clamping: the slider owns the range
        self.selected_station = x

    def filtered_sequence(self, points: Sequence[BoundaryLayerPoint]) -> list[BoundaryLayerPoint]:
        """All points at or upstream of the selected station, in original order."""
        return [p for p in points if p.x <= self.selected_station]

    def current_point(self, points: Sequence[BoundaryLayerPoint]) -> Optional[BoundaryLayerPoint]:
        """First point within STATION_TOLERANCE of the selected station."""
        for p in points:
            if abs(p.x - self.selected_station) < STATION_TOLERANCE:
                return p
        return None


@dataclass
class ProjectState:
    """
    Holds the entire state of the open session.
    Pass this instance to your Controllers and Views.
    """
    data_path: Optional[str] = None
    free_stream_velocity: float = FREE_STREAM_VELOCITY

    samples: list[VelocitySample] = field(default_factory=list)
    points: list[BoundaryLayerPoint] = field(default_factory=list)
    skipped_stations: list[float] = field(default_factory=list)

    # Survives re-ingestion
    view: ViewState = field(default_factory=ViewState)

    @property
    def filtered_points(self) -> list[BoundaryLayerPoint]:
        return self.view.filtered_sequence(self.points)

    @property
    def current_point(self) -> Optional[BoundaryLayerPoint]:
        return self.view.current_point(self.points)

    def apply_results(self, samples: list[VelocitySample], report: ExtractionReport) -> None:
        """Replace samples and points with the outcome of one ingestion pass."""
        self.samples = samples
        self.points = report.points
        self.skipped_stations = report.skipped_stations
        logger.info(
            f"Project updated: {len(self.samples)} samples, {len(self.points)} points, "
            f"{len(self.skipped_stations)} skipped stations."
        )

    def clear_results(self) -> None:
        """Drop all loaded data. The selected station is kept."""
        self.samples = []
        self.points = []
        self.skipped_stations = []
        logger.info("Project data has been cleared.")

"""
Display read-out helpers.

Qt-free formatting of everything the station panel shows, so the text and
the slider range can be checked without a display.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from boundarylayer.config import SLIDER_STEP
from boundarylayer.model.samples import BoundaryLayerPoint
from boundarylayer.model.state import ProjectState

NOT_AVAILABLE = "N/A"

# QSlider ranges are signed 32-bit ints
MAX_SLIDER_TICKS = 2**31 - 1


@dataclass(frozen=True)
class SliderBounds:
    """Station range of the slider, mapped onto integer ticks for QSlider."""
    minimum: float = 0.0
    maximum: float = 1.0
    step: float = SLIDER_STEP

    @property
    def effective_step(self) -> float:
        """`step`, coarsened when the span would need more than MAX_SLIDER_TICKS ticks."""
        span = self.maximum - self.minimum
        if span / self.step > MAX_SLIDER_TICKS:
            return span / MAX_SLIDER_TICKS
        return self.step

    @property
    def tick_count(self) -> int:
        if self.maximum <= self.minimum:
            return 0
        ticks = int(math.floor((self.maximum - self.minimum) / self.effective_step + 1e-9))
        return min(ticks, MAX_SLIDER_TICKS)

    def value_at(self, index: int) -> float:
        index = min(max(index, 0), self.tick_count)
        # round() keeps 0.1 + 2 * 0.01 from landing just above 0.12
        return round(self.minimum + index * self.effective_step, 10)

    def index_of(self, value: float) -> int:
        index = int(round((value - self.minimum) / self.effective_step))
        return min(max(index, 0), self.tick_count)


def slider_bounds(points: Sequence[BoundaryLayerPoint]) -> SliderBounds:
    """First and last station of the sequence, or 0..1 when it is empty."""
    if not points:
        return SliderBounds()
    return SliderBounds(minimum=points[0].x, maximum=points[-1].x)


@dataclass(frozen=True)
class Readout:
    free_stream_velocity: str
    selected_station: str
    reynolds_number: str
    thickness: str

    def lines(self) -> list[str]:
        return [
            f"Free stream velocity (U∞) = {self.free_stream_velocity}",
            f"Selected x-position: {self.selected_station}",
            f"Current Reynolds number: {self.reynolds_number}",
            f"Current boundary layer thickness: {self.thickness}",
        ]


def build_readout(project: ProjectState) -> Readout:
    point = project.current_point
    return Readout(
        free_stream_velocity=f"{project.free_stream_velocity:g}",
        selected_station=f"{project.view.selected_station:.2f}",
        reynolds_number=f"{point.Re:.2f}" if point is not None else NOT_AVAILABLE,
        thickness=f"{point.delta:.4f}" if point is not None else NOT_AVAILABLE,
    )

"""Tests for the display read-out and slider range."""

import pytest

from boundarylayer.model.extraction import ExtractionReport
from boundarylayer.model.readout import (
    MAX_SLIDER_TICKS,
    NOT_AVAILABLE,
    SliderBounds,
    build_readout,
    slider_bounds,
)
from boundarylayer.model.samples import BoundaryLayerPoint
from boundarylayer.model.state import ProjectState


def make_project(points, station=0.0):
    project = ProjectState()
    project.apply_results([], ExtractionReport(points=points))
    project.view.set_selected_station(station)
    return project


class TestReadout:
    def test_empty_project_shows_na(self):
        readout = build_readout(ProjectState())

        assert readout.reynolds_number == NOT_AVAILABLE
        assert readout.thickness == NOT_AVAILABLE
        assert readout.lines() == [
            "Free stream velocity (U∞) = 1",
            "Selected x-position: 0.00",
            "Current Reynolds number: N/A",
            "Current boundary layer thickness: N/A",
        ]

    def test_matched_point_is_formatted(self):
        points = [BoundaryLayerPoint(x=0.5, delta=0.0079057, Re=50000.0)]
        readout = build_readout(make_project(points, station=0.5))

        assert readout.selected_station == "0.50"
        assert readout.reynolds_number == "50000.00"
        assert readout.thickness == "0.0079"

    def test_unmatched_station_shows_na(self):
        points = [BoundaryLayerPoint(x=0.5, delta=0.01, Re=1.0)]
        readout = build_readout(make_project(points, station=0.53))

        assert readout.selected_station == "0.53"
        assert readout.thickness == NOT_AVAILABLE


class TestSliderBounds:
    def test_empty_defaults(self):
        bounds = slider_bounds([])
        assert (bounds.minimum, bounds.maximum, bounds.step) == (0.0, 1.0, 0.01)
        assert bounds.tick_count == 100

    def test_first_and_last_point(self):
        points = [BoundaryLayerPoint(x=x, delta=1.0, Re=1.0) for x in (0.1, 0.7, 2.0)]
        bounds = slider_bounds(points)

        assert bounds.minimum == 0.1
        assert bounds.maximum == 2.0
        assert bounds.tick_count == 190

    def test_value_at_lands_on_step_grid(self):
        bounds = SliderBounds(minimum=0.1, maximum=2.0)

        assert bounds.value_at(0) == 0.1
        assert bounds.value_at(2) == 0.12
        assert bounds.value_at(bounds.tick_count) == pytest.approx(2.0)

    def test_value_at_clamps(self):
        bounds = SliderBounds(minimum=0.0, maximum=1.0)
        assert bounds.value_at(-5) == 0.0
        assert bounds.value_at(1000) == 1.0

    def test_index_of_round_trips_and_clamps(self):
        bounds = SliderBounds(minimum=0.1, maximum=2.0)

        assert bounds.index_of(0.1) == 0
        assert bounds.index_of(1.0) == 90
        assert bounds.index_of(0.0) == 0
        assert bounds.index_of(50.0) == bounds.tick_count

    def test_descending_range_collapses(self):
        bounds = SliderBounds(minimum=2.0, maximum=1.0)
        assert bounds.tick_count == 0
        assert bounds.value_at(3) == 2.0

    def test_step_kept_for_normal_spans(self):
        assert SliderBounds(minimum=0.1, maximum=2.0).effective_step == 0.01

    def test_wide_span_fits_qslider_range(self):
        bounds = SliderBounds(minimum=0.0, maximum=3.0e7)

        assert bounds.effective_step > bounds.step
        assert MAX_SLIDER_TICKS - 1 <= bounds.tick_count <= MAX_SLIDER_TICKS
        assert bounds.value_at(0) == 0.0
        assert bounds.value_at(bounds.tick_count) == pytest.approx(3.0e7, abs=bounds.effective_step)
        assert bounds.index_of(3.0e7) == bounds.tick_count
        assert bounds.index_of(1.5e7) == pytest.approx(bounds.tick_count / 2, abs=1)


class TestReadoutFreeStream:
    def test_integral_velocity_has_no_trailing_zero(self):
        assert build_readout(ProjectState()).free_stream_velocity == "1"

    def test_fractional_velocity_kept(self):
        project = ProjectState(free_stream_velocity=0.75)
        assert build_readout(project).lines()[0] == "Free stream velocity (U∞) = 0.75"

"""
Boundary Layer Extraction
=========================
Reduces raw velocity samples to one thickness / Reynolds-number pair per
streamwise station.

Procedure:
  1. Group samples by exact station value, keeping first-seen station order.
  2. Within a group, walk the samples in input order and take the first one
     whose velocity reaches THRESHOLD_FRACTION of the free-stream velocity.
     Its wall distance is the boundary layer thickness (delta).
  3. The Reynolds number is read from the first sample of the group.
  4. Stations without a crossing or without a Reynolds number are dropped.

Samples are NOT sorted by wall distance. A station whose rows are out of
order reports the first crossing in file order, not the lowest one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from boundarylayer.config import THRESHOLD_FRACTION
from boundarylayer.model.samples import BoundaryLayerPoint, VelocitySample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionReport:
    """Extracted points plus the stations that had to be left out."""
    points: list[BoundaryLayerPoint] = field(default_factory=list)
    skipped_stations: list[float] = field(default_factory=list)
    unassigned_samples: int = 0  # samples without a usable station value

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_stations)


def group_by_station(samples: Iterable[VelocitySample]) -> tuple[dict[float, list[VelocitySample]], int]:
    """
    Partition samples by exact station value.

    Returns the groups (dict order == first-seen order) and the number of
    samples that carried no station.
    """
    groups: dict[float, list[VelocitySample]] = {}
    unassigned = 0
    for sample in samples:
        if sample.x is None:
            unassigned += 1
            continue
        groups.setdefault(sample.x, []).append(sample)
    return groups, unassigned


def find_edge_sample(group: Sequence[VelocitySample], free_stream_velocity: float) -> Optional[VelocitySample]:
    """First sample (in input order) with u >= THRESHOLD_FRACTION * U∞."""
    threshold = THRESHOLD_FRACTION * free_stream_velocity
    for sample in group:
        if sample.u is not None and sample.u >= threshold:
            return sample
    return None


def reduce_station(station: float, group: Sequence[VelocitySample],
                   free_stream_velocity: float) -> Optional[BoundaryLayerPoint]:
    edge = find_edge_sample(group, free_stream_velocity)
    if edge is None or edge.y is None:
        return None

    reynolds = group[0].Re
    if reynolds is None:
        return None

    return BoundaryLayerPoint(x=station, delta=edge.y, Re=reynolds)


def extract_with_report(samples: Iterable[VelocitySample], free_stream_velocity: float) -> ExtractionReport:
    """
    Run the extraction and keep track of every station that was omitted.
    """
    groups, unassigned = group_by_station(samples)

    points: list[BoundaryLayerPoint] = []
    skipped: list[float] = []
    for station, group in groups.items():
        point = reduce_station(station, group, free_stream_velocity)
        if point is None:
            logger.debug(f"Station x={station} skipped: no {THRESHOLD_FRACTION:.0%} crossing or no Re.")
            skipped.append(station)
            continue
        points.append(point)

    if unassigned:
        logger.debug(f"{unassigned} sample(s) without a station value were ignored.")
    logger.info(
        f"Extracted {len(points)} boundary layer point(s) from {len(groups)} station(s), "
        f"{len(skipped)} skipped."
    )
    return ExtractionReport(points=points, skipped_stations=skipped, unassigned_samples=unassigned)


def extract_boundary_layer(samples: Iterable[VelocitySample], free_stream_velocity: float) -> list[BoundaryLayerPoint]:
    """
    One BoundaryLayerPoint per station that has a valid thickness and Re,
    in the order the stations first appear in `samples`.
    """
    return extract_with_report(samples, free_stream_velocity).points

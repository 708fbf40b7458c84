"""
Sample & Point Records
======================
Immutable records passed between ingestion, extraction and the view.

Classes:
    VelocitySample: One decoded row of the input table.
    BoundaryLayerPoint: One reduced station (thickness + Reynolds number).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional


def to_float(value: Any) -> Optional[float]:
    """
    Coerce a raw value to a finite float.

    Returns None when the value is missing, unparseable, NaN or infinite.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        # float() would accept digit grouping such as "1_0"
        if not value or "_" in value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class VelocitySample:
    """
    A single velocity measurement at station x, wall distance y.
    Any field is None if the source row did not provide a usable number.
    """
    x: Optional[float] = None  # streamwise station
    y: Optional[float] = None  # wall-normal position
    u: Optional[float] = None  # local velocity
    Re: Optional[float] = None  # Reynolds number

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> VelocitySample:
        return cls(
            x=to_float(row.get("x")),
            y=to_float(row.get("y")),
            u=to_float(row.get("u")),
            Re=to_float(row.get("Re")),
        )


@dataclass(frozen=True)
class BoundaryLayerPoint:
    x: float  # station
    delta: float  # boundary layer thickness
    Re: float

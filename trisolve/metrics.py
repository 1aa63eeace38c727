"""Derived metrics and shape classification of a solved triangle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .model import SolvedTriangle

SIDE_EQUAL_TOL = 0.01
RIGHT_ANGLE_TOL_DEG = 0.1

EQUILATERAL = "Equilateral"
ISOSCELES = "Isosceles"
SCALENE = "Scalene"

RIGHT = "Right"
OBTUSE = "Obtuse"
ACUTE = "Acute"

GENERIC_COMPARISON = "Geometric Shape"

# Upper bounds in square metres; the last bucket is open-ended.
_AREA_BUCKETS: Tuple[Tuple[float, str], ...] = (
    (1.0, "Coffee Table"),
    (4.0, "King Size Bed"),
    (15.0, "Small Bedroom"),
    (30.0, "Living Room"),
    (200.0, "Tennis Court"),
)
_LARGEST_BUCKET = "Small Field"


class Unit(Enum):
    """Display unit; relabels output but never changes the arithmetic."""

    METERS = "m"
    CENTIMETERS = "cm"
    FEET = "ft"
    INCHES = "in"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def area_suffix(self) -> str:
        return f"{self.value}²"

    @property
    def display_name(self) -> str:
        return _UNIT_NAMES[self]

    @classmethod
    def parse(cls, value: Union["Unit", str]) -> "Unit":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown unit {value!r}; expected one of m, cm, ft, in") from None


_UNIT_NAMES = {
    Unit.METERS: "Meters (m)",
    Unit.CENTIMETERS: "Centimeters (cm)",
    Unit.FEET: "Feet (ft)",
    Unit.INCHES: "Inches (in)",
}

REFERENCE_UNIT = Unit.METERS


@dataclass(frozen=True)
class DerivedMetrics:
    perimeter: float
    semiperimeter: float
    altitude_c: float
    inradius: float
    circumradius: float
    side_type: str
    angle_type: str
    comparison: str


def perimeter(triangle: SolvedTriangle) -> float:
    return triangle.a + triangle.b + triangle.c


def semiperimeter(triangle: SolvedTriangle) -> float:
    return perimeter(triangle) / 2.0


def altitude_to_c(triangle: SolvedTriangle) -> float:
    return 2.0 * triangle.area / triangle.c


def inradius(triangle: SolvedTriangle) -> float:
    return triangle.area / semiperimeter(triangle)


def circumradius(triangle: SolvedTriangle) -> float:
    """``R = abc / (4 * area)``; the diagram draws the circumcircle with this value."""

    return (triangle.a * triangle.b * triangle.c) / (4.0 * triangle.area)


def classify_sides(a: float, b: float, c: float, tol: float = SIDE_EQUAL_TOL) -> str:
    ab = abs(a - b) < tol
    bc = abs(b - c) < tol
    ac = abs(a - c) < tol
    if ab and bc:
        return EQUILATERAL
    if ab or bc or ac:
        return ISOSCELES
    return SCALENE


def classify_angles(angles_deg: Tuple[float, float, float], tol: float = RIGHT_ANGLE_TOL_DEG) -> str:
    largest = max(angles_deg)
    # Right wins over Obtuse for angles just above 90.
    if abs(largest - 90.0) < tol:
        return RIGHT
    if largest > 90.0:
        return OBTUSE
    return ACUTE


def real_world_comparison(area: float, unit: Union[Unit, str] = REFERENCE_UNIT) -> str:
    if Unit.parse(unit) is not REFERENCE_UNIT:
        return GENERIC_COMPARISON
    for bound, label in _AREA_BUCKETS:
        if area < bound:
            return label
    return _LARGEST_BUCKET


def compute_metrics(triangle: SolvedTriangle, unit: Union[Unit, str] = REFERENCE_UNIT) -> DerivedMetrics:
    angles_deg = tuple(math.degrees(angle) for angle in triangle.angles)
    return DerivedMetrics(
        perimeter=perimeter(triangle),
        semiperimeter=semiperimeter(triangle),
        altitude_c=altitude_to_c(triangle),
        inradius=inradius(triangle),
        circumradius=circumradius(triangle),
        side_type=classify_sides(triangle.a, triangle.b, triangle.c),
        angle_type=classify_angles(angles_deg),  # type: ignore[arg-type]
        comparison=real_world_comparison(triangle.area, unit),
    )


__all__ = [
    "ACUTE",
    "EQUILATERAL",
    "GENERIC_COMPARISON",
    "ISOSCELES",
    "OBTUSE",
    "REFERENCE_UNIT",
    "RIGHT",
    "SCALENE",
    "DerivedMetrics",
    "Unit",
    "altitude_to_c",
    "circumradius",
    "classify_angles",
    "classify_sides",
    "compute_metrics",
    "inradius",
    "perimeter",
    "real_world_comparison",
    "semiperimeter",
]

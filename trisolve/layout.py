"""Diagram layout: abstract vertex placement, fit-to-viewport transform and overlays.

The engine only produces geometry (screen-space points, radii, label boxes);
painting is left to the adapters in :mod:`trisolve.render`.  Abstract space has
``y`` growing upward, screen space has ``y`` growing downward.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from . import constructions
from .config import LayoutConfig, get_layout_config
from .constructions import Point
from .logging_utils import apply_debug_logging
from .metrics import circumradius, inradius
from .model import SolvedTriangle
from .printer import format_label

logger = logging.getLogger(__name__)

VERTEX_NAMES: Tuple[str, str, str] = ("A", "B", "C")

MIN_DRAWABLE_PX = 1.0

# side name -> endpoints, following "side x is opposite vertex X"
SIDE_EDGES: Tuple[Tuple[str, Tuple[str, str]], ...] = (
    ("c", ("A", "B")),
    ("b", ("A", "C")),
    ("a", ("B", "C")),
)

TextMeasure = Callable[[str, float], float]


@dataclass(frozen=True)
class OverlayToggles:
    altitude: bool = False
    centroid: bool = False
    incircle: bool = False
    circumcircle: bool = False

    @classmethod
    def from_names(cls, names: Sequence[str]) -> "OverlayToggles":
        known = {"altitude", "centroid", "incircle", "circumcircle"}
        selected = {name.strip().lower() for name in names if name.strip()}
        unknown = sorted(selected - known)
        if unknown:
            raise ValueError(f"unknown overlay(s): {', '.join(unknown)}")
        return cls(**{name: True for name in selected})


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


@dataclass(frozen=True)
class SideLabel:
    """Pill-shaped length label centred on an edge midpoint."""

    side: str
    text: str
    center: Point
    width: float
    height: float
    radius: float


@dataclass(frozen=True)
class VertexLabel:
    vertex: str
    text: str
    position: Point


@dataclass(frozen=True)
class FitTransform:
    """Uniform scale plus translation plus vertical flip into a viewport."""

    scale: float
    offset_x: float
    offset_y: float
    viewport_height: float

    def apply(self, point: Sequence[float]) -> Point:
        x, y = float(point[0]), float(point[1])
        return (
            x * self.scale + self.offset_x,
            self.viewport_height - (y * self.scale + self.offset_y),
        )

    def apply_many(self, points: np.ndarray) -> np.ndarray:
        pts = np.asarray(points, dtype=float)
        out = np.empty_like(pts)
        out[:, 0] = pts[:, 0] * self.scale + self.offset_x
        out[:, 1] = self.viewport_height - (pts[:, 1] * self.scale + self.offset_y)
        return out

    def scale_length(self, length: float) -> float:
        return length * self.scale


@dataclass(frozen=True)
class DiagramGeometry:
    width: float
    height: float
    transform: FitTransform
    vertices: Dict[str, Point]
    side_labels: Tuple[SideLabel, ...]
    vertex_labels: Tuple[VertexLabel, ...]
    altitude: Optional[Segment] = None
    centroid: Optional[Point] = None
    centroid_radius: float = 0.0
    incircle: Optional[Circle] = None
    circumcircle: Optional[Circle] = None
    abstract_vertices: Dict[str, Point] = field(default_factory=dict)

    @property
    def outline(self) -> Tuple[Point, Point, Point]:
        return tuple(self.vertices[name] for name in VERTEX_NAMES)  # type: ignore[return-value]


def place_vertices(triangle: SolvedTriangle) -> np.ndarray:
    """Return the abstract ``(3, 2)`` vertex array: A at the origin, B on +x."""

    return np.array(
        [
            [0.0, 0.0],
            [triangle.c, 0.0],
            [triangle.b * math.cos(triangle.A), triangle.b * math.sin(triangle.A)],
        ],
        dtype=float,
    )


def fit_transform(points: np.ndarray, width: float, height: float, padding: float) -> FitTransform:
    """Return the transform centring ``points`` inside ``width`` x ``height``.

    The scaled bounding box keeps at least ``padding`` from every viewport edge.
    A viewport too small for the padding clamps the drawable extent to
    ``MIN_DRAWABLE_PX`` and the triangle is still centred.
    """

    drawable_w = width - 2.0 * padding
    drawable_h = height - 2.0 * padding
    if drawable_w < MIN_DRAWABLE_PX or drawable_h < MIN_DRAWABLE_PX:
        logger.debug("Viewport %gx%g leaves no room for padding %g; clamping", width, height, padding)
        drawable_w = max(drawable_w, MIN_DRAWABLE_PX)
        drawable_h = max(drawable_h, MIN_DRAWABLE_PX)
    pts = np.asarray(points, dtype=float)
    min_x, min_y = (float(v) for v in pts.min(axis=0))
    max_x, max_y = (float(v) for v in pts.max(axis=0))
    span_x = max_x - min_x
    span_y = max_y - min_y
    if span_x <= 0.0 or span_y <= 0.0:
        raise ValueError("cannot fit a collapsed bounding box")

    scale = min(drawable_w / span_x, drawable_h / span_y)
    offset_x = (width - span_x * scale) / 2.0 - min_x * scale
    offset_y = (height - span_y * scale) / 2.0 - min_y * scale
    return FitTransform(scale=scale, offset_x=offset_x, offset_y=offset_y, viewport_height=float(height))


def default_text_width(text: str, font_px: float, char_width_em: float = 0.6) -> float:
    return len(text) * char_width_em * font_px


def _side_labels(
    triangle: SolvedTriangle,
    screen: Dict[str, Point],
    config: LayoutConfig,
    measure_text: TextMeasure,
) -> Tuple[SideLabel, ...]:
    lengths = {"a": triangle.a, "b": triangle.b, "c": triangle.c}
    labels = []
    for side, (start, end) in SIDE_EDGES:
        text = format_label(lengths[side])
        labels.append(
            SideLabel(
                side=side,
                text=text,
                center=constructions.midpoint(screen[start], screen[end]),
                width=measure_text(text, config.side_font_px) + config.pill_padding,
                height=config.pill_height,
                radius=config.pill_radius,
            )
        )
    return tuple(labels)


def _vertex_labels(screen: Dict[str, Point], config: LayoutConfig) -> Tuple[VertexLabel, ...]:
    center = constructions.centroid(*(screen[name] for name in VERTEX_NAMES))
    return tuple(
        VertexLabel(
            vertex=name,
            text=name,
            position=constructions.outward_offset(screen[name], center, config.vertex_label_offset),
        )
        for name in VERTEX_NAMES
    )


def compute_diagram(
    triangle: SolvedTriangle,
    width: float,
    height: float,
    overlays: Optional[OverlayToggles] = None,
    *,
    config: Optional[LayoutConfig] = None,
    measure_text: Optional[TextMeasure] = None,
) -> DiagramGeometry:
    """Lay out ``triangle`` in a ``width`` x ``height`` viewport.

    Overlays are computed in abstract space and only when toggled on.  Radii
    come from the derived metrics and are scaled by the same factor as the
    vertices.
    """

    config = config or get_layout_config()
    overlays = overlays or OverlayToggles()
    if measure_text is None:

        def measure_text(text: str, font_px: float) -> float:
            return default_text_width(text, font_px, config.char_width_em)

    abstract = place_vertices(triangle)
    transform = fit_transform(abstract, width, height, config.padding)
    screen_arr = transform.apply_many(abstract)
    abstract_pts = {name: (float(x), float(y)) for name, (x, y) in zip(VERTEX_NAMES, abstract)}
    screen = {name: (float(x), float(y)) for name, (x, y) in zip(VERTEX_NAMES, screen_arr)}
    logger.info(
        "Laid out triangle in %gx%g viewport: scale=%.6g offset=(%.6g, %.6g)",
        width,
        height,
        transform.scale,
        transform.offset_x,
        transform.offset_y,
    )

    v1, v2, v3 = abstract_pts["A"], abstract_pts["B"], abstract_pts["C"]

    altitude = None
    if overlays.altitude:
        foot = constructions.foot(v3, v1, v2)
        if foot is not None:
            altitude = Segment(start=screen["C"], end=transform.apply(foot))

    centroid = None
    if overlays.centroid:
        centroid = transform.apply(constructions.centroid(v1, v2, v3))

    incircle = None
    if overlays.incircle:
        center = constructions.incenter(v1, v2, v3, triangle.a, triangle.b, triangle.c)
        if center is not None:
            incircle = Circle(center=transform.apply(center), radius=transform.scale_length(inradius(triangle)))

    circumcircle = None
    if overlays.circumcircle:
        center = constructions.circumcenter(v1, v2, v3, eps=config.circumcenter_eps)
        if center is None:
            logger.info("Skipping circumcircle for near-collinear triangle")
        else:
            circumcircle = Circle(
                center=transform.apply(center),
                radius=transform.scale_length(circumradius(triangle)),
            )

    return DiagramGeometry(
        width=float(width),
        height=float(height),
        transform=transform,
        vertices=screen,
        side_labels=_side_labels(triangle, screen, config, measure_text),
        vertex_labels=_vertex_labels(screen, config),
        altitude=altitude,
        centroid=centroid,
        centroid_radius=config.centroid_radius if centroid is not None else 0.0,
        incircle=incircle,
        circumcircle=circumcircle,
        abstract_vertices=abstract_pts,
    )


apply_debug_logging(globals(), logger=logger)

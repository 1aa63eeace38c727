"""Matplotlib painter for :class:`~trisolve.layout.DiagramGeometry` and PNG export."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402
from matplotlib.patches import Circle as CirclePatch  # noqa: E402
from matplotlib.patches import FancyBboxPatch, Polygon  # noqa: E402

from ..layout import DiagramGeometry  # noqa: E402
from ..state import Snapshot  # noqa: E402

logger = logging.getLogger(__name__)

Color = Union[str, Tuple[float, float, float, float]]

ALTITUDE_COLOR = "#3b82f6"
CENTROID_COLOR = "#f97316"
INCIRCLE_COLOR = "#22c55e"
CIRCUMCIRCLE_COLOR = "#a855f7"


@dataclass(frozen=True)
class Theme:
    line: Color
    fill: Color
    text: Color
    pill: Color
    pill_text: Color
    background: Color


LIGHT_THEME = Theme(
    line="#0071e3",
    fill=(0.0, 113 / 255, 227 / 255, 0.08),
    text="#1d1d1f",
    pill=(1.0, 1.0, 1.0, 0.8),
    pill_text="#4b5563",
    background="#ffffff",
)

DARK_THEME = Theme(
    line="#409cff",
    fill=(64 / 255, 156 / 255, 1.0, 0.15),
    text="#ffffff",
    pill=(0.0, 0.0, 0.0, 0.6),
    pill_text="#ffffff",
    background="#1c1c1e",
)


def render_figure(diagram: DiagramGeometry, *, theme: Theme = LIGHT_THEME, dpi: float = 100.0) -> Figure:
    """Paint ``diagram`` onto a new figure sized to its viewport in pixels.

    The axes use screen coordinates directly (origin top-left, ``y`` down).
    """

    fig = plt.figure(figsize=(diagram.width / dpi, diagram.height / dpi), dpi=dpi)
    fig.patch.set_facecolor(theme.background)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.set_xlim(0.0, diagram.width)
    ax.set_ylim(diagram.height, 0.0)
    ax.set_aspect("equal")
    ax.axis("off")

    outline = list(diagram.outline)
    ax.add_patch(Polygon(outline, closed=True, facecolor=theme.fill, edgecolor="none", zorder=1))

    if diagram.altitude is not None:
        start, end = diagram.altitude.start, diagram.altitude.end
        ax.plot(
            [start[0], end[0]],
            [start[1], end[1]],
            color=ALTITUDE_COLOR,
            linewidth=2,
            linestyle=(0, (5, 5)),
            zorder=2,
        )
    if diagram.centroid is not None:
        ax.add_patch(CirclePatch(diagram.centroid, diagram.centroid_radius, color=CENTROID_COLOR, zorder=3))
    for circle, color in ((diagram.incircle, INCIRCLE_COLOR), (diagram.circumcircle, CIRCUMCIRCLE_COLOR)):
        if circle is None:
            continue
        ax.add_patch(CirclePatch(circle.center, circle.radius, fill=False, edgecolor=color, linewidth=2, zorder=2))

    ax.add_patch(
        Polygon(outline, closed=True, fill=False, edgecolor=theme.line, linewidth=3, joinstyle="round", zorder=4)
    )

    for label in diagram.side_labels:
        cx, cy = label.center
        ax.add_patch(
            FancyBboxPatch(
                (cx - label.width / 2.0, cy - label.height / 2.0),
                label.width,
                label.height,
                boxstyle=f"round,pad=0,rounding_size={label.radius}",
                facecolor=theme.pill,
                edgecolor="none",
                zorder=5,
            )
        )
        ax.text(cx, cy, label.text, color=theme.pill_text, fontsize=9, fontweight="bold",
                ha="center", va="center", zorder=6)

    for label in diagram.vertex_labels:
        x, y = label.position
        ax.text(x, y, label.text, color=theme.text, fontsize=10.5, fontweight="bold",
                ha="center", va="center", zorder=6)

    return fig


def export_png(
    snapshot: Snapshot,
    path: Union[str, Path],
    *,
    theme: Theme = LIGHT_THEME,
    dpi: float = 100.0,
) -> Optional[Path]:
    """Write the snapshot's diagram to ``path``; returns ``None`` when there is nothing to draw."""

    if snapshot.diagram is None:
        logger.warning("No diagram to export: %s", snapshot.display.error)
        return None
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_figure(snapshot.diagram, theme=theme, dpi=dpi)
    try:
        fig.savefig(output_path, format="png", dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    logger.info("Wrote diagram PNG to %s", output_path)
    return output_path

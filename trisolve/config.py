"""Configuration helpers for the diagram layout."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Screen-space constants of the diagram, in pixels unless noted."""

    padding: float = 60.0
    vertex_label_offset: float = 24.0
    pill_padding: float = 12.0
    pill_height: float = 20.0
    pill_radius: float = 6.0
    side_font_px: float = 12.0
    vertex_font_px: float = 14.0
    char_width_em: float = 0.6
    centroid_radius: float = 5.0
    # abstract-space determinant threshold below which no circumcircle is drawn
    circumcenter_eps: float = 1e-5


_LAYOUT_CONFIG = LayoutConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)

"""Rendering adapters that paint solved-triangle diagrams."""

from .mpl import DARK_THEME, LIGHT_THEME, Theme, export_png, render_figure
from .tikz import generate_tikz_code, generate_tikz_document, latex_escape

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
    "Theme",
    "export_png",
    "generate_tikz_code",
    "generate_tikz_document",
    "latex_escape",
    "render_figure",
]

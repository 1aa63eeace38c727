import pytest

from trisolve import AppState, recompute
from trisolve.printer import format_value
from trisolve.render import DARK_THEME, export_png, generate_tikz_code, generate_tikz_document, latex_escape, render_figure
from trisolve.render import tikz


def _snapshot(**overlays):
    return recompute(AppState().with_overlays(**overlays))


def test_tikz_code_draws_triangle_and_labels():
    snapshot = _snapshot()
    code = generate_tikz_code(snapshot.diagram)

    assert code.startswith("\\begin{tikzpicture}")
    assert code.endswith("\\end{tikzpicture}")
    for name in ("A", "B", "C"):
        assert f"\\coordinate ({name}) at (" in code
        assert f"{{{name}}};" in code
    assert "\\draw[carrier] (A) -- (B) -- (C) -- cycle;" in code
    assert "{5};" in code
    assert "circle" not in code


def test_tikz_code_includes_enabled_overlays():
    snapshot = _snapshot(altitude=True, centroid=True, incircle=True, circumcircle=True)
    code = generate_tikz_code(snapshot.diagram)

    assert "\\draw[aux, draw=blue!60]" in code
    assert "\\fill[orange]" in code
    assert "draw=green!60!black" in code
    assert "draw=violet" in code


def test_tikz_coordinates_flip_screen_y():
    snapshot = _snapshot()
    code = generate_tikz_code(snapshot.diagram)
    # A sits on the base, below C on screen, so its TikZ y is smaller
    line_a = next(line for line in code.splitlines() if "\\coordinate (A)" in line)
    line_c = next(line for line in code.splitlines() if "\\coordinate (C)" in line)
    y_a = float(line_a.split(",")[1].strip(" );"))
    y_c = float(line_c.split(",")[1].strip(" );"))
    assert y_a < y_c


def test_tikz_document_wraps_picture():
    document = generate_tikz_document(_snapshot(), problem_text="Sides 3 & 4 & 5")

    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\textbf{Problem:} Sides 3 \\& 4 \\& 5" in document
    assert "\\begin{tikzpicture}" in document
    assert document.rstrip().endswith("\\end{document}")


def test_tikz_document_rejects_failed_solve():
    snapshot = recompute(AppState().with_value("c", 100))
    with pytest.raises(ValueError):
        generate_tikz_document(snapshot)


def test_latex_escape():
    assert latex_escape("50% of a_b") == "50\\% of a\\_b"


def test_export_png_writes_image(tmp_path):
    snapshot = _snapshot(incircle=True, circumcircle=True, altitude=True, centroid=True)
    path = export_png(snapshot, tmp_path / "out" / "triangle.png", theme=DARK_THEME)

    assert path is not None
    data = path.read_bytes()
    assert data.startswith(b"\x89PNG\r\n\x1a\n")


def test_export_png_skips_failed_solve(tmp_path):
    snapshot = recompute(AppState().with_value("c", 100))
    assert export_png(snapshot, tmp_path / "nothing.png") is None
    assert not (tmp_path / "nothing.png").exists()


def test_render_figure_matches_viewport():
    import matplotlib.pyplot as plt

    snapshot = recompute(AppState().with_viewport(500, 300))
    fig = render_figure(snapshot.diagram, dpi=100)
    try:
        width, height = fig.get_size_inches()
        assert width == pytest.approx(5.0)
        assert height == pytest.approx(3.0)
    finally:
        plt.close(fig)


def test_tikz_numbers_share_the_step_formatter():
    document = generate_tikz_document(_snapshot())

    assert tikz.format_value is format_value
    assert "\\begin{minipage}[t]{15.875cm}" in document

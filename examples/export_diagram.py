"""Example: lay out an ASA triangle with every overlay and export PNG + TikZ."""

from pathlib import Path

from trisolve import AppState, recompute
from trisolve.render import export_png, generate_tikz_document


def main() -> None:
    state = (
        AppState()
        .with_mode("ASA")
        .with_value("angle_a", 70)
        .with_overlays(altitude=True, centroid=True, incircle=True, circumcircle=True)
        .with_viewport(800, 600)
    )
    snapshot = recompute(state)
    out_dir = Path("out")
    print("PNG:", export_png(snapshot, out_dir / "asa.png"))
    (out_dir / "asa.tex").write_text(generate_tikz_document(snapshot), encoding="utf-8")
    print("TikZ:", out_dir / "asa.tex")


if __name__ == "__main__":
    main()

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

from trisolve import AppState, OverlayToggles, SolveMode, recompute
from trisolve.metrics import Unit
from trisolve.render import DARK_THEME, LIGHT_THEME, export_png, generate_tikz_document

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_overlays(value: Optional[str]) -> OverlayToggles:
    if not value:
        return OverlayToggles()
    return OverlayToggles.from_names(value.split(","))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Solve a triangle from SSS, SAS or ASA measurements")
    parser.add_argument("mode", choices=[mode.value for mode in SolveMode], type=str.upper, help="Solve mode")
    parser.add_argument(
        "values",
        nargs=3,
        help="Three measurements in form order: SSS a b c; SAS a C b; ASA A c B (angles in degrees)",
    )
    parser.add_argument(
        "--unit",
        default="m",
        choices=[unit.value for unit in Unit],
        help="Display unit (default: m)",
    )
    parser.add_argument("--width", type=float, default=600.0, help="Diagram width in pixels (default: 600)")
    parser.add_argument("--height", type=float, default=400.0, help="Diagram height in pixels (default: 400)")
    parser.add_argument(
        "--show",
        help="Comma separated overlays: altitude,centroid,incircle,circumcircle",
    )
    parser.add_argument("--png", help="Write the diagram as a PNG image to the given path")
    parser.add_argument("--dark", action="store_true", help="Use the dark theme for the PNG export")
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the diagram to the given path",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        overlays = _parse_overlays(args.show)
    except ValueError as exc:
        parser.error(str(exc))
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")

    mode = SolveMode.parse(args.mode)
    state = AppState().with_mode(mode).with_unit(args.unit)
    for name, raw in zip(mode.field_names, args.values):
        state = state.with_value(name, raw)
    state = state.with_viewport(args.width, args.height)
    state = state.with_overlays(**asdict(overlays))

    snapshot = recompute(state)
    display = snapshot.display

    print(f"Mode: {mode.value} ({display.title})")
    if not snapshot.ok:
        assert snapshot.result.error is not None
        logger.error("Solve failed: %s", snapshot.result.error.kind.value)
        print(f"Error [{snapshot.result.error.kind.value}]: {display.error}")
        raise SystemExit(1)

    triangle = snapshot.result.unwrap()
    angle_a, angle_b, angle_c = triangle.angles_degrees()
    print(f"Sides: a={triangle.a:.4f} b={triangle.b:.4f} c={triangle.c:.4f} {display.length_unit}")
    print(f"Angles: A={angle_a:.4f}° B={angle_b:.4f}° C={angle_c:.4f}°")
    print(f"Area: {display.area} {display.area_unit}")
    print(f"Perimeter: {display.perimeter} {display.length_unit}")
    print(f"Altitude (h_c): {display.altitude} {display.length_unit}")
    print(f"Semi-perimeter: {display.semiperimeter} {display.length_unit}")
    print(f"Inradius: {display.inradius} {display.length_unit}")
    print(f"Circumradius: {display.circumradius} {display.length_unit}")
    print(f"Type: {display.side_type} / {display.angle_type}")
    print(f"Comparable to: {display.comparison}")
    print("Steps:")
    for line in display.steps:
        print(f"  {line}")

    if args.png:
        written = export_png(snapshot, args.png, theme=DARK_THEME if args.dark else LIGHT_THEME)
        print(f"PNG written to {written}")

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(generate_tikz_document(snapshot), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])

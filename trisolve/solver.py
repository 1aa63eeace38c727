"""Closed-form triangle solver for the SSS, SAS and ASA congruence forms."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from .logging_utils import apply_debug_logging
from .model import (
    DerivationStep,
    MeasurementSet,
    SolvedTriangle,
    SolveError,
    SolveErrorKind,
    SolveMode,
    SolveResult,
)
from .printer import format_degrees, format_value
from .validate import ValidationError, validate_measurements

logger = logging.getLogger(__name__)

MSG_TRIANGLE_INEQUALITY = "Impossible Triangle (Triangle Inequality)"
MSG_ANGLE_SUM = "Sum of angles A and B must be < 180"
MSG_DEGENERATE = "Invalid Dimensions"

ANGLE_SUM_TOL = 1e-6

_Solved = Tuple[SolvedTriangle, List[DerivationStep]]


class _SolveFailure(Exception):
    def __init__(self, kind: SolveErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def _acos_clamped(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def _law_of_cosines_angle(opposite: float, s1: float, s2: float) -> float:
    """Angle opposite ``opposite`` in a triangle with adjacent sides ``s1``, ``s2``."""

    return _acos_clamped((s1 * s1 + s2 * s2 - opposite * opposite) / (2.0 * s1 * s2))


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0.0


def _check_solved(triangle: SolvedTriangle) -> None:
    """Reject non-finite or non-positive results before anything is formatted."""

    if not _is_positive(triangle.area):
        raise _SolveFailure(SolveErrorKind.DEGENERATE_TRIANGLE, MSG_DEGENERATE)
    if not all(_is_positive(side) for side in triangle.sides):
        raise _SolveFailure(SolveErrorKind.DEGENERATE_TRIANGLE, MSG_DEGENERATE)
    if not all(_is_positive(angle) and angle < math.pi for angle in triangle.angles):
        raise _SolveFailure(SolveErrorKind.DEGENERATE_TRIANGLE, MSG_DEGENERATE)
    if abs(sum(triangle.angles) - math.pi) > ANGLE_SUM_TOL:
        raise _SolveFailure(SolveErrorKind.DEGENERATE_TRIANGLE, MSG_DEGENERATE)


def _step(name: str, formula: str, substitution: str, result: float, *, angle: bool = False) -> DerivationStep:
    if angle:
        text = format_degrees(math.degrees(result))
    else:
        text = format_value(result)
    return DerivationStep(name=name, formula=formula, substitution=substitution, result=result, result_text=text)


def _solve_sss(values: Dict[str, float]) -> _Solved:
    a, b, c = values["a"], values["b"], values["c"]
    if a + b <= c or a + c <= b or b + c <= a:
        raise _SolveFailure(SolveErrorKind.TRIANGLE_INEQUALITY_VIOLATION, MSG_TRIANGLE_INEQUALITY)

    A = _law_of_cosines_angle(a, b, c)
    B = _law_of_cosines_angle(b, a, c)
    C = math.pi - A - B
    s = (a + b + c) / 2.0
    area = math.sqrt(max(s * (s - a) * (s - b) * (s - c), 0.0))
    triangle = SolvedTriangle(a=a, b=b, c=c, A=A, B=B, C=C, area=area)
    _check_solved(triangle)

    fa, fb, fc, fs = (format_value(v) for v in (a, b, c, s))
    steps = [
        _step("Semi-perimeter", "s = (a + b + c) / 2", f"s = ({fa} + {fb} + {fc}) / 2", s),
        _step(
            "Law of Cosines",
            "A = acos((b² + c² - a²) / (2bc))",
            f"A = acos(({fb}² + {fc}² - {fa}²) / (2 × {fb} × {fc}))",
            A,
            angle=True,
        ),
        _step(
            "Law of Cosines",
            "B = acos((a² + c² - b²) / (2ac))",
            f"B = acos(({fa}² + {fc}² - {fb}²) / (2 × {fa} × {fc}))",
            B,
            angle=True,
        ),
        _step(
            "Angle Sum",
            "C = 180° - A - B",
            f"C = 180° - {format_degrees(math.degrees(A))} - {format_degrees(math.degrees(B))}",
            C,
            angle=True,
        ),
        _step(
            "Heron's Formula",
            "Area = √(s(s - a)(s - b)(s - c))",
            f"Area = √({fs}({fs} - {fa})({fs} - {fb})({fs} - {fc}))",
            area,
        ),
    ]
    return triangle, steps


def _solve_sas(values: Dict[str, float]) -> _Solved:
    a, b, C_deg = values["a"], values["b"], values["angle_c"]
    C = math.radians(C_deg)

    c = math.sqrt(max(a * a + b * b - 2.0 * a * b * math.cos(C), 0.0))
    if c <= 0.0:
        raise _SolveFailure(SolveErrorKind.DEGENERATE_TRIANGLE, MSG_DEGENERATE)
    A = _law_of_cosines_angle(a, b, c)
    B = math.pi - A - C
    area = 0.5 * a * b * math.sin(C)
    triangle = SolvedTriangle(a=a, b=b, c=c, A=A, B=B, C=C, area=area)
    _check_solved(triangle)

    fa, fb, fc, fC = format_value(a), format_value(b), format_value(c), format_value(C_deg)
    steps = [
        _step(
            "Law of Cosines",
            "c = √(a² + b² - 2ab·cos C)",
            f"c = √({fa}² + {fb}² - 2 × {fa} × {fb} × cos({fC}°))",
            c,
        ),
        _step(
            "Law of Cosines",
            "A = acos((b² + c² - a²) / (2bc))",
            f"A = acos(({fb}² + {fc}² - {fa}²) / (2 × {fb} × {fc}))",
            A,
            angle=True,
        ),
        _step(
            "Angle Sum",
            "B = 180° - A - C",
            f"B = 180° - {format_degrees(math.degrees(A))} - {fC}°",
            B,
            angle=True,
        ),
        _step("SAS Area", "Area = 0.5 × a × b × sin C", f"Area = 0.5 × {fa} × {fb} × sin({fC}°)", area),
    ]
    return triangle, steps


def _solve_asa(values: Dict[str, float]) -> _Solved:
    A_deg, B_deg, c = values["angle_a"], values["angle_b"], values["c"]
    if A_deg + B_deg >= 180.0:
        raise _SolveFailure(SolveErrorKind.INVALID_ANGLE_SUM, MSG_ANGLE_SUM)

    A = math.radians(A_deg)
    B = math.radians(B_deg)
    C = math.pi - A - B
    sin_c = math.sin(C)
    if sin_c <= 0.0:
        raise _SolveFailure(SolveErrorKind.DEGENERATE_TRIANGLE, MSG_DEGENERATE)
    a = c * math.sin(A) / sin_c
    b = c * math.sin(B) / sin_c
    area = 0.5 * b * c * math.sin(A)
    triangle = SolvedTriangle(a=a, b=b, c=c, A=A, B=B, C=C, area=area)
    _check_solved(triangle)

    fA, fB, fc = format_value(A_deg), format_value(B_deg), format_value(c)
    fC = format_value(math.degrees(C))
    steps = [
        _step("Angle Sum", "C = 180° - A - B", f"C = 180° - {fA}° - {fB}°", C, angle=True),
        _step("Law of Sines", "a = c × sin A / sin C", f"a = {fc} × sin({fA}°) / sin({fC}°)", a),
        _step("Law of Sines", "b = c × sin B / sin C", f"b = {fc} × sin({fB}°) / sin({fC}°)", b),
        _step(
            "ASA Area",
            "Area = 0.5 × b × c × sin A",
            f"Area = 0.5 × {format_value(b)} × {fc} × sin({fA}°)",
            area,
        ),
    ]
    return triangle, steps


_SOLVERS: Dict[SolveMode, Callable[[Dict[str, float]], _Solved]] = {
    SolveMode.SSS: _solve_sss,
    SolveMode.SAS: _solve_sas,
    SolveMode.ASA: _solve_asa,
}


def solve(
    mode: Union[SolveMode, str],
    measurements: Union[MeasurementSet, Mapping[str, Any]],
) -> SolveResult:
    """Solve the triangle described by ``measurements`` in ``mode``.

    Never raises for bad measurements: failures come back as a
    :class:`SolveResult` carrying a :class:`SolveError`.
    """

    mode = SolveMode.parse(mode)
    if not isinstance(measurements, MeasurementSet):
        measurements = MeasurementSet.from_mapping(measurements)

    logger.info("Solving %s triangle from %s", mode.value, measurements.as_dict())
    try:
        values = validate_measurements(mode, measurements)
        triangle, steps = _SOLVERS[mode](values)
    except ValidationError as exc:
        return SolveResult.failure(mode, SolveError(exc.kind, exc.message, exc.field))
    except _SolveFailure as exc:
        logger.warning("%s solve failed (%s): %s", mode.value, exc.kind.value, exc.message)
        return SolveResult.failure(mode, SolveError(exc.kind, exc.message))

    logger.info(
        "Solved %s triangle: sides=(%.6g, %.6g, %.6g) area=%.6g",
        mode.value,
        triangle.a,
        triangle.b,
        triangle.c,
        triangle.area,
    )
    return SolveResult.success(mode, triangle, tuple(steps))


apply_debug_logging(globals(), logger=logger)

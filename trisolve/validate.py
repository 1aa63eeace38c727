import logging
import math
import numbers
from typing import Dict, Optional

from .model import ANGLE, FieldSpec, MeasurementSet, SolveErrorKind, SolveMode

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    def __init__(self, kind: SolveErrorKind, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field


def coerce_float(value: object) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    if hasattr(value, "__float__"):
        try:
            return float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
    return None


def _check_field(spec: FieldSpec, raw: object) -> float:
    value = coerce_float(raw)
    if value is None or not math.isfinite(value):
        raise ValidationError(
            SolveErrorKind.MISSING_OR_INVALID_INPUT,
            f"{spec.label} must be a positive number",
            spec.name,
        )
    if spec.kind == ANGLE:
        if value <= 0.0 or value >= 180.0:
            raise ValidationError(
                SolveErrorKind.INVALID_ANGLE_RANGE,
                "Angle must be between 0 and 180",
                spec.name,
            )
    elif value <= 0.0:
        raise ValidationError(
            SolveErrorKind.MISSING_OR_INVALID_INPUT,
            f"{spec.label} must be a positive number",
            spec.name,
        )
    return value


def validate_measurements(mode: SolveMode, measurements: MeasurementSet) -> Dict[str, float]:
    """Return the numeric values of the fields ``mode`` requires.

    Raises :class:`ValidationError` for the first offending field, in form order.
    """

    values: Dict[str, float] = {}
    for spec in mode.fields:
        try:
            values[spec.name] = _check_field(spec, measurements.get(spec.name))
        except ValidationError as exc:
            logger.warning("Rejected %s input %s=%r: %s", mode.value, spec.name, measurements.get(spec.name), exc)
            raise
    return values

"""Core data structures for the solver pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

FieldName = str

SIDE = "side"
ANGLE = "angle"


@dataclass(frozen=True)
class FieldSpec:
    """Input field exposed by the measurement editor for one mode."""

    name: FieldName
    label: str
    kind: str  # "side" or "angle"
    placeholder: str
    minimum: float = 0.1
    step: float = 0.1
    maximum: Optional[float] = None


_SIDE_A = FieldSpec("a", "Side a", SIDE, "Length")
_SIDE_B = FieldSpec("b", "Side b", SIDE, "Length")
_SIDE_C = FieldSpec("c", "Side c", SIDE, "Length")
_ANGLE_A = FieldSpec("angle_a", "Angle α (A)", ANGLE, "Degrees", maximum=179.0)
_ANGLE_B = FieldSpec("angle_b", "Angle β (B)", ANGLE, "Degrees", maximum=179.0)
_ANGLE_C = FieldSpec("angle_c", "Angle γ (C)", ANGLE, "Degrees", maximum=179.0)

FIELD_SPECS: Dict[FieldName, FieldSpec] = {
    spec.name: spec for spec in (_SIDE_A, _SIDE_B, _SIDE_C, _ANGLE_A, _ANGLE_B, _ANGLE_C)
}


class SolveMode(Enum):
    """Congruence form the measurements are given in."""

    SSS = "SSS"
    SAS = "SAS"
    ASA = "ASA"

    @property
    def fields(self) -> Tuple[FieldSpec, ...]:
        return _MODE_FIELDS[self]

    @property
    def field_names(self) -> Tuple[FieldName, ...]:
        return tuple(spec.name for spec in _MODE_FIELDS[self])

    @property
    def title(self) -> str:
        return _MODE_TITLES[self]

    def default_measurements(self) -> "MeasurementSet":
        return MeasurementSet(**_MODE_DEFAULTS[self])

    @classmethod
    def parse(cls, value: object) -> "SolveMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"unknown solve mode {value!r}; expected one of SSS, SAS, ASA")


_MODE_FIELDS: Dict[SolveMode, Tuple[FieldSpec, ...]] = {
    SolveMode.SSS: (_SIDE_A, _SIDE_B, _SIDE_C),
    SolveMode.SAS: (_SIDE_A, _ANGLE_C, _SIDE_B),
    SolveMode.ASA: (_ANGLE_A, _SIDE_C, _ANGLE_B),
}

_MODE_TITLES: Dict[SolveMode, str] = {
    SolveMode.SSS: "Enter 3 Sides",
    SolveMode.SAS: "Side-Angle-Side",
    SolveMode.ASA: "Angle-Side-Angle",
}

_MODE_DEFAULTS: Dict[SolveMode, Dict[str, float]] = {
    SolveMode.SSS: {"a": 3.0, "b": 4.0, "c": 5.0},
    SolveMode.SAS: {"a": 5.0, "b": 7.0, "angle_c": 45.0},
    SolveMode.ASA: {"angle_a": 45.0, "c": 10.0, "angle_b": 45.0},
}


@dataclass(frozen=True)
class MeasurementSet:
    """Sparse set of user measurements; angles are in degrees.

    Values are stored as given so that validation can report non-numeric
    input; only the fields of the active :class:`SolveMode` are read.
    """

    a: Any = None
    b: Any = None
    c: Any = None
    angle_a: Any = None
    angle_b: Any = None
    angle_c: Any = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "MeasurementSet":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise KeyError(f"unknown measurement field(s): {', '.join(unknown)}")
        return cls(**dict(values))

    def with_value(self, name: FieldName, value: Any) -> "MeasurementSet":
        if name not in FIELD_SPECS:
            raise KeyError(f"unknown measurement field {name!r}")
        return replace(self, **{name: value})

    def get(self, name: FieldName) -> Any:
        return getattr(self, name)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass(frozen=True)
class SolvedTriangle:
    """Fully determined triangle; side ``a`` is opposite vertex ``A`` and so on.

    Angles are in radians.
    """

    a: float
    b: float
    c: float
    A: float
    B: float
    C: float
    area: float

    @property
    def sides(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    @property
    def angles(self) -> Tuple[float, float, float]:
        return (self.A, self.B, self.C)

    def angles_degrees(self) -> Tuple[float, float, float]:
        return tuple(math.degrees(angle) for angle in self.angles)  # type: ignore[return-value]


@dataclass(frozen=True)
class DerivationStep:
    """One displayed step: the formula, its substituted form and the outcome."""

    name: str
    formula: str
    substitution: str
    result: float
    result_text: str

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return f"{self.name}: {self.substitution} = {self.result_text}"


class SolveErrorKind(Enum):
    TRIANGLE_INEQUALITY_VIOLATION = "TriangleInequalityViolation"
    INVALID_ANGLE_RANGE = "InvalidAngleRange"
    INVALID_ANGLE_SUM = "InvalidAngleSum"
    DEGENERATE_TRIANGLE = "DegenerateTriangle"
    MISSING_OR_INVALID_INPUT = "MissingOrInvalidInput"


@dataclass(frozen=True)
class SolveError:
    kind: SolveErrorKind
    message: str
    field: Optional[FieldName] = None

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


class TriangleError(ValueError):
    """Raised by :meth:`SolveResult.unwrap` when the solve failed."""

    def __init__(self, error: SolveError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class SolveResult:
    """Tagged solver outcome: either a triangle with its steps or an error."""

    mode: SolveMode
    triangle: Optional[SolvedTriangle] = None
    error: Optional[SolveError] = None
    steps: Tuple[DerivationStep, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if (self.triangle is None) == (self.error is None):
            raise ValueError("SolveResult requires exactly one of triangle or error")
        if self.error is not None and self.steps:
            raise ValueError("failed SolveResult cannot carry derivation steps")

    @property
    def ok(self) -> bool:
        return self.triangle is not None

    def unwrap(self) -> SolvedTriangle:
        if self.triangle is None:
            assert self.error is not None
            raise TriangleError(self.error)
        return self.triangle

    @classmethod
    def success(
        cls, mode: SolveMode, triangle: SolvedTriangle, steps: Tuple[DerivationStep, ...]
    ) -> "SolveResult":
        return cls(mode=mode, triangle=triangle, steps=tuple(steps))

    @classmethod
    def failure(cls, mode: SolveMode, error: SolveError) -> "SolveResult":
        return cls(mode=mode, error=error)


__all__ = [
    "ANGLE",
    "SIDE",
    "DerivationStep",
    "FIELD_SPECS",
    "FieldName",
    "FieldSpec",
    "MeasurementSet",
    "SolveError",
    "SolveErrorKind",
    "SolveMode",
    "SolveResult",
    "SolvedTriangle",
    "TriangleError",
]

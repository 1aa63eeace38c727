from .model import (
    DerivationStep,
    FieldSpec,
    MeasurementSet,
    SolvedTriangle,
    SolveError,
    SolveErrorKind,
    SolveMode,
    SolveResult,
    TriangleError,
)
from .validate import validate_measurements, ValidationError
from .solver import solve
from .metrics import DerivedMetrics, Unit, compute_metrics, classify_angles, classify_sides, real_world_comparison
from .config import LayoutConfig, get_layout_config, set_layout_config
from .layout import (
    Circle,
    DiagramGeometry,
    FitTransform,
    OverlayToggles,
    Segment,
    SideLabel,
    VertexLabel,
    compute_diagram,
    fit_transform,
    place_vertices,
)
from .printer import format_stat, format_steps, PLACEHOLDER
from .state import AppState, DisplayValues, Session, Snapshot, recompute

__all__ = [
    'solve',
    'validate_measurements',
    'ValidationError',
    'DerivationStep',
    'FieldSpec',
    'MeasurementSet',
    'SolvedTriangle',
    'SolveError',
    'SolveErrorKind',
    'SolveMode',
    'SolveResult',
    'TriangleError',
    'DerivedMetrics',
    'Unit',
    'compute_metrics',
    'classify_angles',
    'classify_sides',
    'real_world_comparison',
    'LayoutConfig',
    'get_layout_config',
    'set_layout_config',
    'Circle',
    'DiagramGeometry',
    'FitTransform',
    'OverlayToggles',
    'Segment',
    'SideLabel',
    'VertexLabel',
    'compute_diagram',
    'fit_transform',
    'place_vertices',
    'format_stat',
    'format_steps',
    'PLACEHOLDER',
    'AppState',
    'DisplayValues',
    'Session',
    'Snapshot',
    'recompute',
]

"""Application state and the recompute pipeline feeding the rendering side.

Every update produces a new :class:`AppState`; :func:`recompute` turns a state
into a :class:`Snapshot` (solve result, metrics, diagram, display strings)
from scratch.  :class:`Session` keeps the current state and pushes snapshots to
subscribers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Tuple, Union

from .config import LayoutConfig
from .layout import DiagramGeometry, OverlayToggles, compute_diagram
from .metrics import DerivedMetrics, Unit, compute_metrics
from .model import FieldName, MeasurementSet, SolveMode, SolveResult
from .printer import PLACEHOLDER, format_stat, format_steps
from .solver import solve

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT: Tuple[float, float] = (600.0, 400.0)


@dataclass(frozen=True)
class AppState:
    mode: SolveMode = SolveMode.SSS
    measurements: MeasurementSet = field(default_factory=SolveMode.SSS.default_measurements)
    unit: Unit = Unit.METERS
    overlays: OverlayToggles = field(default_factory=OverlayToggles)
    viewport: Tuple[float, float] = DEFAULT_VIEWPORT

    def with_mode(self, mode: Union[SolveMode, str]) -> "AppState":
        """Switch mode and reset the measurements to that mode's defaults."""

        mode = SolveMode.parse(mode)
        return replace(self, mode=mode, measurements=mode.default_measurements())

    def with_value(self, name: FieldName, value: Any) -> "AppState":
        if name not in self.mode.field_names:
            raise KeyError(f"field {name!r} is not editable in {self.mode.value} mode")
        return replace(self, measurements=self.measurements.with_value(name, value))

    def with_unit(self, unit: Union[Unit, str]) -> "AppState":
        return replace(self, unit=Unit.parse(unit))

    def with_overlays(self, **toggles: bool) -> "AppState":
        return replace(self, overlays=replace(self.overlays, **toggles))

    def with_viewport(self, width: float, height: float) -> "AppState":
        return replace(self, viewport=(float(width), float(height)))


@dataclass(frozen=True)
class DisplayValues:
    """Text shown in the stat panel; numeric fields fall back to the placeholder."""

    area: str
    perimeter: str
    altitude: str
    semiperimeter: str
    inradius: str
    circumradius: str
    side_type: str
    angle_type: str
    comparison: str
    steps: Tuple[str, ...]
    error: Optional[str]
    length_unit: str
    area_unit: str
    unit_badge: str
    title: str


@dataclass(frozen=True)
class Snapshot:
    state: AppState
    result: SolveResult
    metrics: Optional[DerivedMetrics]
    diagram: Optional[DiagramGeometry]
    display: DisplayValues

    @property
    def ok(self) -> bool:
        return self.result.ok


def _display(state: AppState, result: SolveResult, metrics: Optional[DerivedMetrics]) -> DisplayValues:
    common = dict(
        length_unit=state.unit.suffix,
        area_unit=state.unit.area_suffix,
        unit_badge=state.unit.display_name,
        title=state.mode.title,
    )
    if result.triangle is None or metrics is None:
        assert result.error is not None
        return DisplayValues(
            area=PLACEHOLDER,
            perimeter=PLACEHOLDER,
            altitude=PLACEHOLDER,
            semiperimeter=PLACEHOLDER,
            inradius=PLACEHOLDER,
            circumradius=PLACEHOLDER,
            side_type=PLACEHOLDER,
            angle_type=PLACEHOLDER,
            comparison=PLACEHOLDER,
            steps=(),
            error=result.error.message,
            **common,
        )
    return DisplayValues(
        area=format_stat(result.triangle.area),
        perimeter=format_stat(metrics.perimeter),
        altitude=format_stat(metrics.altitude_c),
        semiperimeter=format_stat(metrics.semiperimeter),
        inradius=format_stat(metrics.inradius),
        circumradius=format_stat(metrics.circumradius),
        side_type=metrics.side_type,
        angle_type=metrics.angle_type,
        comparison=metrics.comparison,
        steps=tuple(format_steps(result.steps)),
        error=None,
        **common,
    )


def recompute(state: AppState, *, config: Optional[LayoutConfig] = None) -> Snapshot:
    """Run solve -> metrics -> layout for ``state``.

    Metrics and layout are skipped entirely when the solve fails.
    """

    result = solve(state.mode, state.measurements)
    metrics = None
    diagram = None
    if result.triangle is not None:
        metrics = compute_metrics(result.triangle, state.unit)
        width, height = state.viewport
        diagram = compute_diagram(result.triangle, width, height, state.overlays, config=config)
    else:
        logger.info("Solve failed; diagram and stats cleared")
    return Snapshot(
        state=state,
        result=result,
        metrics=metrics,
        diagram=diagram,
        display=_display(state, result, metrics),
    )


Subscriber = Callable[[Snapshot], None]


class Session:
    """Holds the current state and notifies subscribers after each recompute.

    Resize requests are coalesced: :meth:`resize` only records the latest
    viewport, :meth:`flush_frame` applies it once.
    """

    def __init__(self, state: Optional[AppState] = None, *, config: Optional[LayoutConfig] = None) -> None:
        self._config = config
        self._subscribers: List[Subscriber] = []
        self._pending_viewport: Optional[Tuple[float, float]] = None
        self.state = state or AppState()
        self.snapshot = recompute(self.state, config=self._config)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)
        callback(self.snapshot)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _apply(self, state: AppState) -> Snapshot:
        snapshot = recompute(state, config=self._config)
        self.state = state
        self.snapshot = snapshot
        for callback in list(self._subscribers):
            callback(self.snapshot)
        return self.snapshot

    def set_mode(self, mode: Union[SolveMode, str]) -> Snapshot:
        return self._apply(self.state.with_mode(mode))

    def set_value(self, name: FieldName, value: Any) -> Snapshot:
        return self._apply(self.state.with_value(name, value))

    def set_unit(self, unit: Union[Unit, str]) -> Snapshot:
        return self._apply(self.state.with_unit(unit))

    def toggle_overlay(self, name: str, enabled: bool) -> Snapshot:
        return self._apply(self.state.with_overlays(**{name: enabled}))

    def resize(self, width: float, height: float) -> None:
        self._pending_viewport = (float(width), float(height))

    def flush_frame(self) -> Optional[Snapshot]:
        if self._pending_viewport is None:
            return None
        width, height = self._pending_viewport
        self._pending_viewport = None
        return self._apply(self.state.with_viewport(width, height))

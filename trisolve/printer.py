from typing import Iterable, List, Optional

from .model import DerivationStep

PLACEHOLDER = "--"


def format_value(value: float) -> str:
    """Compact representation used inside substituted formulas."""

    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError("Cannot format non-finite value")
    formatted = f"{value:.4f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def format_stat(value: Optional[float]) -> str:
    """Two fixed decimals with thousands separators, or the placeholder."""

    if value is None:
        return PLACEHOLDER
    return f"{value:,.2f}"


def format_label(value: float) -> str:
    """At most two decimals with thousands separators (diagram side pills)."""

    formatted = f"{value:,.2f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted


def format_degrees(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}°"


def format_step(index: int, step: DerivationStep) -> str:
    return f"{index}. {step.name}: {step.substitution} = {step.result_text}"


def format_steps(steps: Iterable[DerivationStep]) -> List[str]:
    return [format_step(idx, step) for idx, step in enumerate(steps, start=1)]

import pytest

from trisolve import DerivationStep, format_stat, format_steps
from trisolve.printer import PLACEHOLDER, format_label, format_value


@pytest.mark.parametrize(
    "value, expected",
    [(3.0, "3"), (2.5, "2.5"), (1.23456, "1.2346"), (0.0, "0"), (-0.00001, "0"), (1234.5, "1234.5")],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_rejects_non_finite():
    with pytest.raises(ValueError):
        format_value(float("nan"))


@pytest.mark.parametrize(
    "value, expected",
    [(6.0, "6.00"), (10.825317547305483, "10.83"), (1234567.891, "1,234,567.89"), (None, PLACEHOLDER)],
)
def test_format_stat(value, expected):
    assert format_stat(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(5.0, "5"), (2.5, "2.5"), (4.949747, "4.95"), (1500.0, "1,500"), (1234.567, "1,234.57")],
)
def test_format_label(value, expected):
    assert format_label(value) == expected


def test_format_steps_numbers_each_step():
    steps = [
        DerivationStep("Angle Sum", "C = 180° - A - B", "C = 180° - 45° - 45°", 1.5708, "90.00°"),
        DerivationStep("Law of Sines", "a = c × sin A / sin C", "a = 10 × sin(45°) / sin(90°)", 7.07, "7.0711"),
    ]
    assert format_steps(steps) == [
        "1. Angle Sum: C = 180° - 45° - 45° = 90.00°",
        "2. Law of Sines: a = 10 × sin(45°) / sin(90°) = 7.0711",
    ]

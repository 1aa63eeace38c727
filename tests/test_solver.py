import math

import pytest

from trisolve import MeasurementSet, SolveErrorKind, SolveMode, TriangleError, solve


def _assert_error(result, kind):
    assert not result.ok
    assert result.triangle is None
    assert result.steps == ()
    assert result.error.kind is kind
    assert result.error.message


@pytest.mark.parametrize(
    "sides",
    [(3, 4, 5), (5, 5, 5), (2, 3, 4), (7, 10, 5), (1, 1, 1.9), (100.5, 80.25, 40.1)],
)
def test_sss_angle_sum_is_pi(sides):
    a, b, c = sides
    triangle = solve("SSS", {"a": a, "b": b, "c": c}).unwrap()
    assert math.isclose(sum(triangle.angles), math.pi, abs_tol=1e-6)
    assert all(0 < angle < math.pi for angle in triangle.angles)


def test_sss_three_four_five_is_right_angled_at_c():
    result = solve(SolveMode.SSS, MeasurementSet(a=3, b=4, c=5))

    assert result.ok
    triangle = result.triangle
    assert math.isclose(math.degrees(triangle.C), 90.0, abs_tol=1e-9)
    assert math.isclose(triangle.area, 6.0, abs_tol=1e-12)
    assert f"{triangle.area:.2f}" == "6.00"


def test_sss_equilateral_has_sixty_degree_angles():
    triangle = solve("SSS", {"a": 5, "b": 5, "c": 5}).unwrap()

    for angle in triangle.angles_degrees():
        assert math.isclose(angle, 60.0, abs_tol=1e-9)
    assert f"{triangle.area:.2f}" == "10.83"


def test_sss_triangle_inequality_boundary():
    _assert_error(solve("SSS", {"a": 1, "b": 2, "c": 3}), SolveErrorKind.TRIANGLE_INEQUALITY_VIOLATION)

    triangle = solve("SSS", {"a": 1, "b": 2, "c": 2.999}).unwrap()
    assert 0 < triangle.area < 0.1


@pytest.mark.parametrize("sides", [(10, 1, 1), (1, 10, 1), (1, 1, 10)])
def test_sss_rejects_each_inequality(sides):
    a, b, c = sides
    result = solve("SSS", {"a": a, "b": b, "c": c})
    _assert_error(result, SolveErrorKind.TRIANGLE_INEQUALITY_VIOLATION)
    assert result.error.message == "Impossible Triangle (Triangle Inequality)"


def test_sas_angle_range_boundary():
    _assert_error(solve("SAS", {"a": 1, "b": 1, "angle_c": 180}), SolveErrorKind.INVALID_ANGLE_RANGE)

    triangle = solve("SAS", {"a": 1, "b": 1, "angle_c": 179.999}).unwrap()
    assert triangle.area > 0
    assert triangle.c < 2.0


@pytest.mark.parametrize("angle", [0, -10, 200])
def test_sas_rejects_angles_outside_open_interval(angle):
    result = solve("SAS", {"a": 3, "b": 4, "angle_c": angle})
    _assert_error(result, SolveErrorKind.INVALID_ANGLE_RANGE)
    assert result.error.field == "angle_c"


def test_sas_right_angle_gives_hypotenuse():
    triangle = solve("SAS", {"a": 3, "b": 4, "angle_c": 90}).unwrap()

    assert math.isclose(triangle.c, 5.0, rel_tol=1e-12)
    assert math.isclose(triangle.area, 6.0, rel_tol=1e-12)
    assert math.isclose(sum(triangle.angles), math.pi, abs_tol=1e-12)


def test_asa_angle_sum_boundary():
    result = solve("ASA", {"angle_a": 90, "angle_b": 90, "c": 1})
    _assert_error(result, SolveErrorKind.INVALID_ANGLE_SUM)
    assert result.error.message == "Sum of angles A and B must be < 180"

    triangle = solve("ASA", {"angle_a": 89.999, "angle_b": 89.999, "c": 1}).unwrap()
    assert triangle.area > 0


def test_asa_law_of_sines():
    triangle = solve("ASA", {"angle_a": 45, "angle_b": 45, "c": 10}).unwrap()

    assert math.isclose(math.degrees(triangle.C), 90.0, abs_tol=1e-9)
    assert math.isclose(triangle.a, 10 / math.sqrt(2), rel_tol=1e-12)
    assert math.isclose(triangle.b, triangle.a, rel_tol=1e-12)
    assert math.isclose(triangle.area, 25.0, rel_tol=1e-12)


@pytest.mark.parametrize(
    "mode, values",
    [
        ("SSS", {"a": 3, "b": 4, "c": 6}),
        ("SAS", {"a": 5, "b": 7, "angle_c": 45}),
        ("SAS", {"a": 2, "b": 9, "angle_c": 130}),
        ("ASA", {"angle_a": 45, "angle_b": 45, "c": 10}),
        ("ASA", {"angle_a": 20, "angle_b": 110, "c": 3.5}),
    ],
)
def test_cross_mode_consistency(mode, values):
    original = solve(mode, values).unwrap()
    again = solve("SSS", {"a": original.a, "b": original.b, "c": original.c}).unwrap()

    for lhs, rhs in zip(original.angles, again.angles):
        assert math.isclose(lhs, rhs, abs_tol=1e-6)
    assert math.isclose(original.area, again.area, rel_tol=1e-6)


@pytest.mark.parametrize(
    "values, field",
    [
        ({"a": 3, "b": 4}, "c"),
        ({"a": "abc", "b": 4, "c": 5}, "a"),
        ({"a": 3, "b": -4, "c": 5}, "b"),
        ({"a": 3, "b": 0, "c": 5}, "b"),
        ({"a": 3, "b": 4, "c": float("nan")}, "c"),
        ({"a": 3, "b": 4, "c": float("inf")}, "c"),
        ({"a": True, "b": 4, "c": 5}, "a"),
        ({"a": "", "b": 4, "c": 5}, "a"),
    ],
)
def test_missing_or_invalid_input(values, field):
    result = solve("SSS", values)
    _assert_error(result, SolveErrorKind.MISSING_OR_INVALID_INPUT)
    assert result.error.field == field


def test_missing_angle_is_invalid_input():
    result = solve("ASA", {"angle_a": 30, "c": 2})
    _assert_error(result, SolveErrorKind.MISSING_OR_INVALID_INPUT)
    assert result.error.field == "angle_b"


def test_numeric_strings_are_accepted():
    triangle = solve("sss", {"a": "3", "b": " 4 ", "c": "5.0"}).unwrap()
    assert math.isclose(triangle.area, 6.0)


def test_fields_of_other_modes_are_ignored():
    result = solve("SSS", {"a": 3, "b": 4, "c": 5, "angle_a": 500})
    assert result.ok


def test_degenerate_area_is_rejected():
    # angle A underflows to zero radians once converted, collapsing the area
    result = solve("ASA", {"angle_a": 1e-323, "angle_b": 30, "c": 1})
    _assert_error(result, SolveErrorKind.DEGENERATE_TRIANGLE)
    assert result.error.message == "Invalid Dimensions"


@pytest.mark.parametrize(
    "mode, measurements",
    [
        ("SSS", {"a": 1e80, "b": 1e80, "c": 1e80}),
        ("SAS", {"a": 1e200, "b": 1e200, "angle_c": 60}),
        ("ASA", {"angle_a": 89.999, "angle_b": 89.999, "c": 1e306}),
        ("SSS", {"a": 1e308, "b": 1e308, "c": 1e308}),
    ],
)
def test_overflowing_results_are_degenerate(mode, measurements):
    result = solve(mode, measurements)
    _assert_error(result, SolveErrorKind.DEGENERATE_TRIANGLE)
    assert result.error.message == "Invalid Dimensions"


def test_failed_result_unwrap_raises():
    result = solve("SSS", {"a": 1, "b": 2, "c": 3})
    with pytest.raises(TriangleError) as excinfo:
        result.unwrap()
    assert excinfo.value.error.kind is SolveErrorKind.TRIANGLE_INEQUALITY_VIOLATION


def test_unknown_mode_is_a_programming_error():
    with pytest.raises(ValueError):
        solve("AAA", {"a": 1})


def test_steps_are_named_and_ordered():
    sss = solve("SSS", {"a": 3, "b": 4, "c": 5})
    assert [step.name for step in sss.steps] == [
        "Semi-perimeter",
        "Law of Cosines",
        "Law of Cosines",
        "Angle Sum",
        "Heron's Formula",
    ]
    assert sss.steps[0].substitution == "s = (3 + 4 + 5) / 2"
    assert sss.steps[0].result == 6.0
    assert sss.steps[-1].result_text == "6"

    sas = solve("SAS", {"a": 5, "b": 7, "angle_c": 45})
    assert [step.name for step in sas.steps] == ["Law of Cosines", "Law of Cosines", "Angle Sum", "SAS Area"]

    asa = solve("ASA", {"angle_a": 45, "angle_b": 45, "c": 10})
    assert [step.name for step in asa.steps] == ["Angle Sum", "Law of Sines", "Law of Sines", "ASA Area"]
    assert asa.steps[0].result_text == "90.00°"


def test_solve_is_idempotent():
    values = {"a": 5, "b": 7, "angle_c": 45}
    first = solve("SAS", values)
    second = solve("SAS", values)
    assert first == second

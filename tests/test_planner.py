import math

import pytest

from powersvd import AlgorithmConfig, InvalidParameterError, plan_iterations


def test_plan_iterations_matches_formula():
    # ceil(ln(2 / 0.05) / 0.05) = ceil(73.78)
    assert plan_iterations(0.05, 0.01, 1.0, 2) == 74
    # ceil(ln(4**0.5 / 0.5) / 0.5) = ceil(2.77)
    assert plan_iterations(0.5, 0.1, 0.5, 4) == 3


def test_plan_iterations_can_be_zero():
    assert plan_iterations(1.0, 0.5, 1.0, 1) == 0


def test_plan_iterations_grows_with_columns_and_accuracy():
    assert plan_iterations(0.1, 0.1, 1.0, 1000) > plan_iterations(0.1, 0.1, 1.0, 10)
    assert plan_iterations(0.01, 0.1, 1.0, 10) > plan_iterations(0.1, 0.1, 1.0, 10)


def test_plan_iterations_handles_large_exponent():
    expected = math.ceil((3.0 * math.log(10**6) - math.log(0.2)) / 0.2)
    assert plan_iterations(0.2, 0.1, 3.0, 10**6) == expected


@pytest.mark.parametrize(
    "epsilon, alpha, beta, m, bad",
    [
        (-0.1, 0.1, 1.0, 5, "epsilon"),
        (0.0, 0.1, 1.0, 5, "epsilon"),
        (1.5, 0.1, 1.0, 5, "epsilon"),
        (float("nan"), 0.1, 1.0, 5, "epsilon"),
        (0.1, 1.5, 1.0, 5, "alpha"),
        (0.1, -0.2, 1.0, 5, "alpha"),
        (0.1, 0.0, 1.0, 5, "alpha"),
        (0.1, 0.1, 0.2, 5, "beta"),
        (0.1, 0.1, float("inf"), 5, "beta"),
        (0.1, 0.1, 1.0, 0, "m"),
        (0.1, 0.1, 1.0, 2.0, "m"),
    ],
)
def test_plan_iterations_rejects_out_of_range(epsilon, alpha, beta, m, bad):
    with pytest.raises(InvalidParameterError) as excinfo:
        plan_iterations(epsilon, alpha, beta, m)
    assert excinfo.value.parameter == bad
    assert bad in str(excinfo.value)


def test_plan_iterations_rejects_non_numeric():
    with pytest.raises(InvalidParameterError) as excinfo:
        plan_iterations("small", 0.1, 1.0, 5)
    assert excinfo.value.parameter == "epsilon"


def test_config_validate_uses_planner_checks():
    AlgorithmConfig(epsilon=0.1, alpha=0.1, beta=1.0).validate(10)
    with pytest.raises(InvalidParameterError):
        AlgorithmConfig(epsilon=0.1, alpha=0.1, beta=0.4).validate(10)

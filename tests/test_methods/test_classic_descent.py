import numpy as np
import pytest

from boxopt import (
    CallableFunction,
    ClassicGradientDescent,
    DifferenceNormStopCriterion,
    GradNormStopCriterion,
    Region,
    Status,
)


def shifted_sphere(center):
    c = np.asarray(center, dtype=float)
    return CallableFunction(
        "shifted sphere",
        c.size,
        lambda x: float((x - c) @ (x - c)),
        lambda x: 2 * (x - c),
    )


def test_exact_line_search_solves_isotropic_quadratic_in_one_step():
    f = shifted_sphere([1.0, -2.0])
    region = Region([(-5.0, 5.0), (-5.0, 5.0)])
    method = ClassicGradientDescent()
    res = method.optimise([3.0, 3.0], region, f, DifferenceNormStopCriterion(1e-8, 100))
    assert np.allclose(res.history[1], [1.0, -2.0], atol=1e-9)
    assert np.allclose(res.x, [1.0, -2.0], atol=1e-9)
    assert res.nit <= 3
    assert res.status is Status.CONVERGED


def test_step_is_limited_by_nearest_bound():
    # unconstrained minimum (10, 0) lies outside the box
    f = shifted_sphere([10.0, 0.0])
    region = Region([(-5.0, 5.0), (-5.0, 5.0)])
    method = ClassicGradientDescent()
    res = method.optimise([0.0, 1.0], region, f, DifferenceNormStopCriterion(1e-8, 100))
    assert res.history[1] == pytest.approx(np.array([5.0, 0.5]), abs=1e-9)
    assert all(region.contains(p) for p in res.history)
    assert res.x[0] == pytest.approx(5.0, abs=1e-9)


def test_zero_gradient_commits_same_point():
    f = shifted_sphere([0.0, 0.0])
    region = Region([(-1.0, 1.0), (-1.0, 1.0)])
    method = ClassicGradientDescent()
    res = method.optimise([0.0, 0.0], region, f, DifferenceNormStopCriterion(1e-8, 10))
    assert len(res.history) == 2
    assert np.array_equal(res.history[1], res.history[0])
    assert method.alpha == 0.0


def test_grad_norm_criterion_stops_before_cap(valley, box):
    method = ClassicGradientDescent()
    res = method.optimise([2.0, 1.9], box, valley, GradNormStopCriterion(1e-2, 1000))
    assert res.nit < 1000
    assert np.linalg.norm(valley.gradient(res.x)) < 1e-2


def test_every_step_decreases_objective(valley, box):
    method = ClassicGradientDescent()
    res = method.optimise([2.0, 1.9], box, valley, DifferenceNormStopCriterion(1e-8, 50))
    values = [valley(p) for p in res.history]
    assert all(b <= a + 1e-15 for a, b in zip(values, values[1:]))


def test_name_and_iteration_count(valley, box):
    method = ClassicGradientDescent()
    assert method.get_name() == "ClassicGradientDescent"
    method.optimise([2.0, 1.9], box, valley, GradNormStopCriterion(0.0, 7))
    assert method.iterations == 7
    assert len(method.points) == 8


def test_gradient_evaluated_once_per_iteration():
    calls = []

    def grad(x):
        calls.append(1)
        return np.array([2.0 * x[0], 8.0 * x[1]])

    f = CallableFunction("ellipse", 2, lambda x: float(x[0] ** 2 + 4.0 * x[1] ** 2), grad)
    region = Region([(-5.0, 5.0), (-5.0, 5.0)])
    method = ClassicGradientDescent()
    method.optimise([3.0, 2.0], region, f, DifferenceNormStopCriterion(0.0, 5))
    assert method.iterations == 5
    assert len(calls) == 5

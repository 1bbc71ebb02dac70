"""End-to-end runs on the quartic valley (0.1x - y)^4 + y^2 in [-5, 5]^2."""

import numpy as np

from boxopt import (
    AdamGradientDescent,
    ClassicGradientDescent,
    DifferenceNormStopCriterion,
    RandomSearch,
    Status,
)

START = np.array([2.0, 1.9])


def test_classic_descent_reaches_valley_floor(valley, box):
    method = ClassicGradientDescent()
    res = method.optimise(START, box, valley, DifferenceNormStopCriterion(1e-8, 1000))
    # the quartic floor is flat, so the run creeps along it until the cap
    assert res.nit == 1000
    assert res.status is Status.MAX_ITER
    assert res.fun < 1e-6
    assert res.fun < valley(START)
    assert all(box.contains(p) for p in res.history)


def test_adam_ends_inside_region(valley, box):
    method = AdamGradientDescent(alpha=1.0, beta1=0.8, beta2=0.99, epsilon=1e-8)
    res = method.optimise(START, box, valley, DifferenceNormStopCriterion(1e-8, 1000))
    assert res.status in (Status.CONVERGED, Status.MAX_ITER, Status.BOUNDARY)
    assert box.contains(method.best_point)
    assert all(box.contains(p) for p in res.history)
    assert res.nit == method.iterations <= 1000


def test_random_search_is_deterministic_and_monotone(valley, box):
    crit = DifferenceNormStopCriterion(1e-8, 1000)
    runs = [
        RandomSearch(alpha=0.9, p=0.5, delta=0.1, seed=228).optimise(START, box, valley, crit)
        for _ in range(2)
    ]
    first, second = runs
    assert first.nit == second.nit
    assert all(np.array_equal(x, y) for x, y in zip(first.history, second.history))
    values = [valley(p) for p in first.history]
    assert all(b <= a for a, b in zip(values, values[1:]))
    assert first.fun < valley(START)

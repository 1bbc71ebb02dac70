import numpy as np
import pytest

from boxopt.core import DimensionMismatchError
from boxopt.functions import (
    FUNCTIONS,
    CallableFunction,
    QuarticValley,
    SineCosineSine,
    available_functions,
    get_function,
)


def central_difference(f, x, eps=1e-6):
    grad = np.zeros_like(x)
    for i in range(x.size):
        e = np.zeros_like(x)
        e[i] = eps
        grad[i] = (f(x + e) - f(x - e)) / (2 * eps)
    return grad


def test_catalogue_has_six_functions():
    assert len(available_functions()) == 6
    dims = {key: cls().dim for key, cls in FUNCTIONS.items()}
    assert dims["sine_cosine_sine"] == 3
    assert dims["weighted_sphere"] == 4


@pytest.mark.parametrize("key", sorted(FUNCTIONS))
def test_gradients_match_finite_differences(key, rng):
    f = get_function(key)
    x = rng.uniform(-1.5, 1.5, size=f.dim)
    assert np.allclose(f.gradient(x), central_difference(f, x), atol=1e-5)


def test_sine_cosine_sine_gradient_has_all_components():
    f = SineCosineSine()
    x = np.array([0.3, 0.7, 1.1])
    expected = np.array(
        [
            np.cos(0.3) * np.cos(0.7) * np.sin(1.1),
            -np.sin(0.3) * np.sin(0.7) * np.sin(1.1),
            np.sin(0.3) * np.cos(0.7) * np.cos(1.1),
        ]
    )
    assert np.allclose(f.gradient(x), expected)


def test_quartic_valley_values():
    f = QuarticValley()
    assert f([0.0, 0.0]) == 0.0
    assert f.evaluate([10.0, 0.0]) == pytest.approx(1.0)
    assert f.name == "(0.1x - y)^4 + y^2"


@pytest.mark.parametrize("key", sorted(FUNCTIONS))
def test_wrong_dimension_raises(key):
    f = get_function(key)
    bad = np.zeros(f.dim + 1)
    with pytest.raises(DimensionMismatchError):
        f(bad)
    with pytest.raises(DimensionMismatchError):
        f.gradient(bad)


def test_duplicate_is_independent():
    f = QuarticValley()
    copy = f.duplicate()
    assert copy is not f
    assert type(copy) is QuarticValley
    copy.name = "renamed"
    assert f.name == "(0.1x - y)^4 + y^2"


def test_callable_function_adapter():
    f = CallableFunction("sum of squares", 3, lambda x: float(x @ x), lambda x: 2 * x)
    x = np.array([1.0, -2.0, 0.5])
    assert f(x) == pytest.approx(5.25)
    assert np.allclose(f.gradient(x), 2 * x)
    dup = f.duplicate()
    assert dup is not f
    assert dup(x) == f(x)
    with pytest.raises(DimensionMismatchError):
        f([1.0, 2.0])


def test_callable_function_rejects_bad_dim():
    with pytest.raises(ValueError):
        CallableFunction("empty", 0, lambda x: 0.0, lambda x: x)


def test_unknown_function_key():
    with pytest.raises(ValueError, match="Unsupported function"):
        get_function("ackley")

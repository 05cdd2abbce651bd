import pytest

from algodrills.numeric import Interpolator, derivative, gradient_descent, lerp


def test_interpolator_midpoint():
    assert Interpolator().value(0.0, 5.0, 0.5) == pytest.approx(2.5)


@pytest.mark.parametrize("a, b", [(0.0, 5.0), (-3.5, 8.25), (10, 2)])
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0) == pytest.approx(a)
    assert lerp(a, b, 1) == pytest.approx(b)


def test_lerp_is_monotonic_between_endpoints():
    points = [lerp(1.0, 9.0, t / 10) for t in range(11)]
    assert points == sorted(points)
    assert all(1.0 <= p <= 9.0 for p in points)


def test_interpolator_uses_custom_blend():
    def nearest(a, b, t):
        return a if t < 0.5 else b

    interp = Interpolator(nearest)
    assert interp.value("low", "high", 0.2) == "low"
    assert interp.value("low", "high", 0.7) == "high"


def test_derivative_of_linear_function():
    assert derivative(lambda x: 2 * x + 1, 4.0) == pytest.approx(2.0, abs=1e-6)


def test_derivative_sign_follows_slope():
    def f(x):
        return (x - 1) ** 2

    assert derivative(f, -2.0) < 0
    assert derivative(f, 3.0) > 0


def test_gradient_descent_parabola():
    result = gradient_descent(lambda x: (x - 3) ** 2, 0.0, 0.01)
    assert abs(result - 3) <= 0.02


def test_gradient_descent_finds_local_minimum():
    def f(x):
        return x * x * x + 4 * (x - 2) * (x - 2) + x - 5

    x = gradient_descent(f, 5.0, 0.01)
    assert f(x) <= f(x - 0.05)
    assert f(x) <= f(x + 0.05)


def test_gradient_descent_rejects_non_positive_step():
    with pytest.raises(ValueError):
        gradient_descent(lambda x: x * x, 1.0, 0.0)
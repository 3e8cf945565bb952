import numpy as np
import pytest

from fmin.optimize import IterationRecord, gradient_descent, gradient_descent_line_search

HIMMELBLAU_START = np.array([4.9515014216303825, 0.07301421370357275])
BANANA_START = np.array([1.6084564160555601, -1.5980748860165477])


def booth(x: np.ndarray, fxprime: np.ndarray) -> float:
    a = x[0] + 2 * x[1] - 7
    b = 2 * x[0] + x[1] - 5
    fxprime[0] = 2 * a + 4 * b
    fxprime[1] = 4 * a + 2 * b
    return a * a + b * b


def banana(x: np.ndarray, fxprime: np.ndarray) -> float:
    fxprime[0] = 400 * x[0] ** 3 - 400 * x[1] * x[0] + 2 * x[0] - 2
    fxprime[1] = 200 * x[1] - 200 * x[0] ** 2
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def sphere(x: np.ndarray, fxprime: np.ndarray) -> float:
    fxprime[:] = 2 * x
    return float(x @ x)


@pytest.mark.parametrize("optimizer", [gradient_descent, gradient_descent_line_search])
def test_booth_converges(optimizer):
    res = optimizer(booth, HIMMELBLAU_START, lr=0.1)
    assert res.fx == pytest.approx(0.0, abs=1e-5)
    assert res.success


@pytest.mark.parametrize("optimizer", [gradient_descent, gradient_descent_line_search])
def test_banana_converges(optimizer):
    res = optimizer(banana, BANANA_START, lr=0.0003, maxiter=50000)
    assert res.fx == pytest.approx(0.0, abs=1e-3)


@pytest.mark.parametrize("optimizer", [gradient_descent, gradient_descent_line_search])
def test_quadratic_1d(optimizer):
    def loss(x, fxprime):
        fxprime[0] = 2 * (x[0] - 10)
        return (x[0] - 10) ** 2

    res = optimizer(loss, np.array([0.0]), lr=0.5)
    assert res.fx == pytest.approx(0.0, abs=1e-5)


@pytest.mark.parametrize("optimizer", [gradient_descent, gradient_descent_line_search])
def test_zero_gradient_start_does_not_move(optimizer):
    x0 = np.array([0.0, 0.0])
    res = optimizer(sphere, x0)
    assert res.nit == 1
    assert res.success
    assert np.array_equal(res.x, x0)


@pytest.mark.parametrize("optimizer", [gradient_descent, gradient_descent_line_search])
def test_invalid_parameters_raise(optimizer):
    with pytest.raises(ValueError):
        optimizer(sphere, np.array([1.0]), lr=0.0)
    with pytest.raises(ValueError):
        optimizer(sphere, np.array([1.0]), maxiter=-1)


def test_fixed_rate_result_is_consistent_after_iteration_cap():
    res = gradient_descent(booth, HIMMELBLAU_START, lr=0.01, maxiter=5)
    assert res.nit == 5
    assert not res.success
    grad = np.zeros(2)
    assert res.fx == booth(res.x.copy(), grad)
    assert np.array_equal(res.fxprime, grad)


def test_fixed_rate_history_tracks_learn_rate():
    history: list[IterationRecord] = []
    res = gradient_descent(sphere, np.array([1.0, -1.0]), lr=0.25, history=history)
    assert len(history) == res.nit
    assert all(rec.learn_rate == 0.25 for rec in history)
    assert np.array_equal(history[0].x, [1.0, -1.0])
    assert np.allclose(history[1].x, [0.5, -0.5])


def test_fixed_rate_deterministic():
    res1 = gradient_descent(sphere, np.array([0.5, -0.25]), lr=0.2, maxiter=50)
    res2 = gradient_descent(sphere, np.array([0.5, -0.25]), lr=0.2, maxiter=50)
    assert np.array_equal(res1.x, res2.x)
    assert res1.fx == res2.fx


def test_line_search_history_collects_function_calls():
    history: list[IterationRecord] = []
    res = gradient_descent_line_search(booth, HIMMELBLAU_START, history=history)
    assert len(history) == res.nit
    assert np.array_equal(history[0].function_calls[0], HIMMELBLAU_START)
    for rec in history:
        assert len(rec.function_calls) >= 1
        assert rec.alpha == rec.learn_rate
    # Later iterations only hold that iteration's samples.
    assert all(
        not np.array_equal(call, HIMMELBLAU_START)
        for rec in history[1:]
        for call in rec.function_calls
    )


def test_line_search_stops_when_search_fails():
    def wrong_sign(x, fxprime):
        fxprime[:] = -2 * x
        return float(x @ x)

    res = gradient_descent_line_search(wrong_sign, np.array([1.0]))
    assert res.nit == 1
    assert not res.success
    assert res.message == "Line search failed to find a Wolfe step."
    assert np.array_equal(res.x, [1.0])
    assert res.fx == 1.0


def test_line_search_fewer_iterations_than_fixed_rate():
    fixed = gradient_descent(booth, HIMMELBLAU_START, lr=0.01, maxiter=10_000)
    searched = gradient_descent_line_search(booth, HIMMELBLAU_START)
    assert fixed.success and searched.success
    assert searched.nit < fixed.nit

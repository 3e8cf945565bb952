"""Steepest-descent optimizers."""

from __future__ import annotations

from typing import List, Optional

from ..logging import get_logger
from .core import (
    GRAD_TOL,
    Array,
    IterationRecord,
    Objective,
    OptimizeResult,
    State,
    check_convergence,
    default_maxiter,
)
from .line_search import wolfe_line_search
from .utils import norm2, scale, weighted_sum, zeros

logger = get_logger(__name__)


def gradient_descent(
    f: Objective,
    x0: Array,
    maxiter: Optional[int] = None,
    lr: float = 1e-3,
    tol: float = GRAD_TOL,
    history: Optional[List[IterationRecord]] = None,
) -> OptimizeResult:
    """Gradient descent with a fixed learning rate.

    Each iteration evaluates ``f`` and steps ``x -= lr * grad``. The run
    stops before stepping once the gradient norm is ``<= tol``, or after
    ``maxiter`` iterations (default ``100 * len(x0)``), in which case the
    final point is evaluated once more so the result is consistent.
    """
    if lr <= 0:
        raise ValueError(f"lr must be positive, got {lr}.")
    current = State.allocate(x0)
    maxiter = default_maxiter(maxiter, current.x.size, 100)

    converged = False
    nit = 0
    while nit < maxiter:
        current.evaluate(f)
        if history is not None:
            history.append(IterationRecord.snapshot(current, learn_rate=lr))
        nit += 1
        if check_convergence(norm2(current.fxprime), tol):
            converged = True
            break
        weighted_sum(current.x, 1.0, current.x, -lr, current.fxprime)

    if not converged:
        current.evaluate(f)

    result = OptimizeResult.from_state(current, nit, tol)
    logger.debug("gradient_descent: %s (nit=%d, fx=%g)", result.message, nit, result.fx)
    return result


def gradient_descent_line_search(
    f: Objective,
    x0: Array,
    maxiter: Optional[int] = None,
    lr: float = 1.0,
    c1: float = 1e-3,
    c2: float = 0.1,
    tol: float = GRAD_TOL,
    history: Optional[List[IterationRecord]] = None,
) -> OptimizeResult:
    """Steepest descent with the step chosen by a strong Wolfe line search.

    ``lr`` is only the first trial step; later searches start from the
    previous accepted step. The run ends when the gradient norm is
    ``<= tol``, when a search fails, or after ``maxiter`` iterations
    (default ``100 * len(x0)``).

    With ``history``, each record's ``function_calls`` lists every point the
    objective was evaluated at during that iteration.
    """
    if lr <= 0:
        raise ValueError(f"lr must be positive, got {lr}.")
    current = State.allocate(x0)
    next_state = State.allocate(current.x)
    n = current.x.size
    maxiter = default_maxiter(maxiter, n, 100)
    pk = zeros(n)

    samples: Optional[List[Array]] = None
    if history is not None:
        samples = [current.x.copy()]
    current.evaluate(f)

    step = lr
    message = None
    nit = 0
    while nit < maxiter:
        scale(pk, current.fxprime, -1.0)
        step = wolfe_line_search(f, pk, current, next_state, step, c1, c2, samples)
        if history is not None:
            history.append(
                IterationRecord.snapshot(
                    current, alpha=step, learn_rate=step, function_calls=samples
                )
            )
            samples = []
        nit += 1

        if step == 0.0:
            message = "Line search failed to find a Wolfe step."
            logger.debug("Line search failed at iteration %d, stopping.", nit)
            break
        current, next_state = next_state, current
        if check_convergence(norm2(current.fxprime), tol):
            break

    result = OptimizeResult.from_state(current, nit, tol, message)
    logger.debug(
        "gradient_descent_line_search: %s (nit=%d, fx=%g)", result.message, nit, result.fx
    )
    return result


__all__ = ["gradient_descent", "gradient_descent_line_search"]

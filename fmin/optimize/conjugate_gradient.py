"""Conjugate gradient methods.

``conjugate_gradient`` minimizes a general smooth objective with
Polak-Ribiere (PR+) directions and a strong Wolfe line search.
``conjugate_gradient_solve`` is the classical linear CG recurrence for
symmetric positive (semi-)definite systems ``A x = b``; it needs no line
search because the exact step along each direction is known.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Union

import numpy as np

from ..logging import get_logger
from .core import (
    GRAD_TOL,
    RESIDUAL_TOL,
    Array,
    IterationRecord,
    Objective,
    OptimizeResult,
    SolveRecord,
    State,
    check_convergence,
    default_maxiter,
)
from .line_search import wolfe_line_search
from .utils import check_vector, dot, gemv, norm2, scale, weighted_sum, zeros

logger = get_logger(__name__)


def conjugate_gradient(
    f: Objective,
    x0: Array,
    maxiter: Optional[int] = None,
    tol: float = GRAD_TOL,
    history: Optional[List[IterationRecord]] = None,
) -> OptimizeResult:
    """Nonlinear conjugate gradient (PR+) with strong Wolfe line search.

    The step estimate is warm-started from the previous search. A failed
    search (step ``0``) resets the direction to steepest descent instead of
    stopping the run. ``maxiter`` defaults to ``20 * len(x0)``.
    """
    current = State.allocate(x0)
    next_state = State.allocate(current.x)
    n = current.x.size
    maxiter = default_maxiter(maxiter, n, 20)
    yk = zeros(n)
    pk = zeros(n)

    current.evaluate(f)
    scale(pk, current.fxprime, -1.0)

    a = 1.0
    nit = 0
    while nit < maxiter:
        a = wolfe_line_search(f, pk, current, next_state, a)
        if history is not None:
            history.append(IterationRecord.snapshot(current, alpha=a))

        if a == 0.0:
            logger.debug("Line search failed at iteration %d, restarting along -grad.", nit)
            scale(pk, current.fxprime, -1.0)
        else:
            weighted_sum(yk, 1.0, next_state.fxprime, -1.0, current.fxprime)
            delta = dot(current.fxprime, current.fxprime)
            beta = max(0.0, dot(yk, next_state.fxprime) / delta) if delta > 0 else 0.0
            weighted_sum(pk, beta, pk, -1.0, next_state.fxprime)
            current, next_state = next_state, current

        nit += 1
        if check_convergence(norm2(current.fxprime), tol):
            break

    if history is not None:
        history.append(IterationRecord.snapshot(current, alpha=a))

    result = OptimizeResult.from_state(current, nit, tol)
    logger.debug("conjugate_gradient: %s (nit=%d, fx=%g)", result.message, nit, result.fx)
    return result


def conjugate_gradient_solve(
    A: Array,
    b: Array,
    x: Union[Array, MutableSequence[float]],
    history: Optional[List[SolveRecord]] = None,
    tol: float = RESIDUAL_TOL,
) -> Union[Array, MutableSequence[float]]:
    """Solve ``A x = b`` by linear conjugate gradient.

    Runs at most ``len(b)`` iterations and stops once the residual norm is
    ``<= tol``. The solution is written into ``x`` and ``x`` is returned. A
    float64 ndarray is iterated on directly; a list (or other mutable
    sequence) is copied to an array and overwritten with the result. Other
    dtypes raise ``ValueError`` rather than truncating the solution. The
    (possibly unconverged) solution is always returned; compare ``A @ x``
    against ``b`` to judge it.

    When ``history`` is given, it receives a :class:`SolveRecord` before each
    update and one after the loop.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    n = check_vector("b", b)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A must be a square matrix, got shape {A.shape}.")
    if A.shape[0] != n:
        raise ValueError(f"A has shape {A.shape} but b has length {n}.")
    target = x
    if isinstance(x, np.ndarray):
        if x.dtype != np.float64:
            raise ValueError(f"x must have dtype float64 to be updated in place, got {x.dtype}.")
    elif isinstance(x, MutableSequence):
        x = np.array(x, dtype=float)
    else:
        raise ValueError(f"x must be an ndarray or a mutable sequence, got {type(x).__name__}.")
    check_vector("x", x, n)

    r = zeros(n)
    Ap = zeros(n)
    gemv(Ap, A, x)
    weighted_sum(r, 1.0, b, -1.0, Ap)
    p = r.copy()
    rs_old = dot(r, r)
    alpha = 0.0

    if np.sqrt(rs_old) > tol:
        for _ in range(n):
            gemv(Ap, A, p)
            curvature = dot(p, Ap)
            if curvature == 0.0:
                logger.debug("Zero curvature along search direction, stopping.")
                break
            alpha = rs_old / curvature
            if history is not None:
                history.append(SolveRecord(x=x.copy(), p=p.copy(), alpha=alpha))

            weighted_sum(x, 1.0, x, alpha, p)
            weighted_sum(r, 1.0, r, -alpha, Ap)
            rs_new = dot(r, r)
            if np.sqrt(rs_new) <= tol:
                break

            weighted_sum(p, 1.0, r, rs_new / rs_old, p)
            rs_old = rs_new
        else:
            logger.debug(
                "conjugate_gradient_solve: residual %g above tolerance after %d iterations.",
                np.sqrt(rs_old),
                n,
            )

    if history is not None:
        history.append(SolveRecord(x=x.copy(), p=p.copy(), alpha=alpha))
    if target is not x:
        target[:] = x.tolist()
    return target


__all__ = ["conjugate_gradient", "conjugate_gradient_solve"]

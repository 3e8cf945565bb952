"""Strong Wolfe line search by bracketing and zoom (Nocedal & Wright, p. 59-60)."""

from __future__ import annotations

from typing import List, Optional

from ..logging import get_logger
from .core import Array, Objective, State
from .utils import check_vector, dot, weighted_sum

logger = get_logger(__name__)

MAX_BRACKET_ITER = 10
MAX_ZOOM_ITER = 16


def wolfe_line_search(
    f: Objective,
    pk: Array,
    current: State,
    next_state: State,
    a: float = 1.0,
    c1: float = 1e-6,
    c2: float = 0.1,
    samples: Optional[List[Array]] = None,
) -> float:
    """Search along ``pk`` for a step satisfying the strong Wolfe conditions.

    Parameters
    ----------
    f:
        Objective ``f(x, fxprime) -> float`` writing its gradient into
        ``fxprime``.
    pk:
        Search direction, left untouched.
    current:
        Point, value and gradient at step zero.
    next_state:
        Overwritten at every trial; on return it holds the point at the
        accepted step (or the last trial when the search fails).
    a:
        First trial step.
    c1, c2:
        Sufficient-decrease and curvature constants, ``0 < c1 < c2 < 1``.
    samples:
        When given, a copy of every trial point is appended to it.

    Returns
    -------
    float
        The accepted step, which meets both conditions, or ``0.0`` when
        either the expansion or the zoom budget ran out first.
    """
    if not (0 < c1 < c2 < 1):
        raise ValueError("Require 0 < c1 < c2 < 1 for Wolfe conditions.")
    n = check_vector("pk", pk)
    for name, vec in (
        ("current.x", current.x),
        ("current.fxprime", current.fxprime),
        ("next_state.x", next_state.x),
        ("next_state.fxprime", next_state.fxprime),
    ):
        check_vector(name, vec, n)

    phi0 = current.fx
    dphi0 = dot(current.fxprime, pk)

    def evaluate(step: float) -> tuple[float, float]:
        weighted_sum(next_state.x, 1.0, current.x, step, pk)
        if samples is not None:
            samples.append(next_state.x.copy())
        phi = next_state.evaluate(f)
        return phi, dot(next_state.fxprime, pk)

    def zoom(a_lo: float, a_hi: float, phi_lo: float) -> float:
        for _ in range(MAX_ZOOM_ITER):
            step = 0.5 * (a_lo + a_hi)
            phi, dphi = evaluate(step)
            if phi > phi0 + c1 * step * dphi0 or phi >= phi_lo:
                a_hi = step
            else:
                if abs(dphi) <= -c2 * dphi0:
                    return step
                if dphi * (a_hi - a_lo) >= 0:
                    a_hi = a_lo
                a_lo = step
                phi_lo = phi
        logger.debug("Zoom exhausted %d bisections without a Wolfe step.", MAX_ZOOM_ITER)
        return 0.0

    a_prev = 0.0
    phi_prev = phi0
    for iteration in range(MAX_BRACKET_ITER):
        phi, dphi = evaluate(a)
        if phi > phi0 + c1 * a * dphi0 or (iteration > 0 and phi >= phi_prev):
            return zoom(a_prev, a, phi_prev)
        if abs(dphi) <= -c2 * dphi0:
            return a
        if dphi >= 0:
            return zoom(a, a_prev, phi)
        a_prev = a
        phi_prev = phi
        a *= 2.0

    logger.debug("Bracketing exhausted %d expansions without a Wolfe step.", MAX_BRACKET_ITER)
    return 0.0


__all__ = ["MAX_BRACKET_ITER", "MAX_ZOOM_ITER", "wolfe_line_search"]

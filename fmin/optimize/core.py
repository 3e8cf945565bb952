"""Core interfaces shared across the optimization routines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .utils import approx_grad, check_vector

Array = np.ndarray
Objective = Callable[[Array, Array], float]
ValueFunction = Callable[[Array], float]
Gradient = Callable[[Array], Array]

GRAD_TOL = 1e-5
RESIDUAL_TOL = 1e-10
ATOL = 1e-12


@dataclass
class State:
    """Point, objective value and gradient from a single evaluation.

    Optimizers allocate two of these per run and swap them by reference,
    so ``x`` and ``fxprime`` are written in place and never reallocated.
    """

    x: Array
    fx: float
    fxprime: Array

    @classmethod
    def allocate(cls, x0: Array) -> "State":
        x = np.array(x0, dtype=float)
        if x.ndim != 1:
            raise ValueError(f"Initial point must be 1-D, got shape {x.shape}.")
        return cls(x=x, fx=0.0, fxprime=np.zeros_like(x))

    def evaluate(self, f: Objective) -> float:
        self.fx = float(f(self.x, self.fxprime))
        return self.fx


@dataclass
class OptimizeResult:
    """Result returned by every optimizer in this package.

    ``x``, ``fx`` and ``fxprime`` describe the best point found. A result is
    returned even when the iteration cap is hit; check ``success`` (or the
    gradient norm) before trusting it.
    """

    x: Array
    fx: float
    fxprime: Array
    nit: int
    success: bool
    message: str
    grad_norm: float

    @classmethod
    def from_state(
        cls, state: State, nit: int, tol: float, message: Optional[str] = None
    ) -> "OptimizeResult":
        grad_norm = float(np.linalg.norm(state.fxprime))
        success = check_convergence(grad_norm, tol)
        if success:
            message = "Gradient tolerance satisfied."
        elif message is None:
            message = "Maximum iterations reached."
        return cls(
            x=state.x,
            fx=float(state.fx),
            fxprime=state.fxprime,
            nit=nit,
            success=success,
            message=message,
            grad_norm=grad_norm,
        )


@dataclass
class IterationRecord:
    """Snapshot of one optimizer iteration, stored in a caller's history list."""

    x: Array
    fx: float
    fxprime: Array
    alpha: Optional[float] = None
    learn_rate: Optional[float] = None
    function_calls: List[Array] = field(default_factory=list)

    @classmethod
    def snapshot(cls, state: State, **extras) -> "IterationRecord":
        return cls(x=state.x.copy(), fx=state.fx, fxprime=state.fxprime.copy(), **extras)


@dataclass
class SolveRecord:
    """Snapshot of one linear conjugate gradient iteration."""

    x: Array
    p: Array
    alpha: float


@dataclass(frozen=True)
class Problem:
    """Value function with an optional analytic gradient.

    Use :func:`as_objective` to turn it into the ``f(x, fxprime)`` form the
    optimizers expect.
    """

    fun: ValueFunction
    grad: Optional[Gradient] = None
    dim: Optional[int] = None


def as_objective(problem: Problem) -> Objective:
    """Adapt a :class:`Problem` to the output-parameter objective contract.

    Without ``problem.grad`` the gradient is approximated by central
    differences, costing ``2 * n`` extra evaluations per call.
    """

    def objective(x: Array, fxprime: Array) -> float:
        if problem.dim is not None:
            check_vector("x", x, problem.dim)
        if problem.grad is not None:
            fxprime[:] = problem.grad(x)
        else:
            fxprime[:] = approx_grad(problem.fun, x)
        return float(problem.fun(x))

    return objective


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if gradient norm satisfies tolerance."""
    return grad_norm <= max(tol, ATOL)


def default_maxiter(maxiter: Optional[int], n: int, per_dim: int) -> int:
    """Resolve the iteration cap, which defaults to ``per_dim * n``."""
    if maxiter is None:
        return per_dim * n
    if maxiter <= 0:
        raise ValueError(f"maxiter must be positive, got {maxiter}.")
    return int(maxiter)


__all__ = [
    "ATOL",
    "Array",
    "GRAD_TOL",
    "Gradient",
    "IterationRecord",
    "Objective",
    "OptimizeResult",
    "Problem",
    "RESIDUAL_TOL",
    "SolveRecord",
    "State",
    "ValueFunction",
    "as_objective",
    "check_convergence",
    "default_maxiter",
]

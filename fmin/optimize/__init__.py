"""Gradient-based minimization and linear conjugate gradient.

Objectives take the point and a gradient buffer, fill the buffer in place
and return the value.

Example
-------
>>> import numpy as np
>>> from fmin.optimize import conjugate_gradient
>>> def booth(x, fxprime):
...     a = x[0] + 2 * x[1] - 7
...     b = 2 * x[0] + x[1] - 5
...     fxprime[0] = 2 * a + 4 * b
...     fxprime[1] = 4 * a + 2 * b
...     return a * a + b * b
>>> res = conjugate_gradient(booth, np.array([4.95, 0.07]))
>>> bool(res.fx < 1e-5)
True
"""

from .conjugate_gradient import conjugate_gradient, conjugate_gradient_solve
from .core import (
    ATOL,
    GRAD_TOL,
    RESIDUAL_TOL,
    IterationRecord,
    OptimizeResult,
    Problem,
    SolveRecord,
    State,
    as_objective,
    check_convergence,
)
from .gradient import gradient_descent, gradient_descent_line_search
from .line_search import wolfe_line_search
from .utils import approx_grad

__all__ = [
    "ATOL",
    "GRAD_TOL",
    "IterationRecord",
    "OptimizeResult",
    "Problem",
    "RESIDUAL_TOL",
    "SolveRecord",
    "State",
    "approx_grad",
    "as_objective",
    "check_convergence",
    "conjugate_gradient",
    "conjugate_gradient_solve",
    "gradient_descent",
    "gradient_descent_line_search",
    "wolfe_line_search",
]

"""fmin - unconstrained minimization and linear conjugate gradient on NumPy."""

__version__ = "0.1.0"

from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    IterationRecord,
    OptimizeResult,
    Problem,
    SolveRecord,
    State,
    as_objective,
    conjugate_gradient,
    conjugate_gradient_solve,
    gradient_descent,
    gradient_descent_line_search,
    wolfe_line_search,
)

__all__ = [
    "IterationRecord",
    "OptimizeResult",
    "Problem",
    "SolveRecord",
    "State",
    "as_objective",
    "configure_logging",
    "conjugate_gradient",
    "conjugate_gradient_solve",
    "get_logger",
    "gradient_descent",
    "gradient_descent_line_search",
    "set_log_level",
    "wolfe_line_search",
]

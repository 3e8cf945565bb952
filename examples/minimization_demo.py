"""
Example: Unconstrained minimization with fmin

Minimizes the Rosenbrock function with each descent method and solves a
small symmetric positive-definite system with linear conjugate gradient.
"""

import numpy as np

from fmin import (
    IterationRecord,
    SolveRecord,
    conjugate_gradient,
    conjugate_gradient_solve,
    gradient_descent,
    gradient_descent_line_search,
)


def rosenbrock(x, fxprime):
    fxprime[0] = 400 * x[0] ** 3 - 400 * x[1] * x[0] + 2 * x[0] - 2
    fxprime[1] = 200 * x[1] - 200 * x[0] ** 2
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def example_descent_methods():
    """Example: Compare the three descent methods on Rosenbrock."""
    print("=" * 60)
    print("Example 1: Descent methods on the Rosenbrock function")
    print("=" * 60)

    x0 = np.array([1.6084564160555601, -1.5980748860165477])
    runs = [
        ("Gradient descent", gradient_descent, {"lr": 0.0003}),
        ("Gradient descent w/ line search", gradient_descent_line_search, {}),
        ("Conjugate gradient", conjugate_gradient, {}),
    ]
    for name, optimizer, kwargs in runs:
        result = optimizer(rosenbrock, x0, maxiter=50000, **kwargs)
        print(f"{name}:")
        print(f"  x = {result.x}, f(x) = {result.fx:.3e}")
        print(f"  Iterations: {result.nit} ({result.message})")
    print()


def example_history():
    """Example: Inspect the path taken by conjugate gradient."""
    print("=" * 60)
    print("Example 2: Recording optimizer history")
    print("=" * 60)

    history: list[IterationRecord] = []
    conjugate_gradient(rosenbrock, np.array([-1.2, 1.0]), maxiter=200, history=history)
    for i, record in enumerate(history[:5]):
        print(f"  iter {i}: f = {record.fx:.4f}, alpha = {record.alpha:.4g}")
    print(f"  ... {len(history)} records, final f = {history[-1].fx:.3e}")
    print()


def example_linear_solve():
    """Example: Solve A x = b for a symmetric positive-definite A."""
    print("=" * 60)
    print("Example 3: Linear conjugate gradient")
    print("=" * 60)

    A = np.array([[10.0, 8.0], [8.0, 10.0]])
    b = np.array([34.0, 38.0])
    history: list[SolveRecord] = []
    x = conjugate_gradient_solve(A, b, np.array([-9.08, -7.83]), history=history)
    print(f"  Solution: x = {x}")
    print(f"  Residual norm: {np.linalg.norm(A @ x - b):.2e}")
    print(f"  Steps: {len(history) - 1}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("fmin - Minimization Examples")
    print("=" * 60 + "\n")

    example_descent_methods()
    example_history()
    example_linear_solve()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)

"""Vector helpers used on the optimizers' hot paths.

The level-1/level-2 routines write into caller-supplied buffers so an
iteration never allocates a new state vector. They are thin wrappers over
NumPy ufuncs with ``out=`` and keep the argument order of the classic BLAS
calls (``scale(out, v, c)``, ``weighted_sum(out, w1, v1, w2, v2)``,
``gemv(out, A, x)``).
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

Array = np.ndarray


def zeros(n: int) -> Array:
    return np.zeros(n, dtype=float)


def dot(a: Array, b: Array) -> float:
    return float(np.dot(a, b))


def norm2(a: Array) -> float:
    return float(np.linalg.norm(a))


def scale(out: Array, v: Array, c: float) -> Array:
    """``out = c * v``."""
    return np.multiply(v, c, out=out)


def weighted_sum(out: Array, w1: float, v1: Array, w2: float, v2: Array) -> Array:
    """``out = w1 * v1 + w2 * v2``; ``out`` may alias either input."""
    if out is v2:
        w1, v1, w2, v2 = w2, v2, w1, v1
    np.multiply(v1, w1, out=out)
    out += w2 * v2
    return out


def gemv(out: Array, A: Array, x: Array) -> Array:
    """``out = A @ x``."""
    return np.matmul(A, x, out=out)


def check_vector(name: str, vec: Array, n: Optional[int] = None) -> int:
    """Validate that ``vec`` is 1-D (and of length ``n``); return its length."""
    shape = np.shape(vec)
    if len(shape) != 1:
        raise ValueError(f"{name} must be 1-D, got shape {shape}.")
    if n is not None and shape[0] != n:
        raise ValueError(f"{name} has length {shape[0]}, expected {n}.")
    return shape[0]


def approx_grad(
    fun: Callable[[Array], float], x: Array, eps: float = 1e-6
) -> Array:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size for finite differences.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    grad = np.zeros_like(x)
    probe = x.copy()
    for i in range(x.size):
        probe[i] = x[i] + eps
        f_plus = fun(probe)
        probe[i] = x[i] - eps
        f_minus = fun(probe)
        probe[i] = x[i]
        grad[i] = (f_plus - f_minus) / (2.0 * eps)
    return grad


__all__ = [
    "Array",
    "approx_grad",
    "check_vector",
    "dot",
    "gemv",
    "norm2",
    "scale",
    "weighted_sum",
    "zeros",
]

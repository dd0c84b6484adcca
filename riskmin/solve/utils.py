"""Finite-difference helpers for checking collaborator gradients."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .core import Array

Objective = Callable[[Array], float]


def approx_grad(
    fun: Objective, x: Array, eps: float = 1e-6, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated. May have any shape; the
        result has the same shape.
    eps:
        Perturbation size for finite differences.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    grad = np.zeros_like(x)
    point = x.copy()
    flat = point.reshape(-1)
    out = grad.reshape(-1)
    evals = 0
    for i in range(flat.size):
        orig = flat[i]
        flat[i] = orig + eps
        fx_plus = fun(point)
        flat[i] = orig - eps
        fx_minus = fun(point)
        flat[i] = orig
        evals += 2
        out[i] = (fx_plus - fx_minus) / (2.0 * eps)
    if return_evals:
        return grad, evals
    return grad


def check_grad(
    value_and_grad: Callable[[Array, Array], float],
    fun: Objective,
    x: Array,
    eps: float = 1e-6,
) -> float:
    """Return the max absolute gap between an analytic and a numeric gradient.

    ``value_and_grad(g, x)`` must write the analytic gradient into ``g``.
    """
    x = np.asarray(x, dtype=float)
    g = np.empty_like(x)
    value_and_grad(g, x)
    return float(np.max(np.abs(g - approx_grad(fun, x, eps=eps))))


__all__ = ["approx_grad", "check_grad"]

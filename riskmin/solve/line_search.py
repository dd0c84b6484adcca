"""Armijo backtracking line search working in preallocated buffers."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..errors import ConfigurationError, LineSearchFailure
from .core import Array


def xmcy(out: Array, x: Array, alpha: float, y: Array) -> Array:
    """Write ``x - alpha * y`` into ``out`` without allocating."""
    np.multiply(y, alpha, out=out)
    np.subtract(x, out, out=out)
    return out


def backtracking_armijo(
    objective: Callable[[Array], float],
    theta: Array,
    value: float,
    grad: Array,
    direction: Array,
    out: Array,
    armijo: float = 0.5,
    beta: float = 0.5,
    iteration: Optional[int] = None,
) -> tuple[float, float, int]:
    """Find a step ``alpha`` in (0, 1] with sufficient decrease along ``-direction``.

    Starting from ``alpha = 1`` the step is multiplied by ``beta`` until

        objective(theta - alpha * direction) <= value - armijo * alpha * (direction . grad)

    holds. The accepted trial point is left in ``out``; ``theta`` is never
    written.

    Parameters
    ----------
    objective:
        Returns the full objective (risk plus regularizer) at a point.
    theta:
        Current parameters.
    value:
        Objective value at ``theta``.
    grad:
        Gradient at ``theta``.
    direction:
        Search direction ``p``. The caller guarantees ``p . grad > 0``.
    out:
        Buffer receiving the trial parameters. Must not alias ``theta`` or
        ``direction``.
    armijo, beta:
        Sufficient-decrease coefficient and backtracking ratio, both in (0, 1).
    iteration:
        Iteration number reported by :class:`LineSearchFailure`.

    Returns
    -------
    tuple[float, float, int]
        The accepted step, the objective value at ``out`` and the number of
        objective evaluations.

    Raises
    ------
    LineSearchFailure
        If ``alpha`` falls to machine epsilon of ``theta.dtype`` without the
        condition holding.
    """
    if not (0 < armijo < 1):
        raise ConfigurationError("armijo", "armijo must be a real value in (0, 1).")
    if not (0 < beta < 1):
        raise ConfigurationError("beta", "beta must be a real value in (0, 1).")

    dtype = theta.dtype.type
    eps = np.finfo(theta.dtype).eps
    armijo = dtype(armijo)
    beta = dtype(beta)
    dv = dtype(np.vdot(direction, grad))

    alpha = dtype(1)
    xmcy(out, theta, alpha, direction)
    trial = objective(out)
    nfev = 1
    while not trial <= value - armijo * alpha * dv:
        if not alpha > eps:
            raise LineSearchFailure(float(alpha), iteration=iteration)
        alpha *= beta
        xmcy(out, theta, alpha, direction)
        trial = objective(out)
        nfev += 1
    return float(alpha), float(trial), nfev


__all__ = ["backtracking_armijo", "xmcy"]

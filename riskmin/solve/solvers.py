"""Descent-direction strategies plugged into the solve driver.

A solver decides, once per iteration, the direction ``p`` the driver steps
along (the new parameters are ``theta - alpha * p``). The driver itself is
agnostic to the concrete solver; new strategies subclass
:class:`RiskMinSolver` and implement :meth:`~RiskMinSolver.descent_dir`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .core import Array


class RiskMinSolver(ABC):
    """Base interface for descent-direction strategies."""

    def init_state(self, theta: Array) -> Any:
        """Return the per-solve state, or None for stateless solvers."""
        del theta
        return None

    def prep_searchdir(self, g: Array) -> Array:
        """Return the buffer that :meth:`descent_dir` writes into.

        The default allocates a private buffer shaped like ``g``. Solvers
        whose direction is the gradient itself may return ``g`` instead, so
        callers must not assume the search buffer is independent of the
        gradient buffer.
        """
        return np.empty_like(g)

    @abstractmethod
    def descent_dir(self, state: Any, theta: Array, g: Array, p: Array) -> Array:
        """Write the descent direction at ``theta`` into ``p`` and return it.

        May read and update ``state``. Whether ``p`` is really a descent
        direction is checked by the driver, not here.
        """

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{self.__class__.__name__}({params})"


class GDSolver(RiskMinSolver):
    """Plain gradient descent: the direction is the gradient."""

    def prep_searchdir(self, g: Array) -> Array:
        return g

    def descent_dir(self, state: None, theta: Array, g: Array, p: Array) -> Array:
        if p is not g:
            np.copyto(p, g)
        return p


@dataclass
class MomentumState:
    velocity: Array
    restarts: int = 0


class MomentumSolver(RiskMinSolver):
    """Heavy-ball momentum with adaptive restart.

    The direction is ``momentum * v + g`` where ``v`` is the previous
    direction. When that combination stops pointing downhill the velocity is
    dropped and the plain gradient is used instead.
    """

    def __init__(self, momentum: float = 0.9) -> None:
        if not (0 <= momentum < 1):
            raise ValueError("momentum must lie in [0, 1)")
        self.momentum = float(momentum)

    def init_state(self, theta: Array) -> MomentumState:
        return MomentumState(velocity=np.zeros_like(theta))

    def descent_dir(
        self, state: MomentumState, theta: Array, g: Array, p: Array
    ) -> Array:
        v = state.velocity
        np.multiply(v, self.momentum, out=p)
        np.add(p, g, out=p)
        if np.vdot(p, g) <= 0:
            np.copyto(p, g)
            state.restarts += 1
        np.copyto(v, p)
        return p


@dataclass
class BFGSState:
    inv_hessian: Array
    theta_prev: Optional[Array] = None
    g_prev: Optional[Array] = None
    resets: int = 0


class BFGSSolver(RiskMinSolver):
    """Full-memory BFGS on the flattened parameters.

    The inverse-Hessian approximation is updated from the step and gradient
    change between consecutive calls. It is reset to the identity whenever
    the curvature ``y . s`` drops to ``curvature_eps`` or below.
    """

    def __init__(self, curvature_eps: float = 1e-12) -> None:
        self.curvature_eps = float(curvature_eps)

    def init_state(self, theta: Array) -> BFGSState:
        return BFGSState(inv_hessian=np.eye(theta.size, dtype=theta.dtype))

    def _update(self, state: BFGSState, s: Array, y: Array) -> None:
        ys = float(np.dot(y, s))
        n = s.size
        if ys <= self.curvature_eps:
            state.inv_hessian = np.eye(n, dtype=state.inv_hessian.dtype)
            state.resets += 1
            return
        rho = 1.0 / ys
        identity = np.eye(n, dtype=state.inv_hessian.dtype)
        outer_sy = np.outer(s, y)
        state.inv_hessian = (
            (identity - rho * outer_sy)
            @ state.inv_hessian
            @ (identity - rho * outer_sy.T)
            + rho * np.outer(s, s)
        ).astype(state.inv_hessian.dtype, copy=False)

    def descent_dir(self, state: BFGSState, theta: Array, g: Array, p: Array) -> Array:
        x = theta.ravel()
        gv = g.ravel()
        if state.theta_prev is None:
            state.theta_prev = x.copy()
            state.g_prev = gv.copy()
        else:
            self._update(state, x - state.theta_prev, gv - state.g_prev)
            np.copyto(state.theta_prev, x)
            np.copyto(state.g_prev, gv)
        p[...] = (state.inv_hessian @ gv).reshape(p.shape)
        return p


__all__ = [
    "BFGSSolver",
    "BFGSState",
    "GDSolver",
    "MomentumSolver",
    "MomentumState",
    "RiskMinSolver",
]

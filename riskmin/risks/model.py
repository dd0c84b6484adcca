"""Empirical risk over a data set: predictor composed with a loss."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from .losses import Loss

Array = np.ndarray


class Regularizer(Protocol):
    def value(self, theta: Array) -> float:
        ...

    def add_grad(self, g: Array, theta: Array) -> Array:
        ...


class LinearPred:
    """Prediction ``u = X @ theta`` with ``theta`` of shape ``(dim,)``."""

    def __init__(self, dim: int) -> None:
        if dim < 1:
            raise ValueError("dim must be positive")
        self.dim = int(dim)

    @property
    def nparams(self) -> int:
        return self.dim

    def check(self, theta: Array, X: Array) -> None:
        if theta.shape != (self.nparams,):
            raise ValueError(
                f"theta must have shape ({self.nparams},), got {theta.shape}"
            )
        if X.ndim != 2 or X.shape[1] != self.dim:
            raise ValueError(f"X must have shape (n, {self.dim}), got {X.shape}")

    def predict(self, theta: Array, X: Array) -> Array:
        return X @ theta

    def grad(self, g: Array, theta: Array, X: Array, d: Array) -> Array:
        """Write ``sum_i d_i * du_i/dtheta`` into ``g``."""
        g[...] = X.T @ d
        return g

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dim={self.dim})"


class AffinePred(LinearPred):
    """Prediction ``u = X @ w + bias * b`` with ``theta = [w, b]``."""

    def __init__(self, dim: int, bias: float = 1.0) -> None:
        super().__init__(dim)
        self.bias = float(bias)

    @property
    def nparams(self) -> int:
        return self.dim + 1

    def predict(self, theta: Array, X: Array) -> Array:
        return X @ theta[:-1] + self.bias * theta[-1]

    def grad(self, g: Array, theta: Array, X: Array, d: Array) -> Array:
        g[:-1] = X.T @ d
        g[-1] = self.bias * np.sum(d)
        return g

    def __repr__(self) -> str:
        return f"AffinePred(dim={self.dim}, bias={self.bias!r})"


class SupervisedRiskModel:
    """Sum of per-sample losses of a predictor over the rows of ``X``."""

    def __init__(self, pred: LinearPred, loss: Loss) -> None:
        self.pred = pred
        self.loss = loss

    def value(self, theta: Array, X: Array, y: Array) -> float:
        u = self.pred.predict(theta, X)
        return float(np.sum(self.loss.value(u, y)))

    def value_and_grad(
        self, reg: Regularizer, g: Array, theta: Array, X: Array, y: Array
    ) -> tuple[float, Array]:
        """Return the regularized risk and write its gradient into ``g``."""
        self.pred.check(theta, X)
        u = self.pred.predict(theta, X)
        v = float(np.sum(self.loss.value(u, y)))
        self.pred.grad(g, theta, X, self.loss.deriv(u, y))
        v += reg.value(theta)
        reg.add_grad(g, theta)
        return v, g

    def __repr__(self) -> str:
        return f"SupervisedRiskModel({self.pred!r}, {self.loss!r})"


__all__ = ["AffinePred", "LinearPred", "SupervisedRiskModel"]

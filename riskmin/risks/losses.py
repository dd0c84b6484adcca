"""Univariate loss functions on a scalar prediction."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

Array = np.ndarray


class Loss(ABC):
    """Loss of prediction ``u`` against target ``y``, vectorised over samples."""

    @abstractmethod
    def value(self, u: Array, y: Array) -> Array:
        """Per-sample loss values."""

    @abstractmethod
    def deriv(self, u: Array, y: Array) -> Array:
        """Per-sample derivative with respect to ``u``."""

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{self.__class__.__name__}({params})"


class SqrLoss(Loss):
    """``0.5 * (u - y) ** 2``."""

    def value(self, u: Array, y: Array) -> Array:
        r = u - y
        return 0.5 * r * r

    def deriv(self, u: Array, y: Array) -> Array:
        return u - y


class LogisticLoss(Loss):
    """``log(1 + exp(-y * u))`` for labels ``y`` in {-1, +1}."""

    def value(self, u: Array, y: Array) -> Array:
        return np.logaddexp(0.0, -y * u)

    def deriv(self, u: Array, y: Array) -> Array:
        # -y * sigmoid(-y u), written with tanh to stay finite for large |u|
        return -0.5 * y * (1.0 - np.tanh(0.5 * y * u))


class HuberLoss(Loss):
    """Quadratic for residuals within ``delta``, linear beyond."""

    def __init__(self, delta: float = 1.0) -> None:
        if delta <= 0:
            raise ValueError("delta must be positive")
        self.delta = float(delta)

    def value(self, u: Array, y: Array) -> Array:
        r = np.abs(u - y)
        d = self.delta
        return np.where(r <= d, 0.5 * r * r, d * (r - 0.5 * d))

    def deriv(self, u: Array, y: Array) -> Array:
        return np.clip(u - y, -self.delta, self.delta)


__all__ = ["HuberLoss", "LogisticLoss", "Loss", "SqrLoss"]

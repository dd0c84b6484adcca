"""Data-independent penalty terms."""

from __future__ import annotations

import numpy as np

Array = np.ndarray


class ZeroReg:
    """No regularization."""

    def value(self, theta: Array) -> float:
        return 0.0

    def add_grad(self, g: Array, theta: Array) -> Array:
        return g

    def __repr__(self) -> str:
        return "ZeroReg()"


class SqrL2Reg:
    """Squared L2 penalty ``c / 2 * ||theta||^2``."""

    def __init__(self, c: float) -> None:
        if c < 0:
            raise ValueError("c must be non-negative")
        self.c = float(c)

    def value(self, theta: Array) -> float:
        t = theta.ravel()
        return 0.5 * self.c * float(np.dot(t, t))

    def add_grad(self, g: Array, theta: Array) -> Array:
        """Add ``c * theta`` to ``g`` in place."""
        g += self.c * theta
        return g

    def __repr__(self) -> str:
        return f"SqrL2Reg(c={self.c!r})"


__all__ = ["SqrL2Reg", "ZeroReg"]

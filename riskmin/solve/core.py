"""Core interfaces shared by the solvers, the line search and the driver."""

from __future__ import annotations

import enum
import numbers
from dataclasses import dataclass, replace
from typing import Any, Callable, Protocol

import numpy as np

from ..errors import ConfigurationError
from .reporting import format_solution

Array = np.ndarray
Callback = Callable[[int, Array, float, Array], None]


class Verbosity(enum.IntEnum):
    """How much textual progress a solve call reports."""

    NONE = 0
    FINAL = 1
    ITER = 2

    @classmethod
    def coerce(cls, value: "Verbosity | str") -> "Verbosity":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ConfigurationError(
            "verbosity", "verbosity must be either 'none', 'final', or 'iter'."
        )

    def __str__(self) -> str:
        return self.name.lower()


class RiskModel(Protocol):
    """Data-dependent part of the objective."""

    def value(self, theta: Array, X: Array, y: Array) -> float:
        ...

    def value_and_grad(
        self, reg: "Regularizer", g: Array, theta: Array, X: Array, y: Array
    ) -> tuple[float, Array]:
        """Write the gradient of ``value(theta) + reg.value(theta)`` into ``g``."""
        ...


class Regularizer(Protocol):
    """Additive penalty on the parameters."""

    def value(self, theta: Array) -> float:
        ...


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class RiskMinOptions:
    """Hyperparameters controlling a solve call.

    Args:
        maxiter: Maximum number of iterations. Must be an integer > 1.
        ftol: Tolerance on the change of the objective value.
        xtol: Tolerance on the L2 change of the parameters.
        grtol: Tolerance on the L2 norm of the gradient.
        armijo: Sufficient-decrease coefficient of the line search, in (0, 1).
        beta: Backtracking ratio of the line search, in (0, 1).
        verbosity: ``'none'``, ``'final'`` or ``'iter'``.

    Raises:
        ConfigurationError: On the first field that violates its constraint.
    """

    maxiter: int = 200
    ftol: float = 1.0e-6
    xtol: float = 1.0e-8
    grtol: float = 1.0e-8
    armijo: float = 0.5
    beta: float = 0.5
    verbosity: Verbosity = Verbosity.NONE

    def __post_init__(self) -> None:
        if not (
            isinstance(self.maxiter, numbers.Integral)
            and not isinstance(self.maxiter, bool)
            and self.maxiter > 1
        ):
            raise ConfigurationError(
                "maxiter", "maxiter must be an integer greater than 1."
            )
        for name in ("ftol", "xtol", "grtol"):
            value = getattr(self, name)
            if not (_is_real(value) and value > 0):
                raise ConfigurationError(
                    name, f"{name} must be a positive real value."
                )
        for name in ("armijo", "beta"):
            value = getattr(self, name)
            if not (_is_real(value) and 0 < value < 1):
                raise ConfigurationError(
                    name, f"{name} must be a real value in (0, 1)."
                )
        verbosity = Verbosity.coerce(self.verbosity)

        object.__setattr__(self, "maxiter", int(self.maxiter))
        for name in ("ftol", "xtol", "grtol", "armijo", "beta"):
            object.__setattr__(self, name, float(getattr(self, name)))
        object.__setattr__(self, "verbosity", verbosity)

    def replace(self, **changes: Any) -> "RiskMinOptions":
        """Return a validated copy with ``changes`` applied."""
        return replace(self, **changes)


@dataclass(frozen=True, eq=False)
class RiskMinSolution:
    """Result of a solve call.

    ``sol`` is the parameter buffer the driver worked in, handed over
    without copying.
    """

    sol: Array
    fval: float
    niters: int
    converged: bool

    def __str__(self) -> str:
        return format_solution(self)


__all__ = [
    "Array",
    "Callback",
    "Regularizer",
    "RiskMinOptions",
    "RiskMinSolution",
    "RiskModel",
    "Verbosity",
]

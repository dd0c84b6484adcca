"""Exception types raised by the risk minimization engine."""

from __future__ import annotations

from typing import Optional


class RiskMinError(Exception):
    """Base class for riskmin errors."""


class ConfigurationError(RiskMinError, ValueError):
    """Raised when a solver hyperparameter violates its constraint."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class DescentDirectionError(RiskMinError, ArithmeticError):
    """Raised when a solver proposes a direction with ``p . g <= 0``."""

    def __init__(
        self,
        iteration: int,
        directional_derivative: float,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = (
                f"The descent direction is invalid at iteration {iteration} "
                f"(p . g = {directional_derivative!r})."
            )
        super().__init__(message)
        self.iteration = iteration
        self.directional_derivative = directional_derivative


class LineSearchFailure(RiskMinError, ArithmeticError):
    """Raised when backtracking shrinks the step below machine epsilon."""

    def __init__(
        self,
        step_size: float,
        iteration: Optional[int] = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            where = "" if iteration is None else f" at iteration {iteration}"
            message = (
                f"Failed to find a proper step size{where} "
                f"(step size shrank to {step_size!r})."
            )
        super().__init__(message)
        self.step_size = step_size
        self.iteration = iteration


__all__ = [
    "ConfigurationError",
    "DescentDirectionError",
    "LineSearchFailure",
    "RiskMinError",
]

"""Textual progress reporting for solve calls."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from .core import RiskMinSolution


@dataclass
class IterationRecord:
    """
    Progress of one iteration.

    Args:
        iteration: Iteration number; 0 is the initial evaluation.
        value: Objective value after the iteration.
        previous_value: Objective value before the iteration. None at t = 0.
        grad_norm: L2 norm of the gradient at the new parameters, if known.
        step_size: Step length accepted by the line search, if any.
    """

    iteration: int
    value: float
    previous_value: Optional[float] = None
    grad_norm: Optional[float] = None
    step_size: Optional[float] = None


class Reporter:
    """Writes an iteration table and a final summary to a text stream."""

    header = (
        f"{'Iter':>5}  {'f.value':>14}  {'f.change':>12}  "
        f"{'g.norm':>12}  {'step':>10}"
    )

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")

    def start(self, record: IterationRecord) -> None:
        self._write(self.header)
        self._write("-" * len(self.header))
        self.iteration(record)

    def iteration(self, record: IterationRecord) -> None:
        if record.previous_value is None:
            self._write(f"{record.iteration:5d}  {record.value:14.6e}")
            return
        change = record.value - record.previous_value
        grad_norm = "" if record.grad_norm is None else f"{record.grad_norm:12.4e}"
        step = "" if record.step_size is None else f"{record.step_size:10.3e}"
        self._write(
            f"{record.iteration:5d}  {record.value:14.6e}  {change:12.4e}  "
            f"{grad_norm:>12}  {step:>10}"
        )

    def final(self, niters: int, value: float, converged: bool) -> None:
        status = "converged" if converged else "did NOT converge"
        self._write(
            f"Optimization {status} after {niters} iterations "
            f"(f.value = {value:.6e})"
        )


def format_solution(solution: "RiskMinSolution") -> str:
    """Return a multi-line human-readable summary of ``solution``."""
    sol = solution.sol
    lines = [
        "RiskMinSolution:",
        f"- sol:       {tuple(sol.shape)} {type(sol).__name__}[{sol.dtype}]",
        f"- fval:      {solution.fval}",
        f"- niters:    {solution.niters}",
        f"- converged: {solution.converged}",
    ]
    return "\n".join(lines)


__all__ = ["IterationRecord", "Reporter", "format_solution"]

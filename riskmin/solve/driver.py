"""Iterative descent driver: direction, line search, convergence test."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..errors import DescentDirectionError, LineSearchFailure
from ..logging import get_logger
from .core import (
    Array,
    Callback,
    Regularizer,
    RiskMinOptions,
    RiskMinSolution,
    RiskModel,
    Verbosity,
)
from .line_search import backtracking_armijo
from .reporting import IterationRecord, Reporter
from .solvers import GDSolver, RiskMinSolver

logger = get_logger(__name__)


def _l2diff(a: Array, b: Array) -> float:
    return float(np.linalg.norm((a - b).ravel()))


def _check_theta(theta: Array) -> None:
    if not isinstance(theta, np.ndarray):
        raise TypeError(
            f"theta must be a numpy.ndarray, got {type(theta).__name__}"
        )
    if not np.issubdtype(theta.dtype, np.floating):
        raise TypeError(f"theta must have a floating dtype, got {theta.dtype}")


def solve_inplace(
    rmodel: RiskModel,
    reg: Regularizer,
    theta: Array,
    X: Array,
    y: Array,
    solver: RiskMinSolver,
    options: RiskMinOptions,
    callback: Optional[Callback] = None,
    reporter: Optional[Reporter] = None,
) -> RiskMinSolution:
    """Minimize ``rmodel.value + reg.value`` using ``theta`` as working storage.

    ``theta`` is overwritten with the final parameters and returned as the
    solution's ``sol``. All tolerances are converted to ``theta.dtype`` once,
    before the first iteration.

    Args:
        rmodel: Risk model providing ``value`` and ``value_and_grad``.
        reg: Regularizer providing ``value``.
        theta: Initial parameters; a floating ``numpy.ndarray``.
        X: Inputs, one sample per row.
        y: Targets.
        solver: Descent-direction strategy.
        options: Validated hyperparameters.
        callback: Called as ``callback(t, theta, v, g)`` after each iteration.
            The arrays are reused by the next iteration and must not be kept.
        reporter: Sink for textual progress; a stdout :class:`Reporter` is
            created when ``options.verbosity`` asks for output.

    Returns:
        The final :class:`RiskMinSolution`.

    Raises:
        DescentDirectionError: If ``solver`` yields ``p`` with ``p . g <= 0``.
        LineSearchFailure: If no step satisfies the Armijo condition.
    """
    _check_theta(theta)
    if callback is not None and not callable(callback):
        raise TypeError("callback must be callable or None")

    dtype = theta.dtype.type
    maxiter = options.maxiter
    ftol = dtype(options.ftol)
    xtol = dtype(options.xtol)
    grtol = dtype(options.grtol)
    verbosity = options.verbosity
    if reporter is None and verbosity > Verbosity.NONE:
        reporter = Reporter()

    # two parameter slots; ``cur`` indexes the current one
    slots = [theta, np.empty_like(theta)]
    cur = 0
    g = np.empty_like(theta)
    p = solver.prep_searchdir(g)
    state = solver.init_state(theta)

    def objective(point: Array) -> float:
        return rmodel.value(point, X, y) + reg.value(point)

    logger.debug(
        "solve: %s, %d parameters (%s), maxiter=%d",
        solver,
        theta.size,
        theta.dtype,
        maxiter,
    )

    t = 0
    converged = False
    v, _ = rmodel.value_and_grad(reg, g, theta, X, y)
    if verbosity >= Verbosity.ITER:
        reporter.start(IterationRecord(iteration=t, value=float(v)))

    while not converged and t < maxiter:
        t += 1
        v_pre = v
        current = slots[cur]
        trial = slots[1 - cur]

        solver.descent_dir(state, current, g, p)

        dv = np.vdot(p, g)
        if not dv > 0:
            logger.error("iteration %d: invalid descent direction (p . g = %r)", t, dv)
            raise DescentDirectionError(t, float(dv))

        try:
            alpha, _, nfev = backtracking_armijo(
                objective,
                current,
                v,
                g,
                p,
                trial,
                armijo=options.armijo,
                beta=options.beta,
                iteration=t,
            )
        except LineSearchFailure:
            logger.error("iteration %d: line search failed", t)
            raise

        cur = 1 - cur
        current, previous = trial, current

        v, _ = rmodel.value_and_grad(reg, g, current, X, y)

        grad_norm = float(np.linalg.norm(g.ravel()))
        converged = bool(
            abs(v - v_pre) < ftol
            or grad_norm < grtol
            or _l2diff(current, previous) < xtol
        )

        logger.debug(
            "iteration %d: f=%.6e, |g|=%.3e, alpha=%.3e, nfev=%d",
            t,
            v,
            grad_norm,
            alpha,
            nfev,
        )
        if verbosity >= Verbosity.ITER:
            reporter.iteration(
                IterationRecord(
                    iteration=t,
                    value=float(v),
                    previous_value=float(v_pre),
                    grad_norm=grad_norm,
                    step_size=alpha,
                )
            )

        if callback is not None:
            callback(t, current, v, g)

    if verbosity >= Verbosity.FINAL:
        reporter.final(t, float(v), converged)

    if slots[cur] is not theta:
        np.copyto(theta, slots[cur])

    if converged:
        logger.info("converged after %d iterations (f=%.6e)", t, v)
    else:
        logger.info("stopped at maxiter=%d without converging (f=%.6e)", t, v)

    return RiskMinSolution(sol=theta, fval=float(v), niters=t, converged=converged)


def solve(
    rmodel: RiskModel,
    reg: Regularizer,
    theta: Array,
    X: Array,
    y: Array,
    *,
    solver: Optional[RiskMinSolver] = None,
    options: Optional[RiskMinOptions] = None,
    callback: Optional[Callback] = None,
    reporter: Optional[Reporter] = None,
) -> RiskMinSolution:
    """Like :func:`solve_inplace` but leaves ``theta`` untouched.

    Integer inputs are promoted to ``float64``; floating dtypes are kept.
    Defaults to :class:`GDSolver` and ``RiskMinOptions()``.
    """
    theta = np.array(theta, copy=True)
    if not np.issubdtype(theta.dtype, np.floating):
        theta = theta.astype(np.float64)
    if solver is None:
        solver = GDSolver()
    if options is None:
        options = RiskMinOptions()
    return solve_inplace(
        rmodel, reg, theta, X, y, solver, options, callback=callback, reporter=reporter
    )


__all__ = ["solve", "solve_inplace"]

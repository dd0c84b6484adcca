"""Iterative risk minimization: descent strategies, Armijo line search, driver.

Example
-------
>>> import numpy as np
>>> from riskmin.risks import LinearPred, SqrLoss, SqrL2Reg, SupervisedRiskModel
>>> from riskmin.solve import RiskMinOptions, solve
>>> X = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
>>> y = X @ np.array([2.0, -1.0])
>>> rmodel = SupervisedRiskModel(LinearPred(2), SqrLoss())
>>> res = solve(rmodel, SqrL2Reg(1e-8), np.zeros(2), X, y,
...             options=RiskMinOptions(maxiter=1000, ftol=1e-14))
>>> np.round(res.sol, 4)
array([ 2., -1.])
"""

from .core import (
    Array,
    Callback,
    Regularizer,
    RiskMinOptions,
    RiskMinSolution,
    RiskModel,
    Verbosity,
)
from .driver import solve, solve_inplace
from .line_search import backtracking_armijo
from .reporting import IterationRecord, Reporter, format_solution
from .solvers import (
    BFGSSolver,
    BFGSState,
    GDSolver,
    MomentumSolver,
    MomentumState,
    RiskMinSolver,
)
from .utils import approx_grad, check_grad

__all__ = [
    "Array",
    "BFGSSolver",
    "BFGSState",
    "Callback",
    "GDSolver",
    "IterationRecord",
    "MomentumSolver",
    "MomentumState",
    "Regularizer",
    "Reporter",
    "RiskMinOptions",
    "RiskMinSolution",
    "RiskMinSolver",
    "RiskModel",
    "Verbosity",
    "approx_grad",
    "backtracking_armijo",
    "check_grad",
    "format_solution",
    "solve",
    "solve_inplace",
]

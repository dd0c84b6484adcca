"""riskmin - regularized empirical risk minimization by descent and line search."""

__version__ = "0.1.0"

from .errors import (
    ConfigurationError,
    DescentDirectionError,
    LineSearchFailure,
    RiskMinError,
)
from .logging import configure_logging, get_logger, set_log_level
from .risks import (
    AffinePred,
    HuberLoss,
    LinearPred,
    LogisticLoss,
    SqrL2Reg,
    SqrLoss,
    SupervisedRiskModel,
    TorchRiskModel,
    ZeroReg,
)
from .solve import (
    BFGSSolver,
    GDSolver,
    MomentumSolver,
    RiskMinOptions,
    RiskMinSolution,
    RiskMinSolver,
    Verbosity,
    solve,
    solve_inplace,
)

__all__ = [
    "AffinePred",
    "BFGSSolver",
    "ConfigurationError",
    "DescentDirectionError",
    "GDSolver",
    "HuberLoss",
    "LineSearchFailure",
    "LinearPred",
    "LogisticLoss",
    "MomentumSolver",
    "RiskMinError",
    "RiskMinOptions",
    "RiskMinSolution",
    "RiskMinSolver",
    "SqrL2Reg",
    "SqrLoss",
    "SupervisedRiskModel",
    "TorchRiskModel",
    "Verbosity",
    "ZeroReg",
    "__version__",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "solve",
    "solve_inplace",
]

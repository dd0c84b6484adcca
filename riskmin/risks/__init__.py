"""Risk models, losses and regularizers consumed by :mod:`riskmin.solve`."""

from .losses import HuberLoss, LogisticLoss, Loss, SqrLoss
from .model import AffinePred, LinearPred, SupervisedRiskModel
from .regularizers import SqrL2Reg, ZeroReg
from .torch_model import TorchRiskModel

__all__ = [
    "AffinePred",
    "HuberLoss",
    "LinearPred",
    "LogisticLoss",
    "Loss",
    "SqrL2Reg",
    "SqrLoss",
    "SupervisedRiskModel",
    "TorchRiskModel",
    "ZeroReg",
]

"""Risk model whose loss is a torch function, differentiated by autograd."""

from __future__ import annotations

from typing import Callable

import numpy as np
import torch

from .model import Regularizer

Array = np.ndarray
TorchLoss = Callable[[torch.Tensor, torch.Tensor, torch.Tensor], torch.Tensor]


class TorchRiskModel:
    """
    Wrap ``loss_fn(theta, X, y) -> scalar tensor`` as a risk model.

    Parameters are exchanged with the solver as numpy arrays; each call
    builds a tensor view of ``X`` and ``y`` in the dtype of ``theta`` and
    lets ``torch.autograd`` compute the gradient.

    Args:
        loss_fn: Torch function of the parameters and the data returning a
            0-dimensional tensor.
    """

    def __init__(self, loss_fn: TorchLoss) -> None:
        self.loss_fn = loss_fn

    @staticmethod
    def _data(arr: Array, dtype: torch.dtype) -> torch.Tensor:
        t = torch.as_tensor(arr)
        if t.is_floating_point():
            t = t.to(dtype)
        return t

    def _evaluate(self, theta_t: torch.Tensor, X: Array, y: Array) -> torch.Tensor:
        loss = self.loss_fn(
            theta_t, self._data(X, theta_t.dtype), self._data(y, theta_t.dtype)
        )
        if loss.ndim != 0:
            raise ValueError("loss_fn must return a scalar tensor.")
        return loss

    def value(self, theta: Array, X: Array, y: Array) -> float:
        with torch.no_grad():
            return float(self._evaluate(torch.from_numpy(theta), X, y).item())

    def value_and_grad(
        self, reg: Regularizer, g: Array, theta: Array, X: Array, y: Array
    ) -> tuple[float, Array]:
        theta_t = torch.tensor(theta, requires_grad=True)
        loss = self._evaluate(theta_t, X, y)
        (grad,) = torch.autograd.grad(loss, theta_t)
        g[...] = grad.detach().cpu().numpy()
        v = float(loss.item()) + reg.value(theta)
        reg.add_grad(g, theta)
        return v, g

    def __repr__(self) -> str:
        name = getattr(self.loss_fn, "__name__", repr(self.loss_fn))
        return f"TorchRiskModel({name})"


__all__ = ["TorchRiskModel"]

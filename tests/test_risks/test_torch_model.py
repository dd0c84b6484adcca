import numpy as np
import pytest
import torch

from riskmin.risks import LinearPred, LogisticLoss, SqrL2Reg, SupervisedRiskModel, TorchRiskModel
from riskmin.solve import RiskMinOptions, solve


def torch_logistic(theta, X, y):
    return torch.nn.functional.softplus(-y * (X @ theta)).sum()


def test_matches_numpy_risk_model(logreg_data, rng):
    X, y = logreg_data
    reg = SqrL2Reg(0.5)
    theta = rng.normal(size=2)
    reference = SupervisedRiskModel(LinearPred(2), LogisticLoss())
    model = TorchRiskModel(torch_logistic)

    g_ref = np.empty(2)
    v_ref, _ = reference.value_and_grad(reg, g_ref, theta, X, y)
    g = np.empty(2)
    v, _ = model.value_and_grad(reg, g, theta, X, y)

    assert v == pytest.approx(v_ref)
    np.testing.assert_allclose(g, g_ref, rtol=1e-10)
    assert model.value(theta, X, y) == pytest.approx(reference.value(theta, X, y))


def test_solve_with_torch_model(logreg_data):
    X, y = logreg_data
    reg = SqrL2Reg(0.5)
    opts = RiskMinOptions(maxiter=1000)
    res_torch = solve(TorchRiskModel(torch_logistic), reg, np.zeros(2), X, y, options=opts)
    res_np = solve(
        SupervisedRiskModel(LinearPred(2), LogisticLoss()), reg, np.zeros(2), X, y, options=opts
    )
    assert res_torch.converged
    np.testing.assert_allclose(res_torch.sol, res_np.sol, atol=1e-4)


def test_float32_parameters(logreg_data):
    X, y = logreg_data
    res = solve(
        TorchRiskModel(torch_logistic),
        SqrL2Reg(0.5),
        np.zeros(2, dtype=np.float32),
        X,
        y,
        options=RiskMinOptions(ftol=1e-3),
    )
    assert res.sol.dtype == np.float32
    assert res.converged


def test_non_scalar_loss_rejected():
    model = TorchRiskModel(lambda theta, X, y: X @ theta)
    with pytest.raises(ValueError):
        model.value(np.zeros(2), np.ones((3, 2)), np.ones(3))

import numpy as np
import pytest

from riskmin.risks import (
    AffinePred,
    LinearPred,
    LogisticLoss,
    SqrL2Reg,
    SqrLoss,
    SupervisedRiskModel,
    ZeroReg,
)
from riskmin.solve import BFGSSolver, RiskMinOptions, check_grad, solve


@pytest.mark.parametrize(
    "pred, loss",
    [
        (LinearPred(2), SqrLoss()),
        (LinearPred(2), LogisticLoss()),
        (AffinePred(2, bias=2.0), LogisticLoss()),
    ],
    ids=repr,
)
def test_value_and_grad_matches_finite_differences(pred, loss, logreg_data, rng):
    X, y = logreg_data
    rmodel = SupervisedRiskModel(pred, loss)
    reg = SqrL2Reg(0.3)
    theta = rng.normal(size=pred.nparams)

    def vg(g, x):
        return rmodel.value_and_grad(reg, g, x, X, y)

    def objective(x):
        return rmodel.value(x, X, y) + reg.value(x)

    assert check_grad(vg, objective, theta) < 1e-5
    g = np.empty_like(theta)
    v, g_out = rmodel.value_and_grad(reg, g, theta, X, y)
    assert g_out is g
    assert v == pytest.approx(objective(theta))


def test_value_is_sum_over_samples():
    X = np.array([[1.0, 0.0], [0.0, 1.0]])
    y = np.array([1.0, 1.0])
    rmodel = SupervisedRiskModel(LinearPred(2), SqrLoss())
    assert rmodel.value(np.zeros(2), X, y) == pytest.approx(1.0)


def test_affine_prediction_uses_bias():
    pred = AffinePred(1, bias=3.0)
    u = pred.predict(np.array([2.0, 1.0]), np.array([[1.0], [2.0]]))
    np.testing.assert_allclose(u, [5.0, 7.0])
    assert pred.nparams == 2


def test_shape_mismatch_is_rejected():
    rmodel = SupervisedRiskModel(LinearPred(2), SqrLoss())
    with pytest.raises(ValueError):
        rmodel.value_and_grad(ZeroReg(), np.empty(3), np.zeros(3), np.ones((4, 2)), np.ones(4))
    with pytest.raises(ValueError):
        rmodel.value_and_grad(ZeroReg(), np.empty(2), np.zeros(2), np.ones((4, 3)), np.ones(4))


def test_regularizers():
    theta = np.array([1.0, -2.0])
    assert ZeroReg().value(theta) == 0.0
    assert SqrL2Reg(2.0).value(theta) == pytest.approx(5.0)
    g = np.zeros(2)
    SqrL2Reg(2.0).add_grad(g, theta)
    np.testing.assert_allclose(g, [2.0, -4.0])
    with pytest.raises(ValueError):
        SqrL2Reg(-1.0)


def test_ridge_solution_matches_normal_equations(linreg_data):
    X, y, _ = linreg_data
    c = 5.0
    rmodel = SupervisedRiskModel(AffinePred(3), SqrLoss())
    res = solve(
        rmodel,
        SqrL2Reg(c),
        np.zeros(4),
        X,
        y,
        solver=BFGSSolver(),
        options=RiskMinOptions(ftol=1e-14),
    )
    Xa = np.hstack([X, np.ones((X.shape[0], 1))])
    expected = np.linalg.solve(Xa.T @ Xa + c * np.eye(4), Xa.T @ y)
    np.testing.assert_allclose(res.sol, expected, atol=1e-4)

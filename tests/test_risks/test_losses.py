import numpy as np
import pytest

from riskmin.risks import HuberLoss, LogisticLoss, SqrLoss
from riskmin.solve import approx_grad


@pytest.mark.parametrize("loss", [SqrLoss(), LogisticLoss(), HuberLoss(0.7)], ids=repr)
def test_deriv_matches_finite_differences(loss):
    u = np.array([-3.0, -0.4, 0.1, 0.9, 2.5])
    y = np.array([1.0, -1.0, 1.0, -1.0, 1.0])
    numeric = approx_grad(lambda z: float(np.sum(loss.value(z, y))), u)
    np.testing.assert_allclose(loss.deriv(u, y), numeric, atol=1e-6)


def test_sqr_loss_values():
    np.testing.assert_allclose(SqrLoss().value(np.array([3.0]), np.array([1.0])), [2.0])


def test_logistic_loss_is_stable_for_large_margins():
    u = np.array([1000.0, -1000.0])
    y = np.array([1.0, 1.0])
    np.testing.assert_allclose(LogisticLoss().value(u, y), [0.0, 1000.0])
    np.testing.assert_allclose(LogisticLoss().deriv(u, y), [0.0, -1.0])
    assert LogisticLoss().value(np.zeros(1), np.ones(1))[0] == pytest.approx(np.log(2.0))


def test_huber_loss_is_linear_beyond_delta():
    loss = HuberLoss(delta=1.0)
    np.testing.assert_allclose(loss.value(np.array([0.5, 3.0]), np.zeros(2)), [0.125, 2.5])
    np.testing.assert_allclose(loss.deriv(np.array([0.5, 3.0, -3.0]), np.zeros(3)), [0.5, 1.0, -1.0])


def test_huber_rejects_non_positive_delta():
    with pytest.raises(ValueError):
        HuberLoss(delta=0.0)

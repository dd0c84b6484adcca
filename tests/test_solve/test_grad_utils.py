import numpy as np
import pytest

from riskmin.solve import approx_grad, check_grad


def test_approx_grad_matches_analytic():
    def fun(x):
        return float(np.sum(x**3))

    x = np.array([[1.0, -2.0], [0.5, 3.0]])
    grad, evals = approx_grad(fun, x, return_evals=True)
    assert grad.shape == x.shape
    assert evals == 2 * x.size
    np.testing.assert_allclose(grad, 3 * x**2, rtol=1e-6)


def test_approx_grad_does_not_modify_input():
    x = np.array([1.0, 2.0])
    approx_grad(lambda z: float(z @ z), x)
    np.testing.assert_array_equal(x, [1.0, 2.0])


def test_approx_grad_rejects_non_positive_eps():
    with pytest.raises(ValueError):
        approx_grad(lambda z: 0.0, np.zeros(1), eps=0.0)


def test_check_grad_reports_gap():
    def vg(g, x):
        g[...] = 2 * x + 1.0  # off by one
        return float(x @ x)

    assert check_grad(vg, lambda x: float(x @ x), np.array([1.0, 2.0])) == pytest.approx(
        1.0, abs=1e-6
    )

"""
Example: Regularized risk minimization with riskmin

Fits a ridge regression and an L2-regularized logistic regression with the
three built-in descent strategies, and shows the iteration report, the
callback hook and a torch-defined loss.
"""

import numpy as np
import torch

from riskmin import (
    AffinePred,
    BFGSSolver,
    GDSolver,
    LinearPred,
    LogisticLoss,
    MomentumSolver,
    RiskMinOptions,
    SqrL2Reg,
    SqrLoss,
    SupervisedRiskModel,
    TorchRiskModel,
    solve,
)


def example_ridge_regression(rng: np.random.Generator):
    """Example: Ridge regression with an intercept."""
    print("=" * 60)
    print("Example 1: Ridge Regression")
    print("=" * 60)

    X = rng.normal(size=(200, 3))
    y = X @ np.array([1.0, -2.0, 0.5]) + 3.0 + 0.1 * rng.normal(size=200)

    rmodel = SupervisedRiskModel(AffinePred(3), SqrLoss())
    result = solve(
        rmodel,
        SqrL2Reg(1e-2),
        np.zeros(4),
        X,
        y,
        solver=BFGSSolver(),
        options=RiskMinOptions(verbosity="iter"),
    )
    print(result)
    print(f"Coefficients: {np.round(result.sol, 3)}")
    print()


def example_logistic_regression(rng: np.random.Generator):
    """Example: Comparing descent strategies on logistic regression."""
    print("=" * 60)
    print("Example 2: Logistic Regression - Strategy Comparison")
    print("=" * 60)

    X = rng.normal(size=(300, 2))
    y = np.where(X @ np.array([2.0, -1.0]) + 0.5 * rng.normal(size=300) >= 0, 1.0, -1.0)
    rmodel = SupervisedRiskModel(LinearPred(2), LogisticLoss())
    options = RiskMinOptions(maxiter=500, ftol=1e-9)

    for solver in (GDSolver(), MomentumSolver(0.5), BFGSSolver()):
        trace = []
        result = solve(
            rmodel,
            SqrL2Reg(0.1),
            np.zeros(2),
            X,
            y,
            solver=solver,
            options=options,
            callback=lambda t, theta, v, g: trace.append(v),
        )
        print(
            f"{solver!r:28s} niters={result.niters:4d} "
            f"f: {trace[0]:.4f} -> {trace[-1]:.6f} converged={result.converged}"
        )
    print()


def example_torch_loss(rng: np.random.Generator):
    """Example: A loss written in torch, differentiated by autograd."""
    print("=" * 60)
    print("Example 3: Torch-defined Pseudo-Huber Regression")
    print("=" * 60)

    X = rng.normal(size=(100, 2))
    y = X @ np.array([0.5, 1.5]) + rng.standard_t(df=2, size=100)

    def pseudo_huber(theta, X, y):
        r = X @ theta - y
        return (torch.sqrt(1.0 + r**2) - 1.0).sum()

    result = solve(
        TorchRiskModel(pseudo_huber),
        SqrL2Reg(1e-3),
        np.zeros(2),
        X,
        y,
        options=RiskMinOptions(verbosity="final"),
    )
    print(f"Coefficients: {np.round(result.sol, 3)}")
    print()


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    example_ridge_regression(rng)
    example_logistic_regression(rng)
    example_torch_loss(rng)

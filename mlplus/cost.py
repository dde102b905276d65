"""Loss functions, their derivatives and weight regularisation terms.

Every loss accepts either vectors (1-D) or matrices (2-D). Means are taken
over the first axis, so a matrix loss is averaged over its rows.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], Sequence[Sequence[float]], np.ndarray]

_LOG_EPS = 1e-8


def _arr(values: ArrayLike) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _rows(values: np.ndarray) -> int:
    return values.shape[0] if values.ndim else 1


def _pair(y_hat: ArrayLike, y: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    a, b = _arr(y_hat), _arr(y)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")
    return a, b


# Regression costs

def mse(y_hat: ArrayLike, y: ArrayLike) -> float:
    """Half mean squared error: sum of squared errors over 2n."""
    a, b = _pair(y_hat, y)
    return float(np.sum((a - b) ** 2) / (2 * _rows(a)))


def mse_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    a, b = _pair(y_hat, y)
    return a - b


def rmse(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    return float(np.sqrt(np.sum((a - b) ** 2) / _rows(a)))


def rmse_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Derivative of the root mean squared error.

    For matrices the scale factor is sqrt(MSE) / 2 rather than 1 / (2 sqrt(MSE)).
    """
    a, b = _pair(y_hat, y)
    root = np.sqrt(mse(a, b))
    factor = 1 / (2 * root) if a.ndim < 2 else 1 / (2 / root)
    return factor * (a - b)


def mae(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    return float(np.sum(np.abs(a - b)) / _rows(a))


def mae_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    a, b = _pair(y_hat, y)
    return np.sign(a - b)


def mbe(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    return float(np.sum(a - b) / _rows(a))


def mbe_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    a, _ = _pair(y_hat, y)
    return np.ones_like(a)


# Classification costs

def log_loss(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    terms = b * np.log(a + _LOG_EPS) + (1 - b) * np.log(1 - a + _LOG_EPS)
    return float(-np.sum(terms) / _rows(a))


def log_loss_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    a, b = _pair(y_hat, y)
    return -b / a + (1 - b) / (1 - a)


def cross_entropy(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    return float(-np.sum(b * np.log(a)))


def cross_entropy_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    a, b = _pair(y_hat, y)
    return -b / a


def huber_loss(y_hat: ArrayLike, y: ArrayLike, delta: float) -> float:
    a, b = _pair(y_hat, y)
    err = np.abs(b - a)
    terms = np.where(err <= delta, err**2, 2 * delta * err - delta * delta)
    return float(np.sum(terms))


def huber_loss_deriv(y_hat: ArrayLike, y: ArrayLike, delta: float) -> np.ndarray:
    a, b = _pair(y_hat, y)
    inside = np.abs(b - a) <= delta
    return np.where(inside, a - b, 2 * delta * np.sign(a))


def hinge_loss(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    return float(np.sum(np.maximum(0.0, 1 - b * a)) / _rows(a))


def hinge_loss_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    a, b = _pair(y_hat, y)
    return np.where(1 - b * a > 0, -b, 0.0)


def regularized_hinge_loss(
    y_hat: ArrayLike, y: ArrayLike, weights: ArrayLike, c: float
) -> float:
    """Soft-margin SVM cost: C times the hinge loss plus a unit ridge term."""
    return c * hinge_loss(y_hat, y) + reg_term(weights, 1.0, 0.0, "Ridge")


def regularized_hinge_loss_deriv(y_hat: ArrayLike, y: ArrayLike, c: float) -> np.ndarray:
    return c * hinge_loss_deriv(y_hat, y)


def wasserstein_loss(y_hat: ArrayLike, y: ArrayLike) -> float:
    a, b = _pair(y_hat, y)
    return float(-np.sum(a * b) / _rows(a))


def wasserstein_loss_deriv(y_hat: ArrayLike, y: ArrayLike) -> np.ndarray:
    return -_arr(y)


# Dual form of the linear SVM

def _dual_q(x: ArrayLike, y: ArrayLike) -> np.ndarray:
    xs = _arr(x)
    ys = np.diag(_arr(y))
    kernel = xs @ xs.T
    return ys.T @ kernel @ ys


def dual_form_svm(alpha: ArrayLike, x: ArrayLike, y: ArrayLike) -> float:
    """Dual SVM objective: -sum(alpha) + alpha^T Q alpha / 2 with a linear kernel."""
    a = _arr(alpha)
    q = _dual_q(x, y)
    return float(-np.sum(a) + 0.5 * (a @ q @ a))


def dual_form_svm_deriv(alpha: ArrayLike, x: ArrayLike, y: ArrayLike) -> np.ndarray:
    a = _arr(alpha)
    return _dual_q(x, y) @ a - np.ones_like(a)


# Regularisation

def reg_term(weights: ArrayLike, lam: float, alpha: float, reg: str) -> float:
    """Penalty added to a cost for the given regularisation type.

    Unknown types (including "None") contribute nothing.
    """
    w = _arr(weights)
    if reg == "Ridge":
        return float(lam * np.sum(w**2) / 2)
    if reg == "Lasso":
        return float(lam * np.sum(np.abs(w)))
    if reg == "ElasticNet":
        return float(lam * np.sum(alpha * np.abs(w) + (1 - alpha) * w**2 / 2))
    return 0.0


def reg_deriv_term(weights: ArrayLike, lam: float, alpha: float, reg: str) -> np.ndarray:
    """Gradient of the penalty with respect to the weights.

    For "WeightClipping", lam and alpha are the lower and upper bounds and the
    result is the clipped weights.
    """
    w = _arr(weights)
    if reg == "Ridge":
        return lam * w
    if reg == "Lasso":
        return lam * np.sign(w)
    if reg == "ElasticNet":
        return lam * (alpha * np.sign(w) + (1 - alpha) * w)
    if reg == "WeightClipping":
        return np.clip(w, lam, alpha)
    return np.zeros_like(w)


def reg_weights(weights: ArrayLike, lam: float, alpha: float, reg: str) -> np.ndarray:
    """Weights after one regularisation step (or clipping)."""
    w = _arr(weights)
    if reg == "WeightClipping":
        return reg_deriv_term(w, lam, alpha, reg)
    return w - reg_deriv_term(w, lam, alpha, reg)
"""Checks of the Gauss-Markov conditions on a vector of regression residuals."""

from __future__ import annotations

from typing import Iterable


def _values(eps: Iterable[float]) -> list[float]:
    values = [float(e) for e in eps]
    if not values:
        raise ValueError("residuals must not be empty")
    return values


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def arithmetic_mean(eps: Iterable[float]) -> bool:
    """True when the residuals have a mean of exactly zero."""
    return _mean(_values(eps)) == 0


def homoscedasticity(eps: Iterable[float]) -> bool:
    """True when every residual contributes the same share of the variance."""
    values = _values(eps)
    mean = _mean(values)
    n = len(values)
    shares = [(e - mean) * (e - mean) / n for e in values]
    return all(share == shares[0] for share in shares)


def exogeneity(eps: Iterable[float]) -> bool:
    """True when every pair of distinct residuals has zero covariance."""
    values = _values(eps)
    mean = _mean(values)
    n = len(values)
    return all(
        (a - mean) * (b - mean) / n == 0
        for i, a in enumerate(values)
        for j, b in enumerate(values)
        if i != j
    )


def check_gm_conditions(eps: Iterable[float]) -> bool:
    """Report on the three conditions and return whether all of them hold."""
    values = _values(eps)
    condition1 = arithmetic_mean(values)
    condition2 = homoscedasticity(values)
    condition3 = exogeneity(values)
    if condition1 and condition2 and condition3:
        print(
            "Gauss-Markov conditions were not violated. "
            "You may use OLS to obtain a BLUE estimator"
        )
        return True
    print(
        "A test of the expected value of 0 of the error terms returned "
        f"{str(condition1).lower()}, a test of homoscedasticity has returned "
        f"{str(condition2).lower()}, and a test of exogenity has returned ."
    )
    return False
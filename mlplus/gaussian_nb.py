"""Gaussian naive Bayes classifier with one mean and deviation per class."""

from __future__ import annotations

import math

import numpy as np


def _performance(y_hat: np.ndarray, y: np.ndarray) -> float:
    """Fraction of rounded predictions that equal their targets."""
    return float(np.mean(np.round(y_hat) == y))


def _mean_std(values: np.ndarray) -> tuple[float, float]:
    """Mean and sample standard deviation; NaN where undefined."""
    if len(values) == 0:
        return math.nan, math.nan
    mean = float(values.sum() / len(values))
    if len(values) < 2:
        return mean, math.nan
    var = float(np.sum((values - mean) ** 2) / (len(values) - 1))
    return mean, math.sqrt(var)


class GaussianNB:
    """Naive Bayes with a single Gaussian per class, pooled over all features.

    Class scores accumulate from the highest class down: the score of class c
    includes the log terms of every class numbered c or higher.
    """

    def __init__(self, input_set, output_set, class_num: int) -> None:
        self.input_set = np.asarray(input_set, dtype=float)
        self.output_set = np.asarray(output_set, dtype=float)
        if self.input_set.ndim != 2 or len(self.input_set) == 0:
            raise ValueError("input set must be a non-empty matrix")
        if len(self.input_set) != len(self.output_set):
            raise ValueError("input and output sets differ in length")
        if class_num < 1:
            raise ValueError("class_num must be at least 1")
        labels = self.output_set
        if np.any(labels != np.floor(labels)) or np.any(labels < 0) or np.any(labels >= class_num):
            raise ValueError(f"labels must be integers in 0..{class_num - 1}")
        self.class_num = class_num

        stats = [_mean_std(self.input_set[labels == c].ravel()) for c in range(class_num)]
        self.mu = np.array([m for m, _ in stats])
        self.sigma = np.array([s for _, s in stats])
        counts = np.array([np.sum(labels == c) for c in range(class_num)], dtype=float)
        self.priors = counts / len(labels)

        self.y_hat = np.array([self._predict_row(row) for row in self.input_set])

    def model_set_test(self, x) -> np.ndarray:
        return np.array([self.model_test(row) for row in np.atleast_2d(np.asarray(x, dtype=float))])

    def model_test(self, x) -> float:
        """Predict from a single example, reading feature c for class c."""
        point = np.asarray(x, dtype=float)
        if point.ndim != 1 or len(point) < self.class_num:
            raise ValueError(f"example needs at least {self.class_num} features")
        with np.errstate(all="ignore"):
            terms = self._log_terms(point[: self.class_num])
        return self._pick(terms)

    def score(self) -> float:
        return _performance(self.y_hat, self.output_set)

    def _log_terms(self, values: np.ndarray) -> np.ndarray:
        """Log of prior times density, one value per entry of ``values`` and class."""
        var = self.sigma**2
        density = (1 / np.sqrt(2 * math.pi * var)) * np.exp(
            -((values * self.mu) ** 2) / (2 * var)
        )
        return np.log(self.priors * density)

    def _predict_row(self, row: np.ndarray) -> float:
        with np.errstate(all="ignore"):
            terms = np.array([self._class_terms(row, c).sum() for c in range(self.class_num)])
        return self._pick(terms)

    def _class_terms(self, row: np.ndarray, c: int) -> np.ndarray:
        var = self.sigma[c] ** 2
        density = (1 / np.sqrt(2 * math.pi * var)) * np.exp(
            -((row * self.mu[c]) ** 2) / (2 * var)
        )
        return np.log(self.priors[c] * density)

    @staticmethod
    def _pick(terms: np.ndarray) -> float:
        with np.errstate(all="ignore"):
            cumulative = 1 + np.cumsum(terms[::-1])[::-1]
            scores = np.exp(cumulative)
        best = 0
        for c, value in enumerate(scores):
            if value > scores[best]:
                best = c
        return float(best)
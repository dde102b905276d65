"""Exponential regression: y = sum_j initial_j * weights_j ** x_j + bias."""

from __future__ import annotations

import random

import numpy as np

from mlplus.cost import mse, reg_term, reg_weights


def _performance(y_hat: np.ndarray, y: np.ndarray) -> float:
    """Fraction of rounded predictions that equal their targets."""
    return float(np.mean(np.round(y_hat) == y))


def _cost_info(epoch: int, cost_prev: float, cost: float) -> None:
    print("-" * 40)
    print(f"This is epoch: {epoch}")
    print(f"The cost function has been minimized by {cost_prev - cost:g}")
    print(f"Current Cost: {cost:g}")


def _mini_batches(x: np.ndarray, y: np.ndarray, n_batches: int):
    """Split in order into equal batches; the remainder joins the last one."""
    size = len(x) // n_batches
    bounds = [i * size for i in range(n_batches)] + [len(x)]
    return [(x[lo:hi], y[lo:hi]) for lo, hi in zip(bounds, bounds[1:])]


class ExpReg:
    """Exponential regression fit by gradient methods with optional regularisation."""

    def __init__(
        self,
        input_set,
        output_set,
        reg: str = "None",
        lam: float = 0.5,
        alpha: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        self.input_set = np.asarray(input_set, dtype=float)
        self.output_set = np.asarray(output_set, dtype=float)
        if self.input_set.ndim != 2 or len(self.input_set) == 0:
            raise ValueError("input set must be a non-empty matrix")
        if len(self.input_set) != len(self.output_set):
            raise ValueError("input and output sets differ in length")
        self.reg = reg
        self.lam = lam
        self.alpha = alpha
        self._rng = rng or random.Random()
        k = self.input_set.shape[1]
        self.weights = np.array([self._rng.random() for _ in range(k)])
        self.initial = np.array([self._rng.random() for _ in range(k)])
        self.bias = self._rng.random()
        self.y_hat = np.zeros(len(self.input_set))

    def model_set_test(self, x) -> np.ndarray:
        return self._evaluate(np.atleast_2d(np.asarray(x, dtype=float)))

    def model_test(self, x) -> float:
        return float(self.model_set_test([x])[0])

    def gradient_descent(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        x, y = self.input_set, self.output_set
        self._forward_pass()
        for epoch in range(1, max_epoch + 1):
            cost_prev = self._cost(self.y_hat, y)
            self._step(x, self.y_hat - y, learning_rate)
            self.bias -= learning_rate * float(np.mean(self.y_hat - y))
            self._forward_pass()
            if ui:
                self._report(epoch, cost_prev, self._cost(self.y_hat, y))

    def sgd(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        n = len(self.input_set)
        for epoch in range(1, max_epoch + 1):
            idx = self._rng.randint(0, n - 1)
            x = self.input_set[idx : idx + 1]
            y = self.output_set[idx : idx + 1]
            y_hat = self._evaluate(x)
            cost_prev = self._cost(y_hat, y)
            self._step(x, y_hat - y, learning_rate)
            self.bias -= learning_rate * float(y_hat[0] - y[0])
            if ui:
                self._report(epoch, cost_prev, self._cost(self._evaluate(x), y))
        self._forward_pass()

    def mbgd(
        self, learning_rate: float, max_epoch: int, mini_batch_size: int, ui: bool = True
    ) -> None:
        """Mini-batch gradient descent on weights and initial values; the bias is left unchanged."""
        if mini_batch_size <= 0:
            raise ValueError("mini_batch_size must be positive")
        n_batches = len(self.input_set) // mini_batch_size
        if n_batches == 0:
            raise ValueError("mini_batch_size exceeds the number of examples")
        batches = _mini_batches(self.input_set, self.output_set, n_batches)
        for epoch in range(1, max_epoch + 1):
            for x, y in batches:
                y_hat = self._evaluate(x)
                cost_prev = self._cost(y_hat, y)
                self._step(x, y_hat - y, learning_rate)
                if ui:
                    self._report(epoch, cost_prev, self._cost(self._evaluate(x), y))
        self._forward_pass()

    def score(self) -> float:
        return _performance(self.y_hat, self.output_set)

    def _step(self, x: np.ndarray, error: np.ndarray, learning_rate: float) -> None:
        with np.errstate(all="ignore"):
            w_gradient = np.mean(error[:, None] * x * self.weights ** (x - 1), axis=0)
            i_gradient = np.mean(error[:, None] * self.weights**x, axis=0)
        self.weights = self.weights - learning_rate * w_gradient
        self.initial = self.initial - learning_rate * i_gradient
        self.weights = reg_weights(self.weights, self.lam, self.alpha, self.reg)

    def _cost(self, y_hat: np.ndarray, y: np.ndarray) -> float:
        return mse(y_hat, y) + reg_term(self.weights, self.lam, self.alpha, self.reg)

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            return np.sum(self.initial * self.weights**x, axis=1) + self.bias

    def _forward_pass(self) -> None:
        self.y_hat = self._evaluate(self.input_set)

    def _report(self, epoch: int, cost_prev: float, cost: float) -> None:
        _cost_info(epoch, cost_prev, cost)
        print("Weights:", self.weights)
        print("Bias:", self.bias)
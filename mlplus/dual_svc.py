"""Support vector classifier trained on the dual formulation with a linear kernel."""

from __future__ import annotations

import random

import numpy as np

from mlplus.cost import dual_form_svm, dual_form_svm_deriv

KERNELS = ("Linear",)


def _performance(y_hat: np.ndarray, y: np.ndarray) -> float:
    """Fraction of rounded predictions that equal their targets."""
    return float(np.mean(np.round(y_hat) == y))


def _cost_info(epoch: int, cost_prev: float, cost: float) -> None:
    print("-" * 40)
    print(f"This is epoch: {epoch}")
    print(f"The cost function has been minimized by {cost_prev - cost:g}")
    print(f"Current Cost: {cost:g}")


class DualSVC:
    """Binary classifier with labels -1 and +1, fit by projected gradient descent
    on the Lagrange multipliers of the dual SVM problem."""

    def __init__(
        self,
        input_set,
        output_set,
        c: float,
        kernel: str = "Linear",
        rng: random.Random | None = None,
    ) -> None:
        if kernel not in KERNELS:
            raise ValueError(f"unsupported kernel {kernel!r}; choose from {KERNELS}")
        self.input_set = np.asarray(input_set, dtype=float)
        self.output_set = np.asarray(output_set, dtype=float)
        if self.input_set.ndim != 2 or len(self.input_set) == 0:
            raise ValueError("input set must be a non-empty matrix")
        if len(self.input_set) != len(self.output_set):
            raise ValueError("input and output sets differ in length")
        self.c = c
        self.kernel = kernel
        rng = rng or random.Random()
        self.bias = rng.random()
        self.alpha = np.array([rng.random() for _ in range(len(self.input_set))])
        self.gram = self.kernel_function(self.input_set, self.input_set)
        self.z = np.zeros(len(self.input_set))
        self.y_hat = np.zeros(len(self.input_set))

    def kernel_function(self, u, v):
        """Linear kernel: a dot product for vectors, ``u @ v.T`` for matrices."""
        a = np.asarray(u, dtype=float)
        b = np.asarray(v, dtype=float)
        if a.ndim == 1 and b.ndim == 1:
            return float(a @ b)
        return np.atleast_2d(a) @ np.atleast_2d(b).T

    def model_set_test(self, x) -> np.ndarray:
        return np.sign(self._propagate(np.atleast_2d(np.asarray(x, dtype=float))))

    def model_test(self, x) -> float:
        return float(self.model_set_test([x])[0])

    def gradient_descent(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        x, y = self.input_set, self.output_set
        self._forward_pass()
        for epoch in range(1, max_epoch + 1):
            cost_prev = dual_form_svm(self.alpha, x, y)
            self.alpha = self.alpha - learning_rate * dual_form_svm_deriv(self.alpha, x, y)
            self.alpha = np.clip(self.alpha, 0.0, self.c)

            # The bias is estimated from the first training example alone.
            total = 0.0
            if 0 < self.alpha[0] < self.c:
                support = self.alpha > 0
                total = float(
                    np.sum(self.alpha[support] * y[support] * (x[support] @ x[0]))
                )
            bias_gradient = (1 - y[0] * total) / y[0]
            self.bias -= bias_gradient * learning_rate

            self._forward_pass()
            if ui:
                _cost_info(epoch, cost_prev, dual_form_svm(self.alpha, x, y))
                print("Weights:", self.alpha)
                print("Bias:", self.bias)
                print(self.score())

    def score(self) -> float:
        return _performance(self.y_hat, self.output_set)

    def _propagate(self, x: np.ndarray) -> np.ndarray:
        active = self.alpha != 0
        coeffs = self.alpha[active] * self.output_set[active]
        return x @ self.input_set[active].T @ coeffs + self.bias

    def _forward_pass(self) -> None:
        self.z = self._propagate(self.input_set)
        self.y_hat = np.sign(self.z)
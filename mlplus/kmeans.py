"""K-means clustering with random or k-means++ style centroid initialisation."""

from __future__ import annotations

import random

import numpy as np

# Starting value for the nearest-other-cluster distance in silhouette scores.
_INT_MAX = 2147483647.0


def _cost_info(epoch: int, cost_prev: float, cost: float) -> None:
    print("-" * 40)
    print(f"This is epoch: {epoch}")
    print(f"The cost function has been minimized by {cost_prev - cost:g}")
    print(f"Current Cost: {cost:g}")


class KMeans:
    """Lloyd's algorithm over the rows of ``input_set``.

    Assignments are kept as a responsibility matrix ``r`` with one row per
    example and one column per centroid. A row marks every centroid equal in
    value to the nearest one, so duplicate centroids share their members.
    """

    def __init__(
        self,
        input_set,
        k: int,
        init_type: str = "Default",
        rng: random.Random | None = None,
    ) -> None:
        self.input_set = np.asarray(input_set, dtype=float)
        if self.input_set.ndim != 2 or len(self.input_set) == 0:
            raise ValueError("input set must be a non-empty matrix")
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self.init_type = init_type
        self._rng = rng or random.Random()
        if init_type == "KMeans++":
            self.mu = self._kmeanspp_centroids()
        else:
            self.mu = self._random_centroids()
        self.r = np.zeros((len(self.input_set), k))
        self._evaluate()

    def model_set_test(self, x) -> np.ndarray:
        """Nearest centroid for every row of ``x``."""
        points = np.atleast_2d(np.asarray(x, dtype=float))
        return np.array([self.mu[self._nearest(point)] for point in points])

    def model_test(self, x) -> np.ndarray:
        """Nearest centroid to the point ``x``."""
        return self.mu[self._nearest(np.asarray(x, dtype=float))].copy()

    def train(self, epoch_num: int, ui: bool = True) -> None:
        self._evaluate()
        for epoch in range(1, epoch_num + 1):
            cost_prev = self._cost()
            self._compute_mu()
            self._evaluate()
            if ui:
                _cost_info(epoch, cost_prev, self._cost())

    def score(self) -> float:
        """Within-cluster sum of squared distances."""
        return self._cost()

    def silhouette_scores(self) -> np.ndarray:
        """Silhouette-style score for every example.

        The intra-cluster distance sum is divided by the number of features
        minus one, and the distance to another cluster is the sum of distances
        to all examples divided by that cluster's size.
        """
        x = self.input_set
        closest = self.model_set_test(x)
        pair = np.linalg.norm(x[:, None, :] - x[None, :, :], axis=2)
        n_features = x.shape[1]
        scores = []
        with np.errstate(all="ignore"):
            for i, row in enumerate(self.r):
                same = np.all(self.r == row, axis=1)
                same[i] = False
                a = pair[i, same].sum() / np.float64(n_features - 1)
                b = np.float64(_INT_MAX)
                total = pair[i].sum()
                for centroid in self.mu:
                    if np.array_equal(closest[i], centroid):
                        continue
                    size = np.float64(np.all(closest == centroid, axis=1).sum())
                    candidate = total / size
                    if candidate < b:
                        b = candidate
                scores.append((b - a) / np.fmax(a, b))
        return np.array(scores, dtype=float)

    def _nearest(self, point: np.ndarray) -> int:
        dists = np.linalg.norm(self.mu - point, axis=1)
        best = 0
        for j, dist in enumerate(dists):
            if dist < dists[best]:
                best = j
        return best

    def _evaluate(self) -> None:
        rows = []
        for point in self.input_set:
            closest = self.mu[self._nearest(point)]
            rows.append(np.all(self.mu == closest, axis=1))
        self.r = np.array(rows, dtype=float)

    def _compute_mu(self) -> None:
        with np.errstate(all="ignore"):
            counts = self.r.sum(axis=0)
            self.mu = (self.r.T @ self.input_set) / counts[:, None]

    def _random_centroids(self) -> np.ndarray:
        n = len(self.input_set)
        picks = [self._rng.randint(0, n - 1) for _ in range(self.k)]
        return self.input_set[picks].copy()

    def _kmeanspp_centroids(self) -> np.ndarray:
        """First centroid at random; each further one is the last example whose
        summed distance to the centroids chosen so far is non-zero."""
        n = len(self.input_set)
        centroids = [self.input_set[self._rng.randint(0, n - 1)]]
        for _ in range(self.k - 1):
            chosen = None
            for point in self.input_set:
                total = sum(float(np.linalg.norm(point - c)) for c in centroids)
                if total * total > 0:
                    chosen = point
            if chosen is None:
                raise ValueError("all examples coincide; cannot place another centroid")
            centroids.append(chosen)
        return np.array(centroids, dtype=float)

    def _cost(self) -> float:
        with np.errstate(all="ignore"):
            diff = self.input_set[:, None, :] - self.mu[None, :, :]
            return float(np.sum(self.r * np.sum(diff**2, axis=2)))
"""Dataset loading, printing, image colour conversions and feature preprocessing."""

from __future__ import annotations

import os
import random
import sys
from typing import Iterable, Sequence, TextIO, Union

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]

BREAST_CANCER_SIZE = 30
IRIS_SIZE = 4
WINE_SIZE = 4
IRIS_CLASSES = 3
WINE_CLASSES = 3
MNIST_SIZE = 784
MNIST_CLASSES = 10
CALIFORNIA_HOUSING_SIZE = 13

RGB2XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126726, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)

_GRAY_WEIGHTS = np.array([0.299, 0.587, 0.114])
_YCBCR = np.array(
    [
        [0.299, 0.587, 0.114],
        [-0.169, -0.331, 0.500],
        [0.500, -0.419, -0.081],
    ]
)


# Reading and printing CSV data

def _csv_rows(path: PathLike, width: int) -> list[list[float]]:
    """Parse the first ``width`` comma-separated fields of every line as floats."""
    rows = []
    with open(path, encoding="utf-8") as handle:
        for lineno, line in enumerate(handle.read().splitlines(), start=1):
            fields = line.split(",")
            if len(fields) < width:
                raise ValueError(
                    f"{path}:{lineno}: expected at least {width} fields, got {len(fields)}"
                )
            rows.append([float(field) for field in fields[:width]])
    return rows


def read_supervised(path: PathLike, k: int) -> tuple[np.ndarray, np.ndarray]:
    """Read rows of ``k`` features followed by one output value."""
    rows = np.array(_csv_rows(path, k + 1), dtype=float).reshape(-1, k + 1)
    return rows[:, :k], rows[:, k]


def read_unsupervised(path: PathLike, k: int) -> np.ndarray:
    """Read rows of ``k`` features."""
    return np.array(_csv_rows(path, k), dtype=float).reshape(-1, k)


def read_simple(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    """Read two-column data: one input value and one output value per line."""
    rows = np.array(_csv_rows(path, 2), dtype=float).reshape(-1, 2)
    return rows[:, 0], rows[:, 1]


def read_input_names(path: PathLike) -> list[str]:
    """Read one feature name per line."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


def _write_column(name: str, values: Iterable[float], out: TextIO) -> None:
    print(name, file=out)
    for value in values:
        print(f"{value:g}", file=out)


def print_supervised(
    input_names: Sequence[str],
    output_name: str,
    input_set,
    output_set,
    file: TextIO | None = None,
) -> None:
    """Print every feature column under its name, then the output column."""
    out = file if file is not None else sys.stdout
    columns = np.asarray(input_set, dtype=float).T
    for name, column in zip(input_names, columns):
        _write_column(name, column, out)
    _write_column(output_name, np.asarray(output_set, dtype=float), out)


def print_unsupervised(input_names: Sequence[str], input_set, file: TextIO | None = None) -> None:
    """Print every feature column under its name."""
    out = file if file is not None else sys.stdout
    columns = np.asarray(input_set, dtype=float).T
    for name, column in zip(input_names, columns):
        _write_column(name, column, out)


def print_simple(
    input_name: str, output_name: str, input_set, output_set, file: TextIO | None = None
) -> None:
    """Print the input column and the output column under their names."""
    out = file if file is not None else sys.stdout
    _write_column(input_name, np.asarray(input_set, dtype=float), out)
    _write_column(output_name, np.asarray(output_set, dtype=float), out)


# Named datasets

def load_breast_cancer(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    return read_supervised(path, BREAST_CANCER_SIZE)


def load_breast_cancer_svc(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    return read_supervised(path, BREAST_CANCER_SIZE)


def load_iris(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    inputs, labels = read_supervised(path, IRIS_SIZE)
    return inputs, one_hot(labels, IRIS_CLASSES)


def load_wine(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    inputs, labels = read_supervised(path, WINE_SIZE)
    return inputs, one_hot(labels, WINE_CLASSES)


def load_mnist_train(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    inputs, labels = read_supervised(path, MNIST_SIZE)
    return inputs, one_hot(labels, MNIST_CLASSES)


def load_mnist_test(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    inputs, labels = read_supervised(path, MNIST_SIZE)
    return inputs, one_hot(labels, MNIST_CLASSES)


def load_california_housing(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    return read_supervised(path, CALIFORNIA_HOUSING_SIZE)


def load_fires_and_crime(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
    return read_simple(path)


def train_test_split(
    input_set, output_set, test_size: float, rng: random.Random | None = None
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Shuffle the examples and hold out ``floor(test_size * n)`` of them.

    Returns ``(train_inputs, train_outputs, test_inputs, test_outputs)``.
    """
    inputs = np.asarray(input_set, dtype=float)
    outputs = np.asarray(output_set, dtype=float)
    if len(inputs) != len(outputs):
        raise ValueError("input and output sets differ in length")
    if not 0 <= test_size <= 1:
        raise ValueError("test_size must lie in [0, 1]")
    order = list(range(len(inputs)))
    (rng or random.Random()).shuffle(order)
    n_test = int(test_size * len(order))
    test_idx, train_idx = order[:n_test], order[n_test:]
    return inputs[train_idx], outputs[train_idx], inputs[test_idx], outputs[test_idx]


# Images, stored channel first: (3, height, width)

def _image(image) -> np.ndarray:
    arr = np.asarray(image, dtype=float)
    if arr.ndim != 3 or arr.shape[0] < 3:
        raise ValueError("image must have shape (3, height, width)")
    return arr[:3]


def rgb2gray(image) -> np.ndarray:
    return np.einsum("c,cij->ij", _GRAY_WEIGHTS, _image(image))


def rgb2ycbcr(image) -> np.ndarray:
    return np.einsum("ck,kij->cij", _YCBCR, _image(image))


def rgb2hsv(image) -> np.ndarray:
    """Convert 0-255 RGB to hue in degrees, saturation and value in [0, 1]."""
    rgb = _image(image) / 255
    r, g, b = rgb
    c_max = rgb.max(axis=0)
    c_min = rgb.min(axis=0)
    delta = c_max - c_min
    safe = np.where(delta == 0, 1.0, delta)
    hue = np.where(
        c_max == r,
        60 * np.fmod((g - b) / safe, 6),
        np.where(c_max == g, 60 * ((b - r) / safe + 2), 60 * ((r - g) / safe + 6)),
    )
    hue = np.where(delta == 0, 0.0, hue)
    saturation = np.where(c_max == 0, 0.0, delta / np.where(c_max == 0, 1.0, c_max))
    return np.stack([hue, saturation, c_max])


def rgb2xyz(image) -> np.ndarray:
    return np.einsum("ck,kij->cij", RGB2XYZ, _image(image))


def xyz2rgb(image) -> np.ndarray:
    return np.einsum("ck,kij->cij", np.linalg.inv(RGB2XYZ), _image(image))


# Feature preprocessing

def feature_scaling(x) -> np.ndarray:
    """Min-max scale every column to [0, 1]."""
    arr = np.asarray(x, dtype=float)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return (arr - lo) / (hi - lo)


def mean_centering(x) -> np.ndarray:
    """Subtract from every row its own mean."""
    arr = np.asarray(x, dtype=float)
    return arr - arr.mean(axis=1, keepdims=True)


def mean_normalization(x) -> np.ndarray:
    """Centre every row and divide it by its sample standard deviation."""
    centred = mean_centering(x)
    return centred / centred.std(axis=1, ddof=1, keepdims=True)


def one_hot(labels, n_class: int) -> np.ndarray:
    """One row per label with a 1 in the column equal to the label."""
    values = np.asarray(labels, dtype=float).reshape(-1, 1)
    return (values == np.arange(n_class)).astype(float)


def reverse_one_hot(one_hot_set) -> np.ndarray:
    """Position of the first 1 in each row, counted from 1.

    A row without a 1 maps to the number of columns plus one.
    """
    arr = np.asarray(one_hot_set, dtype=float)
    if arr.ndim != 2:
        raise ValueError("one-hot set must be two-dimensional")
    hits = arr == 1
    first = np.where(hits.any(axis=1), hits.argmax(axis=1), arr.shape[1])
    return first.astype(float) + 1
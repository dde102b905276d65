import io
import random

import numpy as np
import pytest

from mlplus import data


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_supervised(tmp_path):
    path = _write(tmp_path, "s.csv", "1,2,0\n3,4,1\n5,6,0\n")
    inputs, outputs = data.read_supervised(path, 2)
    assert inputs.tolist() == [[1, 2], [3, 4], [5, 6]]
    assert outputs.tolist() == [0, 1, 0]


def test_read_unsupervised(tmp_path):
    path = _write(tmp_path, "u.csv", "1.5,2\n3,4.25\n")
    assert data.read_unsupervised(path, 2).tolist() == [[1.5, 2], [3, 4.25]]


def test_read_simple(tmp_path):
    path = _write(tmp_path, "f.csv", "1,10\n2,20\n")
    x, y = data.read_simple(path)
    assert x.tolist() == [1, 2]
    assert y.tolist() == [10, 20]


def test_read_short_line_raises(tmp_path):
    path = _write(tmp_path, "bad.csv", "1,2\n")
    with pytest.raises(ValueError):
        data.read_supervised(path, 2)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        data.read_simple(tmp_path / "missing.csv")


def test_read_input_names(tmp_path):
    path = _write(tmp_path, "names.txt", "age\nheight\n")
    assert data.read_input_names(path) == ["age", "height"]


def test_print_supervised_columns():
    out = io.StringIO()
    data.print_supervised(["a", "b"], "y", [[1, 2], [3, 4]], [5, 6], file=out)
    assert out.getvalue().split() == ["a", "1", "3", "b", "2", "4", "y", "5", "6"]


def test_print_unsupervised_and_simple():
    out = io.StringIO()
    data.print_unsupervised(["a"], [[1.5], [2]], file=out)
    assert out.getvalue().split() == ["a", "1.5", "2"]
    out = io.StringIO()
    data.print_simple("x", "y", [1, 2], [3, 4], file=out)
    assert out.getvalue().split() == ["x", "1", "2", "y", "3", "4"]


def test_load_iris_one_hot(tmp_path):
    path = _write(tmp_path, "iris.csv", "5.1,3.5,1.4,0.2,0\n6.2,2.9,4.3,1.3,2\n")
    inputs, outputs = data.load_iris(path)
    assert inputs.shape == (2, 4)
    assert outputs.tolist() == [[1, 0, 0], [0, 0, 1]]


def test_load_fires_and_crime(tmp_path):
    path = _write(tmp_path, "fc.csv", "3,7\n")
    x, y = data.load_fires_and_crime(path)
    assert (x.tolist(), y.tolist()) == ([3], [7])


def test_train_test_split_keeps_pairs():
    inputs = [[float(i)] for i in range(10)]
    outputs = [[float(i) * 2] for i in range(10)]
    tr_in, tr_out, te_in, te_out = data.train_test_split(
        inputs, outputs, 0.3, random.Random(1)
    )
    assert len(te_in) == 3 and len(tr_in) == 7
    assert np.allclose(tr_out, tr_in * 2)
    assert np.allclose(te_out, te_in * 2)
    merged = sorted(np.concatenate([tr_in, te_in]).ravel().tolist())
    assert merged == [float(i) for i in range(10)]


def test_train_test_split_length_mismatch():
    with pytest.raises(ValueError):
        data.train_test_split([[1.0], [2.0]], [[1.0]], 0.5)


def test_rgb2gray_weights():
    image = np.zeros((3, 1, 3))
    image[0, 0, 0] = image[1, 0, 1] = image[2, 0, 2] = 1.0
    assert np.allclose(data.rgb2gray(image), [[0.299, 0.587, 0.114]])


def test_rgb2ycbcr_luma_matches_gray():
    rng = np.random.default_rng(0)
    image = rng.uniform(0, 255, (3, 2, 2))
    assert np.allclose(data.rgb2ycbcr(image)[0], data.rgb2gray(image))


def test_rgb2hsv_primaries():
    image = np.zeros((3, 1, 3))
    image[0, 0, 0] = 255
    image[1, 0, 1] = 255
    image[2, 0, 2] = 255
    hsv = data.rgb2hsv(image)
    assert np.allclose(hsv[0, 0], [0, 120, 240])
    assert np.allclose(hsv[1, 0], 1.0)
    assert np.allclose(hsv[2, 0], 1.0)


def test_rgb2hsv_gray_pixel_has_no_hue():
    image = np.full((3, 1, 1), 51.0)
    hsv = data.rgb2hsv(image)
    assert hsv[0, 0, 0] == 0 and hsv[1, 0, 0] == 0
    assert hsv[2, 0, 0] == pytest.approx(51 / 255)


def test_xyz_round_trip():
    rng = np.random.default_rng(1)
    image = rng.uniform(0, 1, (3, 2, 3))
    assert np.allclose(data.xyz2rgb(data.rgb2xyz(image)), image)


def test_image_shape_checked():
    with pytest.raises(ValueError):
        data.rgb2gray([[1.0, 2.0]])


def test_feature_scaling_range():
    scaled = data.feature_scaling([[1, 10], [3, 30], [2, 20]])
    assert np.allclose(scaled.min(axis=0), 0)
    assert np.allclose(scaled.max(axis=0), 1)


def test_mean_centering_rows():
    centred = data.mean_centering([[1, 2, 3], [4, 8, 12]])
    assert np.allclose(centred.mean(axis=1), 0)


def test_mean_normalization_rows():
    normed = data.mean_normalization([[1, 2, 3, 7], [4, 8, 12, 1]])
    assert np.allclose(normed.mean(axis=1), 0)
    assert np.allclose(normed.std(axis=1, ddof=1), 1)


def test_one_hot_round_trip():
    labels = [0, 2, 1, 2]
    encoded = data.one_hot(labels, 3)
    assert np.allclose(encoded.sum(axis=1), 1)
    assert data.reverse_one_hot(encoded).tolist() == [label + 1 for label in labels]


def test_reverse_one_hot_without_hit():
    assert data.reverse_one_hot([[0, 0, 0]]).tolist() == [4]
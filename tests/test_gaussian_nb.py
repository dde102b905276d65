import numpy as np
import pytest

from mlplus.gaussian_nb import GaussianNB

X = [[1.0, 2.0], [1.5, 1.8], [5.0, 8.0], [6.0, 9.0]]
Y = [0, 0, 1, 1]


def test_single_class_always_predicts_zero():
    model = GaussianNB([[1.0], [2.0], [3.0]], [0, 0, 0], 1)
    assert model.model_test([7.0]) == 0.0
    assert model.score() == 1.0


def test_priors_follow_label_frequencies():
    model = GaussianNB(X, [0, 0, 0, 1], 2)
    np.testing.assert_allclose(model.priors, [0.75, 0.25])


def test_predictions_are_valid_classes():
    model = GaussianNB(X, Y, 2)
    preds = model.model_set_test(X)
    assert len(preds) == len(X)
    assert set(preds.tolist()) <= {0.0, 1.0}


def test_batch_matches_single():
    model = GaussianNB(X, Y, 2)
    points = [[0.5, 0.2], [4.0, 7.0]]
    assert model.model_set_test(points).tolist() == [model.model_test(p) for p in points]


def test_score_is_a_fraction():
    score = GaussianNB(X, Y, 2).score()
    assert 0.0 <= score <= 1.0


def test_class_statistics_pool_features():
    model = GaussianNB(X, Y, 2)
    assert model.mu[0] == pytest.approx(np.mean([1.0, 2.0, 1.5, 1.8]))
    assert model.sigma[1] == pytest.approx(np.std([5.0, 8.0, 6.0, 9.0], ddof=1))


def test_short_example_rejected():
    model = GaussianNB(X, Y, 2)
    with pytest.raises(ValueError):
        model.model_test([1.0])


def test_out_of_range_label_rejected():
    with pytest.raises(ValueError):
        GaussianNB(X, [0, 0, 1, 2], 2)


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        GaussianNB(X, [0, 1], 2)
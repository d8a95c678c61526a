import math

import numpy as np
import pytest

from classiris.exceptions import NotFittedError, ShapeError
from classiris.models import NaiveBayes
from classiris.utils.statistics import VARIANCE_FLOOR

from conftest import make_dataset


def test_two_points(two_points):
    nb = NaiveBayes().fit(two_points)
    assert nb.predict([0.4, 0.4, 0.4, 0.4]) == "A"
    assert nb.predict([0.6, 0.6, 0.6, 0.6]) == "B"
    for stats in nb.class_statistics.values():
        assert np.all(stats.variances == VARIANCE_FLOOR)


def test_prior_decides_between_identical_gaussians():
    data = make_dataset([([1.0], "Z")] * 9 + [([1.0], "A")])
    nb = NaiveBayes().fit(data)
    assert nb.priors == {"A": pytest.approx(0.1), "Z": pytest.approx(0.9)}
    for query in ([1.0], [0.0], [25.0]):
        assert nb.predict(query) == "Z"


def test_priors_sum_to_one(iris):
    nb = NaiveBayes().fit(iris)
    assert list(nb.priors) == iris.classes
    assert sum(nb.priors.values()) == pytest.approx(1.0)


def test_class_statistics(iris):
    nb = NaiveBayes().fit(iris)
    setosa = np.array([s.features for s in iris if s.label == "Iris-setosa"])
    stats = nb.class_statistics["Iris-setosa"]
    np.testing.assert_allclose(stats.means, setosa.mean(axis=0))
    np.testing.assert_allclose(stats.variances, setosa.var(axis=0, ddof=1))
    assert stats.prior == pytest.approx(1 / 3)


def test_log_scores_formula():
    data = make_dataset([([0.0], "A"), ([2.0], "A"), ([10.0], "B"), ([12.0], "B")])
    nb = NaiveBayes().fit(data)
    scores = nb.log_scores([1.0])
    # class A: mean 1, variance 2; class B: mean 11, variance 2
    expected_a = math.log(0.5) - 0.5 * math.log(2 * math.pi * 2.0)
    expected_b = math.log(0.5) - 0.5 * math.log(2 * math.pi * 2.0) - 100.0 / 4.0
    assert scores["A"] == pytest.approx(expected_a)
    assert scores["B"] == pytest.approx(expected_b)
    assert nb.predict([1.0]) == "A"


def test_single_sample_class():
    nb = NaiveBayes().fit(make_dataset([([5.0, 1.0], "only")]))
    assert nb.predict([0.0, 0.0]) == "only"


def test_tie_goes_to_smallest_label():
    data = make_dataset([([0.0], "b"), ([2.0], "a")])
    assert NaiveBayes().fit(data).predict([1.0]) == "a"


def test_not_fitted():
    with pytest.raises(NotFittedError):
        NaiveBayes().predict([1.0])
    with pytest.raises(NotFittedError):
        NaiveBayes().fit(make_dataset([])).predict([1.0])


def test_shape_mismatch(two_points):
    with pytest.raises(ShapeError):
        NaiveBayes().fit(two_points).predict([1.0])

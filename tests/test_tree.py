import logging

import numpy as np
import pytest

from classiris.exceptions import NotFittedError, ShapeError
from classiris.models import DecisionTree
from classiris.models.tree import Leaf, Split, find_best_split

from conftest import make_dataset


def _check_splits(node, samples):
    """walk the tree along with the training samples reaching each node,
    returning the number of splits visited"""
    if isinstance(node, Leaf):
        return 0
    best = find_best_split(samples)
    assert best is not None and best.info_gain > 0
    assert (node.feature_index, node.threshold) == (best.feature_index, best.threshold)
    goes_left = samples.features[:, node.feature_index] <= node.threshold
    left = samples.subset(np.flatnonzero(goes_left))
    right = samples.subset(np.flatnonzero(~goes_left))
    assert len(left) > 0 and len(right) > 0
    return 1 + _check_splits(node.left, left) + _check_splits(node.right, right)


def test_two_points(two_points):
    tree = DecisionTree().fit(two_points)
    assert tree.root == Split(0, 0.5, Leaf("A"), Leaf("B"))
    assert tree.predict([0.4, 0.4, 0.4, 0.4]) == "A"
    assert tree.predict([0.5, 0.9, 0.9, 0.9]) == "A"
    assert tree.predict([0.6, 0.0, 0.0, 0.0]) == "B"


def test_threshold_between_classes(line_xy):
    tree = DecisionTree().fit(line_xy)
    assert tree.root == Split(0, 2.5, Leaf("X"), Leaf("Y"))
    assert tree.predict_all(line_xy) == line_xy.labels
    assert tree.depth() == 1
    assert tree.nb_leaves() == 2


def test_best_split_gain(line_xy):
    split = find_best_split(list(line_xy))
    assert split.feature_index == 0
    assert split.threshold == 2.5
    assert split.info_gain == pytest.approx(1.0)


def test_best_split_keeps_first_of_equal_gains(two_points):
    split = find_best_split(list(two_points))
    assert split.feature_index == 0


def test_no_split_on_constant_features():
    data = make_dataset([([1, 1], "A"), ([1, 1], "B"), ([1, 1], "B")])
    assert find_best_split(list(data)) is None
    tree = DecisionTree().fit(data)
    assert tree.root == Leaf("B")


def test_identical_features_tie_goes_to_smallest_label():
    data = make_dataset([([2.0], "B"), ([2.0], "A")])
    assert DecisionTree().fit(data).root == Leaf("A")


def test_single_sample_is_a_leaf():
    tree = DecisionTree().fit(make_dataset([([1, 2, 3, 4], "A")]))
    assert tree.root == Leaf("A")
    assert tree.predict([9, 9, 9, 9]) == "A"
    assert tree.depth() == 0


def test_unfitted_tree():
    with pytest.raises(NotFittedError):
        DecisionTree().predict([1.0])


def test_empty_training_set_leaves_tree_unfitted():
    tree = DecisionTree().fit(make_dataset([]))
    assert tree.root is None
    with pytest.raises(NotFittedError):
        tree.predict([1.0])


def test_shape_mismatch(line_xy):
    tree = DecisionTree().fit(line_xy)
    with pytest.raises(ShapeError):
        tree.predict([1.0, 2.0])


def test_perfect_training_accuracy_on_iris(iris):
    tree = DecisionTree().fit(iris)
    assert tree.predict_all(iris) == iris.labels


def test_perfect_training_accuracy_without_conflicts():
    data = make_dataset([([0.1, 3.0], "a"), ([0.2, 1.0], "b"), ([0.3, 2.0], "a"),
                         ([0.4, 0.5], "c"), ([0.5, 2.5], "b"), ([0.6, 0.7], "c")])
    tree = DecisionTree().fit(data)
    assert tree.predict_all(data) == data.labels


def test_every_split_is_the_best_positive_gain_split_of_its_samples(iris):
    tree = DecisionTree().fit(iris)
    assert _check_splits(tree.root, iris) == tree.nb_leaves() - 1


def test_predict_is_idempotent(iris):
    tree = DecisionTree().fit(iris)
    before = str(tree)
    assert [tree.predict(s) for s in iris] == [tree.predict(s) for s in iris]
    assert str(tree) == before


def test_text_rendering(line_xy):
    tree = DecisionTree().fit(line_xy)
    assert tree.to_text(feature_names=["size"]) == "size <= 2.5\n    X\nsize > 2.5\n    Y"
    assert DecisionTree().to_text() == "<not fitted>"


def test_debug_flag_only_affects_its_own_instance(line_xy, caplog):
    DecisionTree(DEBUG=True).fit(line_xy)
    caplog.clear()
    with caplog.at_level(logging.INFO, logger="classiris.models.tree"):
        DecisionTree().fit(line_xy)
    assert caplog.records == []

    with caplog.at_level(logging.INFO, logger="classiris.models.tree"):
        DecisionTree(DEBUG=True).fit(line_xy)
    assert any(r.getMessage().startswith("Split") for r in caplog.records)

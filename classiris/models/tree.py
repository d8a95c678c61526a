from collections import namedtuple

import numpy as np

from ..dataset import Dataset
from ..utils import timeit
from ..utils.statistics import entropy, majority_label
from .base import Classifier

# a node is either a Leaf or a Split; a Split always has two children
Leaf = namedtuple('Leaf', ['label'])
Split = namedtuple('Split', ['feature_index', 'threshold', 'left', 'right'])

SplitCandidate = namedtuple('SplitCandidate', ['feature_index', 'threshold', 'info_gain'])


def find_best_split(samples):
    """Search the binary split of ``samples`` with the highest information gain

    For every feature, candidate thresholds are the midpoints between
    consecutive distinct values; samples whose value is ``<=`` the threshold
    go left. Features are scanned in increasing order, thresholds in
    increasing order, and a later candidate only replaces the current one if
    its gain is strictly higher.

    :param samples: instances to split (at least one)
    :type samples: :class:`~classiris.dataset.sample.Dataset` or list of
        :class:`~classiris.dataset.sample.Sample`
    :returns: the best candidate, or None when no split has a positive gain
    :rtype: :class:`SplitCandidate`
    """
    data = samples if isinstance(samples, Dataset) else Dataset(samples)
    matrix = data.features
    labels = np.array(data.labels, dtype=object)
    nb_samples, nb_features = matrix.shape
    base_entropy = entropy(labels)

    best = SplitCandidate(-1, 0., 0.)
    for feature_index in range(nb_features):
        column = matrix[:, feature_index]
        values = np.unique(column)
        if values.size < 2:
            continue
        for low, high in zip(values[:-1], values[1:]):
            threshold = (low + high) / 2.
            goes_left = column <= threshold
            nb_left = int(goes_left.sum())
            nb_right = nb_samples - nb_left
            if nb_left == 0 or nb_right == 0:
                continue
            children_entropy = (nb_left / nb_samples * entropy(labels[goes_left])
                                + nb_right / nb_samples * entropy(labels[~goes_left]))
            info_gain = base_entropy - children_entropy
            if info_gain > best.info_gain:
                best = SplitCandidate(feature_index, float(threshold), info_gain)

    return best if best.feature_index >= 0 else None


class DecisionTree(Classifier):
    """ID3-like decision tree over continuous features.

    The tree is grown greedily: each node takes the (feature, threshold)
    split maximising information gain and recurses on both sides, until a
    node is pure or cannot be split with a positive gain, in which case it
    becomes a leaf labelled with its majority class.

    :param root: top of the tree, None while not fitted
    :type root: :class:`Leaf` or :class:`Split`

    >>> from classiris.dataset import Dataset, Sample
    >>> tree = DecisionTree().fit(Dataset([Sample([1.], 'X'), Sample([2.], 'X'),
    ...                                    Sample([3.], 'Y'), Sample([4.], 'Y')]))
    >>> print(tree)
    x[0] <= 2.5
        X
    x[0] > 2.5
        Y
    """

    def __init__(self, DEBUG=False):
        super().__init__(DEBUG)
        self.root = None

    @timeit
    def fit(self, dataset):
        """grow the tree on the training instances

        An empty data set leaves the tree unfitted.

        :param dataset: learning instances
        :type dataset: :class:`~classiris.dataset.sample.Dataset`
        """
        self.root = None
        self.nb_features = None
        data = Dataset(dataset)
        if len(data) == 0:
            return self
        self.root = self._build(data)
        self.nb_features = data.nb_features
        if self._tracing():
            self._trace("Tree grown on %s samples: depth %s, %s leaves",
                        len(data), self.depth(), self.nb_leaves())
        return self

    def _build(self, samples):
        if len(samples) == 0:
            return None
        labels = samples.labels
        if len(set(labels)) == 1:
            return Leaf(labels[0])

        split = find_best_split(samples)
        if split is None:
            return Leaf(majority_label(labels))

        goes_left = samples.features[:, split.feature_index] <= split.threshold
        left = samples.subset(np.flatnonzero(goes_left))
        right = samples.subset(np.flatnonzero(~goes_left))
        if len(left) == 0 or len(right) == 0:
            return Leaf(majority_label(labels))

        self._trace("Split %s samples on x[%s] <= %s (gain %.4f)", len(samples),
                    split.feature_index, split.threshold, split.info_gain)
        left_node = self._build(left)
        right_node = self._build(right)
        if left_node is None or right_node is None:
            return Leaf(majority_label(labels))
        return Split(split.feature_index, split.threshold, left_node, right_node)

    def predict(self, sample):
        features = self._check_query(sample)
        node = self.root
        while isinstance(node, Split):
            node = node.left if features[node.feature_index] <= node.threshold else node.right
        return node.label

    def depth(self):
        """number of splits on the longest root-to-leaf path"""
        def _depth(node):
            if isinstance(node, Leaf):
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))
        return None if self.root is None else _depth(self.root)

    def nb_leaves(self):
        def _count(node):
            if isinstance(node, Leaf):
                return 1
            return _count(node.left) + _count(node.right)
        return 0 if self.root is None else _count(self.root)

    def to_text(self, feature_names=None, indent='    '):
        """render the tree as nested rules, one test or label per line

        :param feature_names: names used in tests instead of ``x[i]``
        :type feature_names: list of strings
        :rtype: string
        """
        if self.root is None:
            return '<not fitted>'

        def _name(index):
            return feature_names[index] if feature_names is not None else 'x[%d]' % index

        lines = []

        def _render(node, level):
            prefix = indent * level
            if isinstance(node, Leaf):
                lines.append(prefix + node.label)
                return
            name = _name(node.feature_index)
            lines.append('%s%s <= %s' % (prefix, name, node.threshold))
            _render(node.left, level + 1)
            lines.append('%s%s > %s' % (prefix, name, node.threshold))
            _render(node.right, level + 1)

        _render(self.root, 0)
        return '\n'.join(lines)

    def __str__(self):
        return self.to_text()

from collections import Counter, namedtuple

import numpy as np

from ..exceptions import ShapeError


class Sample(namedtuple('Sample', ['features', 'label'])):
    """Immutable labelled instance: a vector of real-valued features and the
    class it belongs to.

    >>> s = Sample([5.1, 3.5, 1.4, 0.2], 'Iris-setosa')
    >>> s.features
    (5.1, 3.5, 1.4, 0.2)
    >>> s.label
    'Iris-setosa'
    """
    __slots__ = ()

    def __new__(cls, features, label):
        return super().__new__(cls, tuple(float(v) for v in features), str(label))

    @property
    def nb_features(self):
        return len(self.features)


class Dataset(object):
    """Ordered collection of :class:`Sample` sharing the same number of features.

    The label set is the union of observed labels. Everywhere a deterministic
    traversal of labels is needed (majority votes, argmax ties), the
    lexicographic order given by :attr:`classes` is used.

    :param samples: the samples of the data set, in their original order
    :type samples: list of :class:`Sample`
    :param nb_features: number of features of every sample (None when empty)
    :type nb_features: integer

    >>> data = Dataset([Sample([0., 0.], 'b'), Sample([1., 1.], 'a')])
    >>> len(data), data.nb_features, data.classes
    (2, 2, ['a', 'b'])
    """

    def __init__(self, samples=None):
        """Build a data set, checking that all samples have the same arity

        :param samples: the samples to store
        :type samples: iterable of :class:`Sample`
        """
        self.samples = list(samples) if samples is not None else []
        self.nb_features = None
        for sample in self.samples:
            if self.nb_features is None:
                self.nb_features = sample.nb_features
            elif sample.nb_features != self.nb_features:
                raise ShapeError(self.nb_features, sample.nb_features)

    def __len__(self):
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    def __repr__(self):
        return "Dataset(%d samples, %s features, classes=%s)" % (
            len(self), self.nb_features, self.classes)

    @property
    def classes(self):
        """sorted list of the observed labels"""
        return sorted(set(s.label for s in self.samples))

    @property
    def labels(self):
        """labels of the samples, in sample order"""
        return [s.label for s in self.samples]

    @property
    def features(self):
        """N x F matrix of features

        :rtype: :class:`~numpy.ndarray`
        """
        if not self.samples:
            return np.empty((0, 0))
        return np.array([s.features for s in self.samples], dtype=float)

    def class_counts(self):
        """number of samples of each label

        :rtype: :class:`~collections.Counter`
        """
        return Counter(s.label for s in self.samples)

    def subset(self, indices):
        """return the data set made of the samples at the given positions

        :param indices: positions of the samples to retain, in output order
        :type indices: iterable of integers
        :rtype: :class:`~classiris.dataset.sample.Dataset`
        """
        return Dataset([self.samples[i] for i in indices])

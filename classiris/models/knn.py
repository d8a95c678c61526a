import numbers

import numpy as np

from ..dataset import Dataset
from ..exceptions import ConfigError, NotEnoughDataError, NotFittedError
from ..utils.statistics import euclidean_distances, majority_label
from .base import Classifier

DEFAULT_K = 5


class KNN(Classifier):
    """KNN implements the K-nearest neighbour classifier with majority vote.

    Learning only stores the training instances. A query is compared to every
    stored instance with the Euclidean distance; instances are ranked by
    increasing distance, equal distances keeping the training order, and the
    label most represented among the first ``k`` is returned. Ties between
    labels go to the lexicographically smallest one.

    :param k: number of neighbours taking part in the vote
    :type k: positive integer
    :param learndata: N x F matrix of the training features
    :type learndata: :class:`~numpy.ndarray`
    :param truelabels: store the true labels of learning instances
    :type truelabels: list of labels

    .. note::

        The training set must hold at least ``k`` instances, otherwise
        predictions fail with :class:`~classiris.exceptions.NotEnoughDataError`.
    """

    def __init__(self, k=DEFAULT_K, DEBUG=False):
        """Build an empty KNN structure

        :param k: number of neighbours
        :type k: positive integer
        """
        super().__init__(DEBUG)
        if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k <= 0:
            raise ConfigError("k must be a positive integer, got %r" % (k,))
        self.k = int(k)
        self.learndata = None
        self.truelabels = None
        self.training = None

    def fit(self, dataset):
        """store the instances required to evaluate new ones

        :param dataset: learning instances
        :type dataset: :class:`~classiris.dataset.sample.Dataset`
        """
        self.training = Dataset(dataset)
        self.truelabels = self.training.labels
        self.learndata = self.training.features
        self.nb_features = self.training.nb_features
        if len(self.training) < self.k:
            self._trace("Only %s training samples for k=%s", len(self.training), self.k)
        return self

    def is_fitted(self):
        return self.truelabels is not None

    def neighbours(self, sample):
        """the k training instances nearest to ``sample``

        :returns: (distance, training sample) pairs, nearest first
        :rtype: list of tuples
        """
        if not self.is_fitted():
            raise NotFittedError("KNN used before fit")
        if len(self.truelabels) < self.k:
            raise NotEnoughDataError("%s training samples, cannot vote among k=%s neighbours"
                                     % (len(self.truelabels), self.k))
        query = self._check_query(sample)
        distances = euclidean_distances(query, self.learndata)
        nearest = np.argsort(distances, kind='stable')[:self.k]
        return [(float(distances[i]), self.training[i]) for i in nearest]

    def predict(self, sample):
        return majority_label(neighbour.label for _, neighbour in self.neighbours(sample))

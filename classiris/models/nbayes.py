from collections import OrderedDict, namedtuple

import numpy as np

from ..dataset import Dataset
from ..utils.statistics import VARIANCE_FLOOR, gaussian_parameters
from .base import Classifier

ClassStatistics = namedtuple('ClassStatistics', ['means', 'variances', 'prior'])


class NaiveBayes(Classifier):
    """Gaussian naive Bayes classifier.

    Each feature is modelled, within each class, by an independent normal
    distribution whose mean and (Bessel-corrected) variance are estimated on
    the training instances of the class; variances are floored at
    ``variance_floor``. Classes are weighted by their frequency in the
    training set. A query gets the label maximising

        log(prior_c) + sum_i [-0.5 log(2 pi var_ci) - (x_i - mean_ci)^2 / (2 var_ci)]

    and equal scores go to the lexicographically smallest label.

    :param class_statistics: per label, means, variances and prior
    :type class_statistics: dict label -> :class:`ClassStatistics`
    """

    def __init__(self, variance_floor=VARIANCE_FLOOR, DEBUG=False):
        super().__init__(DEBUG)
        self.variance_floor = variance_floor
        self.class_statistics = OrderedDict()

    @property
    def priors(self):
        return OrderedDict((clazz, stats.prior) for clazz, stats in self.class_statistics.items())

    def fit(self, dataset):
        """estimate class priors and per-class Gaussian parameters

        An empty data set leaves the model unfitted.

        :param dataset: learning instances
        :type dataset: :class:`~classiris.dataset.sample.Dataset`
        """
        self.class_statistics = OrderedDict()
        self.nb_features = None
        data = Dataset(dataset)
        if len(data) == 0:
            return self

        X = data.features
        y = np.array(data.labels, dtype=object)
        counts = data.class_counts()
        for clazz in data.classes:
            prior = counts[clazz] / len(data)
            means, variances = gaussian_parameters(X[y == clazz], self.variance_floor)
            self.class_statistics[clazz] = ClassStatistics(means, variances, prior)
            if self._tracing():
                self._trace("class %s: prior %.4f, means %s, variances %s", clazz,
                            prior, means, variances)
        self.nb_features = data.nb_features
        return self

    def log_scores(self, sample):
        """unnormalised log posterior of each class

        :rtype: dict label -> float, labels in lexicographic order
        """
        x = np.array(self._check_query(sample), dtype=float)
        scores = OrderedDict()
        for clazz, stats in self.class_statistics.items():
            log_likelihood = (-0.5 * np.log(2 * np.pi * stats.variances)
                              - (x - stats.means) ** 2 / (2 * stats.variances))
            scores[clazz] = float(np.log(stats.prior) + log_likelihood.sum())
        return scores

    def predict(self, sample):
        best_clazz, best_score = None, -np.inf
        for clazz, score in self.log_scores(sample).items():
            if best_clazz is None or score > best_score:
                best_clazz, best_score = clazz, score
        return best_clazz

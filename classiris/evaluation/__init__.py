import numbers

import numpy as np

from . import measures
from ..dataset.sample import Dataset
from ..exceptions import ConfigError
from ..utils import create_logger, is_level_debug

DEFAULT_FOLDS = 5

_logger = create_logger(__name__)


def fold_plan(nb_samples, folds, seed=None):
    """
    Partition positions 0..nb_samples-1 into ``folds`` contiguous blocks of a
    random permutation.

    The permutation is drawn with :meth:`numpy.random.RandomState.permutation`
    (Mersenne Twister, Fisher-Yates), so a given seed always gives the same
    plan. Blocks hold nb_samples // folds positions, the last one also takes
    the remainder.

    :param nb_samples: size of the data set
    :type nb_samples: integer
    :param folds: number of blocks, at least 2 and at most nb_samples
    :type folds: integer
    :param seed: seed of the permutation, None to draw a fresh one
    :type seed: integer
    :returns: one array of positions per block
    :rtype: list of :class:`~numpy.ndarray`
    """
    if isinstance(folds, bool) or not isinstance(folds, numbers.Integral) or folds < 2:
        raise ConfigError("Number of folds should be an integer >= 2, got %r" % (folds,))
    if nb_samples < folds:
        raise ConfigError("Cannot split %s samples into %s folds" % (nb_samples, folds))
    permutation = np.random.RandomState(seed).permutation(nb_samples)
    fold_size = nb_samples // folds
    plan = []
    for k in range(folds):
        end = nb_samples if k == folds - 1 else (k + 1) * fold_size
        plan.append(permutation[k * fold_size:end])
    return plan


def k_fold_cross_validation(data, K=DEFAULT_FOLDS, random_seed=None):
    """
    Generates K (training, validation) pairs from the samples of data.

    Validation sets are the blocks of :func:`fold_plan`; each training set
    gathers the other blocks, in shuffled order.

    :param data: the labelled samples
    :type data: :class:`~classiris.dataset.sample.Dataset`
    :param K: number of folds
    :type K: integer
    :param random_seed: set the seed for the randomisation to reproduce
        identical splits if needed
    :type random_seed: integer
    :returns: iterable over training/evaluation pairs
    :rtype: tuples of :class:`~classiris.dataset.sample.Dataset`
    """
    data = data if isinstance(data, Dataset) else Dataset(data)
    plan = fold_plan(len(data), K, random_seed)
    for k in range(K):
        training = np.concatenate(plan[:k] + plan[k + 1:])
        yield data.subset(training), data.subset(plan[k])


def cross_validation_scores(dataset, learner_factory, folds=DEFAULT_FOLDS, seed=None):
    """
    Accuracy of a freshly built learner on each fold of a k-fold split

    :param dataset: the labelled samples
    :type dataset: :class:`~classiris.dataset.sample.Dataset`
    :param learner_factory: builds an untrained model offering ``fit(dataset)``
        and ``predict(sample)``
    :type learner_factory: callable
    :param folds: number of folds
    :param seed: seed of the shuffling
    :returns: accuracies of the folds, in fold order
    :rtype: list of floats
    """
    scores = []
    for k, (training, testing) in enumerate(k_fold_cross_validation(dataset, folds, seed)):
        model = learner_factory()
        model.fit(training)
        predictions = [model.predict(sample) for sample in testing]
        fold_accuracy = measures.accuracy(testing.labels, predictions)
        _logger.debug("Fold %s (train %s, test %s): accuracy %.4f",
                      k, len(training), len(testing), fold_accuracy)
        if is_level_debug(_logger):
            _logger.debug("Confusion counts of fold %s:\n%s", k,
                          measures.confusion_counts(testing.labels, predictions))
        scores.append(fold_accuracy)
    return scores


def cross_validate(dataset, learner_factory, folds=DEFAULT_FOLDS, seed=None):
    """
    Mean accuracy over a k-fold cross-validation, see :func:`cross_validation_scores`

    :rtype: float in [0, 1]
    """
    scores = cross_validation_scores(dataset, learner_factory, folds, seed)
    return sum(scores) / folds

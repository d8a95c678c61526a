"""Console entry points: evaluate one classifier on the Iris data set.

Each command reads ``resources/iris.data``, runs a 5-fold cross-validation
seeded from the clock and prints the mean accuracy as a percentage.
"""
import sys
import time

from .dataset import load_iris
from .evaluation import DEFAULT_FOLDS, cross_validate
from .exceptions import DatasetIOError, EmptyDatasetError, ParseError
from .models import KNN, DecisionTree, NaiveBayes
from .models.knn import DEFAULT_K
from .utils import create_logger


def clock_seed():
    return int(time.time() * 1000) % (2 ** 32)


def evaluate_on_iris(model_name, learner_factory, folds=DEFAULT_FOLDS, in_path=None,
                     seed=None, out=None):
    """
    Cross-validate a learner on the Iris data and report the mean accuracy

    :param model_name: name printed in the report
    :param learner_factory: builds an untrained model
    :param in_path: data file, the bundled one by default
    :param seed: shuffling seed, taken from the clock by default
    :param out: where the report goes, stdout by default
    :return: exit status, 0 on success and 1 when the data cannot be loaded
    """
    logger = create_logger("classiris.drivers", stream=sys.stderr)
    out = sys.stdout if out is None else out
    try:
        data = load_iris(in_path)
    except (DatasetIOError, EmptyDatasetError, ParseError) as e:
        logger.error("%s. Exiting.", e)
        return 1

    seed = clock_seed() if seed is None else seed
    logger.info("Cross-validating %s on %s samples, seed %s", model_name, len(data), seed)
    avg_accuracy = cross_validate(data, learner_factory, folds, seed)
    out.write("Average accuracy over %d-fold cross-validation (%s) is: %g%%\n"
              % (folds, model_name, avg_accuracy * 100.0))
    return 0


def dt_iris():
    return evaluate_on_iris("ID3 Decision Tree", DecisionTree)


def knn_iris():
    return evaluate_on_iris("KNN with K=%d" % DEFAULT_K, lambda: KNN(DEFAULT_K))


def nb_iris():
    return evaluate_on_iris("Naive Bayes", NaiveBayes)

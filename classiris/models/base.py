import abc
import logging

from ..exceptions import NotFittedError, ShapeError
from ..utils import create_logger, is_level_debug


def query_features(sample):
    """feature tuple of a query, given either as a Sample or a plain vector"""
    features = getattr(sample, 'features', sample)
    return tuple(float(v) for v in features)


class Classifier(metaclass=abc.ABCMeta):
    """Capability shared by the classifiers: learn from a labelled data set,
    then predict the label of new instances.

    :param nb_features: arity of the training samples, None while not fitted
    :type nb_features: integer
    :param DEBUG: report the progress of this instance at INFO level; other
        instances of the same class are not affected
    :type DEBUG: boolean
    """

    def __init__(self, DEBUG=False):
        self.nb_features = None
        self.DEBUG = DEBUG
        self._logger = create_logger(self.__class__.__module__)

    @abc.abstractmethod
    def fit(self, dataset):
        """learn the model from the training instances

        :param dataset: learning instances
        :type dataset: :class:`~classiris.dataset.sample.Dataset`
        :returns: the model itself
        """

    @abc.abstractmethod
    def predict(self, sample):
        """return the predicted label of one instance

        :param sample: the instance (a Sample or a feature vector)
        :rtype: string
        """

    def predict_all(self, samples):
        return [self.predict(sample) for sample in samples]

    def is_fitted(self):
        return self.nb_features is not None

    def _tracing(self):
        return self.DEBUG or is_level_debug(self._logger)

    def _trace(self, msg, *args):
        self._logger.log(logging.INFO if self.DEBUG else logging.DEBUG, msg, *args)

    def _check_query(self, sample):
        if not self.is_fitted():
            raise NotFittedError("%s used before fit" % self.__class__.__name__)
        features = query_features(sample)
        if len(features) != self.nb_features:
            raise ShapeError(self.nb_features, len(features))
        return features

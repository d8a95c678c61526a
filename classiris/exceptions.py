"""Exceptions raised by classiris.

Every error raised on purpose by the package derives from
:class:`ClassirisError`, so callers may catch the whole family at once.
Configuration and shape errors are also :class:`ValueError` subclasses.
"""


class ClassirisError(Exception):
    """Base class of all classiris errors."""


class DatasetIOError(ClassirisError):
    """The dataset file cannot be opened or read."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = "Cannot open file: %s" % path
        if reason is not None:
            message = "%s (%s)" % (message, reason)
        super().__init__(message)


class ParseError(ClassirisError):
    """A line of the dataset file holds a malformed numeric field."""

    def __init__(self, lineno, value):
        self.lineno = lineno
        self.value = value
        super().__init__("Malformed numeric field %r at line %s" % (value, lineno))


class EmptyDatasetError(ClassirisError):
    """No sample could be loaded."""


class ConfigError(ClassirisError, ValueError):
    """Invalid parameter: number of neighbours, number of folds, ..."""


class NotFittedError(ClassirisError):
    """Prediction requested from a model that was never trained."""


class NotEnoughDataError(ClassirisError):
    """The training set is too small for the requested prediction."""


class ShapeError(ClassirisError, ValueError):
    """Feature vectors of incompatible arity."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__("Expecting %s features, got %s" % (expected, got))

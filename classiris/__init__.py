"""classiris: classical classifiers evaluated on the Iris data set."""
from . import dataset
from . import evaluation
from . import models
from . import utils
from .exceptions import (ClassirisError, ConfigError, DatasetIOError, EmptyDatasetError,
                         NotEnoughDataError, NotFittedError, ParseError, ShapeError)

__version__ = '0.1.0'

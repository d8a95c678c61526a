import os
import sys
import warnings
from os.path import join

import pandas as pd

from ..exceptions import DatasetIOError, EmptyDatasetError, ParseError
from ..utils import create_logger
from .sample import Dataset, Sample

IRIS_COLUMNS = ['sepal_length', 'sepal_width', 'petal_length', 'petal_width', 'class']
IRIS_FILENAME = 'iris.data'

_logger = create_logger(__name__)


def iris_data_path():
    """conventional location of the Iris data file

    ``resources/iris.data`` next to the source tree, or under the
    installation prefix where setup.py copies the resources.
    """
    current_dir = os.path.dirname(os.path.abspath(__file__))
    candidates = [join(current_dir, '..', '..', 'resources', IRIS_FILENAME),
                  join(sys.prefix, 'resources', IRIS_FILENAME)]
    for candidate in candidates:
        if os.path.isfile(candidate):
            return os.path.normpath(candidate)
    return os.path.normpath(candidates[0])


def load_iris(in_path=None):
    """Load the Iris data set from a UCI ``iris.data`` file

    One record per line, four comma-separated measures followed by the class
    label, no header. Blank lines and records with fewer than five fields are
    skipped, fields beyond the fifth are ignored.

    :param in_path: file to read, :func:`iris_data_path` by default
    :type in_path: string
    :returns: the samples, in file order
    :rtype: :class:`~classiris.dataset.sample.Dataset`
    :raises DatasetIOError: the file cannot be opened or read
    :raises ParseError: one of the four measures is not a number; the error
        carries the 1-based line number of the record
    :raises EmptyDatasetError: no record could be loaded
    """
    in_path = iris_data_path() if in_path is None else in_path
    if not os.path.isfile(in_path):
        raise DatasetIOError(in_path, "no such file")
    # index_col=False: extra fields never become an implicit index, even on the
    # first line. Blank lines are kept so that row i is line i + 1.
    try:
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', pd.errors.ParserWarning)
            data = pd.read_csv(in_path, sep=',', header=None, names=IRIS_COLUMNS,
                               index_col=False, dtype=str, skip_blank_lines=False,
                               encoding='utf-8', engine='python',
                               on_bad_lines=lambda fields: fields[:len(IRIS_COLUMNS)])
    except pd.errors.EmptyDataError:
        raise EmptyDatasetError("No data loaded from %s" % in_path)
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetIOError(in_path, e) from e

    # blank lines and short records have no label
    data = data[data['class'].notna()]
    labels = data['class'].astype(str).str.strip()
    data = data[labels != '']
    labels = labels[labels != '']
    if len(data) == 0:
        raise EmptyDatasetError("No data loaded from %s" % in_path)

    measures = data[IRIS_COLUMNS[:-1]]
    values = measures.apply(lambda col: pd.to_numeric(col.astype(str).str.strip(), errors='coerce'))
    malformed = values.isna().any(axis=1)
    if malformed.any():
        row = malformed.idxmax()
        column = values.loc[row].isna().idxmax()
        raise ParseError(int(row) + 1, measures.loc[row, column])

    dataset = Dataset(Sample(features, label)
                      for features, label in zip(values.to_numpy(), labels))
    _logger.debug("Loaded %s samples of classes %s from %s",
                  len(dataset), dataset.classes, in_path)
    return dataset

"""Measures comparing predicted labels with the observed ones."""
import pandas as pd
from sklearn.metrics import accuracy_score, confusion_matrix


def accuracy(y_true, y_predicts):
    """
    Proportion of correct predictions

    :param y_true: observed labels
    :param y_predicts: predicted labels, in the same order
    :return: a float in [0, 1], 0 when there is nothing to compare
    """
    y_true, y_predicts = list(y_true), list(y_predicts)
    if len(y_true) != len(y_predicts):
        raise ValueError("%s observed labels for %s predictions" % (len(y_true), len(y_predicts)))
    if len(y_true) == 0:
        return 0.0
    return float(accuracy_score(y_true, y_predicts))


def confusion_counts(y_true, y_predicts, labels=None):
    """
    Counts of (observed, predicted) label pairs

    :param labels: labels indexing rows and columns, sorted observed and
        predicted labels by default
    :return: :class:`~pandas.DataFrame` with observed labels as rows and
        predicted labels as columns
    """
    y_true, y_predicts = list(y_true), list(y_predicts)
    if labels is None:
        labels = sorted(set(y_true) | set(y_predicts))
    counts = confusion_matrix(y_true, y_predicts, labels=labels)
    return pd.DataFrame(counts, index=pd.Index(labels, name='observed'),
                        columns=pd.Index(labels, name='predicted'))

"""Small statistics shared by the classifiers.

All functions treat labels as an unordered multiset; whenever a tie between
labels has to be broken, the lexicographically smallest label wins.
"""
from collections import Counter

import numpy as np
from scipy.spatial import distance

# floor applied to every estimated variance, keeps log(2*pi*var) finite
VARIANCE_FLOOR = 1e-9


def entropy(labels):
    """Shannon entropy (in bits) of a multiset of labels

    :param labels: observed labels
    :type labels: iterable of strings
    :returns: -sum_c p_c log2(p_c), or 0 when ``labels`` is empty
    :rtype: float

    >>> entropy(['a', 'a', 'b', 'b'])
    1.0
    >>> entropy(['a', 'a'])
    0.0
    """
    counts = np.array(list(Counter(labels).values()), dtype=float)
    if counts.size == 0:
        return 0.
    proportions = counts / counts.sum()
    return float(abs(np.sum(proportions * np.log2(proportions))))


def majority_label(labels):
    """most frequent label, ties going to the smallest label

    :param labels: observed labels (at least one)
    :type labels: iterable of strings
    :rtype: string
    """
    counts = Counter(labels)
    if not counts:
        raise ValueError("majority label of an empty collection")
    best_label, best_count = None, -1
    for label in sorted(counts):
        if counts[label] > best_count:
            best_label, best_count = label, counts[label]
    return best_label


def gaussian_parameters(features, floor=VARIANCE_FLOOR):
    """per-feature sample mean and Bessel-corrected variance

    Variances lower than ``floor`` (and the undefined variance of a single
    sample) are replaced by ``floor``.

    :param features: n x F matrix of observations, n >= 1
    :type features: :class:`~numpy.ndarray`
    :param floor: minimal variance
    :type floor: float
    :returns: means and variances, both of length F
    :rtype: tuple of :class:`~numpy.ndarray`
    """
    features = np.asarray(features, dtype=float)
    nb_samples, nb_features = features.shape
    means = features.mean(axis=0)
    if nb_samples > 1:
        variances = features.var(axis=0, ddof=1)
    else:
        variances = np.zeros(nb_features)
    variances[variances < floor] = floor
    return means, variances


def euclidean_distances(query, points):
    """square-root Euclidean distance from ``query`` to every row of ``points``

    :param query: feature vector of length F
    :param points: N x F matrix
    :type points: :class:`~numpy.ndarray`
    :rtype: :class:`~numpy.ndarray` of length N
    """
    query = np.asarray(query, dtype=float).reshape(1, -1)
    return distance.cdist(query, np.asarray(points, dtype=float), metric='euclidean')[0]

"""Statistics over one-dimensional numeric sequences used by split search."""

import numpy
import numpy.typing


def unique_values(values: numpy.typing.ArrayLike) -> numpy.ndarray:
    """Distinct values of `values`, in order of first occurrence."""
    values = numpy.asarray(values)
    uniques, first_index = numpy.unique(values, return_index=True)
    return uniques[numpy.argsort(first_index, kind="stable")]


def is_pure(labels: numpy.typing.ArrayLike) -> bool:
    return len(unique_values(labels)) == 1


def bin_counts(values: numpy.typing.ArrayLike) -> numpy.ndarray:
    """
    Count occurrences of each integer in `[0, max(values)]`.

    Values are assumed to be non-negative integers; the count of value `i`
    is stored at index `i`.
    """
    return numpy.bincount(numpy.asarray(values).astype(numpy.int64))


def entropy(labels: numpy.typing.ArrayLike) -> float:
    """
    Shannon entropy (base 2) of the class distribution in `labels`.

    Raises:
        ValueError: if `labels` is empty
    """
    labels = numpy.asarray(labels)
    if labels.shape[0] == 0:
        raise ValueError("Entropy of an empty label sequence is undefined.")

    counts = bin_counts(labels)
    # Absent classes contribute nothing (0 * log 0 = 0)
    probabilities = counts[counts > 0] / labels.shape[0]
    return float(-numpy.sum(probabilities * numpy.log2(probabilities)))


def information_gain(
    parent: numpy.typing.ArrayLike,
    left: numpy.typing.ArrayLike,
    right: numpy.typing.ArrayLike,
) -> float:
    """Entropy reduction obtained by partitioning `parent` into `left` and `right`."""
    n_parent = len(parent)
    left_prop = len(left) / n_parent
    right_prop = len(right) / n_parent
    return entropy(parent) - (
        left_prop * entropy(left) + right_prop * entropy(right)
    )


def majority_class(labels: numpy.typing.ArrayLike) -> int:
    """Most frequent class in `labels`; ties go to the lowest class index."""
    # argmax returns the first maximal index
    return int(numpy.argmax(bin_counts(labels)))

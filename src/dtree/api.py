"""
Functional interface over flat, row-major feature buffers.

Features are passed as a flat sequence of `nrow * ncol` values where row `r`
occupies positions `[r * ncol, (r + 1) * ncol)`.
"""

import numpy
import numpy.typing

from dtree.builder import TreeParams, build_tree
from dtree.classifier import _check_training_set
from dtree.exceptions import (
    DimensionMismatchError,
    DTreeException,
    EmptyInputError,
    FeatureIndexOutOfRangeError,
    InvalidTestSetError,
    InvalidTrainingSetError,
)
from dtree.tree import DecisionTree
from dtree.types import LabelVector


def _as_matrix(
    features: numpy.typing.ArrayLike,
    ncol: int,
    nrow: int,
    error: type[DTreeException],
) -> numpy.ndarray:
    try:
        flat = numpy.asarray(features, dtype=numpy.float64).reshape(-1)
    except (TypeError, ValueError) as e:
        raise error("Features must be numeric.") from e
    if flat.shape[0] != ncol * nrow:
        raise DimensionMismatchError(
            f"Expected {ncol * nrow} feature values for {nrow} rows of "
            f"{ncol} columns, got {flat.shape[0]}."
        )
    return flat.reshape(nrow, ncol)


def train(
    features: numpy.typing.ArrayLike,
    labels: numpy.typing.ArrayLike,
    ncol: int,
    nrow: int,
    params: TreeParams | None = None,
) -> DecisionTree:
    """
    Train a decision tree classifier on a flat row-major feature buffer.

    Args:
        features: flat feature values, row-major, length ncol * nrow
        labels: class labels encoded as 0, 1, ..., K-1, length nrow
        ncol: number of columns (features)
        nrow: number of samples
        params: stopping parameters (default: max_depth=5, min_samples_split=1)

    Raises:
        EmptyInputError: if ncol or nrow is not positive
        InvalidTrainingSetError: if features are not numeric
        DimensionMismatchError: if buffer lengths disagree with ncol and nrow
        InvalidLabelError: if a label is negative or not integral
    """
    if nrow < 1 or ncol < 1:
        raise EmptyInputError(
            f"Training set must have at least one row and column, got {nrow}x{ncol}."
        )

    matrix = _as_matrix(features, ncol, nrow, InvalidTrainingSetError)
    labels = numpy.asarray(labels)
    if labels.ndim != 1 or labels.shape[0] != nrow:
        raise DimensionMismatchError(
            f"Expected {nrow} labels, got shape {labels.shape}."
        )
    matrix, label_vector = _check_training_set(matrix, labels)

    return build_tree(matrix, label_vector, params).tree


fit = train


def predict_single(tree: DecisionTree, row: numpy.typing.ArrayLike) -> int:
    """
    Classify a single sample.

    Raises:
        InvalidTestSetError: if the row is not numeric
        FeatureIndexOutOfRangeError: if the row lacks a feature tested by the tree
    """
    try:
        row = numpy.asarray(row, dtype=numpy.float64).reshape(-1)
    except (TypeError, ValueError) as e:
        raise InvalidTestSetError("Sample features must be numeric.") from e
    needed = tree.max_feature_index() + 1
    if row.shape[0] < needed:
        raise FeatureIndexOutOfRangeError(
            f"Sample has {row.shape[0]} features, tree needs at least {needed}."
        )
    return tree.predict(row)


def predict(
    tree: DecisionTree,
    features: numpy.typing.ArrayLike,
    ncol: int,
    nrow: int,
) -> LabelVector:
    """
    Classify `nrow` samples from a flat row-major buffer, in row order.

    Raises:
        InvalidTestSetError: if features are not numeric
        DimensionMismatchError: if the buffer length is not ncol * nrow
        FeatureIndexOutOfRangeError: if ncol is too small for the tree
    """
    matrix = _as_matrix(features, ncol, nrow, InvalidTestSetError)
    needed = tree.max_feature_index() + 1
    if ncol < needed:
        raise FeatureIndexOutOfRangeError(
            f"Samples have {ncol} features, tree needs at least {needed}."
        )
    return tree.predict_many(matrix)


def release(tree: DecisionTree) -> None:
    """Release the nodes of `tree`. The tree cannot be used afterwards."""
    tree.release()

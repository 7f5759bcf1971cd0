import numpy
import numpy.typing

from dtree.builder import BuildResult, TreeParams, build_tree
from dtree.exceptions import (
    DimensionMismatchError,
    EmptyInputError,
    InvalidLabelError,
    InvalidTestSetError,
    InvalidTrainingSetError,
)
from dtree.tree import DecisionTree
from dtree.types import FeatureMatrix, FeatureVector, LabelVector


def _check_labels(labels: numpy.typing.ArrayLike) -> LabelVector:
    """
    Convert labels to an integer vector.
    Raises InvalidLabelError if a label is negative or not integral.
    """
    labels = numpy.asarray(labels)
    if labels.ndim != 1:
        raise DimensionMismatchError(
            f"Labels must be a vector, got {labels.ndim} dimensions."
        )

    if labels.dtype == numpy.bool_:
        return labels.astype(numpy.int64)
    if not numpy.issubdtype(labels.dtype, numpy.integer) and not numpy.issubdtype(
        labels.dtype, numpy.floating
    ):
        raise InvalidLabelError(f"Labels must be numeric, got dtype {labels.dtype}.")

    if not numpy.all(numpy.isfinite(labels)):
        raise InvalidLabelError("Labels must be finite.")
    if numpy.any(labels < 0):
        raise InvalidLabelError("Labels must be non-negative class indices.")
    if numpy.any(labels != numpy.floor(labels)):
        raise InvalidLabelError("Labels must be integral class indices.")

    return labels.astype(numpy.int64)


def _check_training_set(
    features: numpy.typing.ArrayLike, labels: numpy.typing.ArrayLike
) -> tuple[FeatureMatrix, LabelVector]:
    """
    Verify the training set and convert it to the internal representation.
    Raises a subclass of DTreeException if the training set is unusable.
    """
    try:
        features = numpy.asarray(features, dtype=numpy.float64)
    except (TypeError, ValueError) as e:
        raise InvalidTrainingSetError("Features must be numeric.") from e

    if features.ndim != 2:
        raise DimensionMismatchError(
            f"Features must be a matrix, got {features.ndim} dimensions."
        )

    labels = _check_labels(labels)

    if features.shape[0] != labels.shape[0]:
        raise DimensionMismatchError(
            "Inconsistent number of samples between features and labels."
        )
    if features.shape[0] == 0:
        raise EmptyInputError("Training set has no samples.")
    if features.shape[1] == 0:
        raise EmptyInputError("Training set has no features.")

    return features, labels


class DTreeClassifier:
    _n_samples: int
    _n_features: int
    _decision_tree: DecisionTree
    _build_result: BuildResult

    def __init__(
        self,
        features: FeatureMatrix,
        labels: LabelVector,
        params: TreeParams | None = None,
        *,
        max_depth: int | None = None,
        min_samples_split: int | None = None,
        verbose: bool = False,
    ) -> None:
        """
        Initialize and train a decision tree classifier.

        Args:
            features: training features (numeric matrix, one row per sample)
            labels: training labels, encoded as 0, 1, ..., K-1
            params: stopping parameters. Mutually exclusive with the keyword
                overrides below.
            max_depth: maximum tree depth (default: 5)
            min_samples_split: nodes with fewer samples become leaves (default: 1)
            verbose: if True, print progress information

        Raises:
            InvalidTrainingSetError: if labels are invalid or the set is empty
            DimensionMismatchError: if features and labels disagree in shape
            InvalidTreeParamError: if the stopping parameters are out of range
        """
        if params is None:
            defaults = TreeParams()
            params = TreeParams(
                max_depth=defaults.max_depth if max_depth is None else max_depth,
                min_samples_split=(
                    defaults.min_samples_split
                    if min_samples_split is None
                    else min_samples_split
                ),
            )
        elif max_depth is not None or min_samples_split is not None:
            raise TypeError(
                "Pass either params or max_depth/min_samples_split, not both."
            )

        features, labels = _check_training_set(features, labels)

        self._n_samples = features.shape[0]
        self._n_features = features.shape[1]

        result = build_tree(features, labels, params, verbose=verbose)
        self._decision_tree = result.tree
        self._build_result = result  # Store for access to timing info

    @property
    def build_result(self) -> BuildResult:
        """Return the build result containing timing information."""
        return self._build_result

    @property
    def tree(self) -> DecisionTree:
        return self._decision_tree

    def predict(self, features: FeatureMatrix) -> LabelVector:
        features = numpy.asarray(features, dtype=numpy.float64)
        if features.ndim != 2 or features.shape[1] != self._n_features:
            raise InvalidTestSetError(
                "Number of features in test set does not match training set."
            )

        return self._decision_tree.predict_many(features)

    def predict_single(self, features: FeatureVector) -> int:
        features = numpy.asarray(features, dtype=numpy.float64)
        if features.ndim != 1 or features.shape[0] != self._n_features:
            raise InvalidTestSetError(
                "Number of features in test sample does not match training set."
            )

        return self._decision_tree.predict(features)

class DTreeException(Exception):
    """Library-specific exceptions in dtree."""


class InvalidTrainingSetError(DTreeException):
    """Raised when the training set provided is invalid."""

    def __init__(self, message: str):
        super().__init__(message)


class DimensionMismatchError(InvalidTrainingSetError):
    """Raised when features or labels do not match the declared shape."""


class InvalidLabelError(InvalidTrainingSetError):
    """Raised when a label is negative or not an integer."""


class EmptyInputError(InvalidTrainingSetError):
    """Raised when the training set has no samples or no features."""


class InvalidTestSetError(DTreeException):
    """Raised when the test set provided is invalid."""

    def __init__(self, message: str):
        super().__init__(message)


class FeatureIndexOutOfRangeError(InvalidTestSetError):
    """Raised when a sample is too short for the features used by the tree."""


class InvalidTreeParamError(DTreeException):
    """Raised when training parameters are out of range."""


class TreeReleasedError(DTreeException):
    """Raised when a released tree is used for prediction."""

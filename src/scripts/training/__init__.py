"""Training utilities for dtree and sklearn comparison."""

from scripts.training.dtree import DTreeResult, train_dtree
from scripts.training.sklearn_dt import SklearnDTResult, train_sklearn_dt

__all__ = [
    "DTreeResult",
    "train_dtree",
    "SklearnDTResult",
    "train_sklearn_dt",
]

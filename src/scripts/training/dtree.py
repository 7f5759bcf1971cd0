"""Training utilities for the dtree classifier."""

from __future__ import annotations

import dataclasses
import time

import numpy as np

from dtree import DTreeClassifier
from dtree.builder import BuildResult


@dataclasses.dataclass(frozen=True)
class DTreeResult:
    """Result from training a dtree classifier."""

    classifier: DTreeClassifier
    train_accuracy: float
    test_accuracy: float | None
    elapsed: float
    n_nodes: int
    depth: int
    splits: list[tuple[int, float]]  # (feature, threshold) in preorder

    @property
    def build_result(self) -> BuildResult:
        """Access the build result with timing information."""
        return self.classifier.build_result


def train_dtree(
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None = None,
    y_test: np.ndarray | None = None,
    *,
    max_depth: int = 5,
    min_samples_split: int = 1,
    verbose: bool = False,
) -> DTreeResult:
    """
    Train dtree classifier with timing and accuracy metrics.

    Args:
        X_train: Training features
        y_train: Training labels (0, 1, ..., K-1)
        X_test: Optional test features for evaluation
        y_test: Optional test labels for evaluation
        max_depth: Maximum tree depth
        min_samples_split: Minimum samples required to split a node
        verbose: Print progress information

    Returns:
        DTreeResult with classifier, accuracies, and timing
    """
    start = time.time()
    clf = DTreeClassifier(
        X_train,
        y_train,
        max_depth=max_depth,
        min_samples_split=min_samples_split,
        verbose=verbose,
    )
    elapsed = time.time() - start

    train_acc = float(np.mean(clf.predict(X_train) == y_train))

    test_acc: float | None = None
    if X_test is not None and y_test is not None:
        test_acc = float(np.mean(clf.predict(X_test) == y_test))

    return DTreeResult(
        classifier=clf,
        train_accuracy=train_acc,
        test_accuracy=test_acc,
        elapsed=elapsed,
        n_nodes=clf.build_result.n_nodes,
        depth=clf.build_result.depth,
        splits=clf.tree.splits(),
    )

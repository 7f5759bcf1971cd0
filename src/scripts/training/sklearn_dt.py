"""Reference tree from sklearn, grown with the entropy criterion."""

from __future__ import annotations

import dataclasses

import numpy as np
from sklearn.tree import DecisionTreeClassifier


@dataclasses.dataclass(frozen=True)
class SklearnDTResult:
    """Fitted sklearn tree with its accuracies and split tests."""

    classifier: DecisionTreeClassifier
    train_accuracy: float
    test_accuracy: float | None
    n_nodes: int
    depth: int
    splits: list[tuple[int, float]]  # (feature, threshold) in preorder

    @property
    def root_split(self) -> tuple[int, float] | None:
        return self.splits[0] if self.splits else None


def sklearn_splits(clf: DecisionTreeClassifier) -> list[tuple[int, float]]:
    """
    Split tests of a fitted sklearn tree in preorder.

    sklearn numbers nodes depth-first, left child before right, so walking
    node ids in order visits internal nodes in the same order as
    `dtree.DecisionTree.splits`. Its thresholds are midpoints between
    adjacent training values, while dtree uses the training values
    themselves, so matching tests differ by up to half a value gap.
    """
    structure = clf.tree_
    is_internal = structure.children_left != structure.children_right
    return [
        (int(structure.feature[node]), float(structure.threshold[node]))
        for node in np.flatnonzero(is_internal)
    ]


def train_sklearn_dt(
    X_train: np.ndarray,
    y_train: np.ndarray,
    X_test: np.ndarray | None = None,
    y_test: np.ndarray | None = None,
    *,
    max_depth: int | None = 5,
    min_samples_split: int = 2,
    random_state: int | None = None,
) -> SklearnDTResult:
    """
    Grow sklearn's DecisionTreeClassifier with the same stopping rules as dtree.

    Args:
        X_train: Training features
        y_train: Training labels
        X_test: Optional test features for evaluation
        y_test: Optional test labels for evaluation
        max_depth: Maximum tree depth (None = unlimited)
        min_samples_split: Minimum samples required to split (sklearn needs >= 2;
            dtree's 1 behaves the same since single samples are pure)
        random_state: Seed for sklearn's feature permutation, which decides
            ties between equally good splits

    Returns:
        SklearnDTResult with classifier, accuracies, and split tests
    """
    clf = DecisionTreeClassifier(
        criterion="entropy",
        max_depth=max_depth,
        min_samples_split=min_samples_split,
        random_state=random_state,
    )
    clf.fit(X_train, y_train)

    test_acc: float | None = None
    if X_test is not None and y_test is not None:
        test_acc = float(clf.score(X_test, y_test))

    return SklearnDTResult(
        classifier=clf,
        train_accuracy=float(clf.score(X_train, y_train)),
        test_accuracy=test_acc,
        n_nodes=int(clf.tree_.node_count),
        depth=int(clf.get_depth()),
        splits=sklearn_splits(clf),
    )

"""Comparison experiment between dtree and sklearn's entropy DecisionTree."""

from __future__ import annotations

import time
from typing import Any

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from dtree.exceptions import DTreeException
from scripts.data.pmlb import load_and_encode
from scripts.training.dtree import train_dtree
from scripts.training.sklearn_dt import train_sklearn_dt


def _same_root_feature(
    dtree_splits: list[tuple[int, float]],
    sklearn_splits: list[tuple[int, float]],
) -> bool:
    """Whether both trees test the same feature first (two leaves also match)."""
    if not dtree_splits or not sklearn_splits:
        return not dtree_splits and not sklearn_splits
    return dtree_splits[0][0] == sklearn_splits[0][0]


def compare_dtree_vs_sklearn(
    dataset_name: str,
    max_depths: list[int],
    *,
    train_size: float = 0.8,
    random_state: int = 42,
    min_samples_split: int = 1,
    data: tuple[np.ndarray, np.ndarray] | None = None,
) -> pd.DataFrame:
    """
    Compare dtree with sklearn DecisionTreeClassifier(criterion="entropy").

    Both trees are grown on the same split for every depth limit. Besides
    accuracy, the fraction of test samples on which both trees agree is
    reported; thresholds differ (sklearn uses midpoints between values,
    dtree the observed values themselves), so agreement is not always 1.
    Whether both trees test the same feature at the root is reported too.

    Args:
        dataset_name: PMLB dataset name
        max_depths: List of depth limits to test
        train_size: Fraction for training split
        random_state: Random seed for reproducibility
        min_samples_split: Minimum samples required to split a node
        data: Optional (features, labels) to use instead of fetching
            `dataset_name` from PMLB

    Returns:
        DataFrame with comparison metrics
    """
    if data is None:
        print(f"Loading dataset: {dataset_name}")
        X_full, y_full = load_and_encode(dataset_name)
    else:
        X_full, y_full = data

    n_full = len(X_full)
    n_features = X_full.shape[1]
    print(f"Full dataset: {n_full} samples, {n_features} features")
    print(f"Classes: {len(np.unique(y_full))}")
    print()

    X_train, X_test, y_train, y_test = train_test_split(
        X_full, y_full, train_size=train_size, random_state=random_state
    )
    print(f"Train set: {len(X_train)} samples | Test set: {len(X_test)} samples")
    print("=" * 100)

    header = (
        f"{'depth':>5} | {'dtree Size':>10} | {'dtree Test':>10} | {'dtree Time':>10} | "
        f"{'sklearn Size':>12} | {'sklearn Test':>12} | {'Agree':>6} | {'Root':>4}"
    )
    print(header)
    print("-" * 100)

    results: list[dict[str, Any]] = []
    overall_start = time.time()

    for max_depth in max_depths:
        try:
            dtree_result = train_dtree(
                X_train,
                y_train,
                X_test,
                y_test,
                max_depth=max_depth,
                min_samples_split=min_samples_split,
            )
        except DTreeException as e:
            results.append(
                {
                    "max_depth": max_depth,
                    "dtree_size": None,
                    "dtree_test_acc": None,
                    "dtree_time": None,
                    "sklearn_size": None,
                    "sklearn_test_acc": None,
                    "agreement": None,
                    "same_root_feature": None,
                    "status": f"ERR: {type(e).__name__}",
                }
            )
            print(f"{max_depth:>5} | ERR: {type(e).__name__}")
            continue

        sklearn_result = train_sklearn_dt(
            X_train,
            y_train,
            X_test,
            y_test,
            max_depth=max_depth,
            min_samples_split=max(min_samples_split, 2),
            random_state=random_state,
        )

        agreement = float(
            np.mean(
                dtree_result.classifier.predict(X_test)
                == sklearn_result.classifier.predict(X_test)
            )
        )

        same_root = _same_root_feature(
            dtree_result.splits, sklearn_result.splits
        )

        row = {
            "max_depth": max_depth,
            "dtree_size": dtree_result.n_nodes,
            "dtree_test_acc": dtree_result.test_accuracy,
            "dtree_time": dtree_result.elapsed,
            "sklearn_size": sklearn_result.n_nodes,
            "sklearn_test_acc": sklearn_result.test_accuracy,
            "agreement": agreement,
            "same_root_feature": same_root,
            "status": "OK",
        }
        results.append(row)

        print(
            f"{max_depth:>5} | {dtree_result.n_nodes:>10} | "
            f"{dtree_result.test_accuracy:>10.2%} | {dtree_result.elapsed:>9.3f}s | "
            f"{sklearn_result.n_nodes:>12} | {sklearn_result.test_accuracy:>12.2%} | "
            f"{agreement:>6.2%} | {'same' if same_root else 'diff':>4}"
        )

    print("=" * 100)
    print(f"Total time: {time.time() - overall_start:.1f}s")

    return pd.DataFrame(results)

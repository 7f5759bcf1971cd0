import numpy as np
import pytest

from dtree.types import FeatureMatrix, LabelVector


@pytest.fixture
def and_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """AND truth table: only (1,1) -> 1"""
    features = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float64)
    labels = np.array([0, 0, 0, 1], dtype=np.int64)
    return features, labels


@pytest.fixture
def or_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """OR truth table: only (0,0) -> 0"""
    features = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float64)
    labels = np.array([0, 1, 1, 1], dtype=np.int64)
    return features, labels


@pytest.fixture
def xor_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """XOR truth table in the row order (1,1), (0,1), (1,0), (0,0)"""
    features = np.array([[1, 1], [0, 1], [1, 0], [0, 0]], dtype=np.float64)
    labels = np.array([0, 1, 1, 0], dtype=np.int64)
    return features, labels


@pytest.fixture
def trivial_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """Single sample, single feature"""
    features = np.array([[0.5]], dtype=np.float64)
    labels = np.array([1], dtype=np.int64)
    return features, labels


@pytest.fixture
def all_same_label_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """All samples have the same label"""
    features = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float64)
    labels = np.array([2, 2, 2, 2], dtype=np.int64)
    return features, labels


@pytest.fixture
def conflicting_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """Identical feature rows with different labels: no split can separate them"""
    features = np.array([[1.0, 2.0], [1.0, 2.0], [1.0, 2.0]], dtype=np.float64)
    labels = np.array([1, 0, 1], dtype=np.int64)
    return features, labels


@pytest.fixture
def three_class_dataset() -> tuple[FeatureMatrix, LabelVector]:
    """Three classes separable by thresholds on the first feature"""
    features = np.array(
        [
            [0.1, 5.0],
            [0.4, 3.0],
            [1.2, 4.0],
            [1.7, 1.0],
            [2.5, 2.0],
            [2.9, 0.0],
        ],
        dtype=np.float64,
    )
    labels = np.array([0, 0, 1, 1, 2, 2], dtype=np.int64)
    return features, labels

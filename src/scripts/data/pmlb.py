"""PMLB data loading utilities."""

from __future__ import annotations

import numpy as np
from pmlb import fetch_data


def load_dataset(
    name: str,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Fetch raw dataset from PMLB.

    Args:
        name: Name of the PMLB dataset to fetch

    Returns:
        Tuple of (features, labels) as numpy arrays
    """
    features, labels = fetch_data(name, return_X_y=True, local_cache_dir=".cache")
    features = np.array(features)
    labels = np.array(labels)
    return features, labels


def encode_labels(raw_labels: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Densely encode arbitrary labels as 0, 1, ..., K-1.

    Classes are numbered in sorted order of their raw value.

    Args:
        raw_labels: Raw labels from PMLB

    Returns:
        Tuple of (encoded_labels, classes) where classes[i] is the raw value
        of class i
    """
    classes, encoded = np.unique(raw_labels, return_inverse=True)
    return encoded.astype(np.int64), classes


def load_and_encode(
    dataset_name: str,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Fetch a PMLB dataset as float features and densely encoded labels.

    Args:
        dataset_name: Name of the PMLB dataset

    Returns:
        Tuple of (features, labels)
    """
    features, raw_labels = load_dataset(dataset_name)
    labels, _ = encode_labels(raw_labels)
    return features.astype(np.float64), labels

"""Data loading utilities."""

from scripts.data.pmlb import encode_labels, load_and_encode, load_dataset

__all__ = [
    "load_dataset",
    "encode_labels",
    "load_and_encode",
]

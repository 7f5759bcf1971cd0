"""Experiment runners."""

from scripts.experiments.comparison import compare_dtree_vs_sklearn

__all__ = [
    "compare_dtree_vs_sklearn",
]

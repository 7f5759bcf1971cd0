import dataclasses
import logging
import math

import numpy

from dtree.stats import information_gain, unique_values
from dtree.types import FeatureMatrix, LabelVector

logger = logging.getLogger(__name__)

NO_SPLIT_GAIN: float = -1.0
"""Gain of a split search that found no candidate with two non-empty sides"""

GAIN_TOLERANCE: float = 1e-12
"""Gains closer than this are equal; rounding must not reorder exact ties"""


@dataclasses.dataclass(frozen=True)
class Split:
    """Best threshold split of a training subset and the partitions it implies."""

    feature: int  # Column tested by the split
    threshold: float  # Rows with feature value <= threshold go left
    gain: float  # Information gain, NO_SPLIT_GAIN if nothing was usable
    left_features: FeatureMatrix | None
    left_labels: LabelVector | None
    right_features: FeatureMatrix | None
    right_labels: LabelVector | None
    n_candidates: int  # Number of thresholds scored

    @property
    def is_usable(self) -> bool:
        return self.left_labels is not None


def best_split(features: FeatureMatrix, labels: LabelVector) -> Split:
    """
    Find the (feature, threshold) pair maximizing information gain.

    Features are visited in ascending order and, within a feature, candidate
    thresholds are the column's distinct values in order of first occurrence.
    A candidate replaces the current best only when its gain is strictly
    greater (beyond GAIN_TOLERANCE, which absorbs float rounding), so the
    first candidate reaching the maximum wins.

    Args:
        features: feature rows of the current subset
        labels: labels of the current subset

    Returns:
        Split with the winning test and full feature rows for both sides,
        in original row order. If no threshold leaves both sides non-empty,
        the split has gain NO_SPLIT_GAIN and no partitions.
    """
    n_samples, n_features = features.shape
    assert n_samples == labels.shape[0]

    best_gain = NO_SPLIT_GAIN
    best_feature = 0
    best_threshold = 0.0
    best_mask: numpy.ndarray | None = None
    n_candidates = 0

    for f in range(n_features):
        column = features[:, f]
        for threshold in unique_values(column):
            mask = column <= threshold
            n_left = int(numpy.count_nonzero(mask))
            if n_left == 0 or n_left == n_samples:
                continue

            n_candidates += 1
            gain = information_gain(labels, labels[mask], labels[~mask])
            if gain > best_gain and not math.isclose(
                gain, best_gain, rel_tol=0.0, abs_tol=GAIN_TOLERANCE
            ):
                best_gain = gain
                best_feature = f
                best_threshold = float(threshold)
                best_mask = mask

    if best_mask is None:
        logger.debug("No usable split among %d samples", n_samples)
        return Split(
            feature=0,
            threshold=0.0,
            gain=NO_SPLIT_GAIN,
            left_features=None,
            left_labels=None,
            right_features=None,
            right_labels=None,
            n_candidates=n_candidates,
        )

    logger.debug(
        "Best split: feature=%d threshold=%g gain=%.6f (%d candidates)",
        best_feature,
        best_threshold,
        best_gain,
        n_candidates,
    )
    return Split(
        feature=best_feature,
        threshold=best_threshold,
        gain=best_gain,
        left_features=features[best_mask],
        left_labels=labels[best_mask],
        right_features=features[~best_mask],
        right_labels=labels[~best_mask],
        n_candidates=n_candidates,
    )

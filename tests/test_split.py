import numpy as np
import pytest

from dtree.split import NO_SPLIT_GAIN, best_split


class TestBestSplit:
    """Unit tests for exhaustive threshold search."""

    def test_xor_root_split(self, xor_dataset):
        """On XOR every usable split gains nothing; the first one wins."""
        features, labels = xor_dataset
        split = best_split(features, labels)

        assert split.is_usable
        assert split.feature == 0
        assert split.threshold == 0.0
        assert split.gain == pytest.approx(0.0)
        # feature 0: threshold 1 leaves the right side empty, threshold 0 is scored
        # feature 1: same
        assert split.n_candidates == 2

    def test_partitions_keep_full_rows_in_order(self, three_class_dataset):
        features, labels = three_class_dataset
        split = best_split(features, labels)

        assert split.feature == 0
        assert split.threshold == pytest.approx(0.4)
        np.testing.assert_array_equal(split.left_features, features[[0, 1]])
        np.testing.assert_array_equal(split.left_labels, [0, 0])
        np.testing.assert_array_equal(split.right_features, features[[2, 3, 4, 5]])
        np.testing.assert_array_equal(split.right_labels, [1, 1, 2, 2])

    def test_tie_between_features_prefers_lower_index(self):
        """Both features separate the classes perfectly; feature 0 is visited first."""
        features = np.array([[0.0, 0.0], [1.0, 1.0]])
        labels = np.array([0, 1])
        split = best_split(features, labels)

        assert split.feature == 0
        assert split.gain == pytest.approx(1.0)

    def test_tie_within_feature_prefers_first_occurrence(self):
        """
        Thresholds 3 and 1 give the same gain. 3 appears first in the column,
        so it wins even though 1 is smaller.
        """
        features = np.array([[3.0], [1.0], [2.0], [4.0]])
        labels = np.array([1, 0, 1, 0])
        split = best_split(features, labels)

        assert split.threshold == 3.0
        np.testing.assert_array_equal(split.left_labels, [1, 0, 1])
        np.testing.assert_array_equal(split.right_labels, [0])

    def test_rounding_does_not_break_exact_tie(self):
        """
        Thresholds 1 and 3 have the same gain in exact arithmetic, but the
        float results differ in the last bit. The earlier threshold 1 wins.
        """
        features = np.array([[2.0], [2.0], [4.0], [1.0], [0.0], [4.0], [1.0], [4.0], [3.0], [2.0]])
        labels = np.array([3, 3, 0, 1, 0, 2, 2, 2, 3, 3])
        split = best_split(features, labels)

        # Weighted child entropy at either threshold: 0.3*log2(3) + 0.7*log2(7) - 1
        parent = -(0.2 * np.log2(0.2) + 0.1 * np.log2(0.1) + 0.3 * np.log2(0.3) + 0.4 * np.log2(0.4))
        expected = parent - (0.3 * np.log2(3) + 0.7 * np.log2(7) - 1.0)
        assert split.threshold == 1.0
        assert split.gain == pytest.approx(expected)
        np.testing.assert_array_equal(split.left_labels, [1, 0, 2])

    def test_strictly_better_candidate_replaces_earlier(self):
        features = np.array([[0.0, 5.0], [1.0, 6.0], [0.0, 7.0], [1.0, 8.0]])
        labels = np.array([0, 0, 1, 1])
        split = best_split(features, labels)

        # feature 0 gains nothing, feature 1 at 6 separates perfectly
        assert split.feature == 1
        assert split.threshold == 6.0
        assert split.gain == pytest.approx(1.0)

    def test_no_usable_split(self, conflicting_dataset):
        """Identical rows cannot be partitioned into two non-empty sides."""
        features, labels = conflicting_dataset
        split = best_split(features, labels)

        assert not split.is_usable
        assert split.gain == NO_SPLIT_GAIN
        assert split.left_features is None
        assert split.right_labels is None
        assert split.n_candidates == 0

    def test_single_sample(self, trivial_dataset):
        features, labels = trivial_dataset
        assert not best_split(features, labels).is_usable

import numpy as np
import pytest

from dtree.exceptions import TreeReleasedError
from dtree.tree import DecisionTree, InternalNode, Leaf, predict_node


def _two_leaf_tree() -> DecisionTree:
    # x[0] <= 0.5 -> class 0, otherwise class 1
    root = InternalNode(
        feature=0, threshold=0.5, gain=1.0, left=Leaf(0), right=Leaf(1)
    )
    return DecisionTree(root, n_features=1)


def _xor_tree() -> DecisionTree:
    #          x0 <= 0
    #         /       \
    #    x1 <= 0     x1 <= 0
    #    /    \      /    \
    #   0      1    1      0
    root = InternalNode(
        feature=0,
        threshold=0.0,
        gain=0.0,
        left=InternalNode(
            feature=1, threshold=0.0, gain=1.0, left=Leaf(0), right=Leaf(1)
        ),
        right=InternalNode(
            feature=1, threshold=0.0, gain=1.0, left=Leaf(1), right=Leaf(0)
        ),
    )
    return DecisionTree(root, n_features=2)


class TestDecisionTree:
    """Unit tests for DecisionTree class."""

    def test_leaf_prediction_single_node(self):
        """A single leaf node tree should return its value for any sample."""
        tree = DecisionTree(Leaf(3), n_features=1)
        assert tree.predict(np.array([42.0])) == 3
        assert tree.predict(np.array([-1.0])) == 3

    def test_two_level_tree_left_branch(self):
        """Values equal to the threshold go left."""
        tree = _two_leaf_tree()
        assert tree.predict(np.array([0.5])) == 0
        assert tree.predict(np.array([-3.0])) == 0

    def test_two_level_tree_right_branch(self):
        tree = _two_leaf_tree()
        assert tree.predict(np.array([0.50001])) == 1

    def test_complex_tree_three_levels(self):
        tree = _xor_tree()
        assert tree.predict(np.array([0.0, 0.0])) == 0
        assert tree.predict(np.array([0.0, 1.0])) == 1
        assert tree.predict(np.array([1.0, 0.0])) == 1
        assert tree.predict(np.array([1.0, 1.0])) == 0

    def test_predict_many_keeps_row_order(self):
        tree = _xor_tree()
        features = np.array([[1.0, 1.0], [0.0, 1.0], [1.0, 0.0], [0.0, 0.0]])
        predictions = tree.predict_many(features)
        assert predictions.tolist() == [0, 1, 1, 0]
        assert predictions.dtype == np.int64

    def test_predict_node_on_subtree(self):
        subtree = _xor_tree().root.right
        assert predict_node(subtree, np.array([1.0, 0.0])) == 1


class TestTreeShape:
    def test_single_leaf(self):
        tree = DecisionTree(Leaf(0), n_features=4)
        assert tree.depth() == 0
        assert tree.node_count() == 1
        assert tree.max_feature_index() == -1

    def test_xor_tree(self):
        tree = _xor_tree()
        assert tree.depth() == 2
        assert tree.node_count() == 7
        assert tree.max_feature_index() == 1

    def test_splits_in_preorder(self):
        assert _xor_tree().splits() == [(0, 0.0), (1, 0.0), (1, 0.0)]

    def test_splits_of_single_leaf(self):
        assert DecisionTree(Leaf(1), n_features=1).splits() == []


class TestRelease:
    def test_release_detaches_root(self):
        tree = _two_leaf_tree()
        assert not tree.released

        tree.release()

        assert tree.released
        with pytest.raises(TreeReleasedError):
            tree.predict(np.array([0.0]))

    def test_release_twice_is_harmless(self):
        tree = _two_leaf_tree()
        tree.release()
        tree.release()
        assert tree.released

    def test_nodes_are_immutable(self):
        leaf = Leaf(1)
        with pytest.raises(AttributeError):
            leaf.value = 2  # type: ignore[misc]

import dataclasses

import numpy

from dtree.exceptions import TreeReleasedError
from dtree.types import FeatureMatrix, FeatureVector, LabelVector


@dataclasses.dataclass(frozen=True)
class Leaf:
    """Terminal node predicting a fixed class."""

    value: int


@dataclasses.dataclass(frozen=True)
class InternalNode:
    """Threshold test on one feature, owning both subtrees."""

    feature: int
    """
    0-indexed feature tested at this node
    """

    threshold: float
    """
    Samples with feature value <= threshold descend left, others right
    """

    gain: float
    """
    Information gain of the split, kept for inspection only
    """

    left: "TreeNode"
    right: "TreeNode"


TreeNode = Leaf | InternalNode


def predict_node(node: TreeNode, features: FeatureVector) -> int:
    """Classify one sample starting from `node`."""
    while isinstance(node, InternalNode):
        if features[node.feature] <= node.threshold:  # <= for left branch
            node = node.left
        else:
            node = node.right
    return node.value


class DecisionTree:
    """
    Binary decision tree produced by induction.

    The tree is immutable once built, so a single instance can serve
    concurrent predictions.
    """

    n_features: int
    """
    Number of features of the training set
    """

    def __init__(self, root: TreeNode, n_features: int) -> None:
        self._root: TreeNode | None = root
        self.n_features = n_features

    @property
    def root(self) -> TreeNode:
        if self._root is None:
            raise TreeReleasedError("Decision tree has been released.")
        return self._root

    @property
    def released(self) -> bool:
        return self._root is None

    def release(self) -> None:
        """Drop the node structure; the tree cannot predict afterwards."""
        self._root = None

    def depth(self) -> int:
        def _depth(node: TreeNode) -> int:
            if isinstance(node, Leaf):
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))

        return _depth(self.root)

    def node_count(self) -> int:
        def _count(node: TreeNode) -> int:
            if isinstance(node, Leaf):
                return 1
            return 1 + _count(node.left) + _count(node.right)

        return _count(self.root)

    def max_feature_index(self) -> int:
        """Largest feature index tested by the tree, -1 for a single leaf."""

        def _max(node: TreeNode) -> int:
            if isinstance(node, Leaf):
                return -1
            return max(node.feature, _max(node.left), _max(node.right))

        return _max(self.root)

    def splits(self) -> list[tuple[int, float]]:
        """(feature, threshold) of every internal node, in preorder."""
        result: list[tuple[int, float]] = []
        stack: list[TreeNode] = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, InternalNode):
                result.append((node.feature, node.threshold))
                stack.append(node.right)
                stack.append(node.left)
        return result

    def predict(self, features: FeatureVector) -> int:
        return predict_node(self.root, features)

    def predict_many(self, features: FeatureMatrix) -> LabelVector:
        root = self.root
        return numpy.array(
            [predict_node(root, row) for row in features], dtype=numpy.int64
        )

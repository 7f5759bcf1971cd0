import dataclasses
import logging
import time

from dtree.exceptions import EmptyInputError, InvalidTreeParamError
from dtree.split import best_split
from dtree.stats import is_pure, majority_class
from dtree.tree import DecisionTree, InternalNode, Leaf, TreeNode
from dtree.types import FeatureMatrix, LabelVector

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH: int = 5
DEFAULT_MIN_SAMPLES_SPLIT: int = 1


@dataclasses.dataclass(frozen=True)
class TreeParams:
    """Stopping parameters for tree induction."""

    max_depth: int = DEFAULT_MAX_DEPTH  # Nodes at this depth become leaves
    min_samples_split: int = DEFAULT_MIN_SAMPLES_SPLIT  # Fewer samples become a leaf

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise InvalidTreeParamError(
                f"max_depth must be non-negative, got {self.max_depth}."
            )
        if self.min_samples_split < 1:
            raise InvalidTreeParamError(
                f"min_samples_split must be at least 1, got {self.min_samples_split}."
            )


@dataclasses.dataclass(frozen=True)
class BuildResult:
    """Result of growing a decision tree."""

    tree: DecisionTree
    total_time: float  # Total time spent (seconds)
    n_nodes: int  # Number of nodes, leaves included
    depth: int  # Depth of the deepest leaf, 0 for a single leaf


def _make_leaf(labels: LabelVector) -> Leaf:
    return Leaf(value=majority_class(labels))


def grow(
    features: FeatureMatrix,
    labels: LabelVector,
    depth: int,
    params: TreeParams,
) -> TreeNode:
    """
    Recursively grow the subtree for the given training subset.

    Args:
        features: feature rows reaching this node
        labels: labels of those rows
        depth: depth of this node, 0 for the root
        params: stopping parameters

    Returns:
        A leaf if a stopping rule fires or no split separates the rows,
        an internal node otherwise

    Raises:
        EmptyInputError: if no rows reach this node
    """
    n_samples = labels.shape[0]
    if n_samples == 0:
        raise EmptyInputError(f"No samples reached the node at depth {depth}.")

    if (
        is_pure(labels)
        or n_samples < params.min_samples_split
        or depth == params.max_depth
    ):
        return _make_leaf(labels)

    split = best_split(features, labels)
    if not split.is_usable:
        # Identical feature rows with different labels cannot be separated
        logger.debug(
            "Forcing leaf at depth %d: %d samples, no usable split", depth, n_samples
        )
        return _make_leaf(labels)

    left = grow(split.left_features, split.left_labels, depth + 1, params)
    right = grow(split.right_features, split.right_labels, depth + 1, params)

    return InternalNode(
        feature=split.feature,
        threshold=split.threshold,
        gain=split.gain,
        left=left,
        right=right,
    )


def induce(
    features: FeatureMatrix,
    labels: LabelVector,
    params: TreeParams | None = None,
) -> TreeNode:
    """Grow a tree from the root. Inputs are assumed to be validated."""
    if params is None:
        params = TreeParams()
    return grow(features, labels, 0, params)


def build_tree(
    features: FeatureMatrix,
    labels: LabelVector,
    params: TreeParams | None = None,
    *,
    verbose: bool = False,
) -> BuildResult:
    """
    Build a decision tree classifier with ID3-style induction.

    Args:
        features: training features, one row per sample
        labels: training labels, encoded as 0, 1, ..., K-1
        params: stopping parameters (default: TreeParams())
        verbose: if True, print progress information

    Returns:
        BuildResult containing the tree and build statistics
    """
    if params is None:
        params = TreeParams()

    n_samples, n_features = features.shape

    if verbose:
        print(
            f"Growing tree on {n_samples} samples, {n_features} features "
            f"(max_depth={params.max_depth}, min_samples_split={params.min_samples_split})..."
        )

    start = time.time()
    root = induce(features, labels, params)
    tree = DecisionTree(root, n_features)
    total_time = time.time() - start

    result = BuildResult(
        tree=tree,
        total_time=total_time,
        n_nodes=tree.node_count(),
        depth=tree.depth(),
    )

    if verbose:
        print(
            f"Grew tree with {result.n_nodes} nodes, depth {result.depth} "
            f"in {total_time:.4f}s"
        )
    logger.debug(
        "Built tree: %d nodes, depth %d, %.4fs", result.n_nodes, result.depth, total_time
    )

    return result

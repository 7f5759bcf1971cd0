from dtree.api import fit, predict, predict_single, release, train
from dtree.builder import BuildResult, TreeParams
from dtree.classifier import DTreeClassifier
from dtree.tree import DecisionTree, InternalNode, Leaf

__all__ = [
    "DTreeClassifier",
    "DecisionTree",
    "BuildResult",
    "TreeParams",
    "Leaf",
    "InternalNode",
    "train",
    "fit",
    "predict",
    "predict_single",
    "release",
]

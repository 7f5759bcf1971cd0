#!/usr/bin/env python3
"""Grow a decision tree on the XOR gate and reproduce its truth table.

Usage:
    python exp/xor_example.py
"""

from __future__ import annotations

import dtree

# Flat, row-major features: (1,1), (0,1), (1,0), (0,0)
FEATURES = [
    1, 1,
    0, 1,
    1, 0,
    0, 0,
]
LABELS = [0, 1, 1, 0]
NCOL = 2
NROW = 4


def main() -> None:
    tree = dtree.train(FEATURES, LABELS, NCOL, NROW)

    # Bulk predictions on the training data reproduce the labels
    predictions = dtree.predict(tree, FEATURES, NCOL, NROW)
    for i, prediction in enumerate(predictions):
        print(f"result {i}: {prediction}")

    print(f"result single: {dtree.predict_single(tree, [1, 0])}")  # 1

    dtree.release(tree)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Depth sweep comparing dtree with sklearn's entropy decision tree.

Data Pipeline per Dataset:
    1. Load dataset from PMLB (e.g., 'iris')
    2. Densely encode labels as 0, 1, ..., K-1
    3. Split once into train/test
    4. For every depth limit, grow dtree and sklearn trees on the same split
    5. Collect metrics

Metrics per Depth (CSV columns):
    - dataset, max_depth
    - dtree_size, dtree_test_acc, dtree_time
    - sklearn_size, sklearn_test_acc, agreement, status

Usage:
    python exp/depth_comparison.py --datasets iris --depths 1,2,3,5
    python exp/depth_comparison.py --datasets iris,wine_recognition --output custom.csv
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from scripts.experiments.comparison import compare_dtree_vs_sklearn

DEFAULT_DATASETS = "iris"
DEFAULT_DEPTHS = "1,2,3,4,5"
DEFAULT_TRAIN_SIZE = 0.8
DEFAULT_RANDOM_STATE = 42


def default_output_path() -> str:
    """Generate default output path with ISO 8601 timestamp."""
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    return f"output/{timestamp}.csv"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Depth sweep: dtree vs sklearn entropy tree comparison"
    )
    parser.add_argument(
        "--datasets",
        type=str,
        default=DEFAULT_DATASETS,
        help=f"Comma-separated dataset names (default: {DEFAULT_DATASETS})",
    )
    parser.add_argument(
        "--depths",
        type=str,
        default=DEFAULT_DEPTHS,
        help=f"Comma-separated depth limits (default: {DEFAULT_DEPTHS})",
    )
    parser.add_argument(
        "--train-size",
        type=float,
        default=DEFAULT_TRAIN_SIZE,
        help=f"Fraction of samples used for training (default: {DEFAULT_TRAIN_SIZE})",
    )
    parser.add_argument(
        "--random-state",
        type=int,
        default=DEFAULT_RANDOM_STATE,
        help=f"Random seed for the train/test split (default: {DEFAULT_RANDOM_STATE})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV file path (default: output/<timestamp>.csv)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging from dtree",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    datasets = [d.strip() for d in args.datasets.split(",")]
    depths = [int(d.strip()) for d in args.depths.split(",")]
    output_path = args.output if args.output is not None else default_output_path()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    print(f"Datasets: {', '.join(datasets)}")
    print(f"Depths: {depths}")
    print(f"Output: {output_path}")

    frames: list[pd.DataFrame] = []
    for dataset in datasets:
        df = compare_dtree_vs_sklearn(
            dataset,
            depths,
            train_size=args.train_size,
            random_state=args.random_state,
        )
        df.insert(0, "dataset", dataset)
        frames.append(df)
        print()

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    pd.concat(frames, ignore_index=True).to_csv(output_path, index=False)

    print("\nDone.")


if __name__ == "__main__":
    main()

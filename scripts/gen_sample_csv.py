#!/usr/bin/env python3
"""Synthetic CSV generator for performance checks.

Writes a header row plus ``--rows`` data rows with a mix of name, category,
numeric and date columns. Every value is written as plain text, the way
csvpick reads it back.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

CATEGORIES = ["Electronics", "Clothing", "Books", "Food", "Sports", "Home"]


def generate_synthetic_data(rows: int, cols: int, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame of ``rows`` x ``cols`` string-convertible values.

    The first columns are always ``id``, ``name``, ``category`` (when cols
    allows); the remainder alternates amounts, quantities and dates.
    """
    rng = np.random.default_rng(seed)
    data: dict[str, list[Any]] = {}

    data["id"] = list(range(1, rows + 1))
    if cols > 1:
        data["name"] = [f"Item_{n}_{chr(65 + (j % 26))}" for j, n in enumerate(rng.integers(1000, 9999, rows))]
    if cols > 2:
        data["category"] = rng.choice(CATEGORIES, rows).tolist()

    dates = pd.date_range("2023-01-01", "2024-12-31", periods=100).strftime("%Y-%m-%d")
    for i in range(3, cols):
        if i % 3 == 0:
            data[f"amount_{i}"] = np.round(rng.uniform(0.01, 9999.99, rows), 2).tolist()
        elif i % 3 == 1:
            data[f"quantity_{i}"] = rng.integers(1, 1000, rows).tolist()
        else:
            data[f"date_{i}"] = rng.choice(dates, rows).tolist()

    return pd.DataFrame(data)


def create_csv_file(output_path: Path, rows: int, cols: int, seed: int = 42) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_synthetic_data(rows, cols, seed)
    df.to_csv(output_path, index=False, lineterminator="\n")
    return output_path


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a synthetic CSV dataset")
    parser.add_argument("output", type=Path, help="Output CSV file path")
    parser.add_argument("--rows", type=int, default=50_000, help="Number of data rows (default: 50,000)")
    parser.add_argument("--cols", type=int, default=12, help="Number of columns (default: 12)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.cols <= 0:
        print("Error: --cols must be positive", file=sys.stderr)
        return 1

    path = create_csv_file(args.output, args.rows, args.cols, args.seed)
    print(f"Created CSV file: {path}")
    print(f"  Rows: {args.rows:,} (+ 1 header row)")
    print(f"  Columns: {args.cols}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

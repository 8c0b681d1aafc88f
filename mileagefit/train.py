"""Command that fits the mileage/price model and stores it in the specs file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .regression import DEFAULT_SPECS, DatasetError, LinearRegression, SpecsError

USAGE = "Usage: ./train <learning_rate> <maximum_iteration> <dataset_file>"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Train on a dataset and write the denormalised weight and bias."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Wrong number of arguments!")
        print(USAGE)
        return 1

    rate_text, iterations_text, dataset_file = args
    try:
        learning_rate = float(rate_text)
    except ValueError:
        print("Invalid learning rate.", file=sys.stderr)
        return 1
    try:
        max_iterations = int(iterations_text)
    except ValueError:
        print("Invalid maximum iteration.", file=sys.stderr)
        return 1
    if max_iterations < 0:
        print("Invalid maximum iteration.", file=sys.stderr)
        return 1

    model = LinearRegression(learning_rate, max_iterations, dataset_file)
    try:
        model.load_dataset()
        model.train(log=print)
        model.save_specs(DEFAULT_SPECS)
    except (DatasetError, SpecsError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Command that estimates a price for a mileage from the stored specs."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .regression import DEFAULT_SPECS, SpecsError, predict, read_specs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the predicted price for the mileage given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage:")
        print("./predict <number_of_mileage>")
        return 1

    try:
        mileage = float(args[0])
    except ValueError:
        print(f"Invalid mileage input: {args[0]}", file=sys.stderr)
        return 1

    try:
        weight, bias = read_specs(DEFAULT_SPECS)
    except SpecsError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Weight at start: {weight:g} Bias at start: {bias:g}")
    print(f"Prediction: {predict(mileage, weight, bias):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
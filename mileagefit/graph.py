"""Command that charts the dataset and the fitted regression line."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .plotting import X_LABEL, Y_LABEL, Plot, Plotter, PlotStyle, create_line_plot_x
from .regression import DEFAULT_SPECS, DatasetError, SpecsError, read_dataset, read_specs

DATA_OPTIONS = ("-d", "-b")
LINE_OPTIONS = ("-l", "-b")

USAGE = """\
Usage: ./graph <option> <dataset_file>
Options:
    -d = Plot the dataset points
    -l = Plot the linear regression line
    -b = Plot both dataset points and linear regression line"""


def build_plots(
    option: str,
    mileages: Sequence[float],
    prices: Sequence[float],
    weight: float = 0.0,
    bias: float = 0.0,
) -> list:
    """Series to draw for a command-line option; empty for an unknown option."""
    plots = []
    if option in DATA_OPTIONS:
        plots.append(Plot(list(mileages), list(prices), PlotStyle.SCATTER, "Dataset", "#FF8800", 1))
    if option in LINE_OPTIONS:
        if not mileages:
            raise ValueError("cannot draw the regression line without data")
        plots.append(
            create_line_plot_x(
                weight, bias, min(mileages), max(mileages), "Regression", "#0000FF", 2
            )
        )
    return plots


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open gnuplot and draw what the option asks for."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE)
        return 1

    option, dataset_file = args
    try:
        rows = read_dataset(dataset_file)
    except DatasetError as exc:
        print(exc, file=sys.stderr)
        return 1
    mileages = [mileage for mileage, _ in rows]
    prices = [price for _, price in rows]

    weight = bias = 0.0
    if option in LINE_OPTIONS:
        try:
            weight, bias = read_specs(DEFAULT_SPECS)
        except SpecsError as exc:
            print(exc, file=sys.stderr)
            return 1

    try:
        plots = build_plots(option, mileages, prices, weight, bias)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    if not plots:
        print("Invalid multi-plot call.", file=sys.stderr)
        return 1

    try:
        with Plotter.open() as plotter:
            plotter.set_title("Linear Regression Visualization")
            plotter.set_label(X_LABEL, "Mileage")
            plotter.set_label(Y_LABEL, "Price")
            plotter.plot_multiple(plots)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
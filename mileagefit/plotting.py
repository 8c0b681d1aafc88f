"""Drawing data sets and straight lines through a gnuplot command stream."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Iterable, Optional, Sequence, Union

X_LABEL = "xlabel"
Y_LABEL = "ylabel"


class PlotStyle(str, Enum):
    """Gnuplot drawing styles."""

    SCATTER = "points"
    LINE = "lines"
    LINE_POINTS = "linespoints"
    IMPULSE = "impulses"
    HISTOGRAM = "boxes"


def _style_name(style: Union[PlotStyle, str]) -> str:
    return style.value if isinstance(style, PlotStyle) else str(style)


@dataclass
class Plot:
    """One series of points with the way it is drawn."""

    x: list = field(default_factory=list)
    y: list = field(default_factory=list)
    style: Union[PlotStyle, str] = PlotStyle.LINE
    title: str = ""
    color: str = "black"
    line_width: int = 1

    def __post_init__(self) -> None:
        self.x = [float(v) for v in self.x]
        self.y = [float(v) for v in self.y]

    def points(self) -> Iterable[tuple]:
        if len(self.x) != len(self.y):
            raise ValueError(
                f"plot {self.title!r} has {len(self.x)} x values "
                f"but {len(self.y)} y values"
            )
        return zip(self.x, self.y)

    def spec(self) -> str:
        return (
            f"'-' with {_style_name(self.style)} linecolor rgb \"{self.color}\" "
            f"linewidth {self.line_width} title \"{self.title}\""
        )


def create_line_plot_x(
    slope: float,
    intercept: float,
    start_x: float,
    end_x: float,
    title: str = "Line",
    color: str = "black",
    line_width: int = 1,
) -> Plot:
    """Line y = slope * x + intercept between two x positions."""
    xs = [start_x, end_x]
    ys = [slope * start_x + intercept, slope * end_x + intercept]
    return Plot(xs, ys, PlotStyle.LINE, title, color, line_width)


def create_line_plot_y(
    slope: float,
    intercept: float,
    start_y: float,
    end_y: float,
    title: str = "Line",
    color: str = "black",
    line_width: int = 1,
) -> Plot:
    """Line y = slope * x + intercept between two y positions."""
    if slope == 0.0:
        raise ValueError("cannot place a line by y when the slope is zero")
    ys = [start_y, end_y]
    xs = [(start_y - intercept) / slope, (end_y - intercept) / slope]
    return Plot(xs, ys, PlotStyle.LINE, title, color, line_width)


class Plotter:
    """Writes gnuplot commands and inline data to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream: Optional[IO[str]] = stream
        self._process: Optional[subprocess.Popen] = None

    @classmethod
    def open(cls) -> "Plotter":
        """Start a persistent gnuplot process and plot into it."""
        try:
            process = subprocess.Popen(
                ["gnuplot", "-persist"], stdin=subprocess.PIPE, text=True
            )
        except OSError as exc:
            raise RuntimeError("failed to open gnuplot pipe") from exc
        plotter = cls(process.stdin)
        plotter._process = process
        return plotter

    def close(self) -> None:
        if self._stream is None:
            return
        self._stream.close()
        self._stream = None
        if self._process is not None:
            self._process.wait()
            self._process = None

    def __enter__(self) -> "Plotter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _write(self, text: str) -> None:
        if self._stream is None:
            raise RuntimeError("plotter is closed")
        self._stream.write(text)

    def _flush(self) -> None:
        if self._stream is not None:
            self._stream.flush()

    def _write_data(self, plot: Plot) -> None:
        for x, y in plot.points():
            self._write(f"{x:f} {y:f}\n")
        self._write("e\n")

    def plot(self, plot: Plot) -> None:
        """Draw a single series."""
        points = list(plot.points())
        self._write(f"plot {plot.spec()}\n")
        for x, y in points:
            self._write(f"{x:f} {y:f}\n")
        self._write("e\n")
        self._flush()

    def plot_multiple(self, plots: Sequence[Plot]) -> None:
        """Draw several series in one chart."""
        plots = list(plots)
        if not plots:
            raise ValueError("no plots to draw")
        for item in plots:
            item.points()
        self._write("plot " + ", ".join(item.spec() for item in plots) + "\n")
        for item in plots:
            self._write_data(item)
        self._flush()

    def set_label(self, axis: str, label: str) -> None:
        self._write(f"set {axis} \"{label}\"\n")

    def set_title(self, title: str) -> None:
        self._write(f"set title \"{title}\"\n")
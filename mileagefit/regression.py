"""Linear regression of price on mileage with gradient descent."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

PathLike = Union[str, Path]
DEFAULT_SPECS = "specs"


class DatasetError(Exception):
    """The dataset file cannot be read or used."""


class SpecsError(Exception):
    """The specs file cannot be read or written."""


def predict(value: float, weight: float, bias: float) -> float:
    return weight * value + bias


def normalize(value: float, mean: float, std: float) -> float:
    return (value - mean) / std


def denormalize(value: float, mean: float, std: float) -> float:
    return value * std + mean


def read_dataset(path: PathLike) -> list:
    """Read (mileage, price) rows from a CSV file with a header line."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise DatasetError(f"couldn't open the dataset file {path}") from exc

    rows = []
    for number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        fields = line.split(",")
        if len(fields) < 2:
            raise DatasetError(f"line {number}: expected mileage,price")
        try:
            rows.append((float(fields[0]), float(fields[1])))
        except ValueError as exc:
            raise DatasetError(f"line {number}: {exc}") from exc
    return rows


def read_specs(path: PathLike = DEFAULT_SPECS) -> tuple:
    """Read the weight and bias stored as 'weight,bias' on the first line."""
    try:
        with open(path, encoding="utf-8") as handle:
            line = handle.readline()
    except OSError as exc:
        raise SpecsError(f"couldn't open the spec file {path}") from exc
    if not line:
        raise SpecsError("empty spec file")

    weight_text, comma, bias_text = line.rstrip("\r\n").partition(",")
    if not comma or not bias_text:
        raise SpecsError("wrong file format, expected weight,bias")
    try:
        return float(weight_text), float(bias_text)
    except ValueError as exc:
        raise SpecsError(f"conversion error: {exc}") from exc


def write_specs(path: PathLike, weight: float, bias: float) -> None:
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{weight:g},{bias:g}\n")
    except OSError as exc:
        raise SpecsError(f"failed to open {path} for writing") from exc


def calculate_cost(dataset: Mapping[float, float], weight: float, bias: float) -> float:
    """Mean squared error of the line over the dataset."""
    total = sum((predict(x, weight, bias) - y) ** 2 for x, y in dataset.items())
    return total / len(dataset)


def calculate_weight_gradient(
    dataset: Mapping[float, float], weight: float, bias: float
) -> float:
    total = sum((predict(x, weight, bias) - y) * x for x, y in dataset.items())
    return total / len(dataset)


def calculate_bias_gradient(
    dataset: Mapping[float, float], weight: float, bias: float
) -> float:
    total = sum(predict(x, weight, bias) - y for x, y in dataset.items())
    return total / len(dataset)


class LinearRegression:
    """Model trained on standardised mileage and price."""

    def __init__(
        self,
        learning_rate: float = 0.0,
        max_iterations: int = 0,
        dataset_file: PathLike = "",
    ) -> None:
        if max_iterations < 0:
            raise ValueError("the iteration count cannot be below zero")
        self.learning_rate = float(learning_rate)
        self.max_iterations = int(max_iterations)
        self.dataset_file = dataset_file
        self.weight = 0.0
        self.bias = 0.0
        self.mean_mileage = 0.0
        self.std_mileage = 1.0
        self.mean_price = 0.0
        self.std_price = 1.0
        self.dataset: dict = {}

    def load_dataset(self) -> None:
        """Read the dataset file and store it standardised, keyed by mileage."""
        rows = read_dataset(self.dataset_file)
        if not rows:
            raise DatasetError("the dataset has no rows")
        count = len(rows)
        self.mean_mileage = sum(m for m, _ in rows) / count
        self.mean_price = sum(p for _, p in rows) / count
        self.std_mileage = math.sqrt(
            sum((m - self.mean_mileage) ** 2 for m, _ in rows) / count
        )
        self.std_price = math.sqrt(
            sum((p - self.mean_price) ** 2 for _, p in rows) / count
        )
        if self.std_mileage == 0 or self.std_price == 0:
            raise DatasetError("mileage and price must both vary across the dataset")

        normalised = {}
        for mileage, price in rows:
            key = normalize(mileage, self.mean_mileage, self.std_mileage)
            normalised[key] = normalize(price, self.mean_price, self.std_price)
        self.dataset = dict(sorted(normalised.items()))

    def load_specs(self, path: PathLike = DEFAULT_SPECS) -> tuple:
        self.weight, self.bias = read_specs(path)
        return self.weight, self.bias

    def denormalized_weight(self) -> float:
        return self.weight * (self.std_price / self.std_mileage)

    def denormalized_bias(self) -> float:
        return (
            self.mean_price
            - self.denormalized_weight() * self.mean_mileage
            + self.bias * self.std_price
        )

    def train(self, log: Optional[Callable[[str], None]] = None) -> list:
        """Run gradient descent; return the cost after each iteration."""
        costs = []
        for iteration in range(1, self.max_iterations + 1):
            self.weight -= self.learning_rate * calculate_weight_gradient(
                self.dataset, self.weight, self.bias
            )
            self.bias -= self.learning_rate * calculate_bias_gradient(
                self.dataset, self.weight, self.bias
            )
            cost = calculate_cost(self.dataset, self.weight, self.bias)
            costs.append(cost)
            if log is not None:
                log(
                    f"| Iteration: {iteration} | Cost: {cost:g} "
                    f"| Weight: {self.weight:g} | Bias: {self.bias:g} |"
                )
        return costs

    def save_specs(self, path: PathLike = DEFAULT_SPECS) -> None:
        write_specs(path, self.denormalized_weight(), self.denormalized_bias())
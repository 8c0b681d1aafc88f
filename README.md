# mileagefit

mileagefit is a small linear-regression toolkit that learns how a car's price
depends on its mileage. It provides three commands:

- `mileagefit-train` fits a line with gradient descent.
- `mileagefit-predict` predicts a price for a given mileage.
- `mileagefit-graph` draws the dataset and the fitted line with gnuplot.

## Installation

```
pip install .
```

The graph command starts `gnuplot -persist`, so `gnuplot` must be on your
`PATH`. The other commands do not need it.

## Dataset format

The dataset is a CSV file. Its first line is a header and is skipped, and blank
lines are ignored. Every other line starts with a mileage and a price:

```
km,price
240000,3650
139800,3800
150500,4400
```

If a line has fewer than two fields, or a value that is not a number, the
command reports an error and exits with status 1.

## Training

```
mileagefit-train <learning_rate> <maximum_iteration> <dataset_file>
```

Training standardises mileage and price to mean 0 and standard deviation 1. The
standardised rows are keyed by mileage, so when two rows have the same mileage
only the last of them is kept. Each iteration prints a line like this:

```
| Iteration: 1 | Cost: 0.95 | Weight: -0.0086 | Bias: 0 |
```

When training ends, the weight and bias are converted back to the original
scale. They are written as `weight,bias` to a file named `specs` in the current
directory.

The command exits with status 1 in these cases:

- the argument count is wrong
- the learning rate or the iteration count is not a number
- the iteration count is negative
- the dataset has no rows
- every row has the same mileage, or every row has the same price

Example:

```
mileagefit-train 0.1 1000 data.csv
```

## Prediction

```
mileagefit-predict <number_of_mileage>
```

This reads `specs` from the current directory. It prints the stored weight and
bias, followed by `Prediction: <weight * mileage + bias>`.

## Plotting

```
mileagefit-graph <option> <dataset_file>
```

Options:

- `-d` draws the dataset points.
- `-l` draws the regression line read from `specs`, from the smallest mileage in
  the dataset to the largest.
- `-b` draws both.

Any other option is an error.

## Library use

```python
from mileagefit.regression import LinearRegression, predict

model = LinearRegression(0.1, 1000, "data.csv")
model.load_dataset()
costs = model.train()          # pass log=print to see each iteration
model.save_specs("specs")

print(predict(50000, model.denormalized_weight(), model.denormalized_bias()))
```

`mileagefit.regression` provides the following functions:

- `read_dataset`
- `read_specs`
- `write_specs`
- `normalize`
- `denormalize`
- `calculate_cost`
- `calculate_weight_gradient`
- `calculate_bias_gradient`

Failures raise `DatasetError` or `SpecsError`.

`mileagefit.plotting` provides `Plot`, `PlotStyle`, `Plotter`,
`create_line_plot_x` and `create_line_plot_y`:

- `Plotter.open()` starts a gnuplot process.
- `Plotter(stream)` writes the same gnuplot commands to any writable text
  stream.
- `create_line_plot_y` raises `ValueError` when the slope is zero.

Example:

```python
import io
from mileagefit.plotting import Plotter, create_line_plot_x

buffer = io.StringIO()
with Plotter(buffer) as plotter:
    plotter.set_title("Example")
    plotter.plot(create_line_plot_x(2.0, 1.0, 0.0, 10.0))
```
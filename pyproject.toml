[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mileagefit"
version = "0.1.0"
description = "Fit car price against mileage with gradient-descent linear regression, predict prices and plot the result with gnuplot."
requires-python = ">=3.10"
dependencies = []
keywords = ["linear regression", "gradient descent", "machine learning", "gnuplot", "mileage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mileagefit-train = "mileagefit.train:main"
mileagefit-predict = "mileagefit.predict:main"
mileagefit-graph = "mileagefit.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["mileagefit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

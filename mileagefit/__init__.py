"""Gradient-descent linear regression of car price against mileage, with gnuplot plotting."""

__version__ = "0.1.0"
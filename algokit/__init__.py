"""Algorithms and data structures for number theory, algebra, power series, graphs, strings and matroids."""

__version__ = "0.1.0"
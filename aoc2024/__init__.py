"""Advent of Code 2024 puzzle solutions for days 1 to 8, with a command to run them."""

__version__ = "0.1.0"
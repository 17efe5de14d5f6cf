"""Solvers for days 16 to 25 of a 2023 puzzle calendar, with a command line entry point."""

__version__ = "0.1.0"
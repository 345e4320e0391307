"""Competitive programming solutions, command-line solvers and modular arithmetic helpers."""

__version__ = "0.1.0"
__all__ = ["modmath", "subarray_sum", "string_task", "team", "theatre_square", "long_words"]
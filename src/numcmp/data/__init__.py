"""Numeric sample input."""

from numcmp.data.reader import parse_numbers, read_numbers, read_sorted_sample

__all__ = ["parse_numbers", "read_numbers", "read_sorted_sample"]

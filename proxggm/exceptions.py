"""Typed failures raised at the proxggm entry points."""

from __future__ import annotations


class DimensionMismatchError(ValueError):
    """Array shapes are incompatible (e.g. ``theta`` is not P×P for P data columns)."""


class NonFiniteInputError(ValueError):
    """An input array contains NaN or infinite entries."""

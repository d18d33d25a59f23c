# _errors.py
"""Exceptions raised at the public boundary of the tree."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a tree is constructed with an unusable max_children."""


class InvalidRectangle(ValueError):
    """Raised when a rectangle is malformed (wrong arity, NaN, or min > max)."""

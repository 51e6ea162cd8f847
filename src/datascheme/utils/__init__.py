"""Utility functions for datascheme."""

from __future__ import annotations

from .sizing import encoded_size, field_sizes, static_size

__all__ = [
    "static_size",
    "field_sizes",
    "encoded_size",
]

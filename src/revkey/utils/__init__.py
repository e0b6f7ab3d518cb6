"""Utility functions for revkey.

This module provides encoded size calculation.
"""

from __future__ import annotations

from .sizing import encoded_size, max_encoded_size

__all__ = [
    "encoded_size",
    "max_encoded_size",
]

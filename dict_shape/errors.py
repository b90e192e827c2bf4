"""Exceptions raised by dict-shape."""

from __future__ import annotations


class ConversionError(ValueError):
    """A value cannot be expressed as a canonical mapping."""

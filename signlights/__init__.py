"""Colour sequences and controller helpers for multi-digit LED matrix signs."""

__version__ = "0.1.0"
"""Animated isometric cube-field background engine."""

__version__ = "0.1.0"

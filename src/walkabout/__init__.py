"""Walkabout: a keyboard-driven sprite-sheet character on a canvas."""

__version__ = "0.1.0"

"""Retro terminal toy that turns random keystrokes into scrolling code."""

__version__ = "1.0.0"
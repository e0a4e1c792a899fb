"""Checkie - rules engine for 8x8 checkers."""

__version__ = "0.1.0"

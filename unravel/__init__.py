"""Unravel: automatic decoding of unknown encoded text."""

__version__ = "0.1.0"

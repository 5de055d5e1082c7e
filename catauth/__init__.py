"""Catrobat web server authentication client."""

__version__ = "0.1.0"

"""Presentation helpers for the block explorer address pages."""

__version__ = "0.1.0"

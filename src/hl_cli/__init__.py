"""Highlight delimited fields of streamed text with ANSI colors."""

__version__ = "0.1.0"

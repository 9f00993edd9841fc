"""Cursor-driven chess: rule engine, positional records and a text board."""

__version__ = "0.1.0"

"""Persistence layer of a catalog product import."""

__version__ = "1.0.0"

"""Typed callout picker for document editors."""

__version__ = "0.1.0"

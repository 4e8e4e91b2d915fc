"""Resolve DB booking references and deep links into journey details."""

__version__ = "0.1.0"

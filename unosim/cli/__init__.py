"""Command-line interface for the UNO simulator."""

from .main import app, main

__all__ = ["app", "main"]

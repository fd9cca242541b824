"""
Command-line interface components.

This package contains the interactive shell and entry point for cf.
"""

from .main import main

__all__ = ["main"]

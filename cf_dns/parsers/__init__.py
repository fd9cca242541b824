"""
Input parsers.

This package contains the command line tokenizer.
"""

from .command_line import CommandLineParser, join_args

__all__ = ["CommandLineParser", "join_args"]

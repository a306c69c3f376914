"""
Command-line entry points.
"""

from my_text_reader.cli.main import app, main

__all__ = ["app", "main"]

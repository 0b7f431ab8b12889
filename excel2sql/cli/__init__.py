"""
Command line interface for excel2sql.
"""

from .main import app, main

__all__ = ["app", "main"]

"""
SQL script generation.
"""

from .sql_generator import DEFAULT_BATCH_SIZE, SQLGenerator, generate
from .validation import validate_script

__all__ = ["DEFAULT_BATCH_SIZE", "SQLGenerator", "generate", "validate_script"]

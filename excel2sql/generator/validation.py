"""
Syntax validation of generated scripts using sqlglot.
"""

import logging

import sqlglot
from sqlglot.errors import SqlglotError

from excel2sql.dialects import SQLDialect, get_dialect
from excel2sql.exceptions import ScriptValidationError

logger = logging.getLogger(__name__)


def validate_script(script: str, dialect: str | SQLDialect) -> int:
    """
    Parse a script in the target dialect to check it is syntactically valid.

    Args:
        script: Generated SQL script
        dialect: Target dialect name or instance

    Returns:
        Number of statements parsed

    Raises:
        ScriptValidationError: If sqlglot cannot parse the script
    """
    target = get_dialect(dialect)
    if not script.strip():
        return 0

    try:
        expressions = sqlglot.parse(script, read=target.sqlglot_dialect)
    except SqlglotError as e:
        logger.error(f"Generated script does not parse as {target.name}: {e}")
        raise ScriptValidationError(f"Generated SQL is not valid {target.name}: {e}") from e

    statements = [expression for expression in expressions if expression is not None]
    logger.debug(f"Validated {len(statements)} statement(s) as {target.name}")
    return len(statements)

"""
Dialect registry for looking up target SQL dialects by name.

Dialects register themselves on import; lookups are case-insensitive and accept
each dialect's aliases.
"""

import logging

from excel2sql.exceptions import GenerationError

from .base import SQLDialect


class DialectRegistry:
    """Registry for managing target SQL dialects."""

    def __init__(self):
        self._dialects: dict[str, type[SQLDialect]] = {}
        self._aliases: dict[str, str] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, dialect_name: str, dialect_class: type[SQLDialect]) -> None:
        """
        Register a dialect.

        Args:
            dialect_name: Display name (e.g., 'MSSQL', 'PostgreSQL')
            dialect_class: Class implementing SQLDialect
        """
        key = dialect_name.lower()
        self._dialects[key] = dialect_class
        for alias in dialect_class.aliases:
            self._aliases[alias.lower()] = key
        self.logger.debug(f"Registered dialect: {dialect_name} -> {dialect_class.__name__}")

    def get_dialect_class(self, dialect_name: str) -> type[SQLDialect] | None:
        """
        Get the dialect class for a name or alias.

        Args:
            dialect_name: Dialect name or alias

        Returns:
            Dialect class or None if not found
        """
        key = dialect_name.strip().lower()
        key = self._aliases.get(key, key)
        return self._dialects.get(key)

    def create_dialect(self, dialect: "str | SQLDialect") -> SQLDialect:
        """
        Resolve a dialect instance.

        Args:
            dialect: Dialect name, alias, or an existing dialect instance

        Returns:
            Dialect instance

        Raises:
            GenerationError: If the dialect is not supported
        """
        if isinstance(dialect, SQLDialect):
            return dialect

        if not dialect:
            raise GenerationError("Target dialect is required")

        dialect_class = self.get_dialect_class(dialect)
        if not dialect_class:
            raise GenerationError(
                f"Unsupported dialect: {dialect}. Supported dialects: {self.list_dialects()}"
            )
        return dialect_class()

    def list_dialects(self) -> list[str]:
        """Get display names of registered dialects."""
        return [dialect_class.name for dialect_class in self._dialects.values()]

    def is_supported(self, dialect_name: str) -> bool:
        """Check if a dialect name or alias is supported."""
        return self.get_dialect_class(dialect_name) is not None


# Global registry instance
_registry = DialectRegistry()


def register_dialect(dialect_name: str, dialect_class: type[SQLDialect]) -> None:
    """Register a dialect with the global registry."""
    _registry.register(dialect_name, dialect_class)


def get_dialect(dialect: "str | SQLDialect") -> SQLDialect:
    """
    Get a dialect instance by name.

    Args:
        dialect: Dialect name, alias, or instance

    Returns:
        Dialect instance
    """
    return _registry.create_dialect(dialect)


def list_available_dialects() -> list[str]:
    """Get list of available dialect names."""
    return _registry.list_dialects()


def is_dialect_supported(dialect_name: str) -> bool:
    """Check if a dialect is supported."""
    return _registry.is_supported(dialect_name)

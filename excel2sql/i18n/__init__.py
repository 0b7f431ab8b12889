"""
Localized text for the command line front end.
"""

from .catalog import DEFAULT_LANGUAGE, TextCatalog, available_languages, load_messages

__all__ = ["DEFAULT_LANGUAGE", "TextCatalog", "available_languages", "load_messages"]

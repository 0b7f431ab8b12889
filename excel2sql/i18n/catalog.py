"""
Text catalog for user-facing messages.

Messages live in YAML files under ``messages/``, one per language, keyed by string
id. Lookups fall back to English and then to the key itself.
"""

import logging
from functools import lru_cache
from importlib import resources

import yaml

DEFAULT_LANGUAGE = "en"

logger = logging.getLogger(__name__)


def _messages_dir():
    return resources.files("excel2sql.i18n") / "messages"


def available_languages() -> list[str]:
    """List the language codes with a bundled catalog."""
    return sorted(
        entry.name.removesuffix(".yaml")
        for entry in _messages_dir().iterdir()
        if entry.name.endswith(".yaml")
    )


@lru_cache(maxsize=None)
def load_messages(language: str) -> dict[str, str]:
    """
    Load the message table for a language.

    Args:
        language: Language code such as "en" or "es"

    Returns:
        Mapping of message id to text; empty if the language has no catalog
    """
    resource = _messages_dir() / f"{language}.yaml"
    if not resource.is_file():
        logger.debug(f"No text catalog for language '{language}'")
        return {}

    data = yaml.safe_load(resource.read_text(encoding="utf-8")) or {}
    return {str(key): str(value) for key, value in data.items()}


class TextCatalog:
    """Localized message lookup with English and key fallback."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        language = (language or DEFAULT_LANGUAGE).strip().lower()
        if language not in available_languages():
            logger.debug(f"Language '{language}' not available, using {DEFAULT_LANGUAGE}")
            language = DEFAULT_LANGUAGE
        self.language = language

    def get(self, key: str, **kwargs: object) -> str:
        """
        Get a message by id, formatted with keyword arguments.

        Args:
            key: Message id
            **kwargs: Values for the message's placeholders

        Returns:
            Localized text, the English text, or the key when neither has it
        """
        template = load_messages(self.language).get(key)
        if template is None:
            template = load_messages(DEFAULT_LANGUAGE).get(key, key)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            logger.warning(f"Could not format message '{key}' with {sorted(kwargs)}")
            return template

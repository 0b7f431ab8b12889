"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import logging


def parse_setting_items(items: list[str] | None) -> dict[str, str]:
    """
    Parse KEY=VALUE items into a dictionary.

    Args:
        items: Items such as ["target_dialect=MySQL", "language=es"]

    Returns:
        Dictionary of keys to values

    Raises:
        ValueError: If an item has no '=' or an empty key
    """
    result = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(item)
        result[key.strip()] = value.strip()
    return result


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")

"""Suggestion lists read from the area and cuisine reference tables."""

import json
import logging
from pathlib import Path
from typing import Any

from restaurant_entry.config import Config
from restaurant_entry.models import AreaReference, CuisineReference, ReferenceEntry

logger = logging.getLogger(__name__)


def read_table(path: Path) -> Any | None:
    """Read a JSON reference table.

    Args:
        path: Location of the table

    Returns:
        The parsed JSON value, or None if the file is missing or unreadable
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning(f"Reference table not found: {path}")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read reference table {path}: {e}")
    return None


def _decode_all(table: Any, kind: type[ReferenceEntry]) -> list[ReferenceEntry]:
    if not isinstance(table, list):
        return []
    decoded = (kind.decode(entry) for entry in table)
    return [entry for entry in decoded if entry is not None]


def load_area_keys(area_table: Any) -> list[str]:
    """Return the area keys found in an area table, in table order."""
    return [area.key for area in _decode_all(area_table, AreaReference)]


def load_cuisine_names(cuisine_table: Any) -> list[str]:
    """Return the cuisine names found in a cuisine table, in table order."""
    return [cuisine.name for cuisine in _decode_all(cuisine_table, CuisineReference)]


class LookupLoader:
    """Loads suggestion lists from the configured reference tables.

    An empty list means suggestions are unavailable, not that no value is
    acceptable.
    """

    def __init__(self, config: Config) -> None:
        """Initialize the loader.

        Args:
            config: Tool configuration holding the table paths
        """
        self.config = config

    def area_keys(self) -> list[str]:
        keys = load_area_keys(read_table(self.config.areas_file))
        logger.info(f"Loaded {len(keys)} area keys from {self.config.areas_file}")
        return keys

    def cuisine_names(self) -> list[str]:
        names = load_cuisine_names(read_table(self.config.cuisines_file))
        logger.info(
            f"Loaded {len(names)} cuisine names from {self.config.cuisines_file}"
        )
        return names

"""The restaurants.json store."""

import json
import logging
import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from restaurant_entry.errors import MalformedStoreError, StoreReadError
from restaurant_entry.models import RestaurantRecord

logger = logging.getLogger(__name__)


def dump_json(data: Any) -> str:
    """Serialize ``data`` the way the store is written on disk."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_json(path: Path, data: Any) -> None:
    """Replace ``path`` with ``data`` through a temporary sibling file."""
    text = dump_json(data)
    tmp = NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    try:
        with tmp:
            tmp.write(text)
        if path.exists():
            os.chmod(tmp.name, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(tmp.name, path)
    except BaseException:
        Path(tmp.name).unlink(missing_ok=True)
        raise


class RestaurantStore:
    """Ordered list of restaurant entries backed by a JSON file.

    Existing entries are kept as the raw objects read from disk, so fields
    this tool does not manage survive a rewrite untouched. The file is only
    written by :meth:`commit`. Concurrent runs are not coordinated; the last
    writer wins.
    """

    def __init__(
        self, path: Path, entries: list[dict[str, Any]] | None = None
    ) -> None:
        self.path = path
        self.entries: list[dict[str, Any]] = entries if entries is not None else []

    @classmethod
    def load(cls, path: Path) -> "RestaurantStore":
        """Read the whole store into memory.

        Raises:
            StoreReadError: If the file cannot be read or is not valid JSON
            MalformedStoreError: If the file is not a JSON array
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(f"Could not read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreReadError(f"{path.name} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise MalformedStoreError(f"{path.name} must be a JSON array.")

        logger.info(f"Loaded {len(data)} restaurants from {path}")
        return cls(path, data)

    def slugs(self) -> set[str]:
        """Slugs of the entries currently in the store."""
        return {
            entry["slug"]
            for entry in self.entries
            if isinstance(entry, dict)
            and isinstance(entry.get("slug"), str)
            and entry["slug"]
        }

    def commit(self, record: RestaurantRecord) -> None:
        """Append ``record`` and rewrite the whole file."""
        self.entries.append(record.to_json())
        write_json(self.path, self.entries)
        logger.info(f"Wrote {len(self.entries)} restaurants to {self.path}")

    def __len__(self) -> int:
        return len(self.entries)

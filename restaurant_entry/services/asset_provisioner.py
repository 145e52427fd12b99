"""Placeholder photos for newly added restaurants."""

import logging
import shutil
from pathlib import Path

from restaurant_entry.config import Config

logger = logging.getLogger(__name__)


class AssetProvisioner:
    """Creates the first photo of a restaurant from the shared placeholder.

    The placeholder is only ever copied; a missing placeholder is not fatal.
    """

    def __init__(self, config: Config) -> None:
        """Initialize the provisioner.

        Args:
            config: Tool configuration holding the media paths
        """
        self.config = config

    def photo_dir(self, slug: str) -> Path:
        """Folder holding the photos of ``slug``."""
        return self.config.media_dir / slug

    def photo_path(self, slug: str) -> Path:
        """Absolute path of the first photo of ``slug``."""
        return self.photo_dir(slug) / f"1.{self.config.photo_extension}"

    def provision_placeholder(self, dest_path: Path) -> bool:
        """Copy the placeholder to ``dest_path`` unless a photo is already there.

        Args:
            dest_path: Where the first photo should live

        Returns:
            True if the placeholder was copied, False otherwise
        """
        dest_path.parent.mkdir(parents=True, exist_ok=True)

        if dest_path.exists():
            logger.info(f"Photo already present at {dest_path}")
            return False

        placeholder = self.config.placeholder_image
        if not placeholder.is_file():
            logger.warning(f"Placeholder image not found: {placeholder}")
            return False

        shutil.copyfile(placeholder, dest_path)
        logger.info(f"Copied {placeholder} to {dest_path}")
        return True

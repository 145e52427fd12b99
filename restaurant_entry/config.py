"""Configuration management for the restaurant entry tool using Pydantic."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from restaurant_entry.models import PriceTier


class Config(BaseSettings):
    """Tool configuration loaded from environment variables.

    Every path may be given relative to ``site_root``; they are resolved to
    absolute paths once the settings are loaded.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESTAURANT_ENTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Site layout
    site_root: Path = Field(
        default_factory=Path.cwd, description="Root directory of the website"
    )
    site_name: str = Field(
        default="Fenwick Island Social", description="Site name shown in the banner"
    )

    # Data files
    restaurants_file: Path = Field(
        default=Path("src/data/restaurants.json"),
        description="JSON array of restaurant entries",
    )
    areas_file: Path = Field(
        default=Path("src/data/areas.json"), description="Area reference table"
    )
    cuisines_file: Path = Field(
        default=Path("src/data/cuisines.json"), description="Cuisine reference table"
    )

    # Media
    public_dir: Path = Field(
        default=Path("public"), description="Directory served at the site root"
    )
    placeholder_image: Path = Field(
        default=Path("public/images/placeholder.jpg"),
        description="Image copied as the first photo of a new restaurant",
    )
    media_url_prefix: str = Field(
        default="/images/restaurants",
        description="URL prefix of restaurant photo folders",
    )
    photo_extension: str = Field(default="jpg", description="First photo extension")

    # Entry defaults
    default_price: PriceTier = Field(
        default=PriceTier.MODERATE, description="Price tier used when blank"
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Logging level")

    def model_post_init(self, __context) -> None:
        """Resolve every configured path against the site root."""
        self.site_root = self.site_root.expanduser().resolve()
        self.restaurants_file = self.resolve_path(self.restaurants_file)
        self.areas_file = self.resolve_path(self.areas_file)
        self.cuisines_file = self.resolve_path(self.cuisines_file)
        self.public_dir = self.resolve_path(self.public_dir)
        self.placeholder_image = self.resolve_path(self.placeholder_image)
        self.photo_extension = self.photo_extension.lstrip(".")

    def resolve_path(self, path: Path) -> Path:
        """Return ``path`` as an absolute path under the site root."""
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = self.site_root / path
        return path.resolve()

    @property
    def media_dir(self) -> Path:
        """Directory holding one photo folder per restaurant."""
        return self.public_dir / self.media_url_prefix.strip("/")


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

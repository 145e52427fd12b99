"""Promotion of a collected draft into a restaurant record."""

import logging
import time
from collections.abc import Callable, Collection

from restaurant_entry.config import Config
from restaurant_entry.errors import RequiredInputMissingError, SlugGenerationError
from restaurant_entry.models import RestaurantDraft, RestaurantRecord
from restaurant_entry.slug import normalize

logger = logging.getLogger(__name__)

SUFFIX_DIGITS = 5


class RecordAssembler:
    """Settles the slug of a draft and builds the final record.

    The assembler never touches the store; it only reads the set of slugs
    already in use.
    """

    def __init__(
        self,
        config: Config,
        echo: Callable[[str], None] = print,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Tool configuration (media URL prefix and photo extension)
            echo: Function that shows a notice to the operator
            clock: Time source for collision suffixes, in seconds
        """
        self.config = config
        self.echo = echo
        self.clock = clock

    def assemble(
        self, draft: RestaurantDraft, existing_slugs: Collection[str]
    ) -> RestaurantRecord:
        """Build the record for ``draft``.

        Args:
            draft: Values collected from the operator
            existing_slugs: Slugs already present in the store

        Returns:
            The complete record with a slug not in ``existing_slugs``

        Raises:
            RequiredInputMissingError: If a required field is empty
            SlugGenerationError: If no slug can be derived
        """
        name = draft.name.strip()
        if not name:
            raise RequiredInputMissingError("name", "Name is required.")
        if not draft.area_key.strip():
            raise RequiredInputMissingError("areaKey")
        if not draft.cuisines:
            raise RequiredInputMissingError(
                "cuisines", "At least one cuisine is required."
            )

        slug = normalize(draft.slug) or normalize(name)
        if not slug:
            raise SlugGenerationError("Could not generate slug.")

        if slug in existing_slugs:
            slug = self.disambiguate(slug, existing_slugs)
            self.echo(f"Slug already exists. Using: {slug}")

        return RestaurantRecord(
            name=name,
            slug=slug,
            area_key=draft.area_key.strip(),
            address=draft.address,
            price=draft.price,
            cuisines=draft.cuisines,
            vibes=draft.vibes,
            good_for=draft.good_for,
            short_blurb=draft.short_blurb,
            long_blurb=draft.long_blurb,
            must_try=draft.must_try,
            website=draft.website,
            menu_url=draft.menu_url,
            photos=[self.photo_url(slug)],
            featured=draft.featured,
        )

    def disambiguate(self, slug: str, existing_slugs: Collection[str]) -> str:
        """Append a numeric suffix taken from the clock until ``slug`` is free."""
        millis = int(self.clock() * 1000)
        suffix = int(str(millis)[-SUFFIX_DIGITS:])
        candidate = f"{slug}-{suffix:0{SUFFIX_DIGITS}d}"
        while candidate in existing_slugs:
            suffix += 1
            candidate = f"{slug}-{suffix:0{SUFFIX_DIGITS}d}"
        logger.info(f"Slug {slug} is taken, using {candidate}")
        return candidate

    def photo_url(self, slug: str) -> str:
        """Site-relative path of the first photo of ``slug``."""
        prefix = self.config.media_url_prefix.rstrip("/")
        return f"{prefix}/{slug}/1.{self.config.photo_extension}"

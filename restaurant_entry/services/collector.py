"""Interactive prompts that collect a restaurant draft from the operator."""

import logging
from collections.abc import Callable, Sequence

from restaurant_entry.config import Config
from restaurant_entry.errors import RequiredInputMissingError
from restaurant_entry.models import PriceTier, RestaurantDraft
from restaurant_entry.slug import normalize

logger = logging.getLogger(__name__)

TRUE_WORDS = frozenset({"y", "yes", "true", "1"})
FALSE_WORDS = frozenset({"n", "no", "false", "0"})


def parse_list(text: str | None) -> list[str]:
    """Split comma-separated input into trimmed, non-empty items."""
    return [item.strip() for item in str(text or "").split(",") if item.strip()]


def parse_bool(text: str | None, default: bool = False) -> bool:
    """Interpret a yes/no answer, falling back to ``default``."""
    value = str(text or "").strip().lower()
    if value in TRUE_WORDS:
        return True
    if value in FALSE_WORDS:
        return False
    return default


class InteractiveCollector:
    """Asks the operator for each field of a new restaurant, in order.

    Prompts are answered one at a time through ``prompt``; suggestions,
    warnings and notices go to ``echo``.
    """

    def __init__(
        self,
        config: Config,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
    ) -> None:
        """Initialize the collector.

        Args:
            config: Tool configuration (used for defaults and file names)
            prompt: Function that shows a prompt and returns the answer
            echo: Function that shows a line of text to the operator
        """
        self.config = config
        self.prompt = prompt
        self.echo = echo

    def ask(self, question: str, default: str = "") -> str:
        """Ask one question and return the trimmed answer or ``default``."""
        return self.prompt(question).strip() or default

    def ask_list(self, question: str) -> list[str]:
        return parse_list(self.prompt(question))

    def collect(
        self, area_keys: Sequence[str] = (), cuisine_names: Sequence[str] = ()
    ) -> RestaurantDraft:
        """Run all prompts and return the collected draft.

        Args:
            area_keys: Known area keys, empty if unavailable
            cuisine_names: Known cuisine names, empty if unavailable

        Returns:
            The draft; its slug is the raw operator input

        Raises:
            RequiredInputMissingError: If name, area key or cuisines are empty
        """
        name = self.ask("Restaurant name: ")
        if not name:
            raise RequiredInputMissingError("name", "Name is required.")

        slug = self.ask(f'Slug (Enter to auto: "{normalize(name)}"): ')

        area_key = self._collect_area_key(area_keys)

        address = self.ask('Address (short, e.g. "Fenwick Island, DE"): ')
        price = self._collect_price()

        cuisines = self._collect_cuisines(cuisine_names)

        vibes = self.ask_list(
            'Vibes (comma-separated, e.g. "Casual, Waterfront / View"): '
        )
        good_for = self.ask_list(
            'Good for (comma-separated, e.g. "Groups, Date night"): '
        )

        short_blurb = self.ask("Short blurb (1 sentence): ")
        long_blurb = self.ask("Long blurb (2-4 sentences): ")

        must_try = self.ask_list('Must-try (comma-separated, e.g. "Brisket, Ribs"): ')

        website = self.ask("Website URL (optional): ")
        menu_url = self.ask("Menu URL (optional): ")

        featured = parse_bool(self.prompt("Featured on homepage? (y/N): "), False)

        return RestaurantDraft(
            name=name,
            slug=slug,
            area_key=area_key,
            address=address,
            price=price,
            cuisines=cuisines,
            vibes=vibes,
            good_for=good_for,
            short_blurb=short_blurb,
            long_blurb=long_blurb,
            must_try=must_try,
            website=website,
            menu_url=menu_url,
            featured=featured,
        )

    def _collect_area_key(self, area_keys: Sequence[str]) -> str:
        self.echo("\nAvailable area keys:")
        if area_keys:
            self.echo("  " + ", ".join(area_keys))
        else:
            self.echo("  (Could not detect area keys; you can still type one.)")

        area_key = self.ask("areaKey (example: fenwick-island): ")
        if not area_key:
            raise RequiredInputMissingError("areaKey")

        if area_keys and area_key not in area_keys:
            logger.info(f"Unknown area key: {area_key}")
            self.echo(
                f'⚠ Warning: "{area_key}" not found in '
                f"{self.config.areas_file.name} keys. (Proceeding anyway.)"
            )
        return area_key

    def _collect_price(self) -> PriceTier:
        default = self.config.default_price
        answer = self.ask(
            f"Price ($, $$, $$$) [default {default.value}]: ", default.value
        )
        try:
            return PriceTier(answer)
        except ValueError:
            self.echo(f'⚠ Warning: unknown price "{answer}". Using {default.value}.')
            return default

    def _collect_cuisines(self, cuisine_names: Sequence[str]) -> list[str]:
        self.echo(f"\nCuisine suggestions (from {self.config.cuisines_file.name}):")
        if cuisine_names:
            self.echo("  " + ", ".join(cuisine_names))
        else:
            self.echo("  (No cuisine names detected; type your own.)")

        cuisines = self.ask_list('Cuisines (comma-separated, e.g. "BBQ, Seafood"): ')
        if not cuisines:
            raise RequiredInputMissingError(
                "cuisines", "At least one cuisine is required."
            )
        return cuisines

"""Command-line interface for adding a restaurant to the site."""

import logging
import sys
import time
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from restaurant_entry.config import Config, get_config, setup_logging
from restaurant_entry.errors import RestaurantEntryError
from restaurant_entry.models import RestaurantRecord
from restaurant_entry.services import (
    AssetProvisioner,
    InteractiveCollector,
    LookupLoader,
    RecordAssembler,
    RestaurantStore,
)

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class AddRestaurantCLI:
    """Walks the operator through adding one restaurant entry.

    Nothing is written to the store until every answer has been collected
    and validated.
    """

    def __init__(
        self,
        config: Config,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the CLI.

        Args:
            config: Tool configuration
            prompt: Function that shows a prompt and returns the answer
            echo: Function that shows a line of text to the operator
            clock: Time source used for slug collision suffixes
        """
        self.config = config
        self.echo = echo
        self.lookup_loader = LookupLoader(config)
        self.collector = InteractiveCollector(config, prompt=prompt, echo=echo)
        self.assembler = RecordAssembler(config, echo=echo, clock=clock)
        self.provisioner = AssetProvisioner(config)
        self.committed: RestaurantRecord | None = None

    def run(self) -> RestaurantRecord:
        """Collect, validate and commit one restaurant.

        Returns:
            The committed record
        """
        store = RestaurantStore.load(self.config.restaurants_file)
        area_keys = self.lookup_loader.area_keys()
        cuisine_names = self.lookup_loader.cuisine_names()

        self.echo(f"\n=== Add a Restaurant ({self.config.site_name}) ===\n")

        draft = self.collector.collect(area_keys, cuisine_names)
        record = self.assembler.assemble(draft, store.slugs())

        self._provision_photo(record)

        store.commit(record)
        self.committed = record
        logger.info(f"Added restaurant {record.slug}")

        self._display_summary(record)
        return record

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.config.site_root).as_posix()
        except ValueError:
            return str(path)

    def _provision_photo(self, record: RestaurantRecord) -> None:
        photo_path = self.provisioner.photo_path(record.slug)
        already_there = photo_path.exists()

        if self.provisioner.provision_placeholder(photo_path):
            self.echo(
                f"✓ Created {record.photos[0]} from "
                f"{self.config.placeholder_image.name} "
                "(replace it later with your real photo)."
            )
        elif not already_there:
            self.echo(
                f"⚠ {self.config.placeholder_image.name} not found, so no default "
                f"{photo_path.name} created. Add your own photo at {photo_path}"
            )

    def _display_summary(self, record: RestaurantRecord) -> None:
        photo_dir = self._relative(self.provisioner.photo_dir(record.slug))
        photo_file = self._relative(self.provisioner.photo_path(record.slug))
        commit_name = record.name.replace('"', '\\"')

        self.echo("\n✓ Added restaurant:")
        self.echo(f"   Name: {record.name}")
        self.echo(f"   Slug: {record.slug}")
        self.echo(f"   URL:  /restaurants/{record.slug}")
        self.echo(f"   Photo folder: {photo_dir}/")
        self.echo("\nNext:")
        self.echo(f"  1) Add/replace photo: {photo_file}")
        self.echo("  2) Run: npm run dev")
        self.echo(
            f'  3) Deploy: git add -A && git commit -m "Add {commit_name}" && git push'
        )
        self.echo("")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        config = get_config()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    setup_logging(config)

    app = AddRestaurantCLI(config, prompt=input, echo=print)
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        if app.committed is not None:
            print(
                f"\n\nInterrupted. {app.committed.slug} was already saved.",
                file=sys.stderr,
            )
        else:
            print("\n\nAborted. Nothing was written.", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except (RestaurantEntryError, ValidationError, OSError) as e:
        logger.debug("Add failed", exc_info=True)
        print(f"\n❌ Add failed: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()

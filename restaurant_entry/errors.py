"""Errors raised while building and committing a restaurant entry.

Every error here aborts the run before the store is written.
"""


class RestaurantEntryError(ValueError):
    """Base class for fatal entry errors."""


class RequiredInputMissingError(RestaurantEntryError):
    """A required field was left empty."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is required.")


class StoreReadError(RestaurantEntryError):
    """The restaurant store could not be read or parsed."""


class MalformedStoreError(RestaurantEntryError):
    """The restaurant store does not hold a JSON array."""


class SlugGenerationError(RestaurantEntryError):
    """Neither the supplied slug nor the name produced an identifier."""

"""Data models for the restaurant entry tool."""

from restaurant_entry.models.reference import (
    AreaReference,
    CuisineReference,
    ReferenceEntry,
)
from restaurant_entry.models.restaurant import (
    PriceTier,
    RestaurantDraft,
    RestaurantRecord,
)

__all__ = [
    "AreaReference",
    "CuisineReference",
    "PriceTier",
    "ReferenceEntry",
    "RestaurantDraft",
    "RestaurantRecord",
]

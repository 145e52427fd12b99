"""Data models for restaurant entries."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PriceTier(str, Enum):
    """Price tier symbols shown on the site."""

    BUDGET = "$"
    MODERATE = "$$"
    UPSCALE = "$$$"
    FINE_DINING = "$$$$"


class RestaurantDraft(BaseModel):
    """Values collected from the operator, before the slug is settled."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(default="", description="Restaurant name")
    slug: str = Field(default="", description="Slug seed as typed by the operator")
    area_key: str = Field(default="", description="Key of the area the restaurant is in")
    address: str = Field(default="", description="Short address")
    price: PriceTier = Field(default=PriceTier.MODERATE, description="Price tier")
    cuisines: list[str] = Field(default_factory=list, description="Cuisine names")
    vibes: list[str] = Field(default_factory=list, description="Vibe tags")
    good_for: list[str] = Field(default_factory=list, description="Occasion tags")
    short_blurb: str = Field(default="", description="One-sentence blurb")
    long_blurb: str = Field(default="", description="Longer description")
    must_try: list[str] = Field(default_factory=list, description="Dishes to try")
    website: str = Field(default="", description="Website URL")
    menu_url: str = Field(default="", description="Menu URL")
    featured: bool = Field(default=False, description="Shown on the homepage")


class RestaurantRecord(BaseModel):
    """A restaurant entry as stored in restaurants.json.

    Field order matches the order written to the store.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    name: str = Field(..., min_length=1, description="Restaurant name")
    slug: str = Field(..., min_length=1, description="Unique page identifier")
    area_key: str = Field(..., description="Key of the area the restaurant is in")
    address: str = Field(default="", description="Short address")
    price: PriceTier = Field(default=PriceTier.MODERATE, description="Price tier")
    cuisines: list[str] = Field(..., min_length=1, description="Cuisine names")
    vibes: list[str] = Field(default_factory=list, description="Vibe tags")
    good_for: list[str] = Field(default_factory=list, description="Occasion tags")
    short_blurb: str = Field(default="", description="One-sentence blurb")
    long_blurb: str = Field(default="", description="Longer description")
    must_try: list[str] = Field(default_factory=list, description="Dishes to try")
    website: str = Field(default="", description="Website URL, empty if none")
    menu_url: str = Field(default="", description="Menu URL, empty if none")
    photos: list[str] = Field(..., min_length=1, description="Photo paths")
    featured: bool = Field(default=False, description="Shown on the homepage")

    def to_json(self) -> dict:
        """Return the store representation with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

"""Reference table entries for areas and cuisines.

Reference tables come in two shapes: a list of plain strings, or a list of
objects. Each reference kind declares the object fields it reads, in
priority order; the first non-empty string wins.
"""

from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ReferenceEntry(BaseModel):
    """Base class for a decoded reference table entry."""

    model_config = ConfigDict(frozen=True)

    value_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def value_from_object(cls, entry: dict[str, Any]) -> str | None:
        """Read the first usable field of an object entry."""
        for field in cls.value_fields:
            value = entry.get(field)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    @classmethod
    @abstractmethod
    def decode(cls, entry: Any) -> "ReferenceEntry | None":
        """Decode one table entry, or return None if it cannot be resolved.

        Each reference kind overrides this for its own fields.
        """


class AreaReference(ReferenceEntry):
    """An area a restaurant can belong to."""

    value_fields: ClassVar[tuple[str, ...]] = ("key", "id", "slug")

    key: str = Field(..., min_length=1, description="Area key used by entries")
    name: str | None = Field(None, description="Display name")

    @classmethod
    def decode(cls, entry: Any) -> "AreaReference | None":
        if isinstance(entry, str):
            return cls(key=entry.strip()) if entry.strip() else None
        if isinstance(entry, dict):
            key = cls.value_from_object(entry)
            if key is None:
                return None
            name = entry.get("name")
            return cls(key=key, name=name if isinstance(name, str) else None)
        return None


class CuisineReference(ReferenceEntry):
    """A cuisine name suggested to the operator."""

    value_fields: ClassVar[tuple[str, ...]] = ("name", "key", "id")

    name: str = Field(..., min_length=1, description="Cuisine name")

    @classmethod
    def decode(cls, entry: Any) -> "CuisineReference | None":
        if isinstance(entry, str):
            return cls(name=entry.strip()) if entry.strip() else None
        if isinstance(entry, dict):
            name = cls.value_from_object(entry)
            return cls(name=name) if name is not None else None
        return None

"""Property DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyCollections:
    """Collection ids of the property database."""

    properties: str
    agents: str
    reviews: str
    galleries: str


@dataclass
class PropertySearchInput:
    """Input for a property listing."""

    filter: str | None = None
    search_term: str | None = None
    limit: int | None = None

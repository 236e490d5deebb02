"""Property entity and its resolved, denormalized view."""

from dataclasses import dataclass, field
from typing import Any

from restate.domain.entities.document import Document

AGENT_FIELD = "agent"
REVIEWS_FIELD = "reviews"
GALLERY_FIELD = "gallery"


def _identifier_list(value: Any) -> list[str]:
    if isinstance(value, list):
        return list(value)
    return []


@dataclass(frozen=True)
class Property:
    """A document of the Properties collection.

    Scalar fields stay in the underlying document; the three reference
    fields hold identifiers into the Agents, Reviews and Galleries
    collections.
    """

    document: Document

    @property
    def id(self) -> str:
        return self.document.id

    @property
    def name(self) -> str | None:
        return self.document.get("name")

    @property
    def address(self) -> str | None:
        return self.document.get("address")

    @property
    def type(self) -> str | None:
        return self.document.get("type")

    @property
    def price(self) -> Any:
        return self.document.get("price")

    @property
    def agent_id(self) -> str | None:
        value = self.document.get(AGENT_FIELD)
        if isinstance(value, str) and value:
            return value
        return None

    @property
    def review_ids(self) -> list[str]:
        return _identifier_list(self.document.get(REVIEWS_FIELD))

    @property
    def gallery_ids(self) -> list[str]:
        return _identifier_list(self.document.get(GALLERY_FIELD))


@dataclass
class ResolvedProperty:
    """Property with its references replaced by fetched documents where possible.

    `agent` is the agent Document when it resolved, the raw identifier when
    the fetch failed, and None when the property has no agent. `reviews` and
    `gallery` are empty unless their whole batch resolved.
    """

    source: Property
    agent: Document | str | None = None
    reviews: list[Document] = field(default_factory=list)
    gallery: list[Document] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.source.id

    def to_payload(self) -> dict[str, Any]:
        payload = self.source.document.to_payload()
        # An unresolved agent keeps whatever the source held, including absence.
        if isinstance(self.agent, Document):
            payload[AGENT_FIELD] = self.agent.to_payload()
        payload[REVIEWS_FIELD] = [r.to_payload() for r in self.reviews]
        payload[GALLERY_FIELD] = [g.to_payload() for g in self.gallery]
        return payload

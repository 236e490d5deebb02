"""Domain entities."""

from restate.domain.entities.document import Document, DocumentList
from restate.domain.entities.property import (
    AGENT_FIELD,
    GALLERY_FIELD,
    REVIEWS_FIELD,
    Property,
    ResolvedProperty,
)
from restate.domain.entities.user import CurrentUser

__all__ = [
    "AGENT_FIELD",
    "CurrentUser",
    "Document",
    "DocumentList",
    "GALLERY_FIELD",
    "Property",
    "REVIEWS_FIELD",
    "ResolvedProperty",
]

"""Document entity - one record of the remote store."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from restate.domain.exceptions import ValidationError

_SYSTEM_KEYS = frozenset(
    {"$id", "$collectionId", "$databaseId", "$createdAt", "$updatedAt", "$permissions"}
)


def _parse_timestamp(value: Any, key: str) -> datetime:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Document payload has no {key}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {key}: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")


@dataclass(frozen=True)
class Document:
    """Store record: system attributes plus an open mapping of named fields."""

    id: str
    collection_id: str
    database_id: str
    created_at: datetime
    updated_at: datetime
    data: dict[str, Any] = field(default_factory=dict)
    permissions: list[str] = field(default_factory=list)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Document":
        """Build from the store's JSON shape (`$id`, `$createdAt`, ... plus fields)."""
        if not isinstance(payload, Mapping):
            raise ValidationError("Document payload must be an object")
        document_id = payload.get("$id")
        if not isinstance(document_id, str) or not document_id:
            raise ValidationError("Document payload has no $id")
        return cls(
            id=document_id,
            collection_id=payload.get("$collectionId") or "",
            database_id=payload.get("$databaseId") or "",
            created_at=_parse_timestamp(payload.get("$createdAt"), "$createdAt"),
            updated_at=_parse_timestamp(payload.get("$updatedAt"), "$updatedAt"),
            data={k: v for k, v in payload.items() if k not in _SYSTEM_KEYS},
            permissions=list(payload.get("$permissions") or []),
        )

    def to_payload(self) -> dict[str, Any]:
        """Render back to the store's JSON shape."""
        return {
            "$id": self.id,
            "$collectionId": self.collection_id,
            "$databaseId": self.database_id,
            "$createdAt": _format_timestamp(self.created_at),
            "$updatedAt": _format_timestamp(self.updated_at),
            "$permissions": list(self.permissions),
            **self.data,
        }


@dataclass
class DocumentList:
    """One page of a listing query."""

    total: int
    documents: list[Document]

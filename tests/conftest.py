"""Pytest fixtures for restate tests."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from restate.application.dto.property_dto import PropertyCollections
from restate.domain.entities import Document, DocumentList
from restate.domain.exceptions import NotFound, StoreUnavailable
from restate.domain.value_objects import Directive, QueryMethod

DATABASE_ID = "db-main"
BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def make_document(
    document_id: str,
    collection_id: str = "properties",
    *,
    minutes: int = 0,
    **data: Any,
) -> Document:
    """Document created `minutes` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Document(
        id=document_id,
        collection_id=collection_id,
        database_id=DATABASE_ID,
        created_at=created,
        updated_at=created,
        data=data,
    )


# --- Fake document store ---


def _matches(document: Document, directive: Directive) -> bool:
    if directive.method == QueryMethod.EQUAL:
        return document.get(directive.attribute) in directive.values
    if directive.method == QueryMethod.SEARCH:
        value = document.get(directive.attribute)
        term = str(directive.values[0]).lower()
        return isinstance(value, str) and term in value.lower()
    if directive.method == QueryMethod.OR:
        return any(_matches(document, d) for d in directive.values)
    return True


def _sort_key(document: Document, attribute: str) -> Any:
    if attribute == "$createdAt":
        return document.created_at
    return document.get(attribute)


class FakeDocumentStore:
    """In-memory store that executes directive lists the way the remote executor does."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Document]] = {}
        self._failing: set[tuple[str, str]] = set()
        self.list_unavailable = False
        self.list_calls: list[tuple[str, list[Directive]]] = []
        self.get_calls: list[tuple[str, str]] = []

    def add(self, *documents: Document) -> None:
        for d in documents:
            self._collections.setdefault(d.collection_id, {})[d.id] = d

    def fail_on(self, collection_id: str, document_id: str) -> None:
        """Make get_document raise a transport error for this id."""
        self._failing.add((collection_id, document_id))

    async def list_documents(
        self, collection_id: str, queries: Sequence[Directive]
    ) -> DocumentList:
        self.list_calls.append((collection_id, list(queries)))
        if self.list_unavailable:
            raise StoreUnavailable("connection refused")
        items = list(self._collections.get(collection_id, {}).values())
        limit = None
        for directive in queries:
            if directive.method == QueryMethod.ORDER_ASC:
                items.sort(key=lambda d: _sort_key(d, directive.attribute))
            elif directive.method == QueryMethod.ORDER_DESC:
                items.sort(key=lambda d: _sort_key(d, directive.attribute), reverse=True)
            elif directive.method == QueryMethod.LIMIT:
                limit = directive.values[0]
            else:
                items = [d for d in items if _matches(d, directive)]
        total = len(items)
        # The remote executor caps pages at 25 when no limit is given.
        items = items[: limit if limit is not None else 25]
        return DocumentList(total=total, documents=items)

    async def get_document(self, collection_id: str, document_id: str) -> Document:
        self.get_calls.append((collection_id, document_id))
        if (collection_id, document_id) in self._failing:
            raise StoreUnavailable(f"timeout fetching {document_id}")
        doc = self._collections.get(collection_id, {}).get(document_id)
        if doc is None:
            raise NotFound("Document", document_id)
        return doc


# --- Fixtures ---


@pytest.fixture
def collections() -> PropertyCollections:
    return PropertyCollections(
        properties="properties",
        agents="agents",
        reviews="reviews",
        galleries="galleries",
    )


@pytest.fixture
def store() -> FakeDocumentStore:
    """Fresh in-memory store for each test."""
    return FakeDocumentStore()


@pytest.fixture
def mock_account():
    """AsyncMock for AccountService - signed-in user by default."""
    mock = AsyncMock()
    mock.create_oauth2_token_url = MagicMock(
        return_value="https://store.test/v1/account/tokens/oauth2/google?project=p1"
    )
    mock.create_session.return_value = {
        "$id": "session-1",
        "userId": "user-1",
        "secret": "session-secret",
    }
    mock.delete_session.return_value = None
    mock.get.return_value = {"$id": "user-1", "name": "Jane Doe", "email": "jane@example.com"}
    return mock


@pytest.fixture
def mock_avatars():
    mock = MagicMock()
    mock.get_initials_url.side_effect = (
        lambda name: f"https://store.test/v1/avatars/initials?name={name}"
    )
    return mock

"""Document store port - read access to the remote store."""

from collections.abc import Sequence
from typing import Protocol

from restate.domain.entities import Document, DocumentList
from restate.domain.value_objects import Directive


class DocumentStore(Protocol):
    """Port for listing and fetching documents of one database."""

    async def list_documents(
        self, collection_id: str, queries: Sequence[Directive]
    ) -> DocumentList: ...

    async def get_document(self, collection_id: str, document_id: str) -> Document: ...

"""Appwrite Databases adapter - DocumentStore implementation."""

from collections.abc import Sequence

from restate.domain.entities import Document, DocumentList
from restate.domain.exceptions import ValidationError
from restate.domain.value_objects import Directive
from restate.infrastructure.appwrite.client import AppwriteClient, path_segment


class AppwriteDocumentStore:
    """Read-only access to the documents of one Appwrite database."""

    def __init__(self, client: AppwriteClient, database_id: str) -> None:
        self._client = client
        self._database_id = database_id

    def _documents_path(self, collection_id: str) -> str:
        return (
            f"databases/{path_segment(self._database_id)}"
            f"/collections/{path_segment(collection_id)}/documents"
        )

    async def list_documents(
        self, collection_id: str, queries: Sequence[Directive]
    ) -> DocumentList:
        """Run the directive list against one collection."""
        body = await self._client.request(
            "GET",
            self._documents_path(collection_id),
            params=[("queries[]", q.to_json()) for q in queries],
        )
        if not isinstance(body, dict) or not isinstance(body.get("documents"), list):
            raise ValidationError("Document list payload has no documents")
        documents = [Document.from_payload(d) for d in body["documents"]]
        total = body.get("total")
        if not isinstance(total, int):
            total = len(documents)
        return DocumentList(total=total, documents=documents)

    async def get_document(self, collection_id: str, document_id: str) -> Document:
        """Fetch exactly one document; NotFound when it does not exist."""
        body = await self._client.request(
            "GET", f"{self._documents_path(collection_id)}/{path_segment(document_id)}"
        )
        return Document.from_payload(body)

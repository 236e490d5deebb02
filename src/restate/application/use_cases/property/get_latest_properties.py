"""Get latest properties use case."""

import logging

from restate.application.dto.property_dto import PropertyCollections
from restate.application.ports import DocumentStore
from restate.application.queries.property_queries import compose_latest_query
from restate.domain.entities import Document
from restate.domain.exceptions import RestateError

logger = logging.getLogger(__name__)


class GetLatestPropertiesUseCase:
    """Up to five properties, oldest first within the window."""

    def __init__(self, store: DocumentStore, collections: PropertyCollections) -> None:
        self._store = store
        self._collections = collections

    async def execute(self) -> list[Document]:
        """List latest properties; empty list when the store fails."""
        try:
            result = await self._store.list_documents(
                self._collections.properties, compose_latest_query()
            )
        except RestateError as e:
            logger.warning("Failed to list latest properties: %s", e)
            return []
        except Exception:
            logger.exception("Unexpected error listing latest properties")
            return []
        return result.documents

"""Get properties use case - filtered and searched listing."""

import logging

from restate.application.dto.property_dto import PropertyCollections, PropertySearchInput
from restate.application.ports import DocumentStore
from restate.application.queries.property_queries import compose_listing_query
from restate.domain.entities import Document
from restate.domain.exceptions import RestateError

logger = logging.getLogger(__name__)


class GetPropertiesUseCase:
    """List properties newest first, by category and free-text term."""

    def __init__(self, store: DocumentStore, collections: PropertyCollections) -> None:
        self._store = store
        self._collections = collections

    async def execute(self, input_data: PropertySearchInput) -> list[Document]:
        """List properties; empty list when the store fails."""
        queries = compose_listing_query(
            filter=input_data.filter,
            search_term=input_data.search_term,
            limit=input_data.limit,
        )
        try:
            result = await self._store.list_documents(self._collections.properties, queries)
        except RestateError as e:
            logger.warning(
                "Failed to list properties (filter=%r, query=%r): %s",
                input_data.filter,
                input_data.search_term,
                e,
            )
            return []
        except Exception:
            logger.exception(
                "Unexpected error listing properties (filter=%r, query=%r)",
                input_data.filter,
                input_data.search_term,
            )
            return []
        return result.documents

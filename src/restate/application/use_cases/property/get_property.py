"""Get property use case - primary document plus resolved references."""

import asyncio
import logging

from restate.application.dto.property_dto import PropertyCollections
from restate.application.ports import DocumentStore
from restate.domain.entities import Document, Property, ResolvedProperty
from restate.domain.exceptions import NotFound, RestateError

logger = logging.getLogger(__name__)


def _log_failure(message: str, *args: object, error: BaseException) -> None:
    """Store errors are expected and logged briefly; anything else with a traceback."""
    if isinstance(error, RestateError):
        logger.warning(message + ": %s", *args, error)
    else:
        logger.error(message, *args, exc_info=error)


class GetPropertyUseCase:
    """Fetch a property and resolve its agent, reviews and gallery.

    Only the property fetch is fatal. A failed agent fetch keeps the raw
    identifier; any failure inside the reviews or gallery batch empties that
    field, discarding the fetches that did succeed. No failure escapes
    `execute`.
    """

    def __init__(self, store: DocumentStore, collections: PropertyCollections) -> None:
        self._store = store
        self._collections = collections

    async def execute(self, property_id: str) -> ResolvedProperty | None:
        """Get resolved property by id, None when it cannot be read."""
        try:
            document = await self._store.get_document(
                self._collections.properties, property_id
            )
        except NotFound:
            logger.info("Property %s not found", property_id)
            return None
        except Exception as e:
            _log_failure("Failed to fetch property %s", property_id, error=e)
            return None

        prop = Property(document)
        async with asyncio.TaskGroup() as tg:
            agent = tg.create_task(self._resolve_agent(prop))
            reviews = tg.create_task(
                self._resolve_batch(
                    prop.id, "reviews", self._collections.reviews, prop.review_ids
                )
            )
            gallery = tg.create_task(
                self._resolve_batch(
                    prop.id, "gallery", self._collections.galleries, prop.gallery_ids
                )
            )
        return ResolvedProperty(
            source=prop,
            agent=agent.result(),
            reviews=reviews.result(),
            gallery=gallery.result(),
        )

    async def _resolve_agent(self, prop: Property) -> Document | str | None:
        if prop.agent_id is None:
            return None
        try:
            return await self._store.get_document(self._collections.agents, prop.agent_id)
        except Exception as e:
            _log_failure(
                "Failed to fetch agent %s for property %s",
                prop.agent_id,
                prop.id,
                error=e,
            )
            return prop.agent_id

    async def _resolve_batch(
        self,
        property_id: str,
        field: str,
        collection_id: str,
        document_ids: list[str],
    ) -> list[Document]:
        """Fetch all ids concurrently; a single failure empties the whole batch."""
        if not document_ids:
            return []
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(self._store.get_document(collection_id, document_id))
                    for document_id in document_ids
                ]
        except ExceptionGroup as eg:
            _log_failure(
                "Failed to fetch %s for property %s",
                field,
                property_id,
                error=eg.exceptions[0],
            )
            return []
        return [task.result() for task in tasks]

"""Property API resources."""

import falcon.asgi

from restate.application.dto.property_dto import PropertySearchInput
from restate.application.use_cases.property.get_latest_properties import (
    GetLatestPropertiesUseCase,
)
from restate.application.use_cases.property.get_properties import GetPropertiesUseCase
from restate.application.use_cases.property.get_property import GetPropertyUseCase


class PropertiesResource:
    """GET /v1/properties - filtered, searched listing."""

    def __init__(self, get_properties: GetPropertiesUseCase) -> None:
        self._get_properties = get_properties

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        documents = await self._get_properties.execute(
            PropertySearchInput(
                filter=req.get_param("filter"),
                search_term=req.get_param("query"),
                limit=req.get_param_as_int("limit", min_value=1),
            )
        )
        resp.media = {"documents": [d.to_payload() for d in documents]}
        resp.status = falcon.HTTP_200


class LatestPropertiesResource:
    """GET /v1/properties/latest."""

    def __init__(self, get_latest: GetLatestPropertiesUseCase) -> None:
        self._get_latest = get_latest

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        documents = await self._get_latest.execute()
        resp.media = {"documents": [d.to_payload() for d in documents]}
        resp.status = falcon.HTTP_200


class PropertyResource:
    """GET /v1/properties/{property_id} - property with agent, reviews, gallery."""

    def __init__(self, get_property: GetPropertyUseCase) -> None:
        self._get_property = get_property

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        property_id: str,
    ) -> None:
        resolved = await self._get_property.execute(property_id)
        if resolved is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Property not found"}
            return
        resp.media = resolved.to_payload()
        resp.status = falcon.HTTP_200

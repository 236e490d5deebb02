"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Liveness and readiness endpoints."""

    def __init__(self, store_configured: bool = True) -> None:
        self._store_configured = store_configured

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - store ids configured."""
        if not self._store_configured:
            resp.media = {"status": "unconfigured"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200

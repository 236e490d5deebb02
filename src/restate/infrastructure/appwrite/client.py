"""Appwrite REST client - one shared HTTP connection pool for all services."""

import logging
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from restate import __version__
from restate.domain.exceptions import (
    NotFound,
    PermissionDenied,
    RemoteServiceError,
    StoreUnavailable,
    ValidationError,
)

logger = logging.getLogger(__name__)

RESPONSE_FORMAT = "1.5.0"
SESSION_HEADER = "X-Appwrite-Session"

QueryParams = list[tuple[str, str]] | dict[str, str]


def path_segment(value: str) -> str:
    """Escape one caller-supplied value for use as a single path segment."""
    segment = quote(value, safe="")
    # A bare dot segment would be collapsed by URL normalisation.
    if segment in (".", ".."):
        return segment.replace(".", "%2E")
    return segment


class AppwriteClient:
    """Thin async wrapper over the Appwrite REST API.

    Created once per process and shared by the database, account and
    avatar adapters. Maps transport and status errors onto domain
    exceptions so callers only ever see RestateError subclasses.

    The client holds no per-user state: cookies the server sets are
    discarded and user sessions travel with each request.
    """

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        *,
        platform: str = "",
        api_key: str = "",
        session: str = "",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._project_id = project_id
        headers = {
            "X-Appwrite-Project": project_id,
            "X-Appwrite-Response-Format": RESPONSE_FORMAT,
            "User-Agent": f"restate/{__version__} ({platform or 'python'})",
        }
        if api_key:
            headers["X-Appwrite-Key"] = api_key
        if session:
            headers[SESSION_HEADER] = session
        self._http = httpx.AsyncClient(
            base_url=f"{self._endpoint}/",
            headers=headers,
            timeout=timeout,
            transport=transport,
            cookies=CookieJar(policy=DefaultCookiePolicy(allowed_domains=[])),
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def project_id(self) -> str:
        return self._project_id

    def build_url(self, path: str, params: dict[str, str] | None = None) -> str:
        """Absolute URL for endpoints opened outside this client (browser, <img>)."""
        query = {**(params or {}), "project": self._project_id}
        return f"{self._endpoint}/{path.lstrip('/')}?{urlencode(query)}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json: dict[str, Any] | None = None,
        session: str | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None for 204).

        `session` authenticates this request only; the shared client never
        keeps a per-user session.
        """
        headers = {SESSION_HEADER: session} if session else None
        try:
            response = await self._http.request(
                method, path.lstrip("/"), params=params, json=json, headers=headers
            )
        except httpx.InvalidURL as e:
            raise ValidationError(f"{method} {path}: {e}") from e
        except httpx.HTTPError as e:
            raise StoreUnavailable(f"{method} {path}: {e}") from e

        if response.is_error:
            raise self._error_for(response)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ValidationError(f"{method} {path}: response is not JSON") from e

    @staticmethod
    def _error_for(response: httpx.Response) -> Exception:
        message = response.reason_phrase
        error_type = None
        try:
            body = response.json()
            message = body.get("message") or message
            error_type = body.get("type")
        except (ValueError, AttributeError):
            pass
        logger.debug(
            "Appwrite %s %s -> %s %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            error_type,
        )
        if response.status_code == 404:
            return NotFound(message)
        if response.status_code in (401, 403):
            return PermissionDenied(message)
        return RemoteServiceError(message, response.status_code, error_type)

    async def aclose(self) -> None:
        await self._http.aclose()

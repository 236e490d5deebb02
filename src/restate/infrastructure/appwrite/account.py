"""Appwrite Account adapter - OAuth2 tokens and sessions."""

from typing import Any

from restate.domain.exceptions import AuthenticationFailed
from restate.infrastructure.appwrite.client import AppwriteClient, path_segment


class AppwriteAccount:
    """Account service of the shared client's project.

    The shared client never stores a user session. `create_session` hands the
    session secret back to the caller, which passes it to every later call
    made on that user's behalf.
    """

    def __init__(self, client: AppwriteClient) -> None:
        self._client = client

    def create_oauth2_token_url(
        self, provider: str, success_url: str, failure_url: str
    ) -> str:
        """Authorization URL; the redirect carries userId and secret."""
        return self._client.build_url(
            f"account/tokens/oauth2/{path_segment(provider)}",
            {"success": success_url, "failure": failure_url},
        )

    async def create_session(self, user_id: str, secret: str) -> dict[str, Any]:
        session = await self._client.request(
            "POST",
            "account/sessions/token",
            json={"userId": user_id, "secret": secret},
        )
        if not isinstance(session, dict):
            raise AuthenticationFailed("Session response is empty")
        # The secret is only returned to clients authenticated with an API key.
        if not isinstance(session.get("secret"), str) or not session["secret"]:
            raise AuthenticationFailed("Session response carries no secret")
        return session

    async def delete_session(
        self, session_id: str = "current", *, session: str | None = None
    ) -> None:
        await self._client.request(
            "DELETE", f"account/sessions/{path_segment(session_id)}", session=session
        )

    async def get(self, *, session: str | None = None) -> dict[str, Any]:
        body = await self._client.request("GET", "account", session=session)
        return body if isinstance(body, dict) else {}

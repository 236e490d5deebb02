"""Identity ports - account sessions and avatars."""

from typing import Any, Protocol


class AccountService(Protocol):
    """Port for the identity service's account endpoints.

    Calls made on a user's behalf take that user's session secret; the
    service itself keeps no signed-in user.
    """

    def create_oauth2_token_url(
        self, provider: str, success_url: str, failure_url: str
    ) -> str: ...

    async def create_session(self, user_id: str, secret: str) -> dict[str, Any]: ...

    async def delete_session(
        self, session_id: str = "current", *, session: str | None = None
    ) -> None: ...

    async def get(self, *, session: str | None = None) -> dict[str, Any]: ...


class AvatarService(Protocol):
    """Port for generated avatar references."""

    def get_initials_url(self, name: str) -> str: ...


class AuthSessionBrowser(Protocol):
    """Port for the user agent that walks the OAuth redirect flow.

    Returns the URL the flow redirected back to, or None when the user
    dismissed it.
    """

    async def open_auth_session(self, url: str, redirect_url: str) -> str | None: ...

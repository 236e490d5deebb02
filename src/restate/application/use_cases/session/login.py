"""Login use case - OAuth redirect flow exchanged for a session."""

import logging
from urllib.parse import parse_qs, urlsplit

from restate.application.ports import AccountService, AuthSessionBrowser
from restate.domain.exceptions import AuthenticationFailed, RestateError

logger = logging.getLogger(__name__)


def _callback_credentials(callback_url: str) -> tuple[str, str]:
    """Extract (userId, secret) from the redirect URL's query string."""
    params = parse_qs(urlsplit(callback_url).query)
    user_id = (params.get("userId") or [""])[0]
    secret = (params.get("secret") or [""])[0]
    if not user_id or not secret:
        raise AuthenticationFailed("Redirect carries no userId/secret")
    return user_id, secret


class LoginUseCase:
    """Sign in through the identity service's OAuth2 provider."""

    def __init__(
        self,
        account: AccountService,
        redirect_url: str,
        provider: str = "google",
    ) -> None:
        self._account = account
        self._redirect_url = redirect_url
        self._provider = provider

    def authorization_url(self) -> str:
        """URL the user agent must open to start the flow."""
        return self._account.create_oauth2_token_url(
            self._provider, self._redirect_url, self._redirect_url
        )

    async def create_session(self, callback_url: str | None) -> str | None:
        """Exchange the redirect's credentials for a session secret.

        The secret identifies the new session on later calls; None when the
        flow did not produce one.
        """
        try:
            if not callback_url:
                raise AuthenticationFailed("Login flow was not completed")
            user_id, secret = _callback_credentials(callback_url)
            session = await self._account.create_session(user_id, secret)
            if not session or not session.get("secret"):
                raise AuthenticationFailed("Failed to create a session")
        except RestateError as e:
            logger.error("Login failed: %s", e)
            return None
        except Exception:
            logger.exception("Unexpected error during login")
            return None
        logger.info("Session created for user %s", user_id)
        return session["secret"]

    async def complete(self, callback_url: str | None) -> bool:
        """Whether the redirect's credentials produced a session."""
        return await self.create_session(callback_url) is not None

    async def execute(self, browser: AuthSessionBrowser) -> bool:
        """Run the whole flow through the given browser."""
        try:
            url = self.authorization_url()
            callback_url = await browser.open_auth_session(url, self._redirect_url)
        except RestateError as e:
            logger.error("Login failed: %s", e)
            return False
        except Exception:
            logger.exception("Unexpected error during login")
            return False
        return await self.complete(callback_url)

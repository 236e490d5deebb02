"""Get current user use case."""

import logging

from restate.application.ports import AccountService, AvatarService
from restate.domain.entities import CurrentUser
from restate.domain.exceptions import RestateError

logger = logging.getLogger(__name__)


class GetCurrentUserUseCase:
    """Profile of the signed-in account with an initials avatar."""

    def __init__(self, account: AccountService, avatars: AvatarService) -> None:
        self._account = account
        self._avatars = avatars

    async def execute(self, session: str | None) -> CurrentUser | None:
        """Current user of `session`, or None when unauthenticated or on error."""
        if not session:
            return None
        try:
            profile = await self._account.get(session=session)
        except RestateError as e:
            logger.info("No current user: %s", e)
            return None
        except Exception:
            logger.exception("Unexpected error reading the current user")
            return None
        if not profile.get("$id"):
            return None
        return CurrentUser(
            profile=profile,
            avatar=self._avatars.get_initials_url(profile.get("name") or ""),
        )

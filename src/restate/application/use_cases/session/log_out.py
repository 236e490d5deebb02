"""Log out use case."""

import logging

from restate.application.ports import AccountService
from restate.domain.exceptions import RestateError

logger = logging.getLogger(__name__)


class LogOutUseCase:
    """End the session the caller is signed in with."""

    def __init__(self, account: AccountService) -> None:
        self._account = account

    async def execute(self, session: str | None) -> bool:
        if not session:
            return False
        try:
            await self._account.delete_session("current", session=session)
        except RestateError as e:
            logger.warning("Log out failed: %s", e)
            return False
        except Exception:
            logger.exception("Unexpected error logging out")
            return False
        return True

"""Session API resources - OAuth login, log out, current user.

The signed-in user's session secret lives in an HttpOnly cookie and is
handed to the identity service on each request.
"""

import falcon
import falcon.asgi

from restate.application.use_cases.session.get_current_user import GetCurrentUserUseCase
from restate.application.use_cases.session.log_out import LogOutUseCase
from restate.application.use_cases.session.login import LoginUseCase

SESSION_COOKIE = "restate_session"


def session_from(req: falcon.asgi.Request) -> str | None:
    values = req.get_cookie_values(SESSION_COOKIE)
    return values[0] if values else None


class LoginResource:
    """GET /v1/auth/login redirects to the provider; GET /v1/auth/callback completes."""

    def __init__(self, login: LoginUseCase, *, secure_cookie: bool = True) -> None:
        self._login = login
        self._secure_cookie = secure_cookie

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        raise falcon.HTTPFound(self._login.authorization_url())

    async def on_get_callback(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        session = await self._login.create_session(req.url)
        if session is None:
            resp.media = {"success": False}
            resp.status = falcon.HTTP_401
            return
        resp.set_cookie(
            SESSION_COOKIE,
            session,
            path="/",
            secure=self._secure_cookie,
            http_only=True,
            same_site="Lax",
        )
        resp.media = {"success": True}
        resp.status = falcon.HTTP_200


class SessionResource:
    """DELETE /v1/auth/session - log out."""

    def __init__(self, log_out: LogOutUseCase) -> None:
        self._log_out = log_out

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        success = await self._log_out.execute(session_from(req))
        resp.unset_cookie(SESSION_COOKIE, path="/")
        resp.media = {"success": success}
        resp.status = falcon.HTTP_200


class CurrentUserResource:
    """GET /v1/auth/me."""

    def __init__(self, get_current_user: GetCurrentUserUseCase) -> None:
        self._get_current_user = get_current_user

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = await self._get_current_user.execute(session_from(req))
        if user is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        resp.media = user.to_payload()
        resp.status = falcon.HTTP_200

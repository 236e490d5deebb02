"""Falcon ASGI application."""

import sys
import traceback

import falcon
import falcon.asgi
from falcon.asgi import App

from restate.interfaces.api.resources.auth import (
    CurrentUserResource,
    LoginResource,
    SessionResource,
)
from restate.interfaces.api.resources.health import HealthResource
from restate.interfaces.api.resources.properties import (
    LatestPropertiesResource,
    PropertiesResource,
    PropertyResource,
)


async def _log_exception(req, resp, ex, params):
    traceback.print_exception(type(ex), ex, ex.__traceback__, file=sys.stderr)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    properties_resource: PropertiesResource,
    latest_properties_resource: LatestPropertiesResource,
    property_resource: PropertyResource,
    login_resource: LoginResource,
    session_resource: SessionResource,
    current_user_resource: CurrentUserResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/properties", properties_resource)
    app.add_route("/v1/properties/latest", latest_properties_resource)
    app.add_route("/v1/properties/{property_id}", property_resource)
    app.add_route("/v1/auth/login", login_resource)
    app.add_route("/v1/auth/callback", login_resource, suffix="callback")
    app.add_route("/v1/auth/session", session_resource)
    app.add_route("/v1/auth/me", current_user_resource)
    return app

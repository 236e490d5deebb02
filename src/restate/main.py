"""Application entry point and composition root."""

from restate import __version__
from restate.application.dto.property_dto import PropertyCollections
from restate.application.use_cases.property.get_latest_properties import (
    GetLatestPropertiesUseCase,
)
from restate.application.use_cases.property.get_properties import GetPropertiesUseCase
from restate.application.use_cases.property.get_property import GetPropertyUseCase
from restate.application.use_cases.session.get_current_user import GetCurrentUserUseCase
from restate.application.use_cases.session.log_out import LogOutUseCase
from restate.application.use_cases.session.login import LoginUseCase
from restate.config import Settings, get_settings
from restate.infrastructure.appwrite.account import AppwriteAccount
from restate.infrastructure.appwrite.avatars import AppwriteAvatars
from restate.infrastructure.appwrite.client import AppwriteClient
from restate.infrastructure.appwrite.databases import AppwriteDocumentStore
from restate.interfaces.api.app import create_app
from restate.interfaces.api.middleware.client_lifespan import ClientLifespanMiddleware
from restate.interfaces.api.middleware.cors import CORSMiddleware
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
from restate.log import configure_logging


def main() -> None:
    """CLI entry point."""
    print(f"restate v{__version__}")


def create_client(settings: Settings) -> AppwriteClient:
    """The one store client shared by every adapter."""
    return AppwriteClient(
        settings.appwrite_endpoint,
        settings.appwrite_project_id,
        platform=settings.appwrite_platform,
        api_key=settings.appwrite_api_key,
        session=settings.appwrite_session,
        timeout=settings.request_timeout,
    )


def create_restate_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    client = create_client(settings)
    store = AppwriteDocumentStore(client, settings.appwrite_database_id)
    account = AppwriteAccount(client)
    avatars = AppwriteAvatars(client)
    collections = PropertyCollections(
        properties=settings.appwrite_properties_collection_id,
        agents=settings.appwrite_agents_collection_id,
        reviews=settings.appwrite_reviews_collection_id,
        galleries=settings.appwrite_galleries_collection_id,
    )

    get_latest = GetLatestPropertiesUseCase(store=store, collections=collections)
    get_properties = GetPropertiesUseCase(store=store, collections=collections)
    get_property = GetPropertyUseCase(store=store, collections=collections)
    login = LoginUseCase(
        account=account,
        redirect_url=settings.oauth_redirect_url,
        provider=settings.oauth_provider,
    )
    log_out = LogOutUseCase(account=account)
    get_current_user = GetCurrentUserUseCase(account=account, avatars=avatars)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        properties_resource=PropertiesResource(get_properties),
        latest_properties_resource=LatestPropertiesResource(get_latest),
        property_resource=PropertyResource(get_property),
        login_resource=LoginResource(
            login, secure_cookie=settings.session_cookie_secure
        ),
        session_resource=SessionResource(log_out),
        current_user_resource=CurrentUserResource(get_current_user),
        health_resource=HealthResource(store_configured=settings.store_configured),
        middleware=[
            CORSMiddleware(cors_origins),
            ClientLifespanMiddleware(client),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_restate_app(settings)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())

"""Fixtures for API tests."""

import pytest

from restate.application.use_cases.property.get_latest_properties import (
    GetLatestPropertiesUseCase,
)
from restate.application.use_cases.property.get_properties import GetPropertiesUseCase
from restate.application.use_cases.property.get_property import GetPropertyUseCase
from restate.application.use_cases.session.get_current_user import GetCurrentUserUseCase
from restate.application.use_cases.session.log_out import LogOutUseCase
from restate.application.use_cases.session.login import LoginUseCase
from restate.interfaces.api.app import create_app
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

from tests.conftest import make_document

REDIRECT_URL = "http://falconframework.org/v1/auth/callback"


@pytest.fixture
def seeded_store(store):
    """Store with a few listings and one fully referenced property."""
    store.add(
        make_document("apt-1", minutes=1, name="Elm Apartment", type="Apartment", address="1 Elm St"),
        make_document("house-1", minutes=2, name="Oak House", type="House", address="2 Oak Ave"),
        make_document(
            "apt-2",
            minutes=3,
            name="Pine Apartment",
            type="Apartment",
            address="3 Pine Rd",
            agent="agent-1",
            reviews=["rev-1"],
            gallery=["img-1", "img-broken"],
        ),
        make_document("agent-1", "agents", name="Sam Agent"),
        make_document("rev-1", "reviews", rating=5),
        make_document("img-1", "galleries", image="https://img/1.jpg"),
    )
    store.fail_on("galleries", "img-broken")
    return store


@pytest.fixture
def app(seeded_store, collections, mock_account, mock_avatars):
    """Falcon ASGI app wired to the fake store and identity mocks."""
    return create_app(
        properties_resource=PropertiesResource(
            GetPropertiesUseCase(store=seeded_store, collections=collections)
        ),
        latest_properties_resource=LatestPropertiesResource(
            GetLatestPropertiesUseCase(store=seeded_store, collections=collections)
        ),
        property_resource=PropertyResource(
            GetPropertyUseCase(store=seeded_store, collections=collections)
        ),
        login_resource=LoginResource(
            LoginUseCase(account=mock_account, redirect_url=REDIRECT_URL)
        ),
        session_resource=SessionResource(LogOutUseCase(account=mock_account)),
        current_user_resource=CurrentUserResource(
            GetCurrentUserUseCase(account=mock_account, avatars=mock_avatars)
        ),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware(["http://localhost:8081"])],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)

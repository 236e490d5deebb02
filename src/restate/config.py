"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env(name: str) -> AliasChoices:
    """Accept both NAME and the mobile app's EXPO_PUBLIC_NAME."""
    return AliasChoices(name, f"expo_public_{name}")


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Appwrite store
    appwrite_endpoint: str = Field(
        default="https://cloud.appwrite.io/v1",
        validation_alias=_env("appwrite_endpoint"),
        description="Appwrite API endpoint",
    )
    appwrite_project_id: str = Field(
        default="", validation_alias=_env("appwrite_project_id"), description="Project ID"
    )
    appwrite_platform: str = Field(
        default="com.amer.restate", description="Registered client platform"
    )
    appwrite_database_id: str = Field(
        default="", validation_alias=_env("appwrite_database_id"), description="Database ID"
    )
    appwrite_properties_collection_id: str = Field(
        default="", validation_alias=_env("appwrite_properties_collection_id")
    )
    appwrite_agents_collection_id: str = Field(
        default="", validation_alias=_env("appwrite_agents_collection_id")
    )
    appwrite_reviews_collection_id: str = Field(
        default="", validation_alias=_env("appwrite_reviews_collection_id")
    )
    appwrite_galleries_collection_id: str = Field(
        default="", validation_alias=_env("appwrite_galleries_collection_id")
    )
    appwrite_api_key: str = Field(default="", description="Server API key (optional)")
    appwrite_session: str = Field(default="", description="Service session secret for store reads (optional)")
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # OAuth login
    oauth_provider: str = Field(default="google", description="OAuth2 provider name")
    oauth_redirect_url: str = Field(
        default="http://localhost:8000/v1/auth/callback",
        description="Where the provider redirects with userId and secret",
    )
    session_cookie_secure: bool = Field(
        default=True, description="Send the session cookie over HTTPS only"
    )

    # Application
    cors_origins: str = Field(default="", description="Comma-separated allowed origins")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def store_configured(self) -> bool:
        """True when every id needed to reach the property collections is set."""
        return all(
            (
                self.appwrite_endpoint,
                self.appwrite_project_id,
                self.appwrite_database_id,
                self.appwrite_properties_collection_id,
                self.appwrite_agents_collection_id,
                self.appwrite_reviews_collection_id,
                self.appwrite_galleries_collection_id,
            )
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

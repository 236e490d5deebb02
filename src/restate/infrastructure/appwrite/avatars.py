"""Appwrite Avatars adapter."""

from restate.infrastructure.appwrite.client import AppwriteClient


class AppwriteAvatars:
    """Generated avatar URLs; nothing is fetched."""

    def __init__(self, client: AppwriteClient) -> None:
        self._client = client

    def get_initials_url(self, name: str) -> str:
        return self._client.build_url("avatars/initials", {"name": name})

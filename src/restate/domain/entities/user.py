"""Current user entity."""

from dataclasses import dataclass
from typing import Any


@dataclass
class CurrentUser:
    """Public account profile plus a generated avatar URL."""

    profile: dict[str, Any]
    avatar: str

    @property
    def id(self) -> str:
        return self.profile.get("$id", "")

    @property
    def name(self) -> str:
        return self.profile.get("name", "")

    def to_payload(self) -> dict[str, Any]:
        return {**self.profile, "avatar": self.avatar}

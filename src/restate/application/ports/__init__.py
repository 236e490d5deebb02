"""Application ports - interfaces for external adapters."""

from restate.application.ports.document_store import DocumentStore
from restate.application.ports.identity import (
    AccountService,
    AuthSessionBrowser,
    AvatarService,
)

__all__ = [
    "AccountService",
    "AuthSessionBrowser",
    "AvatarService",
    "DocumentStore",
]

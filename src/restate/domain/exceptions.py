"""Domain exceptions."""


class RestateError(Exception):
    """Base exception for restate."""

    pass


class NotFound(RestateError):
    """Requested document was not found in the store."""

    pass


class PermissionDenied(RestateError):
    """The store refused the request for the current session or key."""

    pass


class StoreUnavailable(RestateError):
    """The store could not be reached (connection, timeout, protocol)."""

    pass


class RemoteServiceError(RestateError):
    """The store answered with an error status."""

    def __init__(self, message: str, status_code: int, error_type: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type


class ValidationError(RestateError):
    """A payload received from the store is malformed."""

    pass


class AuthenticationFailed(RestateError):
    """The OAuth flow did not produce a session."""

    pass

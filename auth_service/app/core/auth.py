"""Access to the authentication manager collaborator."""

from typing import Any, Protocol

from fastapi import Request

from ..exceptions import AuthAPIServerError
from .constants import AUTH_MANAGER_UNAVAILABLE_CODE


class AuthManager(Protocol):
    """The authentication core. Its behaviour lives outside this service."""

    def authenticate(self, *args: Any, **kwargs: Any) -> Any: ...


def get_auth_manager(request: Request) -> AuthManager:
    """
    FastAPI dependency returning the auth manager the app was created with.

    Raises AuthAPIServerError if the app was started without one.
    """
    manager = getattr(request.app.state, "auth_manager", None)
    if manager is None:
        raise AuthAPIServerError(
            code=AUTH_MANAGER_UNAVAILABLE_CODE, description="auth manager is not configured"
        )
    return manager

"""
Access token authentication dependencies.

Wraps the protected request resolver so every protected route receives
an already-verified identity instead of a raw header.
"""

from fastapi import Depends, Request

from modules.auth.interfaces import ITokenCodec
from modules.auth.models import AuthenticatedRequest, HttpRequest
from modules.auth.resolver import resolve
from shared.models import AuthenticatedUser

from ..dependencies import get_token_codec


def to_http_request(request: Request) -> HttpRequest:
    """Normalize a Starlette request. The body is left unread."""
    return HttpRequest.from_parts(
        headers=dict(request.headers),
        path_params={k: str(v) for k, v in request.path_params.items()},
        query_params=dict(request.query_params),
    )


async def get_authenticated_request(
    request: Request,
    codec: ITokenCodec = Depends(get_token_codec),
) -> AuthenticatedRequest:
    """
    Dependency that runs the auth gate.

    Raises the auth module's exceptions; the app's exception handlers
    turn all of them into the same 401 response.
    """
    return resolve(to_http_request(request), codec)


async def get_current_user(
    authenticated: AuthenticatedRequest = Depends(get_authenticated_request),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return authenticated.user


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_user)

"""
Protected request resolution.

Turns an inbound request into an AuthenticatedRequest, or fails before any
business logic runs. Pure and synchronous: the only input is the in-memory
request structure.
"""

from typing import Optional

from shared.models import AuthenticatedUser

from .exceptions import InvalidTokenError, MissingTokenError
from .interfaces import ITokenCodec
from .models import AuthenticatedRequest, AuthorizationCredentials, HttpRequest

AUTHORIZATION_HEADER = "authorization"


def parse_authorization(value: Optional[str]) -> AuthorizationCredentials:
    """
    Split an ``Authorization`` header value into scheme and token.

    The scheme is kept for callers that care; the resolver does not
    enforce a particular one.

    Raises:
        MissingTokenError: If the value is absent or blank
        InvalidTokenError: If the value is not exactly ``<scheme> <token>``
    """
    if value is None or not value.strip():
        raise MissingTokenError()

    parts = value.split()
    if len(parts) != 2:
        raise InvalidTokenError("Malformed authorization header")

    scheme, token = parts
    return AuthorizationCredentials(scheme=scheme, token=token)


def resolve(request: HttpRequest, codec: ITokenCodec) -> AuthenticatedRequest:
    """
    Gate a request on its bearer token.

    Args:
        request: Normalized inbound request
        codec: Verifies the token and yields the identity claim

    Returns:
        The same request paired with the resolved user

    Raises:
        MissingTokenError: No authorization header
        InvalidTokenError: Malformed header, bad token
        ExpiredTokenError: Token past its expiry
    """
    credentials = parse_authorization(request.header(AUTHORIZATION_HEADER))
    user_id = codec.verify(credentials.token)
    return AuthenticatedRequest(request=request, user=AuthenticatedUser(id=user_id))

"""
Authentication module data models.

These models describe tokens and the normalized request the resolver
works on. They are exposed to other modules through the package API.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class AuthorizationCredentials(BaseModel):
    """The two parts of an ``Authorization: <scheme> <token>`` header."""

    scheme: str
    token: str

    model_config = {"frozen": True}


class HttpRequest(BaseModel):
    """
    Gateway-neutral view of an inbound request.

    Header names are stored lowercased, matching what API Gateway delivers.
    """

    headers: dict[str, str] = Field(default_factory=dict)
    path_params: dict[str, str] = Field(default_factory=dict)
    query_params: dict[str, str] = Field(default_factory=dict)
    body: Optional[Any] = None

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    @classmethod
    def from_parts(
        cls,
        headers: Optional[dict[str, str]] = None,
        path_params: Optional[dict[str, str]] = None,
        query_params: Optional[dict[str, str]] = None,
        body: Optional[Any] = None,
    ) -> "HttpRequest":
        """Build a request, normalizing header names."""
        return cls(
            headers={k.lower(): v for k, v in (headers or {}).items()},
            path_params=dict(path_params or {}),
            query_params=dict(query_params or {}),
            body=body,
        )


class AuthenticatedRequest(BaseModel):
    """A request that passed the auth gate, plus the identity it resolved to."""

    request: HttpRequest
    user: AuthenticatedUser

    model_config = {"frozen": True}

    @property
    def user_id(self) -> str:
        return self.user.id


class AccessTokenResponse(BaseModel):
    """Body returned by sign-in."""

    model_config = {"populate_by_name": True}

    access_token: str = Field(..., alias="accessToken")

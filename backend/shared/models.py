"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    The identity resolved from a verified bearer token.

    Made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (the token subject)")

    model_config = {
        "frozen": True,  # Make immutable for safety
    }

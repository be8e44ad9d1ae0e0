"""
Accounts module interface.
"""

from typing import Protocol, runtime_checkable

from .models import AccountSession, SignInRequest, SignUpRequest, UserProfile


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations.

    Sign-up and sign-in are the only places access tokens are issued.
    """

    async def sign_up(self, request: SignUpRequest) -> AccountSession:
        """
        Create an account with computed daily goals.

        Returns:
            The new user ID and an access token

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def sign_in(self, request: SignInRequest) -> AccountSession:
        """
        Exchange email and password for an access token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def get_profile(self, user_id: str) -> UserProfile:
        """
        Get the user's profile and daily goals.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

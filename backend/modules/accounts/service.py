"""
Accounts service implementation.

Sign-up, sign-in and profile lookup against the ``users`` table.
"""

import logging
from datetime import date
from typing import Callable, Optional

from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.interfaces import IPasswordHasher, ITokenCodec

from .exceptions import EmailAlreadyRegisteredError, UserNotFoundError
from .goals import calculate_goals
from .interfaces import IAccountService
from .models import AccountSession, SignInRequest, SignUpRequest, UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Account service with Supabase backend.

    Implements IAccountService protocol.
    """

    def __init__(
        self,
        repository: UserRepository,
        tokens: ITokenCodec,
        passwords: IPasswordHasher,
        today: Optional[Callable[[], date]] = None,
    ):
        self._repository = repository
        self._tokens = tokens
        self._passwords = passwords
        self._today = today or date.today

    async def sign_up(self, request: SignUpRequest) -> AccountSession:
        """Create the user, then issue their first token."""
        email = request.account.email

        if self._repository.email_exists(email):
            raise EmailAlreadyRegisteredError(email)

        goals = calculate_goals(
            goal=request.goal,
            gender=request.gender,
            birth_date=request.birth_date,
            height=request.height,
            weight=request.weight,
            activity_level=request.activity_level,
            today=self._today(),
        )
        user = self._repository.create(
            request,
            password_hash=self._passwords.hash(request.account.password),
            goals=goals,
        )
        logger.info("Signed up user %s", user.id)

        return AccountSession(user_id=user.id, access_token=self._tokens.issue(user.id))

    async def sign_in(self, request: SignInRequest) -> AccountSession:
        """Check the password and issue a token."""
        user = self._repository.get_by_email(request.email)

        # Same error for unknown email and wrong password
        if user is None or not self._passwords.verify(request.password, user.password):
            logger.info("Rejected sign-in attempt")
            raise InvalidCredentialsError()

        logger.info("Signed in user %s", user.id)
        return AccountSession(user_id=user.id, access_token=self._tokens.issue(user.id))

    async def get_profile(self, user_id: str) -> UserProfile:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserProfile.from_record(user)

"""
Accounts module.

Handles sign-up (with daily goal computation), sign-in and profiles.

Public API:
- IAccountService: Interface for account operations
- SignUpRequest, SignInRequest, AccountSession, UserProfile: Data models
- calculate_goals: Daily calorie and macro targets
"""

from .interfaces import IAccountService
from .goals import calculate_goals
from .models import (
    AccountDetails,
    AccountSession,
    DailyGoals,
    Gender,
    Goal,
    SignInRequest,
    SignUpRequest,
    UserProfile,
    UserRecord,
)
from .exceptions import EmailAlreadyRegisteredError, UserNotFoundError

__all__ = [
    # Interface
    "IAccountService",
    # Calculation
    "calculate_goals",
    # Models
    "AccountDetails",
    "AccountSession",
    "DailyGoals",
    "Gender",
    "Goal",
    "SignInRequest",
    "SignUpRequest",
    "UserProfile",
    "UserRecord",
    # Exceptions
    "EmailAlreadyRegisteredError",
    "UserNotFoundError",
]

"""
Account endpoints.

Two routers: ``auth_router`` for the public sign-up/sign-in endpoints and
``users_router`` for the authenticated user's own profile.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_account_service
from api.middleware.auth import get_current_user
from modules.auth.models import AccessTokenResponse
from shared.models import AuthenticatedUser

from .interfaces import IAccountService
from .models import AccountSession, SignInRequest, SignUpRequest, UserProfile

auth_router = APIRouter()
users_router = APIRouter()


@auth_router.post("/sign-up", response_model=AccountSession, status_code=201)
async def sign_up(
    request: SignUpRequest,
    service: IAccountService = Depends(get_account_service),
) -> AccountSession:
    """
    Create an account.

    Daily goals are computed from the submitted body data. Returns the
    new user ID and an access token.
    """
    return await service.sign_up(request)


@auth_router.post("/sign-in", response_model=AccessTokenResponse)
async def sign_in(
    request: SignInRequest,
    service: IAccountService = Depends(get_account_service),
) -> AccessTokenResponse:
    """
    Exchange email and password for an access token.
    """
    session = await service.sign_in(request)
    return AccessTokenResponse(access_token=session.access_token)


@users_router.get("/me", response_model=UserProfile)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> UserProfile:
    """
    Get the current user's profile and daily goals.

    Requires authentication.
    """
    return await service.get_profile(user.id)

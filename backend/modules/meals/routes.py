"""
Meal API endpoints.

Errors raised by the service are translated by the app-level exception
handlers, so the handlers here stay thin.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_meal_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IMealService
from .models import CreateMealRequest, Meal, MealIntake

router = APIRouter()


@router.post("", response_model=MealIntake, status_code=201)
async def create_meal(
    request: CreateMealRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMealService = Depends(get_meal_service),
) -> MealIntake:
    """
    Register a meal and get a presigned URL for its photo or audio.

    The meal is created in 'uploading' status; the client PUTs the
    file to ``uploadURL`` within ten minutes.
    """
    return await service.register_intake(user.id, request.file_type)


@router.get("/{meal_id}", response_model=Meal)
async def get_meal(
    meal_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMealService = Depends(get_meal_service),
) -> Meal:
    """
    Get one of the current user's meals.
    """
    return await service.get_meal(user.id, meal_id)

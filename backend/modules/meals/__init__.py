"""
Meals module.

Handles meal registration with direct-to-S3 uploads, and meal lookup.

Public API:
- IMealService: Interface for meal operations
- IUploadBroker: Interface for presigned upload issuance
- Meal, MealIntake, MediaKind: Data models
"""

from .interfaces import IMealService, IUploadBroker
from .models import (
    CreateMealRequest,
    Meal,
    MealInputType,
    MealIntake,
    MealStatus,
    MediaKind,
    UploadCapability,
)
from .exceptions import MealNotFoundError, UploadCapabilityUnavailableError

__all__ = [
    # Interfaces
    "IMealService",
    "IUploadBroker",
    # Models
    "CreateMealRequest",
    "Meal",
    "MealInputType",
    "MealIntake",
    "MealStatus",
    "MediaKind",
    "UploadCapability",
    # Exceptions
    "MealNotFoundError",
    "UploadCapabilityUnavailableError",
]

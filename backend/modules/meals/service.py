"""
Meals service implementation.

Registers meal uploads and serves meals back to their owners.
"""

import logging
import uuid
from typing import Union

from shared.exceptions import ValidationError

from .exceptions import MealNotFoundError
from .interfaces import IMealService, IUploadBroker
from .models import Meal, MealIntake, MediaKind
from .repository import MealRepository

logger = logging.getLogger(__name__)


def parse_media_kind(file_type: Union[MediaKind, str]) -> MediaKind:
    """
    Coerce a declared content type into an accepted MediaKind.

    Raises:
        ValidationError: If the type is not one of the accepted kinds
    """
    try:
        return MediaKind(file_type)
    except ValueError:
        accepted = [kind.value for kind in MediaKind]
        raise ValidationError(
            "Unsupported file type",
            errors=[{
                "field": "fileType",
                "message": f"Expected one of: {', '.join(accepted)}",
                "received": str(file_type),
            }],
            code="UNSUPPORTED_FILE_TYPE",
        )


class MealService(IMealService):
    """
    Meal service backed by Supabase and an upload broker.

    Implements IMealService protocol.
    """

    def __init__(self, repository: MealRepository, broker: IUploadBroker):
        self._repository = repository
        self._broker = broker

    async def register_intake(
        self,
        user_id: str,
        file_type: Union[MediaKind, str],
    ) -> MealIntake:
        """Validate, mint the upload URL, then persist the pending meal."""
        kind = parse_media_kind(file_type)

        # Mint first: a failure here must not leave a pending meal behind
        capability = await self._broker.issue_upload_capability(kind)

        meal = self._repository.create_pending(
            user_id=user_id,
            input_file_key=capability.storage_key,
            input_type=kind.input_type,
        )
        logger.info("Registered meal %s for user %s (%s)", meal.id, user_id, kind.value)

        return MealIntake(meal_id=meal.id, upload_url=capability.upload_url)

    async def get_meal(self, user_id: str, meal_id: str) -> Meal:
        """Get a meal the user owns."""
        # Meal IDs are UUIDs; anything else cannot exist
        try:
            uuid.UUID(meal_id)
        except ValueError:
            raise MealNotFoundError(meal_id)

        meal = self._repository.get_for_user(meal_id, user_id)
        if meal is None:
            raise MealNotFoundError(meal_id)
        return meal

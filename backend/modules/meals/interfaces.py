"""
Meals module interfaces.

The API layer depends on IMealService; the service depends on
IUploadBroker so storage can be faked in tests.
"""

from typing import Protocol, Union, runtime_checkable

from .models import Meal, MealIntake, MediaKind, UploadCapability


@runtime_checkable
class IUploadBroker(Protocol):
    """Issues time-boxed write access to object storage."""

    async def issue_upload_capability(self, kind: MediaKind) -> UploadCapability:
        """
        Mint a presigned upload URL for a brand-new storage key.

        Raises:
            UploadCapabilityUnavailableError: If storage cannot sign the URL
        """
        ...


@runtime_checkable
class IMealService(Protocol):
    """
    Interface for meal operations.

    This protocol defines the contract that the meals module exposes
    to the API layer.
    """

    async def register_intake(
        self,
        user_id: str,
        file_type: Union[MediaKind, str],
    ) -> MealIntake:
        """
        Register a meal whose media the client will upload directly.

        The upload URL is minted before the record is written, so a
        failure to mint leaves nothing behind.

        Args:
            user_id: Authenticated owner
            file_type: Declared content type (``audio/m4a`` or ``image/jpeg``)

        Returns:
            The new meal's ID and the URL to PUT the file to

        Raises:
            ValidationError: If file_type is not an accepted kind
            UploadCapabilityUnavailableError: If the URL cannot be issued
        """
        ...

    async def get_meal(self, user_id: str, meal_id: str) -> Meal:
        """
        Get one of the user's meals.

        Raises:
            MealNotFoundError: If missing or owned by someone else
        """
        ...

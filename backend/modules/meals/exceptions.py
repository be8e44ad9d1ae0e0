"""
Meals module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, NotFoundError


class MealNotFoundError(NotFoundError):
    """Raised when a meal does not exist or belongs to someone else."""

    def __init__(self, meal_id: str):
        super().__init__(
            "Meal not found.",
            code="MEAL_NOT_FOUND",
            details={"meal_id": meal_id},
        )


class UploadCapabilityUnavailableError(ExternalServiceError):
    """Raised when object storage cannot presign an upload URL."""

    def __init__(self, original_error: Optional[str] = None):
        super().__init__(
            "Upload URL could not be issued.",
            service="s3",
            code="UPLOAD_CAPABILITY_UNAVAILABLE",
            details={"original_error": original_error},
        )

"""
Meals module data models.

A meal starts life as a pending record in ``uploading`` status while the
client PUTs its photo or audio straight to S3. Every later status belongs
to the media-processing worker and is passed through untouched.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class MediaKind(str, Enum):
    """Content types a client may upload for a meal."""

    AUDIO = "audio/m4a"
    IMAGE = "image/jpeg"

    @property
    def extension(self) -> str:
        """Canonical file extension for the storage key."""
        return _EXTENSIONS[self]

    @property
    def input_type(self) -> "MealInputType":
        return _INPUT_TYPES[self]


class MealInputType(str, Enum):
    """How the meal was captured."""

    AUDIO = "audio"
    PICTURE = "picture"


class MealStatus(str, Enum):
    """Statuses this service writes. Others come from the processing worker."""

    UPLOADING = "uploading"


_EXTENSIONS = {
    MediaKind.AUDIO: ".m4a",
    MediaKind.IMAGE: ".jpeg",
}

_INPUT_TYPES = {
    MediaKind.AUDIO: MealInputType.AUDIO,
    MediaKind.IMAGE: MealInputType.PICTURE,
}


class UploadCapability(BaseModel):
    """A presigned, single-object, write-only grant. Never persisted."""

    storage_key: str
    upload_url: str
    expires_in: int = Field(..., description="Seconds the URL stays valid")
    method: str = "PUT"

    model_config = {"frozen": True}


class Meal(BaseModel):
    """A meal record as stored in the ``meals`` table."""

    model_config = {"populate_by_name": True}

    id: str
    user_id: str = Field(..., alias="userId")
    status: str
    input_type: MealInputType = Field(..., alias="inputType")
    input_file_key: str = Field(..., alias="inputFileKey")
    name: str = ""
    icon: str = ""
    foods: list[dict[str, Any]] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(None, alias="createdAt")


class CreateMealRequest(BaseModel):
    """Body of ``POST /api/meals``."""

    model_config = {"populate_by_name": True}

    file_type: MediaKind = Field(..., alias="fileType")


class MealIntake(BaseModel):
    """Result of registering a meal upload: where the client should PUT the file."""

    model_config = {"populate_by_name": True}

    meal_id: str = Field(..., alias="mealId")
    upload_url: str = Field(..., alias="uploadURL")

"""
Accounts module data models.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class Goal(str, Enum):
    """What the user wants to do with their weight."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class AccountDetails(BaseModel):
    """Credentials and display name supplied at sign-up."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)


class SignUpRequest(BaseModel):
    """Body of ``POST /api/auth/sign-up``."""

    model_config = {"populate_by_name": True}

    goal: Goal
    gender: Gender
    birth_date: date = Field(..., alias="birthDate")
    height: float = Field(..., gt=0, description="Height in centimetres")
    weight: float = Field(..., gt=0, description="Weight in kilograms")
    activity_level: int = Field(..., ge=1, le=5, alias="activityLevel")
    account: AccountDetails


class SignInRequest(BaseModel):
    """Body of ``POST /api/auth/sign-in``."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class DailyGoals(BaseModel):
    """Daily energy and macronutrient targets."""

    calories: int
    proteins: int
    carbohydrates: int
    fats: int


class AccountSession(BaseModel):
    """A newly signed-up or signed-in user and their access token."""

    model_config = {"populate_by_name": True}

    user_id: str = Field(..., alias="userId")
    access_token: str = Field(..., alias="accessToken")


class UserRecord(BaseModel):
    """A row of the ``users`` table, including the password hash."""

    id: str
    name: str
    email: str
    password: str
    goal: Goal
    gender: Gender
    birth_date: date
    height: float
    weight: float
    activity_level: int
    calories: int = 0
    proteins: int = 0
    carbohydrates: int = 0
    fats: int = 0
    created_at: Optional[datetime] = None


class UserProfile(BaseModel):
    """What a user sees about themselves (never the password hash)."""

    model_config = {"populate_by_name": True}

    id: str
    name: str
    email: str
    goal: Goal
    gender: Gender
    birth_date: date = Field(..., alias="birthDate")
    height: float
    weight: float
    activity_level: int = Field(..., alias="activityLevel")
    goals: DailyGoals

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserProfile":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            goal=record.goal,
            gender=record.gender,
            birth_date=record.birth_date,
            height=record.height,
            weight=record.weight,
            activity_level=record.activity_level,
            goals=DailyGoals(
                calories=record.calories,
                proteins=record.proteins,
                carbohydrates=record.carbohydrates,
                fats=record.fats,
            ),
        )

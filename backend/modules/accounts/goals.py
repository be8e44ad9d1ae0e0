"""
Daily goal calculation.

Energy target:
    BMR (Mifflin-St Jeor)
        male:   10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        female: 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161
    TDEE = BMR × PAL, where PAL comes from the 1-5 activity level
    target = TDEE - 500 to lose, + 500 to gain

Macros:
    protein: g per kg of body weight, by goal
    fat: share of the calorie target, by goal (9 kcal/g)
    carbohydrates: whatever calories are left (4 kcal/g), never negative
"""

from datetime import date
from typing import Optional

from .models import DailyGoals, Gender, Goal

# Activity level 1 (sedentary) .. 5 (very active)
PAL_MULTIPLIERS = {
    1: 1.2,
    2: 1.375,
    3: 1.55,
    4: 1.725,
    5: 1.9,
}

CALORIE_ADJUSTMENT = {
    Goal.LOSE: -500,
    Goal.MAINTAIN: 0,
    Goal.GAIN: 500,
}

PROTEIN_G_PER_KG = {
    Goal.LOSE: 2.2,
    Goal.MAINTAIN: 1.8,
    Goal.GAIN: 2.0,
}

FAT_SHARE = {
    Goal.LOSE: 0.25,
    Goal.MAINTAIN: 0.30,
    Goal.GAIN: 0.20,
}


def age_on(birth_date: date, today: date) -> int:
    """Age in whole years on ``today``."""
    had_birthday = (today.month, today.day) >= (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (0 if had_birthday else 1)


def basal_metabolic_rate(gender: Gender, weight: float, height: float, age: int) -> float:
    base = 10 * weight + 6.25 * height - 5 * age
    return base + 5 if gender == Gender.MALE else base - 161


def calculate_goals(
    goal: Goal,
    gender: Gender,
    birth_date: date,
    height: float,
    weight: float,
    activity_level: int,
    today: Optional[date] = None,
) -> DailyGoals:
    """
    Compute a user's daily calorie and macro targets.

    Args:
        goal: lose / maintain / gain
        gender: Selects the BMR constant
        birth_date: Used to derive age
        height: Centimetres
        weight: Kilograms
        activity_level: 1 (sedentary) to 5 (very active)
        today: Reference date for the age, defaults to today

    Returns:
        DailyGoals rounded to whole kcal / grams

    Raises:
        ValueError: If activity_level is outside 1-5
    """
    if activity_level not in PAL_MULTIPLIERS:
        raise ValueError(f"Activity level must be 1-5, got {activity_level}")

    age = age_on(birth_date, today or date.today())
    bmr = basal_metabolic_rate(gender, weight, height, age)
    calories = round(bmr * PAL_MULTIPLIERS[activity_level] + CALORIE_ADJUSTMENT[goal])

    proteins = round(weight * PROTEIN_G_PER_KG[goal])
    fat_calories = calories * FAT_SHARE[goal]
    fats = round(fat_calories / 9)
    carbohydrates = max(0, round((calories - proteins * 4 - fat_calories) / 4))

    return DailyGoals(
        calories=calories,
        proteins=proteins,
        carbohydrates=carbohydrates,
        fats=fats,
    )

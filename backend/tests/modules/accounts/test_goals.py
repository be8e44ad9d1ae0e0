"""Tests for daily goal calculation."""

import pytest
from datetime import date

from modules.accounts.goals import age_on, basal_metabolic_rate, calculate_goals
from modules.accounts.models import Gender, Goal


class TestAgeOn:
    def test_before_birthday(self):
        assert age_on(date(1995, 6, 15), date(2025, 6, 14)) == 29

    def test_on_birthday(self):
        assert age_on(date(1995, 6, 15), date(2025, 6, 15)) == 30


class TestBasalMetabolicRate:
    def test_male(self):
        assert basal_metabolic_rate(Gender.MALE, 80, 180, 30) == 1780

    def test_female(self):
        assert basal_metabolic_rate(Gender.FEMALE, 60, 165, 25) == pytest.approx(1345.25)


class TestCalculateGoals:
    def test_maintain(self):
        goals = calculate_goals(
            goal=Goal.MAINTAIN,
            gender=Gender.MALE,
            birth_date=date(1995, 1, 1),
            height=180,
            weight=80,
            activity_level=3,
            today=date(2025, 1, 1),
        )
        # 1780 × 1.55
        assert goals.calories == 2759
        assert goals.proteins == 144
        assert goals.fats == 92
        assert goals.carbohydrates == 339

    def test_lose(self):
        goals = calculate_goals(
            goal=Goal.LOSE,
            gender=Gender.MALE,
            birth_date=date(1995, 1, 1),
            height=180,
            weight=80,
            activity_level=3,
            today=date(2025, 1, 1),
        )
        assert goals.calories == 2259
        assert goals.proteins == 176
        assert goals.fats == 63
        assert goals.carbohydrates == 248

    def test_gain(self):
        goals = calculate_goals(
            goal=Goal.GAIN,
            gender=Gender.FEMALE,
            birth_date=date(2000, 1, 1),
            height=165,
            weight=60,
            activity_level=1,
            today=date(2025, 1, 1),
        )
        assert goals.calories == 2114
        assert goals.proteins == 120
        assert goals.fats == 47
        assert goals.carbohydrates == 303

    def test_carbohydrates_never_negative(self):
        goals = calculate_goals(
            goal=Goal.LOSE,
            gender=Gender.FEMALE,
            birth_date=date(1945, 1, 1),
            height=100,
            weight=200,
            activity_level=1,
            today=date(2025, 1, 1),
        )
        assert goals.carbohydrates == 0

    @pytest.mark.parametrize("level", [0, 6])
    def test_activity_level_out_of_range(self, level):
        with pytest.raises(ValueError):
            calculate_goals(
                goal=Goal.MAINTAIN,
                gender=Gender.MALE,
                birth_date=date(1995, 1, 1),
                height=180,
                weight=80,
                activity_level=level,
            )

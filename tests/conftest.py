"""Shared fixtures.

Calendar anchor: 2025-01-05 is a Sunday, 2025-01-06 a Monday and
2025-01-11 a Saturday.
"""

import itertools
from datetime import datetime

import pytest

from dietary_insights.models import Meal, FoodItem, Nutrition, BloodWork

_ids = itertools.count(1)


def make_meal(when, flags=(), nutrition=None, foods=()):
    return Meal(
        id=f"meal-{next(_ids)}",
        logged_at=when,
        foods=tuple(FoodItem(name=name, portion="1 serving") for name in foods),
        flags=tuple(flags),
        nutrition=nutrition,
    )


@pytest.fixture
def meal_factory():
    return make_meal


@pytest.fixture
def nutrition_factory():
    def _make(calories=600.0, protein=20.0, carbs=80.0, fat=20.0, sodium=700.0):
        return Nutrition(calories=calories, protein=protein, carbs=carbs, fat=fat, sodium=sodium)
    return _make


@pytest.fixture
def week_of_meals():
    """Two weeks of mixed meals, Mon 2025-01-06 through Sun 2025-01-19."""
    meals = []
    for day in range(6, 20):
        meals.append(make_meal(datetime(2025, 1, day, 8, 0), flags=["caffeine"], foods=["Coffee"]))
        meals.append(make_meal(datetime(2025, 1, day, 12, 30), flags=["plastic_bottle"], foods=["Sandwich"]))
        dinner_flags = ["processed_meat"] if day % 2 == 0 else []
        meals.append(make_meal(datetime(2025, 1, day, 19, 0), flags=dinner_flags, foods=["Pasta"]))
    return meals


@pytest.fixture
def blood_work():
    return BloodWork(
        id="bw-1",
        test_date=datetime(2025, 1, 20),
        total_cholesterol=190,
        ldl=95,
        hdl=55,
        triglycerides=120,
        fasting_glucose=90,
    )

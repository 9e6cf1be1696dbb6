"""
Input entities for dietary analysis.

Meals and blood panels arrive as immutable snapshots from the capture and
persistence layers. Flags are kept exactly as the producer wrote them;
analyzers map them onto ``MealFlag`` and drop anything unrecognized.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from enum import Enum
from typing import Optional, Tuple, Iterator, Iterable, Union


class MealFlag(str, Enum):
    """Closed set of dietary risk flags, in declaration order."""
    PLASTIC_BOTTLE = "plastic_bottle"
    PLASTIC_CONTAINER_HOT = "plastic_container_hot"
    PROCESSED_MEAT = "processed_meat"
    ULTRA_PROCESSED = "ultra_processed"
    CHARRED_GRILLED = "charred_grilled"
    FRIED = "fried"
    HIGH_SUGAR_BEVERAGE = "high_sugar_beverage"
    CAFFEINE = "caffeine"
    ALCOHOL = "alcohol"
    HIGH_SODIUM = "high_sodium"
    REFINED_GRAIN = "refined_grain"
    SPICY_IRRITANT = "spicy_irritant"
    ACIDIC_TRIGGER = "acidic_trigger"
    LATE_MEAL = "late_meal"

    @property
    def label(self) -> str:
        return FLAG_LABELS[self]

    @classmethod
    def parse(cls, value: Union[str, 'MealFlag']) -> Optional['MealFlag']:
        """Return the matching flag, or None for unrecognized values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


FLAG_LABELS = {
    MealFlag.PLASTIC_BOTTLE: "Plastic Bottle",
    MealFlag.PLASTIC_CONTAINER_HOT: "Hot Plastic",
    MealFlag.PROCESSED_MEAT: "Processed Meat",
    MealFlag.ULTRA_PROCESSED: "Ultra-Processed",
    MealFlag.CHARRED_GRILLED: "Charred/Grilled",
    MealFlag.FRIED: "Fried Foods",
    MealFlag.HIGH_SUGAR_BEVERAGE: "Sugary Drinks",
    MealFlag.CAFFEINE: "Caffeine",
    MealFlag.ALCOHOL: "Alcohol",
    MealFlag.HIGH_SODIUM: "High Sodium",
    MealFlag.REFINED_GRAIN: "Refined Grains",
    MealFlag.SPICY_IRRITANT: "Spicy Foods",
    MealFlag.ACIDIC_TRIGGER: "Acidic Foods",
    MealFlag.LATE_MEAL: "Late Meal",
}

CONTAINER_TYPES = ("plastic_bottle", "glass", "can", "none")


@dataclass(frozen=True)
class FoodItem:
    name: str
    portion: str
    container: Optional[str] = None


@dataclass(frozen=True)
class Nutrition:
    """Estimated nutrition for one meal (grams, sodium in mg)."""
    calories: float
    protein: float
    carbs: float
    fat: float
    sodium: float


@dataclass(frozen=True)
class Meal:
    """A logged meal.

    ``logged_at`` is read as local wall-clock time; convert timezone-aware
    values to the user's zone before analysis.
    """
    id: str
    logged_at: datetime
    foods: Tuple[FoodItem, ...] = ()
    flags: Tuple[str, ...] = ()
    nutrition: Optional[Nutrition] = None
    image_url: Optional[str] = None

    @property
    def known_flags(self) -> Iterator[MealFlag]:
        """Recognized flags in stored order, duplicates kept."""
        for raw in self.flags:
            flag = MealFlag.parse(raw)
            if flag is not None:
                yield flag


@dataclass(frozen=True)
class BloodWork:
    """Lipid and glucose panel, all values in mg/dL."""
    id: str
    test_date: Union[date, datetime]
    total_cholesterol: Optional[int] = None
    ldl: Optional[int] = None
    hdl: Optional[int] = None
    triglycerides: Optional[int] = None
    fasting_glucose: Optional[int] = None
    notes: Optional[str] = field(default=None, compare=False)


def latest_blood_work(records: Iterable[BloodWork]) -> Optional[BloodWork]:
    """Return the most recent panel by test date (first wins on ties)."""
    latest = None
    for record in records:
        if latest is None or _as_datetime(record.test_date) > _as_datetime(latest.test_date):
            latest = record
    return latest


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime(value.year, value.month, value.day)

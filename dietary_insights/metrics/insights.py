"""
Insights dataclasses: top-level summary of a meal log.

Insights are derived on every call and never persisted.
"""

from dataclasses import dataclass
from typing import Dict, Any

from dietary_insights.utils.concern import ConcernLevel


@dataclass(frozen=True)
class PlasticSummary:
    """Plastic-bottle beverages. Concern is graded on the raw count."""
    count: int
    per_day: float
    concern_level: ConcernLevel


@dataclass(frozen=True)
class ProcessedMeatSummary:
    """Processed meat servings. Concern is graded on servings per week."""
    count: int
    per_week: float
    concern_level: ConcernLevel


@dataclass(frozen=True)
class MealTimingSummary:
    """Late eating (hour >= 21 or < 5) and average dinner time."""
    late_meal_percent: int
    avg_dinner_time: str
    concern_level: ConcernLevel
    late_meal_count: int = 0


@dataclass(frozen=True)
class Patterns:
    busiest_day: str
    weekend_vs_weekday: str


@dataclass(frozen=True)
class Insights:
    """Summary risk metrics for a meal log.

    ``days_tracked`` is the inclusive calendar-day span between the first
    and last meal, floored at 1 (also 1 for the empty record).
    """
    total_meals: int
    date_range: str
    days_tracked: int
    plastic: PlasticSummary
    processed_meat: ProcessedMeatSummary
    meal_timing: MealTimingSummary
    patterns: Patterns

    @classmethod
    def empty(cls) -> 'Insights':
        """Canonical value for an empty meal log."""
        return cls(
            total_meals=0,
            date_range='No data',
            days_tracked=1,
            plastic=PlasticSummary(count=0, per_day=0.0, concern_level=ConcernLevel.LOW),
            processed_meat=ProcessedMeatSummary(count=0, per_week=0.0, concern_level=ConcernLevel.LOW),
            meal_timing=MealTimingSummary(
                late_meal_percent=0,
                avg_dinner_time='N/A',
                concern_level=ConcernLevel.LOW,
            ),
            patterns=Patterns(busiest_day='N/A', weekend_vs_weekday='No data'),
        )

    @property
    def concern_levels(self) -> Dict[str, ConcernLevel]:
        return {
            'plastic': self.plastic.concern_level,
            'processed_meat': self.processed_meat.concern_level,
            'meal_timing': self.meal_timing.concern_level,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'total_meals': self.total_meals,
            'date_range': self.date_range,
            'days_tracked': self.days_tracked,
            'plastic': {
                'count': self.plastic.count,
                'per_day': round(self.plastic.per_day, 2),
                'concern_level': self.plastic.concern_level.value,
            },
            'processed_meat': {
                'count': self.processed_meat.count,
                'per_week': round(self.processed_meat.per_week, 2),
                'concern_level': self.processed_meat.concern_level.value,
            },
            'meal_timing': {
                'late_meal_percent': self.meal_timing.late_meal_percent,
                'late_meal_count': self.meal_timing.late_meal_count,
                'avg_dinner_time': self.meal_timing.avg_dinner_time,
                'concern_level': self.meal_timing.concern_level.value,
            },
            'patterns': {
                'busiest_day': self.patterns.busiest_day,
                'weekend_vs_weekday': self.patterns.weekend_vs_weekday,
            },
        }

"""
Insights Engine - Top-level summary metrics for a meal log.

Computes plastic exposure, processed meat frequency and meal timing, each
graded into a three-tier concern level, plus weekday patterns.

Evidence Tier: Optimization
Thresholds follow public guidance (WHO/IARC on processed meat, chrononutrition
literature on late eating) but the cutoffs themselves are product choices.
"""

import logging
from typing import Optional, Sequence, List

import numpy as np

from dietary_insights.config import AnalysisConfig
from dietary_insights.metrics.insights import (
    Insights,
    PlasticSummary,
    ProcessedMeatSummary,
    MealTimingSummary,
    Patterns,
)
from dietary_insights.models import Meal, MealFlag
from dietary_insights.utils.concern import ConcernLevel, classify_concern, percent_of
from dietary_insights.utils.frames import meals_to_frame, flagged
from dietary_insights.utils.timefmt import DAY_NAMES, format_clock, format_date_range

logger = logging.getLogger(__name__)


class InsightsEngine:
    """Single entry point for summary metrics.

    Stateless apart from its configuration: ``compute`` is a pure function
    of the meal snapshot and never mutates it.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize engine.

        Args:
            config: Optional configuration. Uses defaults if None.
        """
        self.config = config or AnalysisConfig()

    def compute(self, meals: Sequence[Meal]) -> Insights:
        """Compute Insights for a meal snapshot.

        Args:
            meals: Meals in any order.

        Returns:
            Insights; the canonical empty record when ``meals`` is empty.
        """
        if len(meals) == 0:
            return Insights.empty()

        ordered = sorted(meals, key=lambda m: m.logged_at)
        first = ordered[0].logged_at
        last = ordered[-1].logged_at
        day_span = self.day_span(ordered)

        df = meals_to_frame(ordered)
        total_meals = len(df)
        thresholds = self.config.concern
        timing = self.config.timing

        # Plastic exposure
        plastic_count = int(flagged(df, MealFlag.PLASTIC_BOTTLE).sum())
        plastic = PlasticSummary(
            count=plastic_count,
            per_day=plastic_count / day_span,
            concern_level=classify_concern(plastic_count, thresholds.plastic),
        )

        # Processed meat
        processed_count = int(flagged(df, MealFlag.PROCESSED_MEAT).sum())
        per_week = processed_count * 7 / day_span
        processed_meat = ProcessedMeatSummary(
            count=processed_count,
            per_week=per_week,
            concern_level=classify_concern(per_week, thresholds.processed_meat),
        )

        # Late meals
        late = (df['hour'] >= timing.late_start_hour) | (df['hour'] < timing.late_end_hour)
        late_count = int(late.sum())
        late_percent = percent_of(late_count, total_meals)
        meal_timing = MealTimingSummary(
            late_meal_percent=late_percent,
            avg_dinner_time=self._average_dinner_time(df),
            concern_level=classify_concern(late_percent, thresholds.late_meal_percent),
            late_meal_count=late_count,
        )

        day_counts = np.bincount(df['weekday'].to_numpy(), minlength=7)
        patterns = Patterns(
            # argmax returns the first index achieving the maximum
            busiest_day=DAY_NAMES[int(np.argmax(day_counts))],
            weekend_vs_weekday=self._weekend_note(df),
        )

        return Insights(
            total_meals=total_meals,
            date_range=format_date_range(first, last),
            days_tracked=day_span,
            plastic=plastic,
            processed_meat=processed_meat,
            meal_timing=meal_timing,
            patterns=patterns,
        )

    @staticmethod
    def day_span(meals: Sequence[Meal]) -> int:
        """Inclusive calendar days between earliest and latest meal, at least 1."""
        if len(meals) == 0:
            return 1
        first = min(m.logged_at for m in meals).date()
        last = max(m.logged_at for m in meals).date()
        return max(1, (last - first).days + 1)

    def _average_dinner_time(self, df) -> str:
        dinner = df[df['hour'] >= self.config.timing.dinner_start_hour]
        if dinner.empty:
            return 'N/A'
        minutes = (dinner['hour'] * 60 + dinner['minute']).mean()
        return format_clock(float(minutes))

    def _weekend_note(self, df) -> str:
        weekend = df[df['is_weekend']]
        weekend_late = int((weekend['hour'] >= self.config.timing.late_start_hour).sum())
        weekend_late_percent = percent_of(weekend_late, len(weekend)) if len(weekend) > 0 else 0
        if weekend_late_percent > self.config.timing.weekend_late_percent:
            return 'Late meals cluster on weekends'
        return 'Consistent timing across week'


def insight_messages(insights: Insights) -> List[str]:
    """Plain-language nudges for every signal above the low tier."""
    messages = []

    if insights.plastic.concern_level is not ConcernLevel.LOW:
        messages.append(
            f"You consumed {insights.plastic.count} plastic bottle beverages "
            f"({insights.plastic.per_day:.1f}/day). Consider switching to reusable "
            f"bottles to reduce microplastic exposure."
        )

    if insights.processed_meat.concern_level is not ConcernLevel.LOW:
        messages.append(
            f"Processed meat consumption: {insights.processed_meat.per_week:.1f} servings/week. "
            f"WHO recommends <3/week (Group 1 carcinogen classification)."
        )

    if insights.meal_timing.concern_level is not ConcernLevel.LOW:
        messages.append(
            f"{insights.meal_timing.late_meal_percent}% of meals consumed after 9pm. "
            f"Late eating is associated with disrupted sleep and metabolic issues."
        )

    return messages

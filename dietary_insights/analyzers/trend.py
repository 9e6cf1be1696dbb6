"""
Trend Analyzer - Daily flag counts for the trend chart.
"""

import logging
from typing import Optional, Sequence, List, Dict

import pandas as pd

from dietary_insights.config import AnalysisConfig
from dietary_insights.metrics.series import TrendPoint
from dietary_insights.models import Meal, MealFlag
from dietary_insights.utils.frames import meals_to_frame, flagged
from dietary_insights.utils.timefmt import short_date

logger = logging.getLogger(__name__)

# Every flag maps to a tracked category or None; keep this exhaustive
TREND_CATEGORIES: Dict[MealFlag, Optional[str]] = {
    MealFlag.PLASTIC_BOTTLE: 'plastic',
    MealFlag.PLASTIC_CONTAINER_HOT: 'plastic',
    MealFlag.PROCESSED_MEAT: 'processed',
    MealFlag.ULTRA_PROCESSED: 'processed',
    MealFlag.CHARRED_GRILLED: None,
    MealFlag.FRIED: None,
    MealFlag.HIGH_SUGAR_BEVERAGE: None,
    MealFlag.CAFFEINE: 'timing',
    MealFlag.ALCOHOL: None,
    MealFlag.HIGH_SODIUM: None,
    MealFlag.REFINED_GRAIN: None,
    MealFlag.SPICY_IRRITANT: None,
    MealFlag.ACIDIC_TRIGGER: None,
    MealFlag.LATE_MEAL: 'timing',
}

CATEGORIES = ('processed', 'timing', 'plastic')


def category_flags(category: str) -> List[MealFlag]:
    return [flag for flag, cat in TREND_CATEGORIES.items() if cat == category]


class TrendAnalyzer:
    """Buckets meals by local calendar day.

    Each point counts the meals of that day carrying at least one flag of a
    category; a meal can count toward several categories.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def weekly_trend(self, meals: Sequence[Meal]) -> List[TrendPoint]:
        """Daily category counts, ascending by date.

        Returns:
            One point per distinct day (latest ``window_days`` only), or an
            empty list when fewer than ``min_distinct_days`` days are logged.
        """
        settings = self.config.trend
        df = meals_to_frame(meals)

        distinct_days = df['date'].nunique() if not df.empty else 0
        if distinct_days < settings.min_distinct_days:
            logger.debug(
                "Trend needs %d distinct days, got %d",
                settings.min_distinct_days, distinct_days,
            )
            return []

        counts = pd.DataFrame({'date': df['date']})
        for category in CATEGORIES:
            counts[category] = flagged(df, *category_flags(category)).astype(int)

        daily = counts.groupby('date', sort=True).sum()
        if settings.window_days > 0:
            daily = daily.tail(settings.window_days)

        return [
            TrendPoint(
                date=day,
                label=short_date(day),
                processed=int(row['processed']),
                timing=int(row['timing']),
                plastic=int(row['plastic']),
            )
            for day, row in daily.iterrows()
        ]

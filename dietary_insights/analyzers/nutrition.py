"""
Nutrition Balance Analyzer - Macro averages scored against daily targets.

Evidence Tier: Optimization
Daily targets are FDA Daily Values (protein 50 g, carbs 275 g, fat 65 g,
sodium 2300 mg), split evenly across three meals.
"""

import logging
from typing import Optional, Sequence, List, Dict

from dietary_insights.config import AnalysisConfig
from dietary_insights.metrics.series import BalancePoint
from dietary_insights.models import Meal
from dietary_insights.utils.frames import meals_to_frame, NUTRITION_COLUMNS

logger = logging.getLogger(__name__)


class NutritionBalanceAnalyzer:
    """Radar-chart points for average macro intake per meal.

    Scale: exactly 100% of the per-meal target lands on the reference value
    (80); the score is capped at the full mark (100) so overages stay on
    the chart.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def _axes(self):
        t = self.config.nutrition
        return (
            ('Protein', 'protein', t.protein_g),
            ('Carbs', 'carbs', t.carbs_g),
            ('Fat', 'fat', t.fat_g),
            ('Sodium', 'sodium', t.sodium_mg),
        )

    def average_intake(self, meals: Sequence[Meal]) -> Optional[Dict[str, float]]:
        """Mean nutrition per meal over meals that carry nutrition."""
        df = meals_to_frame(meals)
        if df.empty:
            return None
        with_nutrition = df[df['has_nutrition']]
        if with_nutrition.empty:
            return None
        means = with_nutrition[NUTRITION_COLUMNS].mean()
        return {column: float(means[column]) for column in NUTRITION_COLUMNS}

    def nutrition_balance(self, meals: Sequence[Meal]) -> Optional[List[BalancePoint]]:
        """Balance points, or None when too few meals carry nutrition.

        None means "not enough data", as opposed to a zero-valued chart.
        """
        t = self.config.nutrition
        sample_size = sum(1 for meal in meals if meal.nutrition is not None)
        if sample_size < t.min_meals:
            logger.debug("Nutrition balance needs %d meals, got %d", t.min_meals, sample_size)
            return None

        averages = self.average_intake(meals)
        points = []
        for metric, column, daily_target in self._axes():
            per_meal_target = daily_target / t.meals_per_day
            score = averages[column] / per_meal_target * t.reference_value
            points.append(BalancePoint(
                metric=metric,
                value=min(t.full_mark, score),
                target=t.reference_value,
                full_mark=t.full_mark,
            ))
        return points

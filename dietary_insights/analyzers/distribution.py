"""
Distribution Analyzer - How often each flag appears across the meal set.
"""

from typing import Sequence, List

from dietary_insights.metrics.series import FlagDistributionRow
from dietary_insights.models import Meal, MealFlag
from dietary_insights.utils.frames import meals_to_frame


class DistributionAnalyzer:
    """Flag frequencies for the donut chart and the top-concerns summary.

    Every recognized occurrence counts; the producers do not deduplicate
    flags, so a flag repeated on a meal is counted each time.
    """

    def flag_distribution(self, meals: Sequence[Meal]) -> List[FlagDistributionRow]:
        """Flag counts sorted by count descending.

        Flags with no occurrences are omitted; equal counts keep
        ``MealFlag`` declaration order.
        """
        df = meals_to_frame(meals)
        if df.empty:
            return []

        totals = df[[flag.value for flag in MealFlag]].sum()
        total_meals = len(df)

        rows = [
            FlagDistributionRow(
                flag=flag.value,
                label=flag.label,
                count=int(totals[flag.value]),
                percent_of_meals=round(int(totals[flag.value]) / max(1, total_meals) * 100, 1),
            )
            for flag in MealFlag
            if totals[flag.value] > 0
        ]
        # sorted() is stable, so ties stay in enum order
        return sorted(rows, key=lambda row: row.count, reverse=True)

    def top_concerns(self, meals: Sequence[Meal], n: int = 3) -> List[FlagDistributionRow]:
        return self.flag_distribution(meals)[:n]

    @staticmethod
    def with_other(rows: List[FlagDistributionRow], limit: int = 6) -> List[FlagDistributionRow]:
        """Keep the first ``limit`` rows and fold the rest into one ``other`` row."""
        if len(rows) <= limit:
            return list(rows)
        rest = rows[limit:]
        other = FlagDistributionRow(
            flag='other',
            label='Other',
            count=sum(row.count for row in rest),
            percent_of_meals=round(sum(row.percent_of_meals for row in rest), 1),
        )
        return list(rows[:limit]) + [other]

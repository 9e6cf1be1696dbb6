"""
Report Generator - Structured and text inputs for the narrative report.

The narrative itself is written by an external composer; this module
assembles the deterministic data block it consumes.
"""

from collections import Counter
from datetime import datetime, timedelta
from typing import Optional, Dict, Any, List, Sequence

from dietary_insights.config import AnalysisConfig
from dietary_insights.analyzers.correlation import classify_blood_work
from dietary_insights.analyzers.distribution import DistributionAnalyzer
from dietary_insights.analyzers.insights import insight_messages
from dietary_insights.metrics.insights import Insights
from dietary_insights.metrics.lab_status import LabStatus
from dietary_insights.models import Meal, BloodWork

# Report period choices offered to the user, in days
REPORT_PERIODS = {
    '1month': 30,
    '3month': 90,
    '6month': 180,
    '1year': 365,
}


def filter_period(meals: Sequence[Meal], days: int, now: datetime) -> List[Meal]:
    """Meals logged within ``days`` before ``now`` (inclusive cutoff)."""
    cutoff = now - timedelta(days=days)
    return [meal for meal in meals if meal.logged_at >= cutoff]


def most_frequent_foods(meals: Sequence[Meal], n: int = 10) -> List[Dict[str, Any]]:
    """Food names (lower-cased) by how many times they were logged.

    Equal counts keep first-seen order.
    """
    counts = Counter(
        food.name.lower()
        for meal in meals
        for food in meal.foods
    )
    return [{'name': name, 'count': count} for name, count in counts.most_common(n)]


class ReportGenerator:
    """Generate report inputs from Insights, correlations and the meal log."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize report generator.

        Args:
            config: Optional configuration.
        """
        self.config = config or AnalysisConfig()

    def _lab_marker(self, name: str, value: Optional[int], status: Optional[LabStatus]) -> str:
        if value is None:
            return f"- {name}: not measured"
        note = ''
        if status in (LabStatus.BORDERLINE, LabStatus.HIGH, LabStatus.VERY_HIGH):
            note = ' (ELEVATED)'
        elif status is LabStatus.LOW:
            note = ' (LOW)'
        return f"- {name}: {value} mg/dL{note}"

    def generate_text_report(
        self,
        insights: Insights,
        meals: Sequence[Meal] = (),
        correlations: Optional[List[str]] = None,
        blood_work: Optional[BloodWork] = None,
    ) -> str:
        """Generate the plain-text data block for the report composer.

        Args:
            insights: Insights for the reporting period.
            meals: Meals of the period, used for top foods and concerns.
            correlations: Output of CorrelationEngine.correlate.
            blood_work: Panel the correlations were computed against.

        Returns:
            Formatted text.
        """
        lines = []
        lines.append("PATIENT DIETARY DATA:")
        lines.append(f"- Reporting period: {insights.date_range}")
        lines.append(f"- Total meals logged: {insights.total_meals}")
        lines.append(
            f"- Plastic bottle beverages: {insights.plastic.count} "
            f"({insights.plastic.per_day:.1f}/day average)"
        )
        lines.append(
            f"- Processed meat servings: {insights.processed_meat.count} "
            f"({insights.processed_meat.per_week:.1f}/week)"
        )
        lines.append(f"- Meals after 9pm: {insights.meal_timing.late_meal_percent}%")
        lines.append(f"- Average dinner time: {insights.meal_timing.avg_dinner_time}")
        lines.append(f"- Busiest day: {insights.patterns.busiest_day}")
        lines.append(f"- Pattern: {insights.patterns.weekend_vs_weekday}")
        lines.append("")

        top = DistributionAnalyzer().top_concerns(meals)
        if top:
            lines.append("TOP CONCERNS:")
            for row in top:
                lines.append(f"- {row.label}: {row.count} ({row.percent_of_meals:.0f}% of meals)")
            lines.append("")

        if blood_work is not None:
            status = classify_blood_work(blood_work, self.config.blood_work)
            lines.append(f"BLOOD WORK ({blood_work.test_date:%Y-%m-%d}):")
            lines.append(self._lab_marker('Total Cholesterol', blood_work.total_cholesterol, status.total_cholesterol))
            lines.append(self._lab_marker('LDL Cholesterol', blood_work.ldl, status.ldl))
            lines.append(self._lab_marker('HDL Cholesterol', blood_work.hdl, status.hdl))
            lines.append(self._lab_marker('Triglycerides', blood_work.triglycerides, status.triglycerides))
            lines.append(self._lab_marker('Fasting Glucose', blood_work.fasting_glucose, status.fasting_glucose))
        else:
            lines.append("No blood work provided.")
        lines.append("")

        if correlations:
            lines.append("POTENTIAL DIETARY CORRELATIONS:")
            for correlation in correlations:
                lines.append(f"- {correlation}")
            lines.append("")

        foods = most_frequent_foods(meals)
        if foods:
            lines.append("TOP 10 MOST FREQUENT FOODS:")
            for i, food in enumerate(foods, start=1):
                lines.append(f"{i}. {food['name']} ({food['count']}x)")

        return "\n".join(lines).rstrip("\n")

    def generate_summary_dict(
        self,
        insights: Insights,
        meals: Sequence[Meal] = (),
        correlations: Optional[List[str]] = None,
        blood_work: Optional[BloodWork] = None,
    ) -> Dict[str, Any]:
        """Generate structured summary dictionary.

        Returns:
            Dictionary with insights, messages, lab status and top foods.
        """
        summary = {
            'generated_at': datetime.now().isoformat(),
            'insights': insights.to_dict(),
            'messages': insight_messages(insights),
            'top_concerns': [row.to_dict() for row in DistributionAnalyzer().top_concerns(meals)],
            'blood_work': None,
            'correlations': list(correlations or []),
            'top_foods': most_frequent_foods(meals),
        }

        if blood_work is not None:
            summary['blood_work'] = {
                'test_date': blood_work.test_date.isoformat(),
                'status': classify_blood_work(blood_work, self.config.blood_work).to_dict(),
            }

        return summary

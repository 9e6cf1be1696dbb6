"""Meal log analyzers."""

from dietary_insights.analyzers.insights import InsightsEngine, insight_messages
from dietary_insights.analyzers.trend import TrendAnalyzer
from dietary_insights.analyzers.distribution import DistributionAnalyzer
from dietary_insights.analyzers.timing import TimingAnalyzer
from dietary_insights.analyzers.nutrition import NutritionBalanceAnalyzer
from dietary_insights.analyzers.correlation import CorrelationEngine, classify_blood_work

__all__ = [
    "InsightsEngine",
    "insight_messages",
    "TrendAnalyzer",
    "DistributionAnalyzer",
    "TimingAnalyzer",
    "NutritionBalanceAnalyzer",
    "CorrelationEngine",
    "classify_blood_work",
]

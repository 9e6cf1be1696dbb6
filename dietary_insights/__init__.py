"""
Dietary Insights - Analytics engine for tagged meal logs.

This package provides modular components for:
- Loading meal logs and blood panels exported by the sync layer
- Summarizing risk flags into graded concern levels
- Building chart-ready trend, distribution, timing and nutrition series
- Correlating lab results with dietary patterns for the doctor report
"""

from dietary_insights.config import AnalysisConfig, load_config
from dietary_insights.models import Meal, MealFlag, FoodItem, Nutrition, BloodWork, latest_blood_work
from dietary_insights.analyzers import (
    InsightsEngine,
    TrendAnalyzer,
    DistributionAnalyzer,
    TimingAnalyzer,
    NutritionBalanceAnalyzer,
    CorrelationEngine,
)

__version__ = "1.0.0"
__all__ = [
    "AnalysisConfig",
    "load_config",
    "Meal",
    "MealFlag",
    "FoodItem",
    "Nutrition",
    "BloodWork",
    "latest_blood_work",
    "InsightsEngine",
    "TrendAnalyzer",
    "DistributionAnalyzer",
    "TimingAnalyzer",
    "NutritionBalanceAnalyzer",
    "CorrelationEngine",
]

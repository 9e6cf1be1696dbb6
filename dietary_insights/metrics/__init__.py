"""Result dataclasses for analysis output."""

from dietary_insights.metrics.insights import (
    Insights,
    PlasticSummary,
    ProcessedMeatSummary,
    MealTimingSummary,
    Patterns,
)
from dietary_insights.metrics.series import TrendPoint, FlagDistributionRow, SlotRow, BalancePoint
from dietary_insights.metrics.lab_status import LabStatus, BloodWorkStatus

__all__ = [
    "Insights",
    "PlasticSummary",
    "ProcessedMeatSummary",
    "MealTimingSummary",
    "Patterns",
    "TrendPoint",
    "FlagDistributionRow",
    "SlotRow",
    "BalancePoint",
    "LabStatus",
    "BloodWorkStatus",
]

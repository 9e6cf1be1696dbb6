"""Report input generation."""

from dietary_insights.reports.generator import (
    ReportGenerator,
    REPORT_PERIODS,
    filter_period,
    most_frequent_foods,
)

__all__ = ["ReportGenerator", "REPORT_PERIODS", "filter_period", "most_frequent_foods"]

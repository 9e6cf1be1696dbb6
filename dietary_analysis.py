"""
Dietary Analysis Runner

Loads a meal log export (and optionally blood panels) and produces the
full insights bundle:
- Summary concern levels (plastic, processed meat, meal timing)
- Daily flag trend, flag distribution, weekday/weekend timing
- Nutrition balance scores
- Lab/diet correlation statements
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Dict, Any, Sequence

from dietary_insights.analyzers import (
    InsightsEngine,
    TrendAnalyzer,
    DistributionAnalyzer,
    TimingAnalyzer,
    NutritionBalanceAnalyzer,
    CorrelationEngine,
    insight_messages,
)
from dietary_insights.config import AnalysisConfig, load_config
from dietary_insights.loaders import MealLogLoader, BloodPanelLoader
from dietary_insights.metrics import Insights, TrendPoint, FlagDistributionRow, SlotRow, BalancePoint
from dietary_insights.models import Meal, BloodWork, latest_blood_work
from dietary_insights.reports import ReportGenerator

logger = logging.getLogger(__name__)


# =============================================================================
# Analysis Bundle
# =============================================================================

@dataclass
class DietaryAnalysis:
    """Everything the insights screens and the report need."""
    insights: Insights
    trend: List[TrendPoint] = field(default_factory=list)
    distribution: List[FlagDistributionRow] = field(default_factory=list)
    timing: List[SlotRow] = field(default_factory=list)
    nutrition: Optional[List[BalancePoint]] = None
    correlations: List[str] = field(default_factory=list)
    blood_work: Optional[BloodWork] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'insights': self.insights.to_dict(),
            'messages': insight_messages(self.insights),
            'trend': [p.to_dict() for p in self.trend],
            'distribution': [r.to_dict() for r in self.distribution],
            'timing': [r.to_dict() for r in self.timing],
            'nutrition': [p.to_dict() for p in self.nutrition] if self.nutrition is not None else None,
            'correlations': self.correlations,
        }


def analyze(
    meals: Sequence[Meal],
    blood_work: Sequence[BloodWork] = (),
    config: Optional[AnalysisConfig] = None,
) -> DietaryAnalysis:
    """Run every analyzer over one meal snapshot."""
    config = config or AnalysisConfig()
    insights = InsightsEngine(config).compute(meals)
    panel = latest_blood_work(blood_work)

    return DietaryAnalysis(
        insights=insights,
        trend=TrendAnalyzer(config).weekly_trend(meals),
        distribution=DistributionAnalyzer().flag_distribution(meals),
        timing=TimingAnalyzer(config).timing_comparison(meals),
        nutrition=NutritionBalanceAnalyzer(config).nutrition_balance(meals),
        correlations=CorrelationEngine(config).correlate(insights, panel),
        blood_work=panel,
    )


def run_analysis(
    meals_path: str,
    blood_work_path: Optional[str] = None,
    config_path: Optional[str] = None,
    tz: Optional[str] = None,
) -> tuple:
    """Load exports from disk and analyze them.

    Returns:
        Tuple of (DietaryAnalysis, meals).
    """
    config = load_config(Path(config_path)) if config_path else AnalysisConfig()
    meals = MealLogLoader(meals_path, tz=tz).load()
    panels = BloodPanelLoader(blood_work_path).load() if blood_work_path else []
    return analyze(meals, panels, config), meals


def generate_report(analysis: DietaryAnalysis, meals: Sequence[Meal] = ()) -> str:
    """Text report: report data block followed by the chart series."""
    lines = []
    lines.append("=" * 70)
    lines.append("DIETARY INSIGHTS REPORT")
    lines.append("=" * 70)
    lines.append("")
    lines.append(ReportGenerator().generate_text_report(
        analysis.insights,
        meals=meals,
        correlations=analysis.correlations,
        blood_work=analysis.blood_work,
    ))
    lines.append("")

    messages = insight_messages(analysis.insights)
    if messages:
        lines.append("SUGGESTIONS")
        lines.append("-" * 40)
        for message in messages:
            lines.append(f"  {message}")
        lines.append("")

    lines.append("MEAL TIMING (weekday / weekend)")
    lines.append("-" * 40)
    for row in analysis.timing:
        marker = '  <- danger zone' if row.is_danger_zone else ''
        lines.append(f"  {row.label:<20} {row.weekday:>4} / {row.weekend:<4}{marker}")
    lines.append("")

    lines.append("DAILY FLAG TREND")
    lines.append("-" * 40)
    if analysis.trend:
        for point in analysis.trend:
            lines.append(
                f"  {point.label:<8} processed {point.processed}  timing {point.timing}  plastic {point.plastic}"
            )
    else:
        lines.append("  Not enough days logged yet")
    lines.append("")

    lines.append("NUTRITION BALANCE (target = 80)")
    lines.append("-" * 40)
    if analysis.nutrition is not None:
        for point in analysis.nutrition:
            lines.append(f"  {point.metric:<8} {point.value:5.1f}")
    else:
        lines.append("  Need more meals with nutrition data")
    lines.append("")

    lines.append("=" * 70)
    return "\n".join(lines)


# =============================================================================
# CLI Entry Point
# =============================================================================

def main():
    """Command-line interface for dietary analysis."""
    import argparse
    import json

    parser = argparse.ArgumentParser(
        description='Analyze a tagged meal log and optional blood work'
    )
    parser.add_argument(
        'meals',
        type=str,
        help='Path to meal log JSON export'
    )
    parser.add_argument(
        '--blood-work', '-b',
        type=str,
        help='Path to blood work JSON export'
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Path to YAML config'
    )
    parser.add_argument(
        '--tz',
        type=str,
        help='Zone that timezone-aware timestamps are converted to (e.g. America/New_York)'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--save', '-s',
        type=str,
        help='Save output to file'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    analysis, meals = run_analysis(
        meals_path=args.meals,
        blood_work_path=args.blood_work,
        config_path=args.config,
        tz=args.tz,
    )

    if args.output == 'json':
        output_str = json.dumps(analysis.to_dict(), indent=2)
    else:
        output_str = generate_report(analysis, meals)

    if args.save:
        with open(args.save, 'w') as f:
            f.write(output_str)
        print(f"Output saved to {args.save}")
    else:
        print(output_str)


if __name__ == '__main__':
    main()

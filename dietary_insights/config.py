"""
Configuration management for Dietary Insights.

This module provides dataclasses for all configurable thresholds and settings,
with support for loading from YAML files and runtime modification.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Tuple
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConcernBounds:
    """Pair of exclusive lower bounds for the three-tier concern level.

    A value strictly greater than ``elevated`` is elevated, strictly greater
    than ``moderate`` is moderate, anything else is low.
    """
    elevated: float
    moderate: float


@dataclass
class ConcernThresholds:
    """Concern-level bounds per tracked signal.

    - plastic: raw count of plastic-bottle meals in the period
    - processed_meat: servings per week
    - late_meal_percent: share of meals eaten at night (0-100)
    """
    plastic: ConcernBounds = field(default_factory=lambda: ConcernBounds(10, 5))
    processed_meat: ConcernBounds = field(default_factory=lambda: ConcernBounds(4, 2))
    late_meal_percent: ConcernBounds = field(default_factory=lambda: ConcernBounds(30, 15))


@dataclass
class TimingSettings:
    """Hour boundaries (local wall clock, 0-23)."""
    # A meal is "late" when hour >= late_start or hour < late_end
    late_start_hour: int = 21
    late_end_hour: int = 5
    dinner_start_hour: int = 17

    # Weekend late-meal share above which the weekend note is raised
    weekend_late_percent: float = 30.0

    # Time-of-day slots: (key, label, start, end); end < start wraps midnight
    slots: Tuple[Tuple[str, str, int, int], ...] = (
        ("morning", "Morning (6-11am)", 6, 11),
        ("midday", "Midday (11am-2pm)", 11, 14),
        ("afternoon", "Afternoon (2-6pm)", 14, 18),
        ("evening", "Evening (6-9pm)", 18, 21),
        ("night", "Night (9pm-6am)", 21, 6),
    )
    danger_slot: str = "night"


@dataclass
class TrendSettings:
    """Settings for the daily flag trend series."""
    min_distinct_days: int = 3
    window_days: int = 28


@dataclass
class NutritionTargets:
    """Daily macro targets used by the balance radar.

    Targets are split evenly across ``meals_per_day``. Hitting 100% of the
    per-meal target draws at ``reference_value`` on a 0-``full_mark`` axis.
    """
    protein_g: float = 50.0
    carbs_g: float = 275.0
    fat_g: float = 65.0
    sodium_mg: float = 2300.0
    meals_per_day: int = 3
    min_meals: int = 3
    reference_value: float = 80.0
    full_mark: float = 100.0


@dataclass
class BloodWorkCutoffs:
    """Lab cutoffs in mg/dL (NCEP ATP III lipids, ADA fasting glucose).

    Each value is the exclusive upper bound of the named tier.
    """
    total_cholesterol_normal: int = 200
    total_cholesterol_borderline: int = 240

    ldl_optimal: int = 100
    ldl_near_optimal: int = 130
    ldl_borderline: int = 160
    ldl_high: int = 190

    # HDL is inverse: below hdl_low is adverse, above hdl_high is protective
    hdl_low: int = 40
    hdl_high: int = 60

    triglycerides_normal: int = 150
    triglycerides_borderline: int = 200
    triglycerides_high: int = 500

    glucose_normal: int = 100
    glucose_borderline: int = 126

    # Late-meal share above which glucose is paired with timing
    glucose_late_meal_percent: float = 20.0


@dataclass
class AnalysisConfig:
    """Master configuration container."""
    concern: ConcernThresholds = field(default_factory=ConcernThresholds)
    timing: TimingSettings = field(default_factory=TimingSettings)
    trend: TrendSettings = field(default_factory=TrendSettings)
    nutrition: NutritionTargets = field(default_factory=NutritionTargets)
    blood_work: BloodWorkCutoffs = field(default_factory=BloodWorkCutoffs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        data = asdict(self)
        data['timing']['slots'] = [list(slot) for slot in self.timing.slots]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisConfig':
        """Create config from dictionary, ignoring unknown keys."""
        config = cls()
        _apply_section(config, 'concern', data.get('concern') or {})
        _apply_section(config, 'timing', data.get('timing') or {})
        _apply_section(config, 'trend', data.get('trend') or {})
        _apply_section(config, 'nutrition', data.get('nutrition') or {})
        _apply_section(config, 'blood_work', data.get('blood_work') or {})
        return config


def _apply_section(config: AnalysisConfig, name: str, values: Dict[str, Any]) -> None:
    section = getattr(config, name)
    for key, value in values.items():
        if not hasattr(section, key):
            logger.warning("Ignoring unknown config key %s.%s", name, key)
            continue
        if name == 'concern':
            if not isinstance(value, dict):
                logger.warning(
                    "Ignoring config key concern.%s: expected a mapping with "
                    "'elevated'/'moderate', got %r", key, value,
                )
                continue
            value = ConcernBounds(**{**asdict(getattr(section, key)), **value})
        elif name == 'timing' and key == 'slots':
            value = tuple(tuple(slot) for slot in value)
        setattr(section, key, value)


def load_config(config_path: Optional[Path] = None) -> AnalysisConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, looks for config.yaml
                    in the dietary_insights package directory.

    Returns:
        AnalysisConfig with values from file merged with defaults.
    """
    if config_path is None:
        config_path = Path(__file__).parent / "config.yaml"

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return AnalysisConfig()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    logger.debug("Loaded config from %s", config_path)
    return AnalysisConfig.from_dict(data)


def save_config(config: AnalysisConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

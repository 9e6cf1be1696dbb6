"""
Chart-ready series rows produced by the visualization analyzers.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Any


@dataclass(frozen=True)
class TrendPoint:
    """Meals per tracked category on one calendar day."""
    date: date
    label: str
    processed: int
    timing: int
    plastic: int

    @property
    def total(self) -> int:
        return self.processed + self.timing + self.plastic

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date.isoformat(),
            'label': self.label,
            'processed': self.processed,
            'timing': self.timing,
            'plastic': self.plastic,
            'total': self.total,
        }


@dataclass(frozen=True)
class FlagDistributionRow:
    """Occurrences of one flag across the meal set.

    ``percent_of_meals`` can exceed 100 when producers repeat a flag.
    """
    flag: str
    label: str
    count: int
    percent_of_meals: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'flag': self.flag,
            'label': self.label,
            'count': self.count,
            'percent_of_meals': self.percent_of_meals,
        }


@dataclass(frozen=True)
class SlotRow:
    slot: str
    label: str
    weekday: int
    weekend: int
    is_danger_zone: bool

    @property
    def total(self) -> int:
        return self.weekday + self.weekend

    def to_dict(self) -> Dict[str, Any]:
        return {
            'slot': self.slot,
            'label': self.label,
            'weekday': self.weekday,
            'weekend': self.weekend,
            'is_danger_zone': self.is_danger_zone,
        }


@dataclass(frozen=True)
class BalancePoint:
    """One radar axis. ``value`` is capped at ``full_mark``; ``target`` is
    where exactly 100% of the per-meal target lands."""
    metric: str
    value: float
    target: float = 80.0
    full_mark: float = 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'metric': self.metric,
            'value': round(self.value, 1),
            'target': self.target,
            'full_mark': self.full_mark,
        }

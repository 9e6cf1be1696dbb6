"""
Timing Analyzer - Time-of-day slots split by weekday and weekend.

Slots are half-open hour ranges [start, end). A slot whose end is not
after its start wraps midnight, so Night (21, 6) matches
``hour >= 21 or hour < 6``.
"""

from typing import Optional, Sequence, List, Union

import pandas as pd

from dietary_insights.config import AnalysisConfig
from dietary_insights.metrics.series import SlotRow
from dietary_insights.models import Meal
from dietary_insights.utils.frames import meals_to_frame


def slot_mask(hours: Union[pd.Series, int], start: int, end: int) -> Union[pd.Series, bool]:
    """Boolean mask of hours inside the slot [start, end).

    Works element-wise on a Series and on a single int hour.
    """
    if start < end:
        return (hours >= start) & (hours < end)
    return (hours >= start) | (hours < end)


class TimingAnalyzer:
    """Weekday vs weekend meal counts per time-of-day slot."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def timing_comparison(self, meals: Sequence[Meal]) -> List[SlotRow]:
        """One row per configured slot, in slot order.

        Slots with no meals are kept with zero counts so charts always
        render every category.
        """
        settings = self.config.timing
        df = meals_to_frame(meals)

        rows = []
        for key, label, start, end in settings.slots:
            weekday = weekend = 0
            if not df.empty:
                in_slot = slot_mask(df['hour'], start, end)
                weekday = int((in_slot & ~df['is_weekend']).sum())
                weekend = int((in_slot & df['is_weekend']).sum())
            rows.append(SlotRow(
                slot=key,
                label=label,
                weekday=weekday,
                weekend=weekend,
                is_danger_zone=(key == settings.danger_slot),
            ))
        return rows

    def slot_for_hour(self, hour: int) -> Optional[str]:
        """Key of the first slot containing ``hour``."""
        for key, _, start, end in self.config.timing.slots:
            if slot_mask(hour, start, end):
                return key
        return None

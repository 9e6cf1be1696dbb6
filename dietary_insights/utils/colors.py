"""
Color utilities for dietary charts.

Flags are grouped into color categories; each category has a light and a
dark theme shade.
"""

from typing import Dict, Union

from dietary_insights.models import MealFlag
from dietary_insights.utils.concern import ConcernLevel


CATEGORY_COLORS: Dict[str, Dict[str, str]] = {
    'processed': {'light': '#f43f5e', 'dark': '#fb7185'},   # rose
    'cooking': {'light': '#f59e0b', 'dark': '#fbbf24'},     # amber
    'timing': {'light': '#8b5cf6', 'dark': '#a78bfa'},      # violet
    'plastic': {'light': '#3b82f6', 'dark': '#60a5fa'},     # blue
    'beverages': {'light': '#ec4899', 'dark': '#f472b6'},   # pink
    'nutrition': {'light': '#10b981', 'dark': '#34d399'},   # emerald
    'weekday': {'light': '#5c7a5c', 'dark': '#7a967a'},     # sage
    'weekend': {'light': '#8b5cf6', 'dark': '#a78bfa'},     # violet
    'danger': {'light': '#f43f5e', 'dark': '#fb7185'},      # rose
    'other': {'light': '#94a3b8', 'dark': '#cbd5e1'},       # slate
}

FLAG_COLOR_CATEGORIES: Dict[MealFlag, str] = {
    MealFlag.PROCESSED_MEAT: 'processed',
    MealFlag.ULTRA_PROCESSED: 'processed',
    MealFlag.CHARRED_GRILLED: 'cooking',
    MealFlag.FRIED: 'cooking',
    MealFlag.LATE_MEAL: 'timing',
    MealFlag.CAFFEINE: 'timing',
    MealFlag.PLASTIC_BOTTLE: 'plastic',
    MealFlag.PLASTIC_CONTAINER_HOT: 'plastic',
    MealFlag.HIGH_SUGAR_BEVERAGE: 'beverages',
    MealFlag.ALCOHOL: 'beverages',
    MealFlag.HIGH_SODIUM: 'nutrition',
    MealFlag.REFINED_GRAIN: 'nutrition',
    MealFlag.SPICY_IRRITANT: 'cooking',
    MealFlag.ACIDIC_TRIGGER: 'beverages',
}

CONCERN_COLORS = {
    ConcernLevel.LOW: '#10b981',
    ConcernLevel.MODERATE: '#f59e0b',
    ConcernLevel.ELEVATED: '#ef4444',
}


def get_category_color(category: str, dark: bool = False) -> str:
    shades = CATEGORY_COLORS.get(category, CATEGORY_COLORS['other'])
    return shades['dark' if dark else 'light']


def get_flag_color(flag: Union[str, MealFlag], dark: bool = False) -> str:
    """Color for a flag; unknown values (including ``other``) get slate."""
    parsed = MealFlag.parse(flag)
    category = FLAG_COLOR_CATEGORIES.get(parsed, 'other') if parsed is not None else 'other'
    return get_category_color(category, dark)

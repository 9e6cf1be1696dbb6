"""
Meal snapshot -> DataFrame conversion.

Every analyzer works from the same per-meal frame: one row per meal with
its local calendar fields, one occurrence-count column per MealFlag and
the optional nutrition values.
"""

from collections import Counter
from typing import Sequence, List

import numpy as np
import pandas as pd

from dietary_insights.models import Meal, MealFlag
from dietary_insights.utils.timefmt import sunday_index, is_weekend

FLAG_COLUMNS: List[str] = [flag.value for flag in MealFlag]
NUTRITION_COLUMNS = ['calories', 'protein', 'carbs', 'fat', 'sodium']
BASE_COLUMNS = ['meal_id', 'logged_at', 'date', 'hour', 'minute', 'weekday', 'is_weekend', 'has_nutrition']
COLUMNS = BASE_COLUMNS + FLAG_COLUMNS + NUTRITION_COLUMNS


def meals_to_frame(meals: Sequence[Meal]) -> pd.DataFrame:
    """Build the per-meal analysis frame.

    Rows keep input order. Flag columns count occurrences, so a flag
    repeated on one meal counts twice; unrecognized flags are dropped.

    Args:
        meals: Meal snapshot (not modified).

    Returns:
        DataFrame with ``COLUMNS``.
    """
    rows = []
    for meal in meals:
        moment = meal.logged_at
        counts = Counter(flag.value for flag in meal.known_flags)
        weekday = sunday_index(moment)
        row = {
            'meal_id': meal.id,
            'logged_at': moment,
            'date': moment.date(),
            'hour': moment.hour,
            'minute': moment.minute,
            'weekday': weekday,
            'is_weekend': is_weekend(moment),
            'has_nutrition': meal.nutrition is not None,
        }
        for column in FLAG_COLUMNS:
            row[column] = counts.get(column, 0)
        for column in NUTRITION_COLUMNS:
            row[column] = getattr(meal.nutrition, column) if meal.nutrition is not None else np.nan
        rows.append(row)

    df = pd.DataFrame(rows, columns=COLUMNS)
    if df.empty:
        return df

    df[FLAG_COLUMNS] = df[FLAG_COLUMNS].astype(int)
    df[['hour', 'minute', 'weekday']] = df[['hour', 'minute', 'weekday']].astype(int)
    df[['is_weekend', 'has_nutrition']] = df[['is_weekend', 'has_nutrition']].astype(bool)
    df[NUTRITION_COLUMNS] = df[NUTRITION_COLUMNS].astype(float)
    return df


def flagged(df: pd.DataFrame, *flags: MealFlag) -> pd.Series:
    """Boolean mask of meals carrying any of ``flags`` at least once."""
    if not flags:
        return pd.Series(False, index=df.index)
    return (df[[flag.value for flag in flags]] > 0).any(axis=1)

"""Loaders for meal log and blood panel exports."""

from dietary_insights.loaders.meal_log import MealLogLoader, meal_from_record
from dietary_insights.loaders.blood_panel import BloodPanelLoader, blood_work_from_record

__all__ = ["MealLogLoader", "meal_from_record", "BloodPanelLoader", "blood_work_from_record"]

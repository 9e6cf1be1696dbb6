"""Exceptions raised while reading meal logs and blood panels."""


class DietaryInsightsError(ValueError):
    """Base error for dietary_insights."""


class MealLogError(DietaryInsightsError):
    """A meal record is missing mandatory fields or has an unusable timestamp."""


class BloodPanelError(DietaryInsightsError):
    """A blood work record is missing mandatory fields or values are not numeric."""

"""
Correlation Engine - Pairs lab results with dietary concern levels.

Evidence Tier: EXPERIMENTAL
The pairings are plausible associations for discussion with a clinician,
not diagnoses. A string is emitted only when both the lab marker and the
paired dietary signal are outside their normal range.
"""

import logging
from typing import Optional, List, Iterable

from dietary_insights.config import AnalysisConfig, BloodWorkCutoffs
from dietary_insights.metrics.insights import Insights
from dietary_insights.metrics.lab_status import LabStatus, BloodWorkStatus
from dietary_insights.models import BloodWork, latest_blood_work
from dietary_insights.utils.concern import ConcernLevel

logger = logging.getLogger(__name__)

ADVERSE_LDL = {LabStatus.BORDERLINE, LabStatus.HIGH, LabStatus.VERY_HIGH}
ADVERSE_TRIGLYCERIDES = {LabStatus.BORDERLINE, LabStatus.HIGH, LabStatus.VERY_HIGH}
ADVERSE_GLUCOSE = {LabStatus.BORDERLINE, LabStatus.HIGH}


def classify_blood_work(
    blood_work: BloodWork,
    cutoffs: Optional[BloodWorkCutoffs] = None
) -> BloodWorkStatus:
    """Classify each lab value into its status tier.

    Args:
        blood_work: Panel to classify.
        cutoffs: Optional custom cutoffs. Uses defaults if None.

    Returns:
        BloodWorkStatus with None for values missing from the panel.
    """
    c = cutoffs or BloodWorkCutoffs()

    def total_cholesterol(v):
        if v < c.total_cholesterol_normal:
            return LabStatus.NORMAL
        if v < c.total_cholesterol_borderline:
            return LabStatus.BORDERLINE
        return LabStatus.HIGH

    def ldl(v):
        if v < c.ldl_optimal:
            return LabStatus.OPTIMAL
        if v < c.ldl_near_optimal:
            return LabStatus.NEAR_OPTIMAL
        if v < c.ldl_borderline:
            return LabStatus.BORDERLINE
        if v < c.ldl_high:
            return LabStatus.HIGH
        return LabStatus.VERY_HIGH

    def hdl(v):
        if v < c.hdl_low:
            return LabStatus.LOW
        if v > c.hdl_high:
            return LabStatus.HIGH
        return LabStatus.NORMAL

    def triglycerides(v):
        if v < c.triglycerides_normal:
            return LabStatus.NORMAL
        if v < c.triglycerides_borderline:
            return LabStatus.BORDERLINE
        if v < c.triglycerides_high:
            return LabStatus.HIGH
        return LabStatus.VERY_HIGH

    def fasting_glucose(v):
        if v < c.glucose_normal:
            return LabStatus.NORMAL
        if v < c.glucose_borderline:
            return LabStatus.BORDERLINE
        return LabStatus.HIGH

    def grade(value, classifier):
        return classifier(value) if value is not None else None

    return BloodWorkStatus(
        total_cholesterol=grade(blood_work.total_cholesterol, total_cholesterol),
        ldl=grade(blood_work.ldl, ldl),
        hdl=grade(blood_work.hdl, hdl),
        triglycerides=grade(blood_work.triglycerides, triglycerides),
        fasting_glucose=grade(blood_work.fasting_glucose, fasting_glucose),
    )


class CorrelationEngine:
    """Cross-references a blood panel with Insights concern levels.

    Pairings, in output order:
    - LDL borderline or worse + processed meat above low
    - Triglycerides borderline or worse + meal timing above low
    - HDL low (unconditional dietary-fat suggestion)
    - Fasting glucose borderline/high + late meals above 20%
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def correlate(self, insights: Insights, blood_work: Optional[BloodWork]) -> List[str]:
        """Correlation strings for a panel; empty when no panel is given."""
        if blood_work is None:
            return []

        cutoffs = self.config.blood_work
        status = classify_blood_work(blood_work, cutoffs)
        correlations = []

        if status.ldl in ADVERSE_LDL and insights.processed_meat.concern_level is not ConcernLevel.LOW:
            correlations.append(
                f"Elevated LDL ({blood_work.ldl} mg/dL) may correlate with processed meat "
                f"consumption ({insights.processed_meat.per_week:.1f} servings/week)"
            )

        if (status.triglycerides in ADVERSE_TRIGLYCERIDES
                and insights.meal_timing.concern_level is not ConcernLevel.LOW):
            correlations.append(
                f"Elevated triglycerides ({blood_work.triglycerides} mg/dL) may be associated with "
                f"late-night eating pattern ({insights.meal_timing.late_meal_percent}% of meals after 9pm)"
            )

        if status.hdl is LabStatus.LOW:
            correlations.append(
                f"Low HDL ({blood_work.hdl} mg/dL) - consider dietary modifications to increase healthy fats"
            )

        if (status.fasting_glucose in ADVERSE_GLUCOSE
                and insights.meal_timing.late_meal_percent > cutoffs.glucose_late_meal_percent):
            label = 'Borderline' if status.fasting_glucose is LabStatus.BORDERLINE else 'Elevated'
            correlations.append(
                f"{label} glucose ({blood_work.fasting_glucose} mg/dL) may be influenced by "
                f"meal timing patterns"
            )

        logger.debug("Blood work %s produced %d correlations", blood_work.id, len(correlations))
        return correlations

    def correlate_latest(self, insights: Insights, records: Iterable[BloodWork]) -> List[str]:
        """Correlate against the most recent panel in ``records``."""
        return self.correlate(insights, latest_blood_work(records))

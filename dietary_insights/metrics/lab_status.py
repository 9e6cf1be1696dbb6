"""
Lab value status tiers.

Evidence Tier: Consensus (NCEP ATP III lipid cutoffs, ADA fasting glucose).
Cutoffs live in ``BloodWorkCutoffs``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class LabStatus(str, Enum):
    LOW = "low"
    OPTIMAL = "optimal"
    NEAR_OPTIMAL = "near_optimal"
    NORMAL = "normal"
    BORDERLINE = "borderline"
    HIGH = "high"
    VERY_HIGH = "very_high"


@dataclass(frozen=True)
class BloodWorkStatus:
    """Status per marker; None where the panel lacks the value.

    - total_cholesterol: normal / borderline / high
    - ldl: optimal / near_optimal / borderline / high / very_high
    - hdl: low / normal / high (low is the adverse direction)
    - triglycerides: normal / borderline / high / very_high
    - fasting_glucose: normal / borderline / high
    """
    total_cholesterol: Optional[LabStatus]
    ldl: Optional[LabStatus]
    hdl: Optional[LabStatus]
    triglycerides: Optional[LabStatus]
    fasting_glucose: Optional[LabStatus]

    def to_dict(self) -> Dict[str, Any]:
        return {
            name: (status.value if status is not None else None)
            for name, status in (
                ('total_cholesterol', self.total_cholesterol),
                ('ldl', self.ldl),
                ('hdl', self.hdl),
                ('triglycerides', self.triglycerides),
                ('fasting_glucose', self.fasting_glucose),
            )
        }

"""Tests for lab classification and the correlation engine."""

from dataclasses import replace
from datetime import datetime

import pytest

from dietary_insights.analyzers.correlation import CorrelationEngine, classify_blood_work
from dietary_insights.metrics.insights import (
    Insights,
    PlasticSummary,
    ProcessedMeatSummary,
    MealTimingSummary,
    Patterns,
)
from dietary_insights.metrics.lab_status import LabStatus
from dietary_insights.models import BloodWork
from dietary_insights.utils.concern import ConcernLevel


def make_insights(processed_level=ConcernLevel.LOW, per_week=0.0,
                  timing_level=ConcernLevel.LOW, late_percent=0):
    return Insights(
        total_meals=30,
        date_range="Jan 6 - Jan 19, 2025",
        days_tracked=14,
        plastic=PlasticSummary(count=0, per_day=0.0, concern_level=ConcernLevel.LOW),
        processed_meat=ProcessedMeatSummary(count=0, per_week=per_week, concern_level=processed_level),
        meal_timing=MealTimingSummary(
            late_meal_percent=late_percent,
            avg_dinner_time="7:00 PM",
            concern_level=timing_level,
        ),
        patterns=Patterns(busiest_day="Monday", weekend_vs_weekday="Consistent timing across week"),
    )


@pytest.fixture
def engine():
    return CorrelationEngine()


class TestClassifyBloodWork:

    @pytest.mark.parametrize("value,status", [
        (199, LabStatus.NORMAL),
        (200, LabStatus.BORDERLINE),
        (239, LabStatus.BORDERLINE),
        (240, LabStatus.HIGH),
    ])
    def test_total_cholesterol(self, blood_work, value, status):
        assert classify_blood_work(replace(blood_work, total_cholesterol=value)).total_cholesterol is status

    @pytest.mark.parametrize("value,status", [
        (99, LabStatus.OPTIMAL),
        (100, LabStatus.NEAR_OPTIMAL),
        (130, LabStatus.BORDERLINE),
        (160, LabStatus.HIGH),
        (189, LabStatus.HIGH),
        (190, LabStatus.VERY_HIGH),
    ])
    def test_ldl(self, blood_work, value, status):
        assert classify_blood_work(replace(blood_work, ldl=value)).ldl is status

    @pytest.mark.parametrize("value,status", [
        (39, LabStatus.LOW),
        (40, LabStatus.NORMAL),
        (60, LabStatus.NORMAL),
        (61, LabStatus.HIGH),
    ])
    def test_hdl(self, blood_work, value, status):
        assert classify_blood_work(replace(blood_work, hdl=value)).hdl is status

    @pytest.mark.parametrize("value,status", [
        (149, LabStatus.NORMAL),
        (150, LabStatus.BORDERLINE),
        (200, LabStatus.HIGH),
        (500, LabStatus.VERY_HIGH),
    ])
    def test_triglycerides(self, blood_work, value, status):
        assert classify_blood_work(replace(blood_work, triglycerides=value)).triglycerides is status

    @pytest.mark.parametrize("value,status", [
        (99, LabStatus.NORMAL),
        (100, LabStatus.BORDERLINE),
        (125, LabStatus.BORDERLINE),
        (126, LabStatus.HIGH),
    ])
    def test_glucose(self, blood_work, value, status):
        assert classify_blood_work(replace(blood_work, fasting_glucose=value)).fasting_glucose is status

    def test_missing_values_have_no_status(self):
        status = classify_blood_work(BloodWork(id="bw-2", test_date=datetime(2025, 1, 1), ldl=120))

        assert status.ldl is LabStatus.NEAR_OPTIMAL
        assert status.hdl is None
        assert status.to_dict()["triglycerides"] is None


class TestCorrelationEngine:

    def test_no_panel(self, engine):
        assert engine.correlate(make_insights(), None) == []

    def test_healthy_panel(self, engine, blood_work):
        insights = make_insights(ConcernLevel.ELEVATED, 6.0, ConcernLevel.ELEVATED, 40)
        assert engine.correlate(insights, blood_work) == []

    def test_ldl_paired_with_processed_meat(self, engine, blood_work):
        panel = replace(blood_work, ldl=165)
        insights = make_insights(ConcernLevel.MODERATE, 3.5)

        assert engine.correlate(insights, panel) == [
            "Elevated LDL (165 mg/dL) may correlate with processed meat consumption (3.5 servings/week)"
        ]

    def test_ldl_alone_is_silent(self, engine, blood_work):
        assert engine.correlate(make_insights(), replace(blood_work, ldl=200)) == []

    def test_triglycerides_paired_with_timing(self, engine, blood_work):
        panel = replace(blood_work, triglycerides=520)
        insights = make_insights(timing_level=ConcernLevel.MODERATE, late_percent=18)

        assert engine.correlate(insights, panel) == [
            "Elevated triglycerides (520 mg/dL) may be associated with late-night eating pattern "
            "(18% of meals after 9pm)"
        ]

    def test_low_hdl_is_unconditional(self, engine, blood_work):
        assert engine.correlate(make_insights(), replace(blood_work, hdl=35)) == [
            "Low HDL (35 mg/dL) - consider dietary modifications to increase healthy fats"
        ]

    def test_glucose_needs_late_share_above_twenty(self, engine, blood_work):
        panel = replace(blood_work, fasting_glucose=110)

        assert engine.correlate(make_insights(late_percent=20), panel) == []
        assert engine.correlate(make_insights(late_percent=21), panel) == [
            "Borderline glucose (110 mg/dL) may be influenced by meal timing patterns"
        ]

    def test_high_glucose_label(self, engine, blood_work):
        panel = replace(blood_work, fasting_glucose=130)
        result = engine.correlate(make_insights(late_percent=25), panel)

        assert result == ["Elevated glucose (130 mg/dL) may be influenced by meal timing patterns"]

    def test_output_order(self, engine):
        panel = BloodWork(
            id="bw-3",
            test_date=datetime(2025, 2, 1),
            ldl=170,
            hdl=30,
            triglycerides=210,
            fasting_glucose=105,
        )
        insights = make_insights(ConcernLevel.ELEVATED, 5.0, ConcernLevel.ELEVATED, 35)
        result = engine.correlate(insights, panel)

        assert len(result) == 4
        assert result[0].startswith("Elevated LDL")
        assert result[1].startswith("Elevated triglycerides")
        assert result[2].startswith("Low HDL")
        assert result[3].startswith("Borderline glucose")

    def test_missing_values_emit_nothing(self, engine):
        panel = BloodWork(id="bw-4", test_date=datetime(2025, 2, 1))
        insights = make_insights(ConcernLevel.ELEVATED, 5.0, ConcernLevel.ELEVATED, 35)

        assert engine.correlate(insights, panel) == []

    def test_correlate_latest_uses_newest_panel(self, engine, blood_work):
        older = replace(blood_work, id="bw-0", test_date=datetime(2024, 6, 1), hdl=30)

        assert engine.correlate_latest(make_insights(), [older, blood_work]) == []
        assert engine.correlate_latest(make_insights(), [blood_work, older]) == []
        assert engine.correlate_latest(make_insights(), [older])[0].startswith("Low HDL")
        assert engine.correlate_latest(make_insights(), []) == []

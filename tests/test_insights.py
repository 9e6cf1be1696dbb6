"""Tests for InsightsEngine."""

from datetime import datetime

import pytest

from dietary_insights.analyzers.insights import InsightsEngine, insight_messages
from dietary_insights.config import AnalysisConfig, ConcernThresholds, ConcernBounds
from dietary_insights.metrics.insights import Insights
from dietary_insights.utils.concern import ConcernLevel


@pytest.fixture
def engine():
    return InsightsEngine()


class TestEmptyLog:

    def test_empty_returns_canonical_record(self, engine):
        insights = engine.compute([])

        assert insights == Insights.empty()
        assert insights.total_meals == 0
        assert insights.date_range == "No data"
        assert insights.meal_timing.avg_dinner_time == "N/A"
        assert insights.patterns.busiest_day == "N/A"
        assert all(level is ConcernLevel.LOW for level in insights.concern_levels.values())

    def test_empty_day_span_is_at_least_one(self, engine):
        assert engine.compute([]).days_tracked == 1
        assert engine.compute([]).days_tracked == InsightsEngine.day_span([])


class TestSummary:

    def test_total_meals_matches_input(self, engine, week_of_meals):
        assert engine.compute(week_of_meals).total_meals == len(week_of_meals)

    def test_deterministic(self, engine, week_of_meals):
        assert engine.compute(week_of_meals) == engine.compute(week_of_meals)

    def test_input_not_reordered(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 8, 12, 0)),
            meal_factory(datetime(2025, 1, 6, 12, 0)),
        ]
        snapshot = list(meals)
        engine.compute(meals)
        assert meals == snapshot

    def test_week_of_meals(self, engine, week_of_meals):
        insights = engine.compute(week_of_meals)

        assert insights.days_tracked == 14
        assert insights.date_range == "Jan 6 - Jan 19, 2025"
        assert insights.plastic.count == 14
        assert insights.plastic.concern_level is ConcernLevel.ELEVATED
        assert insights.processed_meat.count == 7
        assert insights.processed_meat.per_week == pytest.approx(3.5)
        assert insights.processed_meat.concern_level is ConcernLevel.MODERATE
        assert insights.meal_timing.late_meal_percent == 0
        assert insights.meal_timing.avg_dinner_time == "7:00 PM"


class TestPlastic:

    def test_same_day_scenario(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 6, 8, 0), flags=["plastic_bottle"]),
            meal_factory(datetime(2025, 1, 6, 12, 0), flags=["plastic_bottle"]),
            meal_factory(datetime(2025, 1, 6, 18, 0)),
        ]
        insights = engine.compute(meals)

        assert insights.plastic.count == 2
        assert insights.plastic.per_day == 2.0
        assert insights.plastic.concern_level is ConcernLevel.LOW
        assert insights.days_tracked == 1

    def test_per_day_uses_inclusive_span(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 10, 12, 0), flags=["plastic_bottle"]),
            meal_factory(datetime(2025, 1, 6, 12, 0), flags=["plastic_bottle"]),
        ]
        insights = engine.compute(meals)

        assert insights.days_tracked == 5
        assert insights.plastic.per_day == insights.plastic.count / insights.days_tracked

    def test_span_counts_calendar_days(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 6, 23, 0)),
            meal_factory(datetime(2025, 1, 7, 1, 0)),
        ]
        assert engine.compute(meals).days_tracked == 2

    @pytest.mark.parametrize("count,level", [
        (5, ConcernLevel.LOW),
        (6, ConcernLevel.MODERATE),
        (10, ConcernLevel.MODERATE),
        (11, ConcernLevel.ELEVATED),
    ])
    def test_concern_thresholds(self, engine, meal_factory, count, level):
        meals = [
            meal_factory(datetime(2025, 1, 6, 6 + i, 0), flags=["plastic_bottle"])
            for i in range(count)
        ]
        assert engine.compute(meals).plastic.concern_level is level

    def test_repeated_flag_counts_meal_once(self, engine, meal_factory):
        meals = [meal_factory(datetime(2025, 1, 6, 12, 0), flags=["plastic_bottle", "plastic_bottle"])]
        assert engine.compute(meals).plastic.count == 1

    def test_unknown_flags_ignored(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 6, 12, 0), flags=["bogus", "plastic_bottle"]),
            meal_factory(datetime(2025, 1, 6, 13, 0), flags=["not_a_flag"]),
        ]
        insights = engine.compute(meals)

        assert insights.total_meals == 2
        assert insights.plastic.count == 1


class TestProcessedMeat:

    def _week(self, meal_factory, processed_days):
        return [
            meal_factory(
                datetime(2025, 1, day, 12, 0),
                flags=["processed_meat"] if day in processed_days else [],
            )
            for day in range(6, 13)
        ]

    def test_exactly_four_per_week_is_moderate(self, engine, meal_factory):
        insights = engine.compute(self._week(meal_factory, {6, 7, 8, 9}))

        assert insights.processed_meat.per_week == 4.0
        assert insights.processed_meat.concern_level is ConcernLevel.MODERATE

    def test_five_per_week_is_elevated(self, engine, meal_factory):
        insights = engine.compute(self._week(meal_factory, {6, 7, 8, 9, 10}))
        assert insights.processed_meat.concern_level is ConcernLevel.ELEVATED

    def test_two_per_week_is_low(self, engine, meal_factory):
        insights = engine.compute(self._week(meal_factory, {6, 7}))

        assert insights.processed_meat.per_week == 2.0
        assert insights.processed_meat.concern_level is ConcernLevel.LOW


class TestMealTiming:

    def test_late_window_edges(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 6, 21, 0)),
            meal_factory(datetime(2025, 1, 7, 4, 30)),
            meal_factory(datetime(2025, 1, 7, 5, 0)),
            meal_factory(datetime(2025, 1, 7, 20, 59)),
        ]
        timing = engine.compute(meals).meal_timing

        assert timing.late_meal_count == 2
        assert timing.late_meal_percent == 50
        assert timing.concern_level is ConcernLevel.ELEVATED

    def test_percent_rounds_half_up(self, engine, meal_factory):
        meals = [meal_factory(datetime(2025, 1, 6, 22, 0))]
        meals += [meal_factory(datetime(2025, 1, 6, 8 + i, 0)) for i in range(7)]
        timing = engine.compute(meals).meal_timing

        assert timing.late_meal_percent == 13
        assert timing.concern_level is ConcernLevel.LOW

    def test_fifteen_percent_is_low(self, engine, meal_factory):
        meals = [meal_factory(datetime(2025, 1, 6 + i, 22, 0)) for i in range(3)]
        meals += [meal_factory(datetime(2025, 1, 6 + i % 7, 12, 0)) for i in range(17)]
        timing = engine.compute(meals).meal_timing

        assert timing.late_meal_percent == 15
        assert timing.concern_level is ConcernLevel.LOW

    def test_average_dinner_time(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 6, 12, 0)),
            meal_factory(datetime(2025, 1, 6, 18, 0)),
            meal_factory(datetime(2025, 1, 7, 19, 30)),
        ]
        assert engine.compute(meals).meal_timing.avg_dinner_time == "6:45 PM"

    def test_average_dinner_time_rounds_to_minute(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 6, 19, 0)),
            meal_factory(datetime(2025, 1, 7, 19, 1)),
        ]
        assert engine.compute(meals).meal_timing.avg_dinner_time == "7:01 PM"

    def test_no_dinner_meals(self, engine, meal_factory):
        meals = [meal_factory(datetime(2025, 1, 6, 12, 0))]
        assert engine.compute(meals).meal_timing.avg_dinner_time == "N/A"


class TestPatterns:

    def test_busiest_day(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 7, 8, 0)),
            meal_factory(datetime(2025, 1, 7, 12, 0)),
            meal_factory(datetime(2025, 1, 6, 12, 0)),
        ]
        assert engine.compute(meals).patterns.busiest_day == "Tuesday"

    def test_busiest_day_tie_takes_first_weekday_index(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 11, 12, 0)),  # Saturday
            meal_factory(datetime(2025, 1, 12, 12, 0)),  # Sunday
        ]
        assert engine.compute(meals).patterns.busiest_day == "Sunday"

    def test_weekend_late_cluster(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 1, 11, 22, 0)),
            meal_factory(datetime(2025, 1, 11, 12, 0)),
            meal_factory(datetime(2025, 1, 6, 12, 0)),
        ]
        assert engine.compute(meals).patterns.weekend_vs_weekday == "Late meals cluster on weekends"

    def test_weekday_only(self, engine, meal_factory):
        meals = [meal_factory(datetime(2025, 1, 6, 22, 0))]
        assert engine.compute(meals).patterns.weekend_vs_weekday == "Consistent timing across week"

    def test_date_range_across_months(self, engine, meal_factory):
        meals = [
            meal_factory(datetime(2025, 2, 2, 12, 0)),
            meal_factory(datetime(2025, 1, 5, 12, 0)),
        ]
        assert engine.compute(meals).date_range == "Jan 5 - Feb 2, 2025"


class TestConfigAndMessages:

    def test_custom_thresholds(self, meal_factory):
        config = AnalysisConfig(concern=ConcernThresholds(plastic=ConcernBounds(elevated=2, moderate=1)))
        meals = [meal_factory(datetime(2025, 1, 6, 8 + i, 0), flags=["plastic_bottle"]) for i in range(3)]

        assert InsightsEngine(config).compute(meals).plastic.concern_level is ConcernLevel.ELEVATED

    def test_messages_only_for_raised_signals(self, engine, week_of_meals):
        messages = insight_messages(engine.compute(week_of_meals))

        assert len(messages) == 2
        assert "plastic bottle" in messages[0]
        assert "3.5 servings/week" in messages[1]

    def test_no_messages_when_all_low(self):
        assert insight_messages(Insights.empty()) == []

    def test_to_dict(self, engine, week_of_meals):
        data = engine.compute(week_of_meals).to_dict()

        assert data['total_meals'] == 42
        assert data['processed_meat']['concern_level'] == 'moderate'
        assert data['plastic']['per_day'] == 1.0

"""
Test suite for StatsService against the demo dataset.

System role: Verification of the statistics report
"""

from datetime import datetime

import pytest

from session_planner.application.services.stats_service import StatsService

NOW = datetime(2025, 11, 17, 12, 0)


@pytest.fixture
async def report(seeded_db) -> dict:
    return await StatsService(seeded_db, now=NOW).get_aggregate_stats()


class TestAggregateStats:
    """Test suite for StatsService.get_aggregate_stats()."""

    async def test_overview(self, report):
        assert report["overview"] == {
            "total_sessions": 33,
            "completed_sessions": 30,
            "upcoming_sessions": 3,
            "completion_rate": pytest.approx(0.91),
        }

    async def test_by_type(self, report):
        by_name = {entry["name"]: entry for entry in report["by_type"]}

        assert set(by_name) == {"Deep Work", "Workout", "Language Practice", "Reading", "Meditation"}
        deep_work = by_name["Deep Work"]
        assert deep_work["total_sessions"] == 8
        assert deep_work["completed_sessions"] == 7
        assert deep_work["upcoming_sessions"] == 1
        assert deep_work["completion_rate"] == pytest.approx(0.875)
        assert by_name["Meditation"]["completion_rate"] == pytest.approx(1.0)
        assert by_name["Reading"]["completion_rate"] == pytest.approx(0.75)
        assert by_name["Workout"]["completion_rate"] == pytest.approx(8 / 9)

    async def test_derived_metrics(self, report):
        derived = report["derived_metrics"]

        # Every day from Oct 31 through Nov 17 has a completed session; Oct 30 has none
        assert derived["current_streak"] == 18
        assert derived["longest_streak"] == 18
        assert derived["total_days_with_sessions"] == 20
        assert derived["most_productive_day"] == "Saturday"
        assert derived["most_productive_day_index"] == 6
        assert derived["average_spacing"] == pytest.approx(0.7)

    async def test_empty_database(self, test_async_db):
        report = await StatsService(test_async_db, now=NOW).get_aggregate_stats()

        assert report["overview"]["total_sessions"] == 0
        assert report["overview"]["completion_rate"] == 0
        assert report["by_type"] == []
        assert report["derived_metrics"]["current_streak"] == 0
        assert report["derived_metrics"]["most_productive_day"] is None

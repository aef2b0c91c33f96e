"""
Tests for the heuristic slot scorer.

Reference scenario: now is Monday 2025-11-17 12:00 and Deep Work (priority 5)
was last done on Saturday 2025-11-15 12:00.
"""

from datetime import datetime, timedelta

import pytest

from session_planner.core.scheduling.records import CandidateSlot, SessionTypeStats
from session_planner.core.scheduling.scorer import SlotScorer, round_half_up

LAST_DEEP_WORK = datetime(2025, 11, 15, 12, 0)


def _slot(start: datetime, minutes: int = 60) -> CandidateSlot:
    return CandidateSlot(start=start, end=start + timedelta(minutes=minutes), day_of_week=0)


def _stats(session_type, last_scheduled=None, average_spacing_days=None) -> SessionTypeStats:
    return SessionTypeStats(
        session_type=session_type,
        last_scheduled=last_scheduled,
        upcoming_count=0,
        completed_count=0 if last_scheduled is None else 1,
        average_spacing_days=average_spacing_days,
    )


class TestReferenceScenario:
    """Full score breakdown for the Monday evening window."""

    def test_monday_evening_deep_work(self, now, make_type):
        scorer = SlotScorer(_stats(make_type(), LAST_DEEP_WORK), [], now)

        result = scorer.score(_slot(datetime(2025, 11, 17, 19, 0)))

        # 100 priority + 11.458 recency + 39.125 urgency + 15 buffer
        assert result.score == pytest.approx(165.583333, abs=1e-4)
        assert result.reasons == (
            "High priority (5/5) session type",
            "Good spacing (2.3 days since last Deep Work)",
            "No other sessions scheduled this day",
            "Good buffer time around session",
        )

    def test_later_slots_gain_recency_faster_than_they_lose_urgency(self, now, make_type):
        scorer = SlotScorer(_stats(make_type(), LAST_DEEP_WORK), [], now)

        scores = [
            scorer.score(_slot(datetime(2025, 11, 17, hour, minute))).score
            for hour, minute in ((19, 0), (19, 30), (20, 0))
        ]

        assert scores == sorted(scores)
        assert scores[-1] == pytest.approx(165.666667, abs=1e-4)

    def test_lower_priority_type_scores_lower(self, now, make_type):
        reading = make_type("Reading", 2, "learning")
        scorer = SlotScorer(_stats(reading, LAST_DEEP_WORK), [], now)

        result = scorer.score(_slot(datetime(2025, 11, 17, 19, 0)))

        assert result.score == pytest.approx(105.583333, abs=1e-4)
        assert not any(reason.startswith("High priority") for reason in result.reasons)


class TestDeterminism:
    """Re-scoring the same inputs."""

    def test_rescoring_is_identical(self, now, make_type, make_session):
        stats = _stats(make_type(), LAST_DEEP_WORK, average_spacing_days=2.5)
        booked = [make_session(datetime(2025, 11, 17, 18, 45), duration=15, priority=5)]
        slot = _slot(datetime(2025, 11, 17, 19, 0))

        first = SlotScorer(stats, booked, now).score(slot)
        second = SlotScorer(stats, booked, now).score(slot)

        assert first == second


class TestRecencyAndSpacing:
    """History based factors."""

    def test_first_time_bonus(self, now, make_type):
        scorer = SlotScorer(_stats(make_type()), [], now)

        result = scorer.score(_slot(datetime(2025, 11, 17, 19, 0)))

        assert "First time scheduling this session type" in result.reasons
        # 100 priority + 30 first time + 39.125 urgency + 15 buffer
        assert result.score == pytest.approx(184.125)

    def test_recency_is_capped(self, now, make_type):
        stale = _stats(make_type(), datetime(2025, 10, 1, 12, 0))
        fresh = _stats(make_type(), datetime(2025, 11, 7, 19, 0))
        slot = _slot(datetime(2025, 11, 17, 19, 0))

        stale_score = SlotScorer(stale, [], now).score(slot).score
        fresh_score = SlotScorer(fresh, [], now).score(slot).score

        # Both are ten or more days out, so both earn the full 50
        assert stale_score == pytest.approx(fresh_score)

    def test_recent_session_gets_no_spacing_reason(self, now, make_type):
        stats = _stats(make_type(), datetime(2025, 11, 17, 6, 0))

        result = SlotScorer(stats, [], now).score(_slot(datetime(2025, 11, 17, 19, 0)))

        assert not any(reason.startswith("Good spacing") for reason in result.reasons)

    def test_spacing_pattern_match(self, now, make_type):
        stats = _stats(make_type(), LAST_DEEP_WORK, average_spacing_days=2.5)
        baseline = SlotScorer(_stats(make_type(), LAST_DEEP_WORK), [], now)
        slot = _slot(datetime(2025, 11, 17, 19, 0))

        result = SlotScorer(stats, [], now).score(slot)

        assert "Matches your usual 2.5-day spacing pattern" in result.reasons
        # 30 - 5 * |2.2917 - 2.5|
        assert result.score - baseline.score(slot).score == pytest.approx(28.958333, abs=1e-4)

    def test_spacing_far_from_pattern_adds_nothing(self, now, make_type):
        stats = _stats(make_type(), LAST_DEEP_WORK, average_spacing_days=12.0)
        baseline = SlotScorer(_stats(make_type(), LAST_DEEP_WORK), [], now)
        slot = _slot(datetime(2025, 11, 17, 19, 0))

        result = SlotScorer(stats, [], now).score(slot)

        assert result.score == pytest.approx(baseline.score(slot).score)
        assert not any("spacing pattern" in reason for reason in result.reasons)

    def test_zero_average_spacing_counts_as_no_history(self, now, make_type):
        stats = _stats(make_type(), LAST_DEEP_WORK, average_spacing_days=0.0)
        baseline = SlotScorer(_stats(make_type(), LAST_DEEP_WORK), [], now)
        slot = _slot(datetime(2025, 11, 17, 19, 0))

        assert SlotScorer(stats, [], now).score(slot).score == pytest.approx(
            baseline.score(slot).score
        )


class TestDailyLoad:
    """Penalties for already busy days."""

    def test_busy_high_priority_day(self, now, make_type, make_session):
        tuesday = [
            make_session(datetime(2025, 11, 18, hour, 0), priority=5)
            for hour in (6, 8, 12)
        ]
        stats = _stats(make_type(), LAST_DEEP_WORK)
        slot = _slot(datetime(2025, 11, 18, 19, 0))

        loaded = SlotScorer(stats, tuesday, now).score(slot)
        empty = SlotScorer(stats, [], now).score(slot)

        # 3 sessions * 15 + priority load 15 * 5
        assert loaded.score - empty.score == pytest.approx(-120)
        assert "⚠️ Day already has 3 sessions scheduled" in loaded.reasons
        assert "⚠️ High priority load already scheduled today (15)" in loaded.reasons
        assert "No other sessions scheduled this day" not in loaded.reasons

    def test_scores_may_go_negative(self, now, make_type, make_session):
        tuesday = [
            make_session(datetime(2025, 11, 18, hour, 0), priority=5)
            for hour in (6, 8, 12)
        ]
        stats = _stats(make_type("Stretching", 1, "wellness"))

        result = SlotScorer(stats, tuesday, now).score(_slot(datetime(2025, 11, 18, 19, 0)))

        # 20 + 30 - 120 + 36.125 urgency + 15 buffer
        assert result.score == pytest.approx(-18.875)

    def test_sessions_on_other_days_do_not_count(self, now, make_type, make_session):
        wednesday = [make_session(datetime(2025, 11, 19, 7, 0), priority=5)]

        result = SlotScorer(_stats(make_type()), wednesday, now).score(
            _slot(datetime(2025, 11, 18, 19, 0))
        )

        assert "No other sessions scheduled this day" in result.reasons


class TestTimeOfDay:
    """Morning and afternoon preferences."""

    @pytest.mark.parametrize("hour", [6, 7, 10])
    def test_morning_for_high_priority(self, now, make_type, hour):
        result = SlotScorer(_stats(make_type("Workout", 4, "fitness")), [], now).score(
            _slot(datetime(2025, 11, 18, hour, 30))
        )

        assert "Morning time slot (ideal for high-priority work)" in result.reasons

    def test_eleven_is_not_morning(self, now, make_type):
        result = SlotScorer(_stats(make_type()), [], now).score(
            _slot(datetime(2025, 11, 18, 11, 0))
        )

        assert not any(reason.startswith("Morning") for reason in result.reasons)

    @pytest.mark.parametrize("hour", [14, 16, 18])
    def test_afternoon_for_low_priority(self, now, make_type, hour):
        result = SlotScorer(_stats(make_type("Reading", 2, "learning")), [], now).score(
            _slot(datetime(2025, 11, 22, hour, 0))
        )

        assert "Afternoon time slot (good for lower-priority activities)" in result.reasons

    def test_medium_priority_has_no_preference(self, now, make_type):
        stats = _stats(make_type("Language Practice", 3, "learning"))
        scorer = SlotScorer(stats, [], now)

        morning = scorer.score(_slot(datetime(2025, 11, 18, 7, 0)))
        afternoon = scorer.score(_slot(datetime(2025, 11, 18, 15, 0)))

        assert not any("time slot" in reason for reason in morning.reasons + afternoon.reasons)


class TestUrgencyAndBuffer:
    """Proximity factors."""

    def test_urgency_bottoms_out_at_zero(self, now, make_type):
        scorer = SlotScorer(_stats(make_type("Language Practice", 3, "learning")), [], now)

        in_two_weeks = scorer.score(_slot(datetime(2025, 12, 1, 19, 0))).score
        in_three_weeks = scorer.score(_slot(datetime(2025, 12, 8, 19, 0))).score

        # 60 priority + 30 first time + 0 urgency + 15 buffer
        assert in_two_weeks == pytest.approx(105)
        assert in_three_weeks == pytest.approx(105)

    def test_session_just_before_removes_buffer(self, now, make_type, make_session):
        ends_at_1845 = make_session(datetime(2025, 11, 17, 18, 15), duration=30)

        result = SlotScorer(_stats(make_type()), [ends_at_1845], now).score(
            _slot(datetime(2025, 11, 17, 19, 0))
        )

        assert "Good buffer time around session" not in result.reasons

    def test_session_just_after_removes_buffer(self, now, make_type, make_session):
        starts_at_2010 = make_session(datetime(2025, 11, 17, 20, 10), duration=30)

        result = SlotScorer(_stats(make_type()), [starts_at_2010], now).score(
            _slot(datetime(2025, 11, 17, 19, 0))
        )

        assert "Good buffer time around session" not in result.reasons

    def test_back_to_back_session_keeps_buffer(self, now, make_type, make_session):
        ends_at_1900 = make_session(datetime(2025, 11, 17, 18, 0), duration=60)

        result = SlotScorer(_stats(make_type()), [ends_at_1900], now).score(
            _slot(datetime(2025, 11, 17, 19, 0))
        )

        assert "Good buffer time around session" in result.reasons


@pytest.mark.parametrize(
    "value, digits, expected",
    [(2.5, 0, 3), (-2.5, 0, -2), (165.4999, 0, 165), (0.875, 2, 0.88), (3.0833, 1, 3.1)],
)
def test_round_half_up(value, digits, expected):
    assert round_half_up(value, digits) == pytest.approx(expected)

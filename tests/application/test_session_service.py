"""
Test suite for SessionService.

Booking, conflict checks, filtering and partial updates against an
in-memory SQLite database.

System role: Verification of session use cases
"""

from datetime import datetime
from unittest.mock import AsyncMock
import uuid

import pytest

from session_planner.application.services.session_service import SessionService
from session_planner.application.services.session_type_service import SessionTypeService
from session_planner.boundary.db.CRUD.session_crud import session_crud
from session_planner.core.exceptions import (
    SessionNotFoundError,
    SessionTypeNotFoundError,
    ValidationError,
)
from session_planner.core.scheduling.records import ConflictResult

NOW = datetime(2025, 11, 17, 12, 0)


@pytest.fixture
def service(test_async_db) -> SessionService:
    return SessionService(test_async_db, now=NOW)


@pytest.fixture
async def workout(test_async_db) -> dict:
    return await SessionTypeService(test_async_db).create_session_type("Workout", "fitness", 4)


@pytest.fixture
async def reading(test_async_db) -> dict:
    return await SessionTypeService(test_async_db).create_session_type("Reading", "learning", 2)


class TestCreateSession:
    """Test suite for SessionService.create_session()."""

    async def test_create_embeds_session_type(self, service, workout):
        # Act
        created = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        # Assert
        assert created["session_type_id"] == workout["id"]
        assert created["session_type"]["name"] == "Workout"
        assert created["session_type"]["priority"] == 4
        assert created["scheduled_at"] == datetime(2025, 11, 21, 19, 0)
        assert created["duration"] == 60
        assert created["completed"] is False

    async def test_overlapping_booking_returns_conflicts(self, service, workout, reading):
        # Arrange
        existing = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        # Act
        result = await service.create_session(reading["id"], datetime(2025, 11, 21, 19, 30), 45)

        # Assert
        assert isinstance(result, ConflictResult)
        assert result.has_conflict is True
        assert [c.id for c in result.conflicting_sessions] == [existing["id"]]
        assert result.conflicting_sessions[0].session_type == "Workout"
        assert len(await service.list_sessions()) == 1

    async def test_identical_interval_conflicts_unless_check_disabled(self, service, workout):
        existing = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        conflict = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)
        forced = await service.create_session(
            workout["id"], datetime(2025, 11, 21, 19, 0), 60, check_conflict=False
        )

        assert [c.id for c in conflict.conflicting_sessions] == [existing["id"]]
        assert forced["scheduled_at"] == datetime(2025, 11, 21, 19, 0)

    @pytest.mark.parametrize("check_conflict, locks", [(True, 1), (False, 0)])
    async def test_checked_booking_holds_booking_lock(
        self, service, workout, monkeypatch, check_conflict, locks
    ):
        lock = AsyncMock()
        monkeypatch.setattr(session_crud, "lock_bookings", lock)

        await service.create_session(
            workout["id"], datetime(2025, 11, 21, 19, 0), 60, check_conflict=check_conflict
        )

        assert lock.await_count == locks
        if locks:
            lock.assert_awaited_with(service.db)

    async def test_back_to_back_booking_succeeds(self, service, workout, reading):
        await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        created = await service.create_session(reading["id"], datetime(2025, 11, 21, 20, 0), 45)

        assert isinstance(created, dict)
        assert len(await service.list_sessions()) == 2

    async def test_check_conflict_disabled_allows_overlap(self, service, workout, reading):
        await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        created = await service.create_session(
            reading["id"], datetime(2025, 11, 21, 19, 30), 45, check_conflict=False
        )

        assert isinstance(created, dict)
        assert len(await service.list_sessions()) == 2

    async def test_unknown_session_type_raises(self, service):
        with pytest.raises(SessionTypeNotFoundError):
            await service.create_session(uuid.uuid4(), datetime(2025, 11, 21, 19, 0), 60)

    @pytest.mark.parametrize("duration", [0, -30])
    async def test_non_positive_duration_raises(self, service, workout, duration):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), duration)

        assert exc_info.value.field == "duration"


class TestCheckConflict:
    """Test suite for SessionService.check_conflict()."""

    async def test_completed_sessions_still_conflict(self, service, workout):
        created = await service.create_session(workout["id"], datetime(2025, 11, 10, 19, 0), 60)
        await service.update_session(created["id"], completed=True)

        result = await service.check_conflict(datetime(2025, 11, 10, 19, 15), 30)

        assert result.has_conflict is True

    async def test_exclude_id_ignores_session_being_moved(self, service, workout):
        created = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        result = await service.check_conflict(
            datetime(2025, 11, 21, 19, 30), 60, exclude_id=created["id"]
        )

        assert result.has_conflict is False

    async def test_long_earlier_session_is_found(self, service, workout):
        await service.create_session(workout["id"], datetime(2025, 11, 21, 9, 0), 480)

        result = await service.check_conflict(datetime(2025, 11, 21, 16, 30), 30)

        assert result.has_conflict is True


class TestListSessions:
    """Test suite for SessionService.list_sessions() filters."""

    @pytest.fixture
    async def booked(self, service, workout, reading) -> dict:
        past = await service.create_session(workout["id"], datetime(2025, 11, 15, 6, 30), 60)
        await service.update_session(past["id"], completed=True)
        missed = await service.create_session(reading["id"], datetime(2025, 11, 16, 20, 0), 45)
        later = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)
        soon = await service.create_session(reading["id"], datetime(2025, 11, 19, 12, 0), 45)
        return {"past": past, "missed": missed, "later": later, "soon": soon}

    async def test_all_sessions_ordered_by_start(self, service, booked):
        listed = await service.list_sessions()

        assert [s["id"] for s in listed] == [
            booked["past"]["id"],
            booked["missed"]["id"],
            booked["soon"]["id"],
            booked["later"]["id"],
        ]

    async def test_upcoming_only(self, service, booked):
        listed = await service.list_sessions(upcoming=True)

        assert [s["id"] for s in listed] == [booked["soon"]["id"], booked["later"]["id"]]

    async def test_date_range_is_inclusive(self, service, booked):
        listed = await service.list_sessions(
            start_date=datetime(2025, 11, 16, 20, 0),
            end_date=datetime(2025, 11, 19, 12, 0),
        )

        assert [s["id"] for s in listed] == [booked["missed"]["id"], booked["soon"]["id"]]

    async def test_filter_by_session_type(self, service, booked, reading):
        listed = await service.list_sessions(session_type_id=reading["id"])

        assert {s["session_type"]["name"] for s in listed} == {"Reading"}
        assert len(listed) == 2


class TestUpdateAndDeleteSession:
    """Test suite for update_session() and delete_session()."""

    async def test_toggle_completed(self, service, workout):
        created = await service.create_session(workout["id"], datetime(2025, 11, 15, 6, 30), 60)

        updated = await service.update_session(created["id"], completed=True)

        assert updated["completed"] is True
        assert updated["session_type"]["name"] == "Workout"
        assert (await service.get_session(created["id"]))["completed"] is True

    async def test_reschedule(self, service, workout):
        created = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        updated = await service.update_session(
            created["id"], scheduled_at=datetime(2025, 11, 22, 9, 0), duration=90
        )

        assert updated["scheduled_at"] == datetime(2025, 11, 22, 9, 0)
        assert updated["duration"] == 90

    async def test_empty_update_raises(self, service, workout):
        created = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        with pytest.raises(ValidationError, match="No fields to update"):
            await service.update_session(created["id"])

    async def test_update_missing_raises(self, service):
        with pytest.raises(SessionNotFoundError):
            await service.update_session(uuid.uuid4(), completed=True)

    async def test_delete(self, service, workout):
        created = await service.create_session(workout["id"], datetime(2025, 11, 21, 19, 0), 60)

        await service.delete_session(created["id"])

        with pytest.raises(SessionNotFoundError):
            await service.get_session(created["id"])

    async def test_delete_missing_raises(self, service):
        with pytest.raises(SessionNotFoundError):
            await service.delete_session(uuid.uuid4())

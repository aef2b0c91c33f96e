"""
Test suite for suggestion API endpoints.

System role: Verification of suggestion HTTP contracts
"""

from datetime import datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from session_planner.api.deps import get_suggestion_service
from session_planner.api.routers.suggestions import router as suggestions_router
from session_planner.core.exceptions import SessionTypeNotFoundError, ValidationError
from session_planner.core.scheduling.records import ConflictingSession, ConflictResult
from session_planner.core.scheduling.suggestions import NO_SLOTS_MESSAGE


@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(suggestions_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_suggestion_service] = lambda: service
    return service


@pytest.fixture
def deep_work() -> dict:
    return {"id": uuid4(), "name": "Deep Work", "category": "productivity", "priority": 5}


def _stats(**overrides) -> dict:
    stats = {
        "name": "Deep Work",
        "priority": 5,
        "upcoming_count": 1,
        "completed_count": 7,
        "average_spacing_days": 18.5 / 6,
    }
    stats.update(overrides)
    return stats


class TestGetSuggestions:
    """GET /suggestions"""

    def test_returns_ranked_suggestions(self, client, mock_service, deep_work):
        # Arrange
        mock_service.get_suggestions.return_value = {
            "suggestions": [
                {
                    "rank": 1,
                    "session_type": deep_work,
                    "suggested_start": datetime(2025, 11, 18, 7, 0),
                    "suggested_end": datetime(2025, 11, 18, 8, 0),
                    "duration": 60,
                    "score": 170,
                    "reasons": ["High priority (5/5) session type"],
                }
            ],
            "session_type_stats": _stats(),
            "message": None,
        }

        # Act
        response = client.get(
            "/suggestions",
            params={"session_type_id": str(deep_work["id"]), "duration": 60, "limit": 3},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["suggestions"][0]["rank"] == 1
        assert data["suggestions"][0]["suggested_start"] == "2025-11-18T07:00:00"
        assert data["suggestions"][0]["session_type"]["name"] == "Deep Work"
        assert data["session_type_stats"]["completed_count"] == 7
        assert data["message"] is None
        mock_service.get_suggestions.assert_called_once_with(
            deep_work["id"], duration=60, days_ahead=None, limit=3
        )

    def test_no_slots_message(self, client, mock_service):
        mock_service.get_suggestions.return_value = {
            "suggestions": [],
            "session_type_stats": _stats(average_spacing_days=None),
            "message": NO_SLOTS_MESSAGE,
        }

        response = client.get("/suggestions", params={"session_type_id": str(uuid4())})

        assert response.status_code == 200
        assert response.json()["suggestions"] == []
        assert response.json()["message"] == NO_SLOTS_MESSAGE

    def test_missing_session_type_id_returns_422(self, client, mock_service):
        response = client.get("/suggestions")

        assert response.status_code == 422
        mock_service.get_suggestions.assert_not_called()

    def test_unknown_session_type_returns_404(self, client, mock_service):
        session_type_id = uuid4()
        mock_service.get_suggestions.side_effect = SessionTypeNotFoundError(session_type_id)

        response = client.get("/suggestions", params={"session_type_id": str(session_type_id)})

        assert response.status_code == 404

    def test_out_of_range_duration_returns_400(self, client, mock_service):
        mock_service.get_suggestions.side_effect = ValidationError(
            "duration must be between 1 and 480 minutes", field="duration"
        )

        response = client.get(
            "/suggestions", params={"session_type_id": str(uuid4()), "duration": 600}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "duration must be between 1 and 480 minutes"


class TestAcceptSuggestion:
    """POST /suggestions/accept"""

    def test_accept_books_session(self, client, mock_service, deep_work):
        now = datetime(2025, 11, 17, 12, 0)
        session_id = uuid4()
        mock_service.accept_suggestion.return_value = {
            "id": session_id,
            "session_type_id": deep_work["id"],
            "session_type": deep_work,
            "scheduled_at": datetime(2025, 11, 18, 7, 0),
            "duration": 60,
            "completed": False,
            "created_at": now,
            "updated_at": now,
        }

        response = client.post(
            "/suggestions/accept",
            json={
                "session_type_id": str(deep_work["id"]),
                "scheduled_at": "2025-11-18T07:00:00",
                "duration": 60,
            },
        )

        assert response.status_code == 201
        assert response.json()["id"] == str(session_id)
        mock_service.accept_suggestion.assert_called_once_with(
            deep_work["id"], datetime(2025, 11, 18, 7, 0), 60
        )

    def test_taken_slot_returns_409(self, client, mock_service, deep_work):
        mock_service.accept_suggestion.return_value = ConflictResult(
            has_conflict=True,
            conflicting_sessions=(
                ConflictingSession(
                    id=uuid4(),
                    session_type="Workout",
                    scheduled_at=datetime(2025, 11, 18, 6, 30),
                    duration=60,
                ),
            ),
        )

        response = client.post(
            "/suggestions/accept",
            json={
                "session_type_id": str(deep_work["id"]),
                "scheduled_at": "2025-11-18T07:00:00",
                "duration": 60,
            },
        )

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "Session conflicts with existing sessions"
        assert body["conflicts"][0]["session_type"] == "Workout"

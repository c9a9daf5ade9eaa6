from __future__ import annotations

from typing import Any, Dict

from fastapi.testclient import TestClient

from app.exceptions.errors import RecordStoreError
from app.main import create_app
from app.storage import MemoryRecordStore

API = "/api/v1"


def _workout_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "exercise_type": "Running",
        "duration": 30,
        "calories": 240,
        "intensity": "medium",
        "notes": "Morning jog",
        "date": "2026-03-03T07:30:00",
    }
    payload.update(overrides)
    return payload


def test_first_contact_creates_guest_and_reuses_it(client: TestClient) -> None:
    first = client.get(f"{API}/auth/user")
    second = client.get(f"{API}/auth/user")

    assert first.status_code == 200
    body = first.json()
    assert body["is_guest"] is True
    assert body["user_id"].startswith("guest_")
    assert second.json()["user_id"] == body["user_id"]


def test_guest_registration_carries_records_over(client: TestClient) -> None:
    guest_id = client.get(f"{API}/auth/user").json()["user_id"]

    workout = client.post(f"{API}/workouts", json=_workout_payload())
    assert workout.status_code == 200
    goal = client.post(f"{API}/goals", json={"type": "daily_calories", "target": 500})
    assert goal.json()["current"] == 0
    progress = client.patch(f"{API}/goals/{goal.json()['id']}", json={"current": 120})
    assert progress.json()["current"] == 120

    registered = client.post(f"{API}/register", json={"username": "alice", "password": "pass-word"})
    assert registered.status_code == 200
    user = registered.json()["user"]
    assert user["username"] == "alice"
    assert user["id"] != guest_id

    session = client.get(f"{API}/auth/user").json()
    assert session == {"is_guest": False, "user_id": user["id"], "username": "alice"}

    workouts = client.get(f"{API}/workouts").json()
    assert len(workouts) == 1
    assert workouts[0]["exercise_type"] == "Running"
    assert workouts[0]["user_id"] == user["id"]
    goals = client.get(f"{API}/goals").json()
    assert [(g["type"], g["current"]) for g in goals] == [("daily_calories", 120)]


def test_login_logout_cycle(client: TestClient) -> None:
    client.post(f"{API}/register", json={"username": "bob", "password": "pass-word"})

    logout = client.post(f"{API}/logout")
    assert logout.json() == {"message": "Logout successful"}
    assert client.get(f"{API}/auth/user").json()["is_guest"] is True

    wrong = client.post(f"{API}/login", json={"username": "bob", "password": "nope"})
    unknown = client.post(f"{API}/login", json={"username": "nobody", "password": "nope"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"error": "Invalid username or password"}

    ok = client.post(f"{API}/login", json={"username": "bob", "password": "pass-word"})
    assert ok.status_code == 200
    assert ok.json()["message"] == "Login successful"
    assert client.get(f"{API}/auth/user").json()["username"] == "bob"


def test_duplicate_username_rejected(store: MemoryRecordStore, client: TestClient) -> None:
    client.post(f"{API}/register", json={"username": "carol", "password": "pass-word"})

    with TestClient(create_app(store)) as other_client:
        response = other_client.post(f"{API}/register", json={"username": "carol", "password": "x"})

    assert response.status_code == 400
    assert response.json() == {"error": "Username already exists"}


def test_blank_credentials_rejected(client: TestClient) -> None:
    response = client.post(f"{API}/register", json={"username": "", "password": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "Username and password are required"}

    response = client.post(f"{API}/login", json={"username": "dave"})
    assert response.status_code == 400


def test_update_missing_or_foreign_workout_is_not_found(
    store: MemoryRecordStore, client: TestClient
) -> None:
    missing = client.patch(f"{API}/workouts/does-not-exist", json={"duration": 10})
    assert missing.status_code == 404
    assert missing.json() == {"error": "Workout not found"}

    with TestClient(create_app(store)) as other_client:
        foreign_id = other_client.post(f"{API}/workouts", json=_workout_payload()).json()["id"]

    foreign = client.patch(f"{API}/workouts/{foreign_id}", json={"duration": 10})
    assert foreign.status_code == 404

    missing_goal = client.patch(f"{API}/goals/nope", json={"current": 1})
    assert missing_goal.json() == {"error": "Goal not found"}


def test_partial_workout_update(client: TestClient) -> None:
    created = client.post(f"{API}/workouts", json=_workout_payload()).json()

    response = client.patch(f"{API}/workouts/{created['id']}", json={"intensity": "high"})

    assert response.status_code == 200
    body = response.json()
    assert body["intensity"] == "high"
    assert body["duration"] == created["duration"]
    assert body["notes"] == created["notes"]


def test_weekly_workouts_only_include_current_week(client: TestClient) -> None:
    client.post(f"{API}/workouts", json=_workout_payload(date=None))
    client.post(f"{API}/workouts", json=_workout_payload(date="2001-01-01T10:00:00"))

    weekly = client.get(f"{API}/workouts/weekly").json()

    assert len(weekly) == 1
    assert len(client.get(f"{API}/workouts").json()) == 2


def test_invalid_workout_payload(client: TestClient) -> None:
    response = client.post(f"{API}/workouts", json=_workout_payload(intensity="extreme"))

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request data"


def test_exercise_catalog(client: TestClient) -> None:
    catalog = client.get(f"{API}/exercises").json()
    assert "Running" in {e["name"] for e in catalog}

    added = client.post(f"{API}/exercises", json={
        "name": "Rowing", "category": "cardio", "calories_per_minute": 9, "emoji": "🚣"
    })
    assert added.status_code == 200
    assert len(client.get(f"{API}/exercises").json()) == len(catalog) + 1


def test_store_failure_during_session_is_generic_error() -> None:
    class BrokenStore(MemoryRecordStore):
        async def create_user(self, data):
            raise RecordStoreError("database unavailable")

    with TestClient(create_app(BrokenStore())) as broken_client:
        response = broken_client.get(f"{API}/workouts")

    assert response.status_code == 500
    assert response.json() == {"error": "Session error"}


def test_store_failure_on_owner_routes_is_persistence_failure() -> None:
    class ReadOnlyOutageStore(MemoryRecordStore):
        async def get_workouts(self, user_id):
            raise RecordStoreError("database unavailable")

    with TestClient(create_app(ReadOnlyOutageStore())) as broken_client:
        response = broken_client.get(f"{API}/workouts")

    assert response.status_code == 500
    assert response.json() == {"error": "Persistence failure"}


def test_unknown_exercise_category_rejected(client: TestClient) -> None:
    response = client.post(f"{API}/exercises", json={
        "name": "Juggling", "category": "circus", "calories_per_minute": 4, "emoji": "🤹"
    })

    assert response.status_code == 422

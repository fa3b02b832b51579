"""
HTTP route tests against in-memory collaborators
"""
import pytest
from fastapi.testclient import TestClient

from gearup.core.dependencies import get_record_store, get_reminder_scheduler
from main import app


@pytest.fixture
def client(store, reminder_scheduler):
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_reminder_scheduler] = lambda: reminder_scheduler
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["reminders_scheduled"] is False


def test_list_returns_default_habits(client):
    response = client.get("/habits")

    assert response.status_code == 200
    assert len(response.json()["habits"]) == 5


def test_habit_lifecycle(client, store):
    created = client.post("/habits", json={"name": "Stretch", "target_value": 2, "unit": "sets", "icon": "🤸"})
    assert created.status_code == 200
    habit_id = created.json()["data"]["id"]

    first = client.post(f"/habits/{habit_id}/increment").json()
    second = client.post(f"/habits/{habit_id}/increment").json()
    assert first["progress"]["current_value"] == 1
    assert second["progress"]["is_completed"] is True
    assert second["just_completed"] is True

    edited = client.put(f"/habits/{habit_id}", json={"name": "Stretching", "target_value": 3, "unit": "sets"})
    assert edited.status_code == 200
    assert edited.json()["data"]["id"] == habit_id

    deleted = client.delete(f"/habits/{habit_id}")
    assert deleted.status_code == 200
    assert all(p.habit_id != habit_id for p in store.get_habit_progress())
    assert client.delete(f"/habits/{habit_id}").status_code == 404


@pytest.mark.parametrize("payload", [
    {"name": "", "target_value": 2, "unit": "sets"},
    {"name": "Run", "target_value": 0, "unit": "km"},
    {"name": "Run", "target_value": 3, "unit": "  "},
])
def test_invalid_habit_is_rejected(client, store, payload):
    response = client.post("/habits", json=payload)

    assert response.status_code == 400
    assert len(store.get_habits()) == 5


def test_increment_unknown_habit(client):
    assert client.post("/habits/nope/increment").status_code == 404


def test_mark_water_and_summary(client, store):
    marked = client.post("/habits/water/mark")
    assert marked.status_code == 200
    assert marked.json()["habit"]["name"] == "Drink Water"

    summary = client.get("/habits/summary/today").json()["summary"]
    widget = client.get("/widget").json()
    assert summary == widget["summary"]
    assert summary["total_count"] == len(store.get_habits())


def test_today_habits(client):
    body = client.get("/habits/today").json()

    assert body["status"] == "success"
    assert len(body["habits"]) == 5
    assert body["summary"]["percentage"] == 0


def test_share_progress(client):
    response = client.get("/habits/share")

    assert response.status_code == 200
    assert "My GearUp Progress" in response.text


def test_reset_habits(client, store):
    client.post("/habits", json={"name": "Stretch", "target_value": 2, "unit": "sets"})
    assert len(store.get_habits()) == 6

    assert client.post("/habits/reset").status_code == 200
    assert len(store.get_habits()) == 5
    assert store.get_habit_progress() == []


def test_mood_save_overwrite_and_today(client):
    first = client.post("/mood", json={"mood": "happy", "note": "sunny"})
    second = client.post("/mood", json={"mood": "sad", "note": "rain"})
    assert first.json()["updated"] is False
    assert second.json()["updated"] is True

    entries = client.get("/mood").json()["entries"]
    assert len(entries) == 1
    assert entries[0]["emoji"] == "😢"
    assert entries[0]["display_date"] == "Today"

    today = client.get("/mood/today").json()
    assert today["mood"] == "sad"
    assert today["entry"]["note"] == "rain"


def test_mood_without_selection(client):
    assert client.post("/mood", json={"note": "hmm"}).status_code == 400
    assert client.post("/mood", json={"mood": "ecstatic"}).status_code == 422


def test_mood_types(client):
    types = client.get("/mood/types").json()
    assert [t["mood"] for t in types] == ["very_happy", "happy", "excited", "neutral", "tired", "sad", "angry"]


def test_mood_summary_and_clear(client):
    assert client.get("/mood/share/summary").status_code == 404

    client.post("/mood", json={"mood": "excited"})
    assert "My Mood Summary" in client.get("/mood/share/summary").text

    assert client.delete("/mood").status_code == 200
    assert client.get("/mood").json()["entries"] == []


def test_mood_range(client, store):
    client.post("/mood", json={"mood": "neutral"})
    day = store.get_mood_entries()[0].date

    assert len(client.get("/mood/range", params={"start": day, "end": day}).json()["entries"]) == 1
    assert client.get("/mood/range", params={"start": "1999-01-01", "end": "1999-12-31"}).json()["entries"] == []


def test_reminder_settings_flow(client, reminder_scheduler):
    initial = client.get("/settings/reminders").json()
    assert initial["settings"]["interval_minutes"] == 60
    assert initial["scheduled"] is False

    enabled = client.put("/settings/reminders", json={"enabled": True, "interval_minutes": 30})
    assert enabled.status_code == 200
    assert enabled.json()["scheduled"] is True
    assert enabled.json()["message"] == "Hydration reminders enabled! 💧"

    disabled = client.put("/settings/reminders", json={"enabled": False})
    assert disabled.json()["scheduled"] is False
    assert reminder_scheduler.is_scheduled() is False


def test_reminder_settings_validation(client):
    assert client.put("/settings/reminders", json={"interval_minutes": 0}).status_code == 400
    assert client.put("/settings/reminders", json={"start_time": "25:00"}).status_code == 422
    assert client.put("/settings/reminders", json={}).status_code == 400

"""Tests for the JSON API."""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from liftlog.web import create_app

PLAN = {
    "workout_name": "Upper Pump",
    "exercises": [{"exercise_name": "Bench Press", "sets": 4, "reps": "8-12", "rest_seconds": 90}],
    "estimated_duration": 45,
    "reasoning": "Moderate volume.",
}


async def fake_completion(**kwargs):
    if "response_format" in kwargs:
        content = json.dumps(PLAN)
    else:
        content = "Eat enough protein."
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def client(temp_db_path):
    app = create_app(temp_db_path)
    app.state.completion = fake_completion
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth(client):
    response = client.post(
        "/auth/signup",
        json={"email": "lifter@example.com", "password": "secret123", "full_name": "Sam"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def create_template(client, auth, **overrides):
    body = {
        "name": "Push Day",
        "exercises": [
            {"name": "Bench Press", "sets": 3, "reps_min": 8, "reps_max": 8, "target_weight": 50},
            {"name": "Dips", "sets": 2, "reps_min": 10, "reps_max": 12},
        ],
    }
    body.update(overrides)
    return client.post("/templates", json=body, headers=auth)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAuth:
    def test_me(self, client, auth):
        response = client.get("/auth/me", headers=auth)
        assert response.status_code == 200
        assert response.json()["email"] == "lifter@example.com"

    def test_login(self, client, auth):
        response = client.post(
            "/auth/login", json={"email": "lifter@example.com", "password": "secret123"}
        )
        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_bad_login(self, client, auth):
        response = client.post(
            "/auth/login", json={"email": "lifter@example.com", "password": "nope-nope"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Email or password is incorrect."

    def test_duplicate_signup(self, client, auth):
        response = client.post(
            "/auth/signup", json={"email": "lifter@example.com", "password": "secret123"}
        )
        assert response.status_code == 401
        assert "already registered" in response.json()["detail"]

    @pytest.mark.parametrize("header", [None, "Token abc", "Bearer unknown"])
    def test_writes_need_a_valid_token(self, client, header):
        headers = {"Authorization": header} if header else {}
        response = client.post("/templates", json={"name": "x"}, headers=headers)
        assert response.status_code == 401

    @pytest.mark.parametrize(
        "method, path",
        [
            ("delete", "/workouts/{session_id}"),
            ("delete", "/templates/{template_id}"),
            ("post", "/templates/{template_id}/favorite"),
        ],
    )
    def test_changes_to_stored_data_need_a_token(self, client, auth, method, path):
        template_id = create_template(client, auth).json()["template"]["id"]
        session_id = client.post(
            "/workouts", json={"exercises": [{"name": "Squat"}]}, headers=auth
        ).json()["session"]["id"]
        url = path.format(session_id=session_id, template_id=template_id)

        response = client.request(method, url)

        assert response.status_code == 401
        assert client.get(f"/workouts/{session_id}").status_code == 200
        template = client.get(f"/templates/{template_id}").json()
        assert template["is_favorite"] is False


class TestTemplates:
    def test_create_and_read(self, client, auth):
        response = create_template(client, auth)
        assert response.status_code == 201
        created = response.json()
        template_id = created["template"]["id"]
        assert [e["order_index"] for e in created["exercises"]] == [0, 1]
        assert created["unresolved"] == []

        loaded = client.get(f"/templates/{template_id}").json()
        assert [e["exercise_name"] for e in loaded["exercises"]] == ["Bench Press", "Dips"]
        assert loaded["exercises"][0]["target_weight_kg"] == 50
        assert loaded["exercises"][1]["target_weight_kg"] is None

        listed = client.get("/templates").json()
        assert [(t["name"], t["exercise_count"]) for t in listed] == [("Push Day", 2)]

    def test_validation_error(self, client, auth):
        response = create_template(client, auth, name="  ")
        assert response.status_code == 400

        response = create_template(client, auth, exercises=[])
        assert response.status_code == 400
        assert "at least one exercise" in response.json()["detail"]

    def test_missing(self, client, auth):
        assert client.get("/templates/99").status_code == 404
        assert client.delete("/templates/99", headers=auth).status_code == 404

    def test_favorite_and_delete(self, client, auth):
        template_id = create_template(client, auth).json()["template"]["id"]

        assert client.post(f"/templates/{template_id}/favorite", headers=auth).json()["is_favorite"] is True
        assert client.delete(f"/templates/{template_id}", headers=auth).status_code == 204
        assert client.get(f"/templates/{template_id}").status_code == 404

    def test_start_returns_pending_sets(self, client, auth):
        template_id = create_template(client, auth).json()["template"]["id"]

        started = client.get(f"/templates/{template_id}/start").json()

        bench = started["rows"][0]
        assert bench["progress"]["actual_weights"] == [50, 50, 50]
        assert bench["progress"]["completed"] == []
        assert started["summary"]["planned_sets"] == 5
        assert started["summary"]["completed_sets"] == 0

    def test_finish_run_collapses_sets(self, client, auth):
        template_id = create_template(client, auth).json()["template"]["id"]

        response = client.post(
            f"/templates/{template_id}/start",
            json={
                "mood": "excellent",
                "rows": [
                    {
                        "order_index": 0,
                        "sets": [
                            {"weight": 50},
                            {"weight": 52, "completed": True},
                            {"weight": 54, "completed": True},
                        ],
                    }
                ],
            },
            headers=auth,
        )

        assert response.status_code == 201
        saved = response.json()
        bench, dips = saved["exercises"]
        assert (bench["sets"], bench["weight_kg"], bench["reps_min"]) == (2, 53, 8)
        assert dips["weight_kg"] is None
        assert saved["session"]["mood"] == "excellent"

    def test_finish_run_bad_position(self, client, auth):
        template_id = create_template(client, auth).json()["template"]["id"]

        response = client.post(
            f"/templates/{template_id}/start",
            json={"rows": [{"order_index": 5, "sets": []}]},
            headers=auth,
        )

        assert response.status_code == 400


class TestWorkouts:
    def test_log_and_review(self, client, auth):
        response = client.post(
            "/workouts",
            json={
                "mood": "tired",
                "notes": "short on sleep",
                "exercises": [
                    {"name": "Bench Press", "sets": 3, "reps": 9, "weight": 20},
                    {"name": "Plank", "sets": 2},
                ],
            },
            headers=auth,
        )
        assert response.status_code == 201
        session_id = response.json()["session"]["id"]

        review = client.get(f"/workouts/{session_id}").json()
        assert review["volumes"] == [540, 0]
        assert review["total_volume"] == 540
        assert review["total_sets"] == 5
        assert review["session"]["mood"] == "tired"
        assert [e["exercise_name"] for e in review["session"]["exercises"]] == ["Bench Press", "Plank"]

        me = client.get("/auth/me", headers=auth).json()
        assert [w["id"] for w in client.get(f"/workouts?user_id={me['user_id']}").json()] == [session_id]

        stats = client.get("/stats").json()
        assert stats["total_sessions"] == 1
        assert stats["total_exercises"] == 2

    def test_empty_session_rejected(self, client, auth):
        response = client.post("/workouts", json={"exercises": []}, headers=auth)
        assert response.status_code == 400

    def test_delete(self, client, auth):
        session_id = client.post(
            "/workouts", json={"exercises": [{"name": "Squat"}]}, headers=auth
        ).json()["session"]["id"]

        assert client.delete(f"/workouts/{session_id}", headers=auth).status_code == 204
        assert client.get(f"/workouts/{session_id}").status_code == 404

    def test_delete_missing(self, client, auth):
        response = client.delete("/workouts/9999", headers=auth)
        assert response.status_code == 404
        assert "Workout 9999 not found" in response.json()["detail"]


class TestTrainersAndAI:
    def create_trainer(self, client):
        response = client.post(
            "/trainers",
            json={
                "name": "Coach Ana",
                "specialty": "hypertrophy",
                "philosophy": "Time under tension.",
                "training_style": "Bro split",
                "favorite_exercises": ["Bench Press"],
            },
        )
        assert response.status_code == 201
        return response.json()

    def test_trainer_crud(self, client):
        trainer = self.create_trainer(client)

        assert client.get(f"/trainers/{trainer['id']}").json()["favorite_exercises"] == ["Bench Press"]
        assert [t["name"] for t in client.get("/trainers").json()] == ["Coach Ana"]
        assert client.delete(f"/trainers/{trainer['id']}").status_code == 204
        assert client.get(f"/trainers/{trainer['id']}").status_code == 404

    def test_trainer_validation(self, client):
        response = client.post(
            "/trainers", json={"name": "X", "philosophy": " ", "training_style": "y"}
        )
        assert response.status_code == 400

    def test_generate_and_fetch(self, client, auth):
        trainer = self.create_trainer(client)
        create_template(client, auth)  # puts Bench Press in the catalog

        response = client.post("/ai", json={"trainer_id": trainer["id"], "goal": "Bigger chest"})

        assert response.status_code == 201
        body = response.json()
        assert body["plan"]["workout_name"] == "Upper Pump"
        assert body["unknown_exercises"] == []
        workout_id = body["workout"]["id"]

        stored = client.get(f"/ai/{workout_id}").json()
        assert stored["goal"] == "Bigger chest"
        assert stored["workout_structure"] == PLAN
        assert [w["id"] for w in client.get(f"/ai?trainer_id={trainer['id']}").json()] == [workout_id]

    def test_generate_unknown_trainer(self, client):
        response = client.post("/ai", json={"trainer_id": 42, "goal": "Anything"})
        assert response.status_code == 404

    def test_generation_failure_is_bad_gateway(self, client):
        trainer = self.create_trainer(client)

        async def broken(**kwargs):
            raise RuntimeError("provider down")

        client.app.state.completion = broken
        response = client.post("/ai", json={"trainer_id": trainer["id"], "goal": "Anything"})

        assert response.status_code == 502
        assert "provider down" in response.json()["detail"]

    def test_ask(self, client):
        trainer = self.create_trainer(client)

        response = client.post("/ai/ask", json={"trainer_id": trainer["id"], "question": "Diet?"})

        assert response.json() == {"trainer": "Coach Ana", "answer": "Eat enough protein."}

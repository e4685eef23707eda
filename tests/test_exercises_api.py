"""Exercise catalog endpoints."""

import uuid

import pytest


def _custom(name="Cable Crossover", **overrides):
    payload = {
        "name": name,
        "description": "Cable chest fly",
        "category": "strength",
        "muscleGroups": ["Chest"],
        "equipment": "Cable",
        "instructions": "Bring handles together",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def alice_exercise(client, alice_headers):
    resp = await client.post("/api/exercises", json=_custom(), headers=alice_headers)
    assert resp.status_code == 201
    return resp.json()["exercise"]


async def test_list_requires_auth(client):
    assert (await client.get("/api/exercises")).status_code == 401


async def test_list_shows_system_then_own_custom(client, alice_headers, bob_headers, bench, squat, alice_exercise):
    resp = await client.get("/api/exercises", headers=alice_headers)
    assert resp.status_code == 200
    names = [e["name"] for e in resp.json()["exercises"]]
    assert names == ["Barbell Bench Press", "Barbell Squat", "Cable Crossover"]

    resp = await client.get("/api/exercises", headers=bob_headers)
    assert [e["name"] for e in resp.json()["exercises"]] == ["Barbell Bench Press", "Barbell Squat"]


async def test_list_filters(client, alice_headers, bench, squat, running):
    resp = await client.get("/api/exercises", params={"category": "cardio"}, headers=alice_headers)
    assert [e["name"] for e in resp.json()["exercises"]] == ["Running"]

    resp = await client.get("/api/exercises", params={"muscleGroup": "Chest"}, headers=alice_headers)
    assert [e["name"] for e in resp.json()["exercises"]] == ["Barbell Bench Press"]

    resp = await client.get("/api/exercises", params={"search": "SQU"}, headers=alice_headers)
    assert [e["name"] for e in resp.json()["exercises"]] == ["Barbell Squat"]

    resp = await client.get("/api/exercises", params={"category": "yoga"}, headers=alice_headers)
    assert resp.status_code == 400


async def test_search_treats_like_wildcards_literally(client, alice_headers, bench, squat):
    for term in ("_", "%", "Barbell%Squat", "B_rbell"):
        resp = await client.get("/api/exercises", params={"search": term}, headers=alice_headers)
        assert resp.status_code == 200
        assert resp.json()["exercises"] == [], term

    resp = await client.get("/api/exercises", params={"search": "bell squ"}, headers=alice_headers)
    assert [e["name"] for e in resp.json()["exercises"]] == ["Barbell Squat"]


async def test_create_returns_custom_exercise(client, alice_headers, alice_exercise):
    assert alice_exercise["isCustom"] is True
    assert alice_exercise["muscleGroups"] == ["Chest"]
    assert alice_exercise["category"] == "strength"
    assert alice_exercise["equipment"] == "Cable"


@pytest.mark.parametrize(
    "payload",
    [
        _custom(muscleGroups=[]),
        {"name": "No groups", "category": "strength"},
        _custom(name=""),
        _custom(category="unknown"),
    ],
)
async def test_create_validation(client, alice_headers, payload):
    resp = await client.post("/api/exercises", json=payload, headers=alice_headers)
    assert resp.status_code == 400
    assert "error" in resp.json()


async def test_update_overwrites_all_fields(client, alice_headers, alice_exercise):
    resp = await client.put(
        f"/api/exercises/{alice_exercise['id']}",
        json={"name": "Pec Deck", "category": "strength", "muscleGroups": ["Chest", "Shoulders"]},
        headers=alice_headers,
    )
    assert resp.status_code == 200
    updated = resp.json()["exercise"]
    assert updated["name"] == "Pec Deck"
    assert updated["muscleGroups"] == ["Chest", "Shoulders"]
    assert updated["description"] is None
    assert updated["equipment"] is None


async def test_update_and_delete_ownership(client, alice_headers, bob_headers, bench, alice_exercise):
    url = f"/api/exercises/{alice_exercise['id']}"
    assert (await client.put(url, json=_custom("Hacked"), headers=bob_headers)).status_code == 403
    assert (await client.delete(url, headers=bob_headers)).status_code == 403

    system_url = f"/api/exercises/{bench.id}"
    assert (await client.put(system_url, json=_custom(), headers=alice_headers)).status_code == 403
    assert (await client.delete(system_url, headers=alice_headers)).status_code == 403

    missing = f"/api/exercises/{uuid.uuid4()}"
    assert (await client.put(missing, json=_custom(), headers=alice_headers)).status_code == 404
    assert (await client.delete(missing, headers=alice_headers)).status_code == 404


async def test_delete_custom_exercise(client, alice_headers, alice_exercise):
    resp = await client.delete(f"/api/exercises/{alice_exercise['id']}", headers=alice_headers)
    assert resp.status_code == 204
    resp = await client.get("/api/exercises", headers=alice_headers)
    assert resp.json()["exercises"] == []


async def test_delete_removes_sets_and_renumbers(client, alice_headers, bench, alice_exercise):
    custom_id = alice_exercise["id"]
    workout = {
        "name": "Push",
        "date": "2024-02-01",
        "sets": [
            {"exerciseId": str(bench.id), "setNumber": 1, "reps": 5, "weight": 185},
            {"exerciseId": custom_id, "setNumber": 1, "reps": 12, "weight": 30},
            {"exerciseId": str(bench.id), "setNumber": 2, "reps": 5, "weight": 185},
        ],
    }
    workout_id = (await client.post("/api/workouts", json=workout, headers=alice_headers)).json()["workout"]["id"]
    template = {
        "name": "Push day",
        "exercises": [{"exerciseId": custom_id}, {"exerciseId": str(bench.id)}],
    }
    template_id = (await client.post("/api/templates", json=template, headers=alice_headers)).json()["template"]["id"]

    assert (await client.delete(f"/api/exercises/{custom_id}", headers=alice_headers)).status_code == 204

    sets = (await client.get(f"/api/workouts/{workout_id}", headers=alice_headers)).json()["workout"]["sets"]
    assert [s["setNumber"] for s in sets] == [1, 2]
    assert {s["exerciseId"] for s in sets} == {str(bench.id)}

    entries = (await client.get(f"/api/templates/{template_id}", headers=alice_headers)).json()["template"]["exercises"]
    assert [(e["exerciseId"], e["orderIndex"]) for e in entries] == [(str(bench.id), 0)]

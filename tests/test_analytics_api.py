"""Analytics endpoints over logged workouts."""

from datetime import date, timedelta

import pytest


async def _log(client, headers, exercise_id, day, sets, name="Workout"):
    payload = {
        "name": name,
        "date": day,
        "sets": [
            {"exerciseId": str(exercise_id), "setNumber": i, "reps": reps, "weight": weight, "weightUnit": unit}
            for i, (reps, weight, unit) in enumerate(sets, start=1)
        ],
    }
    resp = await client.post("/api/workouts", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["workout"]


async def test_volume_for_single_workout(client, alice_headers, squat):
    await _log(client, alice_headers, squat.id, "2024-01-01", [(10, 135, "lbs")], name="Leg Day")
    resp = await client.get("/api/analytics/volume", headers=alice_headers)
    assert resp.status_code == 200
    assert resp.json() == {"volumeData": [{"date": "2024-01-01", "volume": 1350.0, "sets": 1}]}


async def test_volume_filters_by_exercise_and_dates(client, alice_headers, squat, bench):
    await _log(client, alice_headers, squat.id, "2024-01-01", [(10, 100, "lbs")])
    await _log(client, alice_headers, bench.id, "2024-01-01", [(5, 100, "kg")])
    await _log(client, alice_headers, squat.id, "2024-01-10", [(5, 200, "lbs"), (5, 200, "lbs")])

    resp = await client.get("/api/analytics/volume", params={"exerciseId": str(bench.id)}, headers=alice_headers)
    (point,) = resp.json()["volumeData"]
    assert point["volume"] == pytest.approx(1102.31)

    resp = await client.get("/api/analytics/volume", params={"startDate": "2024-01-05"}, headers=alice_headers)
    assert resp.json()["volumeData"] == [{"date": "2024-01-10", "volume": 2000.0, "sets": 2}]

    resp = await client.get("/api/analytics/volume", headers=alice_headers)
    data = resp.json()["volumeData"]
    assert [p["date"] for p in data] == ["2024-01-01", "2024-01-10"]
    assert data[0]["sets"] == 2


async def test_progress_groups_by_day(client, alice_headers, bob_headers, bench):
    await _log(client, alice_headers, bench.id, "2024-01-03", [(5, 100, "kg"), (8, 200, "lbs")])
    await _log(client, alice_headers, bench.id, "2024-01-01", [(10, 135, "lbs")])
    await _log(client, bob_headers, bench.id, "2024-01-01", [(1, 500, "lbs")])

    resp = await client.get(f"/api/analytics/progress/{bench.id}", headers=alice_headers)
    progress = resp.json()["progress"]
    assert [p["date"] for p in progress] == ["2024-01-01", "2024-01-03"]
    assert progress[0] == {"date": "2024-01-01", "maxWeight": 135.0, "totalVolume": 1350.0, "totalReps": 10, "sets": 1}
    assert progress[1]["maxWeight"] == pytest.approx(220.462)
    assert progress[1]["totalVolume"] == pytest.approx(220.462 * 5 + 1600)
    assert progress[1]["totalReps"] == 13
    assert progress[1]["sets"] == 2

    resp = await client.get(
        f"/api/analytics/progress/{bench.id}", params={"endDate": "2024-01-02"}, headers=alice_headers
    )
    assert len(resp.json()["progress"]) == 1


async def test_personal_records(client, alice_headers, bench, squat):
    await _log(client, alice_headers, squat.id, "2024-01-01", [(5, 100, "lbs")])
    await _log(client, alice_headers, squat.id, "2024-01-02", [(8, 100, "lbs")])
    await _log(client, alice_headers, bench.id, "2024-01-03", [(3, 100, "kg"), (10, 200, "lbs")])

    resp = await client.get("/api/analytics/personal-records", headers=alice_headers)
    records = resp.json()["personalRecords"]
    assert [r["exerciseName"] for r in records] == ["Barbell Bench Press", "Barbell Squat"]
    bench_pr, squat_pr = records
    assert bench_pr["maxWeight"] == pytest.approx(220.462)
    assert bench_pr["reps"] == 3
    assert bench_pr["exerciseId"] == str(bench.id)
    assert squat_pr == {
        "exerciseId": str(squat.id),
        "exerciseName": "Barbell Squat",
        "maxWeight": 100.0,
        "reps": 8,
        "date": "2024-01-02",
    }


async def test_workout_frequency_by_sunday_week(client, alice_headers, squat):
    # 2024-01-07 is a Sunday
    for day in ["2024-01-08", "2024-01-01", "2024-01-06", "2024-01-07"]:
        await _log(client, alice_headers, squat.id, day, [(5, 100, "lbs")])

    resp = await client.get("/api/analytics/workout-frequency", headers=alice_headers)
    assert resp.json() == {
        "frequency": [{"week": "2023-12-31", "count": 2}, {"week": "2024-01-07", "count": 2}]
    }

    resp = await client.get(
        "/api/analytics/workout-frequency", params={"startDate": "2024-01-07"}, headers=alice_headers
    )
    assert resp.json() == {"frequency": [{"week": "2024-01-07", "count": 2}]}


async def test_summary_streak_and_last_workout(client, alice_headers, squat, bench):
    d = date(2024, 3, 10)
    for offset, name in [(0, "Today"), (1, "Yesterday"), (2, "Two days ago"), (4, "Earlier")]:
        await _log(client, alice_headers, squat.id, (d - timedelta(days=offset)).isoformat(), [(5, 100, "lbs")], name)
    await _log(client, alice_headers, bench.id, (d - timedelta(days=1)).isoformat(), [(5, 100, "lbs")])

    resp = await client.get("/api/analytics/summary", headers=alice_headers)
    assert resp.json() == {
        "summary": {
            "totalWorkouts": 5,
            "uniqueExercises": 2,
            "currentStreak": 3,
            "lastWorkout": {"date": "2024-03-10", "name": "Today"},
        }
    }


async def test_summary_gap_breaks_streak(client, alice_headers, squat):
    await _log(client, alice_headers, squat.id, "2024-03-10", [(5, 100, "lbs")])
    await _log(client, alice_headers, squat.id, "2024-03-08", [(5, 100, "lbs")])
    resp = await client.get("/api/analytics/summary", headers=alice_headers)
    assert resp.json()["summary"]["currentStreak"] == 1


async def test_summary_without_workouts(client, alice_headers):
    resp = await client.get("/api/analytics/summary", headers=alice_headers)
    assert resp.json() == {
        "summary": {"totalWorkouts": 0, "uniqueExercises": 0, "currentStreak": 0, "lastWorkout": None}
    }


async def test_analytics_only_see_own_data(client, alice_headers, bob_headers, squat):
    await _log(client, alice_headers, squat.id, "2024-01-01", [(5, 100, "lbs")])
    assert (await client.get("/api/analytics/volume", headers=bob_headers)).json() == {"volumeData": []}
    assert (await client.get("/api/analytics/personal-records", headers=bob_headers)).json() == {
        "personalRecords": []
    }
    summary = (await client.get("/api/analytics/summary", headers=bob_headers)).json()["summary"]
    assert summary["totalWorkouts"] == 0


async def test_analytics_require_auth(client):
    for path in ["/api/analytics/summary", "/api/analytics/volume", "/api/analytics/personal-records"]:
        assert (await client.get(path)).status_code == 401

"""Liveness, readiness and API root."""


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


async def test_api_root(client):
    resp = await client.get("/api")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Fitness Tracker API v1"}


async def test_readiness_checks_database(client):
    resp = await client.get("/api/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "connected"}


async def test_unauthenticated_error_shape(client):
    resp = await client.get("/api/workouts")
    assert resp.status_code == 401
    assert resp.json() == {"error": "You must be logged in to access this resource"}


async def test_unknown_route_uses_error_body(client):
    resp = await client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


async def test_wrong_method_uses_error_body(client, alice_headers):
    resp = await client.patch("/api/workouts", headers=alice_headers)
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method Not Allowed"}
    assert "GET" in resp.headers["allow"]

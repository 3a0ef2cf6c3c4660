def test_create_and_get_profile(client):
    resp = client.post(
        "/api/v1/profiles",
        json={"username": "grace", "email": "grace@example.com", "display_name": "Grace H", "bio": "compilers"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["username"] == "grace"
    assert body["followers_count"] == 0

    fetched = client.get("/api/v1/profiles/grace")
    assert fetched.status_code == 200
    assert fetched.json()["profile_id"] == body["profile_id"]
    assert fetched.json()["bio"] == "compilers"


def test_duplicate_username_conflicts(client, make_profile):
    make_profile("grace")
    resp = client.post("/api/v1/profiles", json={"username": "grace", "email": "other@example.com"})
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "username_taken"


def test_unknown_profile_404(client):
    resp = client.get("/api/v1/profiles/nobody")
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "profile_not_found"


def test_health_and_request_id(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.headers.get("X-Request-ID")

    echoed = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert echoed.headers["X-Request-ID"] == "abc-123"

def test_reputation_board_ranks_across_pages(client, make_profile):
    make_profile("low", reputation_score=5)
    make_profile("high", reputation_score=50)
    make_profile("mid", reputation_score=20)

    first = client.get("/api/v1/leaderboard?limit=2").json()
    assert [(e["rank"], e["profile"]["username"], e["score"]) for e in first["items"]] == [
        (1, "high", 50),
        (2, "mid", 20),
    ]
    assert first["total"] == 3
    assert first["has_more"] is True

    second = client.get("/api/v1/leaderboard?limit=2&page=2").json()
    assert [(e["rank"], e["profile"]["username"]) for e in second["items"]] == [(3, "low")]


def test_followers_board(client, make_profile):
    make_profile("quiet", followers_count=1)
    make_profile("popular", followers_count=900)
    data = client.get("/api/v1/leaderboard?type=followers").json()
    assert [e["profile"]["username"] for e in data["items"]] == ["popular", "quiet"]
    assert data["items"][0]["score"] == 900


def test_projects_board_counts_public_projects(client, make_profile, make_project):
    make_profile("maker")
    make_profile("dabbler")
    make_profile("lurker")
    make_project("maker", "One")
    make_project("maker", "Two")
    make_project("maker", "Secret", status="draft")
    make_project("dabbler", "Three")

    data = client.get("/api/v1/leaderboard?type=projects").json()
    assert data["total"] == 2
    assert [(e["profile"]["username"], e["score"]) for e in data["items"]] == [("maker", 2), ("dabbler", 1)]


def test_unknown_board_rejected(client):
    resp = client.get("/api/v1/leaderboard?type=karma")
    assert resp.status_code == 400
    body = resp.json()["detail"]
    assert body["code"] == "invalid_leaderboard_type"
    assert body["detail"]["allowed"] == ["followers", "projects", "reputation"]


def test_huge_page_returns_empty_board(client, make_profile):
    make_profile("solo", reputation_score=1)
    resp = client.get("/api/v1/leaderboard", params={"page": "1e300", "limit": "1"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["items"] == []
    assert data["total"] == 1
    assert data["page"] == 2**63 - 1

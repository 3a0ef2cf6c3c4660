from datetime import datetime, timezone

import pytest
from sqlalchemy import update

from openlaunch.models import Comment


@pytest.fixture
def launched(make_profile, make_project):
    make_profile("owner")
    make_profile("fan")
    return make_project("owner", "Widget")


def _comment(client, slug, author, content, parent_id=None):
    payload = {"author": author, "content": content}
    if parent_id:
        payload["parent_id"] = parent_id
    resp = client.post(f"/api/v1/projects/{slug}/comments", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_comment_updates_counts_and_notifies_owner(client, launched):
    comment = _comment(client, "widget", "fan", "Nice work")
    assert comment["parent_id"] is None
    assert comment["author"]["username"] == "fan"

    project = client.get("/api/v1/projects/widget").json()
    assert project["comments_count"] == 1

    feed = client.get("/api/v1/profiles/owner/notifications").json()
    assert len(feed["items"]) == 1
    note = feed["items"][0]
    assert note["type"] == "comment_received"
    assert note["body"] == "Nice work"
    assert note["data"] == {"project_slug": "widget", "comment_id": comment["comment_id"]}


def test_own_comment_does_not_notify(client, launched):
    _comment(client, "widget", "owner", "Thanks for looking")
    feed = client.get("/api/v1/profiles/owner/notifications").json()
    assert feed["items"] == []


def test_reply_notifies_parent_author(client, launched):
    parent = _comment(client, "widget", "fan", "Question?")
    reply = _comment(client, "widget", "owner", "x" * 300, parent_id=parent["comment_id"])
    assert reply["parent_id"] == parent["comment_id"]

    feed = client.get("/api/v1/profiles/fan/notifications").json()
    assert [n["type"] for n in feed["items"]] == ["comment_reply"]
    assert len(feed["items"][0]["body"]) == 120

    replies = client.get(f"/api/v1/comments/{parent['comment_id']}/replies").json()
    assert [r["comment_id"] for r in replies["items"]] == [reply["comment_id"]]


def test_top_level_listing_excludes_replies(client, launched):
    first = _comment(client, "widget", "fan", "first")
    _comment(client, "widget", "owner", "reply", parent_id=first["comment_id"])
    second = _comment(client, "widget", "fan", "second")

    data = client.get("/api/v1/projects/widget/comments").json()
    assert data["total"] == 2
    assert [c["comment_id"] for c in data["items"]] == [second["comment_id"], first["comment_id"]]
    assert data["items"][1]["replies_count"] == 1

    oldest = client.get("/api/v1/projects/widget/comments?sort_by=oldest").json()
    assert [c["comment_id"] for c in oldest["items"]] == [first["comment_id"], second["comment_id"]]


def test_parent_from_other_project_rejected(client, launched, make_project):
    make_project("owner", "Gadget")
    foreign = _comment(client, "gadget", "fan", "elsewhere")
    resp = client.post(
        "/api/v1/projects/widget/comments",
        json={"author": "fan", "content": "hi", "parent_id": foreign["comment_id"]},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "invalid_parent_comment"


def test_replies_of_unknown_comment_404(client):
    resp = client.get("/api/v1/comments/does-not-exist/replies")
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "comment_not_found"


def test_top_comments_with_equal_scores_page_without_gaps(client, launched, sync_engine):
    ids = [_comment(client, "widget", "fan", f"c{i}")["comment_id"] for i in range(5)]
    with sync_engine.begin() as conn:
        conn.execute(update(Comment).values(created_at=datetime(2024, 1, 1, tzinfo=timezone.utc), upvotes_count=1))

    seen = []
    for page in (1, 2, 3):
        data = client.get("/api/v1/projects/widget/comments", params={"sort_by": "top", "limit": 2, "page": page}).json()
        seen.extend(c["comment_id"] for c in data["items"])
    assert seen == sorted(ids, reverse=True)

def test_get_missing_profile_returns_404(client):
    response = client.get("/api/profile/@nobody:matrix.org")
    assert response.status_code == 404
    assert response.json() == {"error": "Profile not found"}


def test_put_then_get_round_trip(client):
    response = client.put("/api/profile/alice", json={"display_name": "Alice"})
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == "alice"
    assert body["display_name"] == "Alice"
    assert body["created_at"]

    fetched = client.get("/api/profile/alice").json()
    assert fetched == body


def test_partial_update_keeps_other_fields(client):
    client.put("/api/profile/bob", json={"display_name": "Bob", "bio": "likes calls"})
    updated = client.put("/api/profile/bob", json={"avatar_url": "https://example.org/bob.png"}).json()

    assert updated["display_name"] == "Bob"
    assert updated["bio"] == "likes calls"
    assert updated["avatar_url"] == "https://example.org/bob.png"


def test_explicit_null_clears_field(client):
    client.put("/api/profile/bob", json={"display_name": "Bob", "bio": "temporary"})
    updated = client.put("/api/profile/bob", json={"bio": None}).json()

    assert updated["bio"] is None
    assert updated["display_name"] == "Bob"


def test_oversized_bio_is_rejected_without_creating_profile(client):
    response = client.put("/api/profile/carol", json={"bio": "x" * 501})
    assert response.status_code == 400
    assert response.json() == {"error": "Bio too long (max 500 characters)", "field": "bio"}
    assert client.get("/api/profile/carol").status_code == 404


def test_oversized_field_leaves_existing_profile_unchanged(client):
    before = client.put("/api/profile/dave", json={"display_name": "Dave", "bio": "short"}).json()

    response = client.put("/api/profile/dave", json={"display_name": "D" * 101, "bio": "changed"})
    assert response.status_code == 400
    assert response.json()["field"] == "display_name"

    response = client.put("/api/profile/dave", json={"avatar_url": "h" * 501})
    assert response.status_code == 400
    assert response.json()["field"] == "avatar_url"

    assert client.get("/api/profile/dave").json() == before


def test_non_string_field_is_rejected(client):
    response = client.put("/api/profile/erin", json={"display_name": 42})
    assert response.status_code == 400
    assert "error" in response.json()
    assert client.get("/api/profile/erin").status_code == 404


def test_invalid_json_body_is_rejected(client):
    response = client.put(
        "/api/profile/erin", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "error" in response.json()

from fastapi.testclient import TestClient

from privachat.config import Settings
from privachat.main import RATE_LIMIT_MESSAGE, create_app


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "PrivaChat API is running"}


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert "error" in response.json()


def test_rate_limit_applies_to_api(database_url):
    settings = Settings(
        database_url=database_url,
        rate_limit_enabled=True,
        rate_limit_max_requests=3,
        rate_limit_window_seconds=900,
        log_level="WARNING",
    )
    with TestClient(create_app(settings)) as client:
        for _ in range(3):
            assert client.get("/api/health").status_code == 200

        response = client.get("/api/stats/alice")
        assert response.status_code == 429
        assert response.text == RATE_LIMIT_MESSAGE
        assert int(response.headers["Retry-After"]) > 0

        # outside the /api prefix
        assert client.get("/").status_code == 404


def test_static_front_end_is_served(database_url, tmp_path):
    static_dir = tmp_path / "web"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>PrivaChat</h1>")
    settings = Settings(
        database_url=database_url, rate_limit_enabled=False, static_dir=str(static_dir), log_level="WARNING"
    )
    with TestClient(create_app(settings)) as client:
        response = client.get("/")
        assert response.status_code == 200
        assert "PrivaChat" in response.text
        assert client.get("/api/health").json()["status"] == "ok"


def test_cors_headers_present(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost:8080"})
    assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:8080")

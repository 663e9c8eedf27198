from datetime import timedelta

from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import OperationalError

from gigs.crud import crud_review
from gigs.main import ALLOWED_ORIGINS, app


def test_root_and_health_routes(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.text == "Gigs.lk Backend is running!"

    body = client.get("/api/test").json()
    assert body["message"] == "Server is working!"
    assert "timestamp" in body

    assert client.get("/api/artists/test").json() == {"message": "Artist routes are working!"}


def test_unknown_route_returns_json_404(client):
    res = client.post("/api/nope")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found", "path": "/api/nope", "method": "POST"}


def test_cors_allows_listed_origin(client):
    origin = ALLOWED_ORIGINS[0]
    res = client.options(
        "/api/test",
        headers={"Origin": origin, "Access-Control-Request-Method": "GET"},
    )
    assert res.status_code == 200
    assert res.headers.get("access-control-allow-origin") == origin
    assert res.headers.get("access-control-allow-credentials") == "true"


def test_cors_ignores_unlisted_origin(client):
    res = client.get("/api/test", headers={"Origin": "http://evil.example"})
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers


def test_new_performers(client, make_performer, now):
    make_performer(email="old@test.com", stage_name="Old", created_at=now - timedelta(days=30))
    for i in range(5):
        make_performer(
            email=f"p{i}@test.com", stage_name=f"P{i}", created_at=now - timedelta(days=i)
        )

    res = client.get("/api/performers/new")
    assert res.status_code == 200
    names = [p["stage_name"] for p in res.json()["profiles"]]
    assert names == ["P0", "P1", "P2", "P3"]


def test_wrong_method_on_known_path_is_json_404(client):
    res = client.delete("/api/bookings")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found", "path": "/api/bookings", "method": "DELETE"}


def test_database_error_returns_500_with_driver_message(client, monkeypatch):
    def lost(db):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(crud_review, "get_all_reviews", lost)
    res = client.get("/api/admin/reviews")
    assert res.status_code == 500
    assert res.json() == {"message": "Server error", "error": "connection lost"}


def test_json_responses_use_orjson(client):
    assert app.router.default_response_class is ORJSONResponse
    res = client.get("/api/test")
    assert res.headers["content-type"] == "application/json"

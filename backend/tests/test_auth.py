from jose import jwt

from gigs import crud
from gigs.core.config import settings
from gigs.models import Host, Performer, User, UserRole


def register(client, email="new@test.com", role="performer", password="secret"):
    return client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "username": "New User", "role": role},
    )


def test_register_creates_user_and_profile(client, database):
    res = register(client)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "User registered successfully!"
    assert body["role"] == "performer"

    with database.session() as db:
        user = db.get(User, body["userId"])
        assert user.password != "secret"
        performer = db.query(Performer).filter_by(user_id=user.id).one()
        assert performer.stage_name == "New User"
        assert db.query(Host).count() == 0


def test_register_host_creates_host_row(client, database):
    res = register(client, email="venue@test.com", role="host")
    assert res.status_code == 201
    with database.session() as db:
        host = db.query(Host).one()
        assert host.user_id == res.json()["userId"]
        assert host.company_organization == "New User"


def test_register_duplicate_email_conflict(client, database):
    assert register(client).status_code == 201
    res = register(client, email="NEW@test.com")
    assert res.status_code == 409
    assert res.json()["message"] == "User with this email already exists."
    with database.session() as db:
        assert db.query(User).count() == 1


def test_register_rolls_back_when_profile_insert_fails(client, database, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("profile insert failed")

    monkeypatch.setattr(crud.crud_user, "create_role_profile", boom)
    res = register(client)
    assert res.status_code == 500
    assert res.json() == {
        "message": "Server error during registration.",
        "error": "profile insert failed",
    }
    with database.session() as db:
        assert db.query(User).count() == 0
        assert db.query(Performer).count() == 0


def test_register_rejects_invalid_payload(client):
    res = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "x", "username": "A", "role": "admin"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid request."
    assert "email" in body["field_errors"]
    assert "role" in body["field_errors"]


def test_login_returns_token_with_id_and_role(client):
    user_id = register(client, email="Mixed@Test.com").json()["userId"]
    res = client.post("/api/auth/login", json={"email": "mixed@test.com", "password": "secret"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Login successful!"
    assert body["user"] == {"id": user_id, "email": "mixed@test.com", "role": "performer"}

    claims = jwt.decode(body["token"], settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    assert claims["id"] == user_id
    assert claims["role"] == "performer"
    assert "exp" in claims


def test_login_invalid_credentials(client):
    register(client)
    for payload in (
        {"email": "new@test.com", "password": "wrong"},
        {"email": "nobody@test.com", "password": "secret"},
    ):
        res = client.post("/api/auth/login", json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid credentials."


def test_login_rejects_passwordless_account(client, database):
    with database.session() as db:
        crud.crud_user.create_user(
            db, email="g@test.com", password_hash=None, username="G", role=UserRole.HOST
        )
        db.commit()
    res = client.post("/api/auth/login", json={"email": "g@test.com", "password": "anything"})
    assert res.status_code == 400

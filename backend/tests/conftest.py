from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")

from gigs.api.auth import create_access_token  # noqa: E402
from gigs.database import Database, get_db  # noqa: E402
from gigs.main import app  # noqa: E402
from gigs.models import Gig, Host, Performer, User, UserRole  # noqa: E402


@pytest.fixture
def database():
    """Fresh in-memory database wired into the app for one test."""
    db = Database("sqlite:///:memory:")
    db.create_all()

    def override_db():
        session = db.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_db
    yield db
    app.dependency_overrides.clear()
    db.dispose()


@pytest.fixture
def client(database):
    return TestClient(app)


@pytest.fixture
def make_host(database):
    def _make(email="host@test.com", username="Host User"):
        with database.session() as db:
            user = User(email=email, password="x", username=username, role=UserRole.HOST)
            db.add(user)
            db.flush()
            host = Host(user_id=user.id, company_organization=username)
            db.add(host)
            db.commit()
            return user.id, host.id
    return _make


@pytest.fixture
def make_performer(database):
    def _make(email="artist@test.com", stage_name="DJ Test", created_at=None):
        with database.session() as db:
            user = User(email=email, password="x", username=stage_name, role=UserRole.PERFORMER)
            db.add(user)
            db.flush()
            performer = Performer(user_id=user.id, stage_name=stage_name)
            if created_at is not None:
                performer.created_at = created_at
            db.add(performer)
            db.commit()
            return user.id, performer.id
    return _make


@pytest.fixture
def make_gig(database):
    def _make(host_id, title="Beach Party", **fields):
        with database.session() as db:
            gig = Gig(host_id=host_id, title=title, **fields)
            db.add(gig)
            db.commit()
            return gig.id
    return _make


def auth_header(user_id: int, role: UserRole) -> dict:
    token = create_access_token({"id": user_id, "role": role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def host_auth():
    return lambda user_id: auth_header(user_id, UserRole.HOST)


@pytest.fixture
def performer_auth():
    return lambda user_id: auth_header(user_id, UserRole.PERFORMER)


@pytest.fixture
def now():
    return datetime.utcnow()

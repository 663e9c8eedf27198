import logging

import pytest
from sqlalchemy import text

from gigs.core.config import Settings
from gigs.database import Database, build_database_url, describe_database_config


def make_settings(**values):
    return Settings(_env_file=None, **values)


def test_database_url_precedence():
    assert build_database_url(make_settings(DATABASE_URL="sqlite:///x.db", DB_HOST="db")) == "sqlite:///x.db"

    url = build_database_url(
        make_settings(DB_HOST="db.local", DB_USER="gigs", DB_PASSWORD="p@ss", DB_NAME="gigs", DB_PORT=3306)
    )
    assert url.startswith("mysql+pymysql://gigs:")
    assert url.endswith("@db.local:3306/gigs")

    assert build_database_url(make_settings(SQLITE_PATH="/tmp/g.db")) == "sqlite:////tmp/g.db"


def test_database_config_is_masked():
    config = describe_database_config(
        make_settings(DB_HOST="db.local", DB_USER="gigsadmin", DB_PASSWORD="hunter2", DB_NAME="gigs")
    )
    assert config["via"] == "FIELDS"
    assert config["user"] == "g***n"
    assert "hunter2" not in str(config)

    assert describe_database_config(make_settings(DATABASE_URL="mysql://u:p@h/db?ssl=true")) == {
        "via": "DATABASE_URL",
        "ssl": True,
    }


def test_probe_reports_success(caplog):
    caplog.set_level(logging.INFO, logger="gigs.database")
    database = Database("sqlite:///:memory:")
    assert database.probe() is True
    assert any("Successfully connected" in r.getMessage() for r in caplog.records)
    with database.session() as db:
        assert db.execute(text("PRAGMA foreign_keys")).scalar() == 1
    database.dispose()


def test_probe_failure_is_not_fatal(caplog, tmp_path):
    database = Database(f"sqlite:///{tmp_path}/missing/dir/gigs.db")
    assert database.probe() is False
    assert any("Error connecting to the database" in r.getMessage() for r in caplog.records)


def test_get_db_uses_database_on_app_state():
    from fastapi import Depends, FastAPI
    from fastapi.testclient import TestClient

    from gigs.database import get_db

    app = FastAPI()

    @app.get("/ping")
    def ping(db=Depends(get_db)):
        return {"one": db.execute(text("SELECT 1")).scalar()}

    client = TestClient(app)
    with pytest.raises(RuntimeError):
        client.get("/ping")

    app.state.database = Database("sqlite:///:memory:")
    assert client.get("/ping").json() == {"one": 1}
    app.state.database.dispose()

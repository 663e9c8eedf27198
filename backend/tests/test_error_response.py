import logging

import pytest

from gigs.utils.errors import AppError, ServerError, ValidationError, error_response


def test_error_response_logs(caplog):
    caplog.set_level(logging.ERROR, logger="gigs.utils.errors")
    with pytest.raises(ValidationError) as exc:
        raise error_response("Invalid", {"field": "bad"})
    assert exc.value.status_code == 400
    assert exc.value.to_dict() == {"message": "Invalid", "field_errors": {"field": "bad"}}
    assert any(
        "Invalid" in r.getMessage() and "'field': 'bad'" in r.getMessage()
        for r in caplog.records
    )


def test_error_response_custom_code():
    err = error_response("Locked", {"id": "busy"}, code=423)
    assert isinstance(err, AppError)
    assert err.status_code == 423


def test_server_error_carries_cause():
    err = ServerError("Server error during registration.", RuntimeError("db down"))
    assert err.to_dict() == {"message": "Server error during registration.", "error": "db down"}
    assert ServerError("Failed").to_dict() == {"message": "Failed"}

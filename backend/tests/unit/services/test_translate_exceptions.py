from __future__ import annotations

import pytest
from liftlog.core import errors as api_errors
from liftlog.services._shared.base import translate_exceptions
from liftlog.services._shared.errors import (
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)


def test_validation_error_maps_to_bad_request():
    err = translate_exceptions(ValidationError("name", "must be a non-blank string"))
    assert isinstance(err, api_errors.BadRequest)
    assert err.status_code == 400
    assert err.code == "validation_error"
    assert err.details == {"field": "name"}
    assert err.message == "Invalid name: must be a non-blank string"


def test_not_found_maps_to_404():
    err = translate_exceptions(NotFoundError("Workout", 9))
    assert isinstance(err, api_errors.NotFound)
    assert err.status_code == 404
    assert err.message == "Workout not found: 9"


def test_storage_error_hides_details():
    err = translate_exceptions(StorageError("create_workout"))
    assert isinstance(err, api_errors.StorageFailure)
    assert err.status_code == 500
    assert "create_workout" not in err.message


def test_generic_service_error_is_bad_request():
    err = translate_exceptions(ServiceError("nope"))
    assert isinstance(err, api_errors.APIError)
    assert (err.status_code, err.code) == (400, "bad_request")


@pytest.mark.parametrize("exc", [RuntimeError("x"), KeyError("k")])
def test_other_exceptions_pass_through(exc):
    assert translate_exceptions(exc) is exc

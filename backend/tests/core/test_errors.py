"""Error Hierarchy - status codes and response envelopes for each failure kind."""

from formservice.core.errors import (
    ConflictError, ErrorCategory, ErrorContext, NotFoundError,
    StoreUnavailableError, ValidationFailedError,
)


def test_validation_failed_is_400_and_names_field():
    err = ValidationFailedError("Form structure must have a questions array", "form_structure")
    assert err.http_status == 400
    assert err.field == "form_structure"
    assert err.to_response() == {
        "error": "Form structure must have a questions array",
        "code": "VALIDATION_ERROR",
    }


def test_not_found_is_404_without_echoing_id():
    err = NotFoundError("Form", "abc", ErrorContext(tenant_id="t1", form_id="abc"))
    assert err.http_status == 404
    assert err.to_response()["error"] == "Form not found"
    assert err.context.tenant_id == "t1"


def test_conflict_is_409():
    err = ConflictError("Form name already exists for this tenant")
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT


def test_store_unavailable_hides_detail():
    err = StoreUnavailableError("connection refused on 10.0.0.5", "execute")
    assert err.http_status == 500
    assert err.to_response()["error"] == "Internal server error"
    assert "10.0.0.5" not in str(err.to_response())
    assert err.detail == "connection refused on 10.0.0.5"

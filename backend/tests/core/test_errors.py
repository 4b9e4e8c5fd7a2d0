"""Error Hierarchy: status codes, categories and the {"message"} response shape."""

from app.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidContentError, InvalidIdentifierError, ResourceNotFoundError,
    StorageError, TutorialAPIError,
)


def test_invalid_content_is_400_validation():
    err = InvalidContentError("Content can not be empty!")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"message": "Content can not be empty!"}


def test_not_found_is_404():
    err = ResourceNotFoundError("Not found Tutorial with id abc.")
    assert err.http_status == 404
    assert err.severity == ErrorSeverity.WARNING


def test_storage_error_is_500_and_records_operation():
    err = StorageError("Error retrieving Tutorial with id=x", "find_one")
    assert err.http_status == 500
    assert err.operation == "find_one"
    assert err.context.operation == "find_one"
    assert err.to_response() == {"message": "Error retrieving Tutorial with id=x"}


def test_invalid_identifier_is_a_database_error():
    err = InvalidIdentifierError("invalid-id")
    assert isinstance(err, DatabaseError)
    assert isinstance(err, TutorialAPIError)
    assert err.raw_id == "invalid-id"
    assert "invalid-id" in err.message


def test_response_never_contains_internal_fields():
    err = DatabaseError("Connection or operational error", "find")
    assert set(err.to_response()) == {"message"}


def test_log_extra_carries_context():
    err = ResourceNotFoundError("gone", ErrorContext(tutorial_id="42"))
    extra = err.log_extra()
    assert extra["tutorial_id"] == "42"
    assert extra["error_code"] == "RESOURCE_NOT_FOUND"

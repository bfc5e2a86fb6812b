from dtos import ApiError
from exceptions import (
    ApplicationError,
    ConfigurationError,
    ResourceNotFoundError,
    ValidationError,
)


def test_validation_error_carries_errors_in_order():
    errors = [
        ApiError(field="studentFirstName", message="First name is required"),
        ApiError(field="studentEmail", message="Email should be valid"),
    ]

    exc = ValidationError(errors)

    assert exc.errors == errors
    assert isinstance(exc, ApplicationError)
    assert exc.details["errors"] == [
        {"field": "studentFirstName", "message": "First name is required"},
        {"field": "studentEmail", "message": "Email should be valid"},
    ]
    assert "2 field(s)" in exc.message


def test_resource_not_found_error_message():
    exc = ResourceNotFoundError("Student not found with id: 5", resource_id=5)

    assert str(exc) == "Student not found with id: 5"
    assert exc.message == "Student not found with id: 5"
    assert exc.details == {"resource_id": 5}


def test_configuration_error_lists_invalid_keys():
    exc = ConfigurationError("bad", invalid_keys=["STUDENT_API_LOG_LEVEL"])

    assert exc.details == {"invalid_keys": ["STUDENT_API_LOG_LEVEL"]}


def test_api_error_equality():
    assert ApiError(field="field", message="error") == ApiError(field="field", message="error")
    assert ApiError(field="field", message="error") != ApiError(field="field", message="other")

import pytest

from models import Student
from services.student_validator import (
    is_alpha_with_spaces,
    is_not_blank,
    is_valid_email,
    validate,
)


def make_student(**overrides):
    fields = {"first_name": "Tom", "last_name": "Cruise", "email": "tom.cruise@example.com"}
    fields.update(overrides)
    return Student(**fields)


def test_valid_student_has_no_errors():
    assert validate(make_student()) == {}


def test_names_may_contain_spaces():
    assert validate(make_student(first_name="Mary Jane", last_name="Van Der Berg")) == {}


def test_all_fields_missing():
    errors = validate(Student())

    assert errors == {
        "first_name": "First name is required",
        "last_name": "Last name is required",
        "email": "Email is required",
    }


def test_errors_follow_field_order():
    errors = validate(Student(email="nope", last_name="B4d", first_name=None))

    assert list(errors) == ["first_name", "last_name", "email"]


def test_digits_in_first_name():
    errors = validate(make_student(first_name="Tom1"))

    assert errors == {"first_name": "First name should contain only alphabets and white spaces"}


def test_digits_in_last_name():
    errors = validate(make_student(last_name="Cruise2"))

    assert errors == {"last_name": "Last name should contain only alphabets and white spaces"}


def test_invalid_email():
    errors = validate(make_student(email="invalid-email"))

    assert errors == {"email": "Email should be valid"}


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_value_reports_required(blank):
    errors = validate(make_student(first_name=blank, last_name=blank, email=blank))

    assert errors == {
        "first_name": "First name is required",
        "last_name": "Last name is required",
        "email": "Email is required",
    }


def test_one_message_per_field():
    errors = validate(make_student(first_name="R2D2", email="robot@"))

    assert len(errors) == 2


@pytest.mark.parametrize("value, expected", [
    (None, False),
    ("", False),
    ("  \t", False),
    ("Tom", True),
])
def test_is_not_blank(value, expected):
    assert is_not_blank(value) is expected


@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("Tom", True),
    ("Tom Cruise", True),
    ("Tom-Cruise", False),
    ("Tom\n", True),
    ("Tom\tCruise", True),
    ("Tom\x1c", False),
    ("Tom\u00a0Cruise", False),
    ("Tom\u2003Cruise", False),
    ("Tomás", False),
    ("", False),
])
def test_is_alpha_with_spaces(value, expected):
    assert is_alpha_with_spaces(value) is expected


@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("tom.cruise@example.com", True),
    ("will.smith@gmail.com", True),
    ("invalid-email", False),
    ("@gmail.com", False),
    ("tom@", False),
    ("tom cruise@gmail.com", False),
])
def test_is_valid_email(value, expected):
    assert is_valid_email(value) is expected


def test_unicode_whitespace_in_name_is_rejected():
    errors = validate(make_student(first_name="Tom  Cruise\x1c"))

    assert errors == {"first_name": "First name should contain only alphabets and white spaces"}

import pytest

from dtos import StudentDto
from models import Student
from services.student_translator import merge_non_null, to_dto, to_entity


def test_to_entity_maps_external_names_and_drops_id():
    dto = StudentDto(
        id=42,
        student_first_name="Tom",
        student_last_name="Cruise",
        student_email="tom.cruise@example.com"
    )

    student = to_entity(dto)

    assert student.id is None
    assert student.first_name == "Tom"
    assert student.last_name == "Cruise"
    assert student.email == "tom.cruise@example.com"


def test_to_entity_keeps_missing_fields_as_none():
    student = to_entity(StudentDto(student_first_name="Tom"))

    assert student.first_name == "Tom"
    assert student.last_name is None
    assert student.email is None


def test_to_dto_includes_id():
    student = Student(id=7, first_name="Will", last_name="Smith", email="will.smith@gmail.com")

    dto = to_dto(student)

    assert dto == StudentDto(
        id=7,
        student_first_name="Will",
        student_last_name="Smith",
        student_email="will.smith@gmail.com"
    )


def test_round_trip_preserves_fields_except_id():
    dto = StudentDto(
        id=3,
        student_first_name="Tom",
        student_last_name="Cruise",
        student_email="tom.cruise@example.com"
    )

    result = to_dto(to_entity(dto))

    assert result.id is None
    assert result.model_dump(exclude={"id"}) == dto.model_dump(exclude={"id"})


def test_dto_accepts_and_serializes_external_names():
    dto = StudentDto.model_validate({"studentFirstName": "Tom", "studentEmail": "tom@gmail.com"})

    assert dto.student_first_name == "Tom"
    assert dto.model_dump(by_alias=True) == {
        "id": None,
        "studentFirstName": "Tom",
        "studentLastName": None,
        "studentEmail": "tom@gmail.com",
    }


@pytest.mark.parametrize("source_fields", [
    {},
    {"first_name": "Tomkumar"},
    {"last_name": "Hanks"},
    {"email": "tom.hanks@gmail.com"},
    {"first_name": "Tomkumar", "email": "tk@gmail.com"},
    {"first_name": "Tomkumar", "last_name": "Hanks", "email": "tk@gmail.com"},
])
def test_merge_non_null_copies_only_provided_fields(source_fields):
    original = {"first_name": "Tom", "last_name": "Cruise", "email": "tom.cruise@example.com"}
    target = Student(id=1, **original)
    source = Student(**source_fields)

    merge_non_null(source, target)

    for field, value in original.items():
        assert getattr(target, field) == source_fields.get(field, value)
    assert target.id == 1


def test_merge_non_null_never_copies_id():
    target = Student(id=1, first_name="Tom", last_name="Cruise", email="tom.cruise@example.com")
    source = Student(id=99, first_name="Tomkumar")

    merge_non_null(source, target)

    assert target.id == 1


def test_merge_non_null_leaves_source_unchanged():
    target = Student(id=1, first_name="Tom", last_name="Cruise", email="tom.cruise@example.com")
    source = Student(first_name="Tomkumar")

    merge_non_null(source, target)

    assert source.first_name == "Tomkumar"
    assert source.last_name is None
    assert source.email is None


def test_merge_non_null_overwrites_with_empty_string():
    target = Student(id=1, first_name="Tom", last_name="Cruise", email="tom.cruise@example.com")

    merge_non_null(Student(last_name=""), target)

    assert target.last_name == ""

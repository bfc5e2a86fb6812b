"""
Student Translator

Converts between the external StudentDto and the internal Student entity,
and merges partial updates onto stored entities.

Field correspondence:
    first_name  <-> studentFirstName
    last_name   <-> studentLastName
    email       <-> studentEmail
"""

from dtos import StudentDto
from models import Student

# Entity attributes copied by merge_non_null. The id is deliberately absent.
MERGEABLE_FIELDS = ("first_name", "last_name", "email")


def to_entity(dto: StudentDto) -> Student:
    """
    Build a transient Student from a DTO.

    The inbound id is dropped; missing fields stay None.
    """
    return Student(
        first_name=dto.student_first_name,
        last_name=dto.student_last_name,
        email=dto.student_email,
    )


def to_dto(entity: Student) -> StudentDto:
    """Build a StudentDto from a Student, including its id."""
    return StudentDto(
        id=entity.id,
        student_first_name=entity.first_name,
        student_last_name=entity.last_name,
        student_email=entity.email,
    )


def merge_non_null(source: Student, target: Student) -> Student:
    """
    Copy every non-None field of source onto target.

    Fields that are None on source leave target untouched, which gives PATCH
    semantics. Empty strings are not None and do overwrite. The target's id
    is never changed.

    Args:
        source: Entity built from the update request (not modified)
        target: Stored entity, mutated in place

    Returns:
        The mutated target
    """
    for field in MERGEABLE_FIELDS:
        value = getattr(source, field)
        if value is not None:
            setattr(target, field, value)
    return target

"""
Student Service

Handles business logic for student records: translation between DTOs and
entities, field validation, partial updates and persistence.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from constants import StudentMessages
from dtos import StudentDto
from exceptions import ResourceNotFoundError, ValidationError
from models import Student
from repositories.student_repository import StudentRepository
from services.interfaces import IStudentService
from services import student_error_mapper, student_translator, student_validator
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class StudentService(IStudentService):
    """Service for student-related business logic."""

    def __init__(self, db: Session, student_repo: StudentRepository | None = None):
        """
        Initialize StudentService.

        Args:
            db: Database session
            student_repo: Repository to use (defaults to one bound to db)
        """
        self.db = db
        self.student_repo = student_repo or StudentRepository(db)

    @log_operation("get_all_students")
    def get_all_students(self) -> List[StudentDto]:
        students = self.student_repo.get_all()
        return [student_translator.to_dto(student) for student in students]

    @log_operation("get_student_by_id")
    def get_student_by_id(self, student_id: int) -> StudentDto:
        student = self.student_repo.get_by_id(student_id)
        if student is None:
            raise ResourceNotFoundError(StudentMessages.not_found(student_id), resource_id=student_id)
        return student_translator.to_dto(student)

    @log_operation("delete_student")
    def delete_student(self, student_id: int) -> None:
        if not self.student_repo.exists(student_id):
            raise ResourceNotFoundError(StudentMessages.not_found(student_id), resource_id=student_id)

        self.student_repo.delete_by_id(student_id)
        self.db.commit()

    @log_operation("create_student")
    def create_student(self, student_dto: StudentDto) -> StudentDto:
        student = student_translator.to_entity(student_dto)

        self._validate(student)

        saved = self.student_repo.save(student)
        self.db.commit()
        self.db.refresh(saved)

        logger.info(f"Created student {saved.id}")
        return student_translator.to_dto(saved)

    @log_operation("update_student")
    def update_student(self, student_id: int, student_dto: StudentDto) -> StudentDto:
        existing = self.student_repo.get_by_id(student_id)
        if existing is None:
            raise ResourceNotFoundError(StudentMessages.not_found(student_id), resource_id=student_id)

        update_request = student_translator.to_entity(student_dto)
        student_translator.merge_non_null(update_request, existing)

        try:
            self._validate(existing)
        except ValidationError:
            # Discard the in-memory merge so it can never be flushed later
            self.db.rollback()
            raise

        updated = self.student_repo.save(existing)
        self.db.commit()
        self.db.refresh(updated)
        return student_translator.to_dto(updated)

    def _validate(self, student: Student) -> None:
        """
        Raises:
            ValidationError: With one ApiError per invalid field, in external naming
        """
        errors = student_validator.validate(student)
        if errors:
            raise ValidationError(student_error_mapper.map_errors(errors))

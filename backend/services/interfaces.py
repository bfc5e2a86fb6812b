"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos import StudentDto


class IStudentService(ABC):
    """
    Abstract interface for student record services.
    """

    @abstractmethod
    def get_all_students(self) -> List[StudentDto]:
        """
        Get every stored student.

        Returns:
            List of StudentDto ordered by id
        """
        pass

    @abstractmethod
    def get_student_by_id(self, student_id: int) -> StudentDto:
        """
        Get a single student.

        Args:
            student_id: Student ID

        Returns:
            StudentDto for the stored record

        Raises:
            ResourceNotFoundError: If no student has this ID
        """
        pass

    @abstractmethod
    def create_student(self, student_dto: StudentDto) -> StudentDto:
        """
        Validate and store a new student.

        Args:
            student_dto: Incoming student (id is ignored)

        Returns:
            StudentDto for the stored record, with its assigned id

        Raises:
            ValidationError: If any field is invalid (nothing is stored)
        """
        pass

    @abstractmethod
    def update_student(self, student_id: int, student_dto: StudentDto) -> StudentDto:
        """
        Partially update a student. Only non-null fields of the DTO are applied.

        Args:
            student_id: Student ID
            student_dto: Fields to change

        Returns:
            StudentDto for the updated record

        Raises:
            ResourceNotFoundError: If no student has this ID
            ValidationError: If the merged record is invalid (nothing is stored)
        """
        pass

    @abstractmethod
    def delete_student(self, student_id: int) -> None:
        """
        Delete a student.

        Args:
            student_id: Student ID

        Raises:
            ResourceNotFoundError: If no student has this ID
        """
        pass

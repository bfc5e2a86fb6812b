"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from repositories.student_repository import StudentRepository
from services.interfaces import IStudentService
from services.student_service import StudentService


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """
    Factory function for creating StudentRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        StudentRepository instance
    """
    return StudentRepository(db)


def get_student_service(
    db: Session = Depends(get_db),
    student_repo: StudentRepository = Depends(get_student_repository)
) -> IStudentService:
    """
    Factory function for creating StudentService instances.

    Args:
        db: Database session (injected)
        student_repo: Student repository (injected, shares the same session)

    Returns:
        IStudentService: Student service implementation
    """
    return StudentService(db, student_repo)

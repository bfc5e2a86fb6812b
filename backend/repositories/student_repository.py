"""
Student repository for student data access operations.
"""

from sqlalchemy.orm import Session

from models import Student as StudentModel
from .base_repository import BaseRepository


class StudentRepository(BaseRepository[StudentModel]):
    """Repository for Student model operations."""

    def __init__(self, db: Session):
        super().__init__(db, StudentModel)

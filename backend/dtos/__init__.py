"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking database structure to external APIs and allow independent evolution.

Structure:
- student_dto: external representation of a student record (request and response body)
- api_error: a single field-level error reported to API clients
"""

from .api_error import ApiError
from .student_dto import StudentDto

__all__ = [
    "ApiError",
    "StudentDto",
]

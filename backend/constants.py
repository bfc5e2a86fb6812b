"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8080


class DatabaseLimits:
    """Bounds of the 64-bit integer primary key"""

    MIN_ID = -9223372036854775808
    MAX_ID = 9223372036854775807


class ApiPaths:
    """URL prefixes for the public API"""

    STUDENTS = "/api/students"


class StudentMessages:
    """Response and error message templates for student operations"""

    NOT_FOUND = "Student not found with id: {student_id}"
    DELETED = "Student with studentId {student_id} is deleted"

    @classmethod
    def not_found(cls, student_id) -> str:
        return cls.NOT_FOUND.format(student_id=student_id)

    @classmethod
    def deleted(cls, student_id) -> str:
        return cls.DELETED.format(student_id=student_id)


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse
from typing import Annotated, List
from constants import ApiPaths, DatabaseLimits, HTTPStatus, StudentMessages
from dependencies import get_student_service
from dtos import StudentDto
from services.interfaces import IStudentService
from utils.error_handlers import handle_api_errors

router = APIRouter(prefix=ApiPaths.STUDENTS, tags=["students"])

# Ids outside the 64-bit key range are rejected as 400 before reaching the database
StudentId = Annotated[int, Path(ge=DatabaseLimits.MIN_ID, le=DatabaseLimits.MAX_ID)]

NOT_FOUND_RESPONSE = {
    HTTPStatus.NOT_FOUND: {
        "description": "Student not found",
        "content": {"text/plain": {"example": StudentMessages.not_found(999)}},
    }
}

BAD_REQUEST_RESPONSE = {
    HTTPStatus.BAD_REQUEST: {
        "description": "One or more fields are invalid",
        "content": {"application/json": {"example": [{"field": "studentEmail", "message": "Email should be valid"}]}},
    }
}


@router.get("", response_model=List[StudentDto], summary="Get all students")
@handle_api_errors("Get students")
def get_all_students(service: IStudentService = Depends(get_student_service)):
    """Return every student, ordered by id."""
    return service.get_all_students()


@router.get(
    "/{student_id}",
    response_model=StudentDto,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a specific student specified by studentId"
)
@handle_api_errors("Get student")
def get_student_by_id(student_id: StudentId, service: IStudentService = Depends(get_student_service)):
    return service.get_student_by_id(student_id=student_id)


@router.delete(
    "/{student_id}",
    response_class=PlainTextResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a specific student specified by studentId"
)
@handle_api_errors("Delete student")
def delete_student(student_id: StudentId, service: IStudentService = Depends(get_student_service)):
    service.delete_student(student_id=student_id)
    return StudentMessages.deleted(student_id)


@router.post(
    "",
    response_model=StudentDto,
    status_code=HTTPStatus.CREATED,
    responses=BAD_REQUEST_RESPONSE,
    summary="Create a new student specified by request body"
)
@handle_api_errors("Create student")
def create_student(student_dto: StudentDto, service: IStudentService = Depends(get_student_service)):
    """
    Create a student.

    Any id in the body is ignored; the server assigns one.
    """
    return service.create_student(student_dto)


@router.patch(
    "/{student_id}",
    response_model=StudentDto,
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
    summary="Partial update a student specified by studentId and by request body"
)
@handle_api_errors("Update student")
def update_student(
    student_id: StudentId,
    student_dto: StudentDto,
    service: IStudentService = Depends(get_student_service)
):
    """
    Partially update a student.

    Only fields present (and not null) in the body are changed. The merged
    record is validated as a whole before it is saved.
    """
    return service.update_student(student_id=student_id, student_dto=student_dto)

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, status

from students_api.database import Storage
from students_api.dependencies import get_storage
from students_api.models.student import (
    SQLITE_INT_MAX,
    SQLITE_INT_MIN,
    ErrorResponse,
    Student,
    StudentCreate,
    StudentId,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["students"])

# ids outside the SQLite INTEGER range are malformed, not missing
StudentIdPath = Annotated[int, Path(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]

CLIENT_ERROR = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


# ---------------------------------------------------------
# CREATE STUDENT
# ---------------------------------------------------------
@router.post(
    "",
    response_model=StudentId,
    status_code=status.HTTP_201_CREATED,
    responses={**CLIENT_ERROR, **SERVER_ERROR},
)
def create_student(student: StudentCreate, storage: Storage = Depends(get_storage)):
    student_id = storage.create_student(student.name, student.email, student.age)
    logger.info(f"Student {student_id} created", extra={"student_id": student_id})
    return StudentId(id=student_id)


# ---------------------------------------------------------
# GET STUDENT BY ID
# ---------------------------------------------------------
@router.get("/{student_id}", response_model=Student, responses={**CLIENT_ERROR, **SERVER_ERROR})
def get_student(student_id: StudentIdPath, storage: Storage = Depends(get_storage)):
    logger.info(f"Getting student {student_id}", extra={"student_id": student_id})
    return storage.get_student_by_id(student_id)


# ---------------------------------------------------------
# GET ALL STUDENTS
# ---------------------------------------------------------
@router.get("", response_model=List[Student], responses=SERVER_ERROR)
def get_students(storage: Storage = Depends(get_storage)):
    logger.info("Getting all students")
    return storage.get_all_students()


# ---------------------------------------------------------
# UPDATE STUDENT
# ---------------------------------------------------------
@router.put("/{student_id}", response_model=Student, responses={**CLIENT_ERROR, **SERVER_ERROR})
def update_student(student_id: StudentIdPath, student: StudentCreate, storage: Storage = Depends(get_storage)):
    updated = storage.update_student(student_id, student.name, student.email, student.age)
    logger.info(f"Student {student_id} updated", extra={"student_id": student_id})
    return updated


# ---------------------------------------------------------
# DELETE STUDENT
# ---------------------------------------------------------
@router.delete("/{student_id}", response_model=str, responses={**CLIENT_ERROR, **SERVER_ERROR})
def delete_student(student_id: StudentIdPath, storage: Storage = Depends(get_storage)):
    storage.delete_student_by_id(student_id)
    logger.info(f"Student {student_id} deleted", extra={"student_id": student_id})
    return "student deleted successfully"


# ---------------------------------------------------------
# DELETE ALL STUDENTS
# ---------------------------------------------------------
@router.delete("", response_model=str, responses=SERVER_ERROR)
def delete_students(storage: Storage = Depends(get_storage)):
    storage.delete_all_students()
    logger.info("Deleted all students")
    return "deleted all students successfully"

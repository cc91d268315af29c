import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from student_api.api.deps import get_db
from student_api.core.exceptions import EmptyResultException, NotFoundException
from student_api.services.student import student as crud_student
from student_api.schemas.student import (
    MessageResponse,
    Student,
    StudentCreate,
    StudentListResponse,
    StudentResponse,
    StudentUpdate,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": MessageResponse, "description": "No Such Record Found!"}}
INVALID = {422: {"model": ValidationErrorResponse, "description": "Validation failed"}}
FAILED = {500: {"model": MessageResponse, "description": "Something Went Wrong"}}


def _find_student(db: Session, id: int) -> StudentResponse:
    student = crud_student.get_student(db, student_id=id)
    if student is None:
        logger.warning(f"Student id={id} not found")
        raise NotFoundException()
    return StudentResponse(student=Student.model_validate(student))


@router.get(
    "",
    response_model=StudentListResponse,
    responses={404: {"model": MessageResponse, "description": "No Records Found"}},
)
def get_students(db: Session = Depends(get_db)):
    """
    List every student.

    An empty table answers **404** with `No Records Found`.
    """
    students = crud_student.get_students(db)
    if not students:
        raise EmptyResultException()
    return StudentListResponse(students=[Student.model_validate(s) for s in students])


@router.post("", response_model=MessageResponse, responses={**INVALID, **FAILED})
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    """
    Create a student

    - **name**: required, at most 191 characters
    - **course**: required, at most 191 characters
    - **email**: required, valid email, at most 191 characters
    - **phone**: required, exactly 10 digits
    """
    crud_student.create_student(db=db, student=student)
    return MessageResponse(status=200, message="Record has Created Successfully")


@router.get("/{id}", response_model=StudentResponse, responses={**NOT_FOUND, **INVALID})
def get_student(id: int, db: Session = Depends(get_db)):
    """Show one student"""
    return _find_student(db, id)


@router.get("/{id}/edit", response_model=StudentResponse, responses={**NOT_FOUND, **INVALID})
def edit_student(id: int, db: Session = Depends(get_db)):
    """Fetch one student before editing it. Same payload as show."""
    return _find_student(db, id)


@router.put(
    "/{id}/edit",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **INVALID, **FAILED},
)
def update_student(id: int, student: StudentUpdate, db: Session = Depends(get_db)):
    """
    Replace name, course, email and phone of a student.

    The body is validated before the record is looked up.
    """
    updated = crud_student.update_student(db=db, student_id=id, student=student)
    if updated is None:
        logger.warning(f"Cannot update student id={id}: not found")
        raise NotFoundException()
    return MessageResponse(status=200, message="Record has Updated Successfully")

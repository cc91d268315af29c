import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_api.core.exceptions import PersistenceException
from student_api.models.student import Student
from student_api.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

# Range of the INTEGER primary key; ids outside it cannot exist
MAX_STUDENT_ID = 2**31 - 1


def now() -> datetime:
    """Current time for created_at / updated_at"""
    return datetime.now(timezone.utc)


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Fetch one student by primary key"""
    if not 0 < student_id <= MAX_STUDENT_ID:
        return None
    return db.get(Student, student_id)


def get_students(db: Session) -> List[Student]:
    """Fetch every student, oldest first"""
    return db.query(Student).order_by(Student.id).all()


def create_student(db: Session, student: StudentCreate) -> Student:
    """
    Insert a new student with created_at set to now.

    Raises PersistenceException if the write fails; the session is rolled back.
    """
    db_student = Student(
        name=student.name,
        course=student.course,
        email=student.email,
        phone=student.phone,
        created_at=now()
    )
    try:
        db.add(db_student)
        db.commit()
        db.refresh(db_student)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create student: {e}", exc_info=True)
        raise PersistenceException() from e

    logger.info(f"Created student id={db_student.id}")
    return db_student


def update_student(db: Session, student_id: int, student: StudentUpdate) -> Optional[Student]:
    """
    Replace the four business fields and stamp updated_at.

    Returns None when no student has this id.
    """
    db_student = get_student(db, student_id)
    if db_student is None:
        return None

    db_student.name = student.name
    db_student.course = student.course
    db_student.email = student.email
    db_student.phone = student.phone
    db_student.updated_at = now()
    try:
        db.commit()
        db.refresh(db_student)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update student id={student_id}: {e}", exc_info=True)
        raise PersistenceException() from e

    logger.info(f"Updated student id={student_id}")
    return db_student

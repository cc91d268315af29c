from typing import Generator

from sqlalchemy.orm import Session

from student_api.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.
    The session is closed once the request is finished.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

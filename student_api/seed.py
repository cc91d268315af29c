import logging
from student_api.core.database import SessionLocal
from student_api.models.student import Student
from student_api.services.student.student import now

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Nguyen Van A", "course": "Computer Science", "email": "vana@example.com", "phone": "0901234567"},
    {"name": "Tran Thi B", "course": "Mathematics", "email": "thib@example.com", "phone": "0909876543"},
    {"name": "Le Van C", "course": "Physics", "email": "vanc@example.com", "phone": "0912345678"},
]


def seed_data(db=None) -> int:
    """
    Seed sample students into the database.

    Does nothing when the table already has rows. Returns the number of rows inserted.
    """
    owns_session = db is None
    db = db or SessionLocal()
    try:
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        created_at = now()
        db.add_all([Student(created_at=created_at, **row) for row in SAMPLE_STUDENTS])
        db.commit()

        logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
        return len(SAMPLE_STUDENTS)

    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_data()

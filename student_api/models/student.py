from sqlalchemy import Column, DateTime, Integer, String
from student_api.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(191), nullable=False)
    course = Column(String(191), nullable=False)
    email = Column(String(191), nullable=False)
    phone = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

from datetime import datetime
from typing import Annotated, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

MAX_LENGTH = 191

STUDENT_FIELDS = ("name", "course", "email", "phone")

RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_LENGTH)]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, pattern=r"^[0-9]{10}$")]


class StudentBase(BaseModel):
    name: RequiredStr
    course: RequiredStr
    email: RequiredStr
    phone: Phone


class StudentIn(StudentBase):
    """Body accepted by create and update. Both replace all four fields."""

    @field_validator(*STUDENT_FIELDS, mode="before")
    @classmethod
    def null_is_missing(cls, v):
        if v is None:
            raise PydanticCustomError("missing", "Field required")
        return v

    @field_validator("email")
    @classmethod
    def email_address(cls, v: str) -> str:
        # Stored as submitted; the normalized form is only used for checking
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise PydanticCustomError(
                "email_invalid",
                "value is not a valid email address: {reason}",
                {"reason": str(e)},
            ) from e
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def phone_from_number(cls, v):
        # JSON clients often send the phone as a number
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class StudentCreate(StudentIn):
    pass


class StudentUpdate(StudentIn):
    pass


class Student(BaseModel):
    id: int
    name: str
    course: str
    email: str
    phone: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# =========================================================
# Response envelopes
# =========================================================

class StudentListResponse(BaseModel):
    status: int = 200
    students: List[Student]


class StudentResponse(BaseModel):
    status: int = 200
    student: Student


class MessageResponse(BaseModel):
    status: int
    message: str


class ValidationErrorResponse(BaseModel):
    status: int = 422
    errors: Dict[str, List[str]]

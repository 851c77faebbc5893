from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, StrictInt, field_validator

from student_api.core.sanitize import sanitize_text


def check_email(value: str) -> str:
    """
    Validate email syntax but keep the address exactly as given.

    Addresses that sanitization would rewrite (e.g. containing `&`) are
    rejected so the stored value stays a valid address.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    if sanitize_text(value) != value:
        raise ValueError("email contains characters that are not allowed")
    return value


Email = Annotated[str, AfterValidator(check_email)]


class StudentCreate(BaseModel):
    name: str
    email: Email
    age: StrictInt

    @field_validator("name")
    @classmethod
    def name_not_empty_after_sanitizing(cls, v: str) -> str:
        # markup-only names like "<b></b>" would otherwise be stored as ""
        cleaned = sanitize_text(v.strip()).strip()
        if not cleaned:
            raise ValueError("name must not be empty")
        return cleaned


class StudentEmailUpdate(BaseModel):
    email: Email


class Student(BaseModel):
    id: int
    name: str
    email: str
    age: int

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str


class StudentCreated(MessageResponse):
    studentId: int

from typing import Annotated, List
from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, Field


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the address exactly as sent."""
    validate_email(value, check_deliverability=False)
    return value


# Emails are identities compared as stored, so no normalisation here
Email = Annotated[str, AfterValidator(check_email)]


class RegisterRequest(BaseModel):
    teacher: Email
    students: List[Email] = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {
                "teacher": "teacherken@gmail.com",
                "students": ["studentjon@gmail.com", "studenthon@gmail.com"],
            }
        }
    }


class CommonStudentsQuery(BaseModel):
    teacher: List[Email] = Field(..., min_length=1)


class SuspendRequest(BaseModel):
    student: Email

    model_config = {
        "json_schema_extra": {"example": {"student": "studentmary@gmail.com"}}
    }


class NotificationRequest(BaseModel):
    teacher: Email
    notification: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "teacher": "teacherken@gmail.com",
                "notification": "Hello students! @studentagnes@gmail.com @studentmiche@gmail.com",
            }
        }
    }


class CommonStudentsResponse(BaseModel):
    students: List[str]


class RecipientsResponse(BaseModel):
    recipients: List[str]


class ErrorResponse(BaseModel):
    message: str

from typing import Any, Dict, List, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the application.
    Carries the final client-facing message and HTTP status, so handlers
    only have to serialize it. `code` and `details` are for logging only and
    never appear in the response body.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. REQUEST ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: the request cannot be served as sent"""
    def __init__(self, message: str = "Bad Request", code: str = "BAD_REQUEST", details: dict = None):
        super().__init__(
            message=message,
            code=code,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class InvalidInputException(BadRequestException):
    """400: schema validation failed (missing, empty or malformed fields)"""
    def __init__(self, details: dict = None):
        super().__init__(
            message="Invalid input format!",
            code="INVALID_INPUT",
            details=details
        )

class MalformedPayloadException(BadRequestException):
    """400: request body could not be parsed at all"""
    def __init__(self):
        super().__init__(message="Malformed json", code="MALFORMED_PAYLOAD")

# =========================================================
# 2. SCHOOL DOMAIN ERRORS
# =========================================================

class AlreadyRegisteredException(BadRequestException):
    """
    400: one or more students are already associated with the teacher.
    `emails` keeps the order of the registration request.
    """
    def __init__(self, emails: List[str]):
        self.emails = list(emails)
        super().__init__(
            message=f'Student(s) "{",".join(self.emails)}" are already registered to the teacher',
            code="ALREADY_REGISTERED",
            details={"emails": self.emails}
        )

class TeacherNotFoundException(BadRequestException):
    """400: one or more teacher emails do not resolve to a record"""
    def __init__(self, emails: Optional[List[str]] = None):
        self.emails = list(emails or [])
        if self.emails:
            message = f'Teacher(s) "{",".join(self.emails)}" do not exist'
        else:
            message = "Teacher with this email does not exist"
        super().__init__(
            message=message,
            code="TEACHER_NOT_FOUND",
            details={"emails": self.emails} if self.emails else None
        )

class StudentNotFoundException(BadRequestException):
    """400: the student email does not resolve to a record"""
    def __init__(self, email: str):
        self.email = email
        super().__init__(
            message="Student with this email does not exist",
            code="STUDENT_NOT_FOUND",
            details={"email": email}
        )

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from school_admin.api.deps import get_db, get_school_repository
from school_admin.schemas.school import (
    CommonStudentsQuery,
    CommonStudentsResponse,
    ErrorResponse,
    NotificationRequest,
    RecipientsResponse,
    RegisterRequest,
    SuspendRequest,
)
from school_admin.schemas.validation import require_valid
from school_admin.services.school.repository import SchoolRepository

logger = logging.getLogger(__name__)

router = APIRouter(responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


@router.post(
    "/register",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["registration"],
)
def register_students(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    repository: SchoolRepository = Depends(get_school_repository),
):
    """
    Register one or more students to a teacher.

    Teacher and students are created on first use. Fails if any of the
    students is already registered to the teacher; nothing is registered then.
    """
    logger.info("Request received to register students")
    repository.register_students(db, payload.teacher, payload.students)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/commonstudents", response_model=CommonStudentsResponse, tags=["students"])
def get_common_students(
    request: Request,
    teacher: List[str] = Query(default=[], description="Teacher email, repeat for several teachers"),
    db: Session = Depends(get_db),
    repository: SchoolRepository = Depends(get_school_repository),
):
    """
    Students registered to every given teacher.

    Teachers are passed as repeated query parameters:
    `?teacher=a@x.com&teacher=b@x.com` (`teacher[]=` is accepted too).
    """
    logger.info("Request received to fetch common students")
    query = require_valid(
        CommonStudentsQuery,
        {"teacher": teacher + request.query_params.getlist("teacher[]")},
    )
    students = repository.get_common_students(db, query.teacher)
    return {"students": students}


@router.post(
    "/suspend",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["students"],
)
def suspend_student(
    payload: SuspendRequest,
    db: Session = Depends(get_db),
    repository: SchoolRepository = Depends(get_school_repository),
):
    """Suspend a student. Suspended students no longer receive notifications."""
    logger.info("Request received to suspend student")
    repository.suspend_student(db, payload.student)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/retrievefornotifications", response_model=RecipientsResponse, tags=["notifications"])
def retrieve_notification_recipients(
    payload: NotificationRequest,
    db: Session = Depends(get_db),
    repository: SchoolRepository = Depends(get_school_repository),
):
    """
    Students who should receive a notification: the teacher's active
    students plus any active student @mentioned in the text.
    """
    logger.info("Request received to retrieve notification recipients")
    recipients = repository.retrieve_notification_recipients(db, payload.teacher, payload.notification)
    return {"recipients": recipients}

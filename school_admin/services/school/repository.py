"""
Teacher/student domain operations: registration, common students,
suspension and notification recipients.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from school_admin.core.exceptions import (
    AlreadyRegisteredException,
    StudentNotFoundException,
    TeacherNotFoundException,
)
from school_admin.models.student import Student
from school_admin.models.teacher import Teacher
from school_admin.services.school import store
from school_admin.services.school.mentions import parse_mentions


def _unique(emails: Iterable[str]) -> List[str]:
    """Drop repeated emails, keeping first-seen order."""
    return list(dict.fromkeys(emails))


class SchoolRepository:
    """Domain logic over the persistence functions in `store`."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def get_teacher_by_email(self, db: Session, email: str) -> Optional[Teacher]:
        return store.find_one(db, Teacher, email=email, is_active=True)

    def get_student_by_email(self, db: Session, email: str, active_only: bool = True) -> Optional[Student]:
        if active_only:
            return store.find_one(db, Student, email=email, is_active=True)
        return store.find_one(db, Student, email=email)

    def register_students(self, db: Session, teacher_email: str, student_emails: List[str]) -> None:
        """
        Associate every student with the teacher, creating missing records.

        All or nothing: if any student is already associated with the teacher,
        AlreadyRegisteredException names those students and nothing is added.
        """
        student_emails = _unique(student_emails)
        teacher, created = store.find_or_create(db, Teacher, email=teacher_email)
        if created:
            self.logger.info(f"Created teacher {teacher_email}")

        already_registered = []
        for email in student_emails:
            existing = self.get_student_by_email(db, email, active_only=False)
            if existing is not None and store.has_association(db, teacher.id, existing.id):
                already_registered.append(email)

        if already_registered:
            raise AlreadyRegisteredException(already_registered)

        students = [store.find_or_create(db, Student, email=email)[0] for email in student_emails]
        store.add_associations(db, teacher.id, [student.id for student in students])
        self.logger.info(f"Registered {len(students)} student(s) to {teacher_email}")

    def get_common_students(self, db: Session, teacher_emails: List[str]) -> List[str]:
        """Emails of active students associated with every given teacher."""
        teacher_emails = _unique(teacher_emails)
        teachers = [self.get_teacher_by_email(db, email) for email in teacher_emails]

        missing = [email for email, teacher in zip(teacher_emails, teachers) if teacher is None]
        if missing:
            raise TeacherNotFoundException(missing)

        teacher_ids = {teacher.id for teacher in teachers}
        membership = store.teacher_ids_by_student(db, teacher_ids)
        candidates = store.find_students_with_teachers(db, is_active=True)
        return [
            student.email
            for student in candidates
            if teacher_ids <= membership.get(student.id, set())
        ]

    def suspend_student(self, db: Session, email: str) -> None:
        """
        Mark the student inactive. Suspending an already suspended student is
        a silent success; associations are kept.
        """
        student = self.get_student_by_email(db, email, active_only=False)
        if student is None:
            raise StudentNotFoundException(email)
        if not student.is_active:
            self.logger.info(f"Student {email} is already suspended")
        store.update(db, student, is_active=False)
        self.logger.info(f"Suspended student {email}")

    def retrieve_notification_recipients(self, db: Session, teacher_email: str, notification: str) -> List[str]:
        """
        Active students of the teacher, plus active students mentioned in the
        notification. Unknown or suspended mentions are dropped.
        """
        teacher = store.find_one(db, Teacher, email=teacher_email)
        if teacher is None:
            raise TeacherNotFoundException()

        recipients = [
            student.email
            for student in store.find_associated_students(db, teacher.id, is_active=True)
        ]
        known = set(recipients)

        for email in parse_mentions(notification):
            if email in known:
                continue
            known.add(email)
            if self.get_student_by_email(db, email) is not None:
                recipients.append(email)
            else:
                self.logger.debug(f"Dropping mention {email}: no active student")

        return recipients

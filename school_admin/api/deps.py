from typing import Generator

from sqlalchemy.orm import Session

from school_admin.core.database import SessionLocal
from school_admin.services.school.repository import SchoolRepository

school_repository = SchoolRepository()


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.
    The session is closed once the request has been handled.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_school_repository() -> SchoolRepository:
    return school_repository

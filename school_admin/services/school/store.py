"""
Persistence provider for the school domain.

Every function takes the session and explicit identifiers; rows are plain
data, association changes go through the functions below.
"""
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple, Type, TypeVar

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from school_admin.core.database import Base
from school_admin.models.enrollment import teacher_student
from school_admin.models.student import Student

ModelType = TypeVar("ModelType", bound=Base)


def find_one(db: Session, model: Type[ModelType], **filters: Any) -> Optional[ModelType]:
    """First row of `model` matching all filters, or None."""
    return db.query(model).filter_by(**filters).first()


def find_all(db: Session, model: Type[ModelType], **filters: Any) -> List[ModelType]:
    """All rows of `model` matching the filters, in id order."""
    return db.query(model).filter_by(**filters).order_by(model.id).all()


def create(db: Session, model: Type[ModelType], **attrs: Any) -> ModelType:
    record = model(**attrs)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def find_or_create(db: Session, model: Type[ModelType], **filters: Any) -> Tuple[ModelType, bool]:
    """
    Return (record, created).

    If another request inserts the same unique row between the lookup and
    the insert, the losing insert is rolled back and the winner is returned.
    """
    record = find_one(db, model, **filters)
    if record is not None:
        return record, False
    try:
        return create(db, model, **filters), True
    except IntegrityError:
        db.rollback()
        record = find_one(db, model, **filters)
        if record is None:
            raise
        return record, False


def update(db: Session, record: ModelType, **attrs: Any) -> ModelType:
    for field, value in attrs.items():
        setattr(record, field, value)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def has_association(db: Session, teacher_id: int, student_id: int) -> bool:
    stmt = select(teacher_student.c.student_id).where(
        teacher_student.c.teacher_id == teacher_id,
        teacher_student.c.student_id == student_id,
    )
    return db.execute(stmt).first() is not None


def add_associations(db: Session, teacher_id: int, student_ids: Iterable[int]) -> None:
    """Associate all students with the teacher in one batch insert."""
    rows = [{"teacher_id": teacher_id, "student_id": student_id} for student_id in student_ids]
    if not rows:
        return
    db.execute(insert(teacher_student), rows)
    db.commit()


def find_associated_students(db: Session, teacher_id: int, **filters: Any) -> List[Student]:
    """Students associated with the teacher, optionally filtered (e.g. is_active=True)."""
    return (
        db.query(Student)
        .filter_by(**filters)
        .join(teacher_student, Student.id == teacher_student.c.student_id)
        .filter(teacher_student.c.teacher_id == teacher_id)
        .order_by(Student.id)
        .all()
    )


def find_students_with_teachers(db: Session, **filters: Any) -> List[Student]:
    """Students having at least one teacher association."""
    return (
        db.query(Student)
        .filter_by(**filters)
        .join(teacher_student, Student.id == teacher_student.c.student_id)
        .distinct()
        .order_by(Student.id)
        .all()
    )


def teacher_ids_by_student(db: Session, teacher_ids: Iterable[int]) -> Dict[int, Set[int]]:
    """Map student id -> ids of the given teachers the student is associated with."""
    teacher_ids = list(teacher_ids)
    membership: Dict[int, Set[int]] = defaultdict(set)
    if not teacher_ids:
        return membership
    stmt = select(teacher_student.c.student_id, teacher_student.c.teacher_id).where(
        teacher_student.c.teacher_id.in_(teacher_ids)
    )
    for student_id, teacher_id in db.execute(stmt):
        membership[student_id].add(teacher_id)
    return membership

from sqlalchemy import Column, ForeignKey, Integer, Table
from school_admin.core.database import Base


# A (teacher, student) pair is either associated or not; the composite key
# rejects a second insert of the same pair
teacher_student = Table(
    "teacher_student",
    Base.metadata,
    Column("teacher_id", Integer, ForeignKey("teachers.id", ondelete="CASCADE"), primary_key=True),
    Column("student_id", Integer, ForeignKey("students.id", ondelete="CASCADE"), primary_key=True, index=True),
)

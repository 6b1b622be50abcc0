import logging
from school_admin.core.database import SessionLocal, create_database_tables
from school_admin.models.teacher import Teacher
from school_admin.services.school.repository import SchoolRepository

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_REGISTRATIONS = {
    "teacherken@gmail.com": [
        "studentjon@gmail.com",
        "studenthon@gmail.com",
        "commonstudent1@gmail.com",
        "commonstudent2@gmail.com",
        "student_only_under_teacher_ken@gmail.com",
    ],
    "teacherjoe@gmail.com": [
        "commonstudent1@gmail.com",
        "commonstudent2@gmail.com",
        "studentbob@gmail.com",
    ],
}

DEMO_SUSPENDED = ["studentbob@gmail.com"]


def seed_data(repository: SchoolRepository = None) -> bool:
    """
    Register the demo teachers and students.

    Returns False when the database already holds teachers.
    """
    repository = repository or SchoolRepository()
    db = SessionLocal()
    try:
        # Check if data already exists to avoid duplication
        if db.query(Teacher).first():
            logger.info("Database already contains data. Skipping seed.")
            return False

        logger.info("Seeding data...")
        for teacher, students in DEMO_REGISTRATIONS.items():
            repository.register_students(db, teacher, students)
        for student in DEMO_SUSPENDED:
            repository.suspend_student(db, student)

        logger.info("Data seeded successfully")
        return True
    except Exception:
        logger.exception("Error seeding data")
        db.rollback()
        raise
    finally:
        db.close() # Always close the connection

if __name__ == "__main__":
    create_database_tables()
    seed_data()

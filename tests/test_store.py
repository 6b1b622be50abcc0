from school_admin.models.student import Student
from school_admin.models.teacher import Teacher
from school_admin.services.school import store


def test_find_or_create_reports_creation(db):
    first, created = store.find_or_create(db, Student, email="s1@gmail.com")
    again, created_again = store.find_or_create(db, Student, email="s1@gmail.com")

    assert created is True
    assert created_again is False
    assert again.id == first.id


def test_find_or_create_recovers_from_concurrent_insert(db, monkeypatch):
    existing = store.create(db, Student, email="s1@gmail.com")
    real_find_one = store.find_one
    calls = []

    def find_one_missing_first(session, model, **filters):
        # the first lookup happens "before" the other request committed
        calls.append(filters)
        if len(calls) == 1:
            return None
        return real_find_one(session, model, **filters)

    monkeypatch.setattr(store, "find_one", find_one_missing_first)

    record, created = store.find_or_create(db, Student, email="s1@gmail.com")

    assert created is False
    assert record.id == existing.id


def test_associations(db):
    teacher = store.create(db, Teacher, email="t@gmail.com")
    s1 = store.create(db, Student, email="s1@gmail.com")
    s2 = store.create(db, Student, email="s2@gmail.com")

    store.add_associations(db, teacher.id, [s1.id])
    store.add_associations(db, teacher.id, [])

    assert store.has_association(db, teacher.id, s1.id)
    assert not store.has_association(db, teacher.id, s2.id)
    assert [s.email for s in store.find_students_with_teachers(db)] == ["s1@gmail.com"]


def test_teacher_ids_by_student(db):
    ken = store.create(db, Teacher, email="ken@gmail.com")
    joe = store.create(db, Teacher, email="joe@gmail.com")
    s1 = store.create(db, Student, email="s1@gmail.com")
    s2 = store.create(db, Student, email="s2@gmail.com")
    store.add_associations(db, ken.id, [s1.id, s2.id])
    store.add_associations(db, joe.id, [s2.id])

    membership = store.teacher_ids_by_student(db, [ken.id, joe.id])

    assert membership[s1.id] == {ken.id}
    assert membership[s2.id] == {ken.id, joe.id}
    assert store.teacher_ids_by_student(db, []) == {}


def test_update(db):
    student = store.create(db, Student, email="s1@gmail.com")
    assert student.is_active is True

    store.update(db, student, is_active=False)

    assert store.find_one(db, Student, email="s1@gmail.com", is_active=False) is not None

import pytest

from school_admin.schemas.school import CommonStudentsQuery, RegisterRequest, SuspendRequest
from school_admin.schemas.validation import validate_schema


def test_valid_email_is_not_rewritten():
    request = RegisterRequest(teacher="Ken@School.ORG", students=["Agnes@Gmail.COM"])

    assert request.teacher == "Ken@School.ORG"
    assert request.students == ["Agnes@Gmail.COM"]


@pytest.mark.parametrize("email", ["", "studentjon", "jon@", "@gmail.com", "jon gmail.com"])
def test_malformed_email_is_rejected(email):
    outcome = validate_schema(SuspendRequest, {"student": email})

    assert not outcome.ok
    assert "student" in outcome.problems


def test_problems_are_keyed_by_field_path():
    outcome = validate_schema(CommonStudentsQuery, {"teacher": ["Ken@School.ORG", "nope"]})

    assert list(outcome.problems) == ["teacher.1"]


def test_empty_teacher_list_is_rejected():
    outcome = validate_schema(CommonStudentsQuery, {"teacher": []})

    assert not outcome.ok
    assert outcome.value is None

import pytest

from school_admin.core import database


@pytest.fixture()
def created_tables(monkeypatch):
    calls = []
    monkeypatch.setattr(database, "create_database_tables", lambda: calls.append(True))
    return calls


def test_check_database_connection():
    assert database.check_database_connection() is True


def test_init_db_retries_until_database_is_reachable(monkeypatch, created_tables):
    answers = iter([False, False, True])
    monkeypatch.setattr(database, "check_database_connection", lambda: next(answers))

    database.init_db(retries=5, delay=0)

    assert next(answers, None) is None
    assert created_tables == [True]


def test_init_db_gives_up(monkeypatch, created_tables):
    attempts = []
    monkeypatch.setattr(database, "check_database_connection", lambda: attempts.append(1) or False)

    with pytest.raises(RuntimeError, match="after 3 attempts"):
        database.init_db(retries=3, delay=0)

    assert len(attempts) == 3
    assert created_tables == []

from school_admin.core.config import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_database_url_built_from_components(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = make_settings(
        POSTGRES_USER="admin",
        POSTGRES_PASSWORD="s3cret",
        POSTGRES_HOST="db",
        POSTGRES_PORT="5433",
        POSTGRES_DB="school",
    )

    assert settings.DATABASE_URL == "postgresql://admin:s3cret@db:5433/school"
    assert not settings.is_sqlite


def test_explicit_database_url_wins():
    settings = make_settings(DATABASE_URL="sqlite:///./school.db", POSTGRES_HOST="db")

    assert settings.DATABASE_URL == "sqlite:///./school.db"
    assert settings.is_sqlite


def test_masked_database_url_hides_password():
    settings = make_settings(DATABASE_URL="postgresql://admin:s3cret@db:5432/school")

    masked = settings.masked_database_url()

    assert "s3cret" not in masked
    assert masked == "postgresql://admin:***@db:5432/school"


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://localhost:3000, http://localhost:8000")

    assert make_settings().BACKEND_CORS_ORIGINS == ["http://localhost:3000", "http://localhost:8000"]


def test_cors_origins_from_json_env(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://localhost:3000"]')

    assert make_settings().BACKEND_CORS_ORIGINS == ["http://localhost:3000"]

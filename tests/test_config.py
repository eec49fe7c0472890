import pytest
from pydantic import ValidationError

from skillroster.core.config import Settings


def test_missing_secret_key_fails_at_startup(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.delenv("JWT", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_legacy_jwt_variable_supplies_secret(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.setenv("JWT", "legacy-secret")

    assert Settings(_env_file=None).secret_key == "legacy-secret"


def test_schema_reset_refused_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DB_RESET_ON_STARTUP", "true")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_bootstrap_gates_default_off(monkeypatch):
    monkeypatch.delenv("DB_RESET_ON_STARTUP", raising=False)
    monkeypatch.delenv("SEED_ON_STARTUP", raising=False)

    settings = Settings(_env_file=None)

    assert settings.db_reset_on_startup is False
    assert settings.seed_on_startup is False
    assert settings.access_token_expire_minutes == 60

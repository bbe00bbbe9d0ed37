from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from sessionauth.shared.config import AppConfig, SecurityConfig, StorageConfig


def test_defaults_match_service_contract(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "JWT_SECRET", "PORT", "SESSION_TTL", "BCRYPT_ROUNDS", "COOKIE_SAMESITE"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(_env_file=None)

    assert config.port == 3000
    assert config.session.ttl_seconds == 3600
    assert config.session.cookie_name == "auth_token"
    assert config.hashing.bcrypt_rounds == 10
    assert config.security.cookie_samesite == "Lax"
    assert config.secure_cookies() is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("USERS_DB_PATH", str(tmp_path / "users.json"))

    config = AppConfig(_env_file=None)

    assert config.jwt_secret == "from-env"
    assert config.port == 8080
    assert config.storage.users_path == tmp_path / "users.json"


def test_security_config_parses_comma_separated_origins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("COOKIE_SECURE", "yes")

    security = SecurityConfig(_env_file=None)

    assert security.allowed_origins == ["https://a.example", "https://b.example"]
    assert security.cookie_secure is True


def test_security_config_rejects_unknown_samesite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COOKIE_SAMESITE", "lax-typo")

    with pytest.raises(PydanticValidationError):
        SecurityConfig(_env_file=None)

    monkeypatch.setenv("COOKIE_SAMESITE", "Strict")
    assert SecurityConfig(_env_file=None).cookie_samesite == "Strict"


def test_production_requires_strong_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(_env_file=None, app_env="production", jwt_secret="dev")


def test_production_enables_secure_cookies(tmp_path: Path) -> None:
    config = AppConfig(
        _env_file=None,
        app_env="production",
        jwt_secret="a-long-random-production-secret",
        storage=StorageConfig(users_path=tmp_path / "users.json"),
    )

    assert config.is_production()
    assert config.secure_cookies() is True

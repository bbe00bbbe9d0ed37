from __future__ import annotations

from pathlib import Path

import pytest

from sessionauth.shared.config import AppConfig, HashingConfig, StorageConfig


@pytest.fixture()
def users_path(tmp_path: Path) -> Path:
    return tmp_path / "db" / "users.json"


@pytest.fixture()
def app_config(users_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        jwt_secret="test-secret-value",
        storage=StorageConfig(users_path=users_path),
        hashing=HashingConfig(bcrypt_rounds=4),
    )

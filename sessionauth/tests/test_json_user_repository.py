from __future__ import annotations

import json
from pathlib import Path

import pytest

from sessionauth.domain.users.entities import UserRecord
from sessionauth.domain.users.exceptions import StoreCorruptedError, UserAlreadyExistsError
from sessionauth.infrastructure.repositories.users.json_user_repository import (
    JsonFileUserRepository,
)


def _record(username: str = "alice", user_id: str = "id-1") -> UserRecord:
    return UserRecord(id=user_id, username=username, password_hash="$2b$04$hash")


def test_missing_file_reads_as_empty(users_path: Path) -> None:
    repo = JsonFileUserRepository(users_path)

    assert repo.find_by_username("alice") is None
    assert repo.count() == 0
    assert not users_path.exists()


def test_insert_persists_across_instances(users_path: Path) -> None:
    JsonFileUserRepository(users_path).insert(_record())

    reopened = JsonFileUserRepository(users_path)
    found = reopened.find_by_username("alice")

    assert found == _record()
    assert json.loads(users_path.read_text(encoding="utf-8")) == [
        {"_id": "id-1", "username": "alice", "password": "$2b$04$hash"}
    ]


def test_insert_duplicate_username_raises(users_path: Path) -> None:
    repo = JsonFileUserRepository(users_path)
    repo.insert(_record())

    with pytest.raises(UserAlreadyExistsError):
        repo.insert(_record(user_id="id-2"))

    assert repo.count() == 1


def test_insert_leaves_no_temp_file(users_path: Path) -> None:
    JsonFileUserRepository(users_path).insert(_record())

    assert [p.name for p in users_path.parent.iterdir()] == ["users.json"]


def test_corrupted_file_raises_store_error(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    users_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreCorruptedError) as info:
        JsonFileUserRepository(users_path).find_by_username("alice")
    assert info.value.status == 500


def test_non_list_document_raises_store_error(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    users_path.write_text('{"users": []}', encoding="utf-8")

    with pytest.raises(StoreCorruptedError):
        JsonFileUserRepository(users_path).count()


def test_malformed_rows_are_skipped(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    users_path.write_text(
        json.dumps([{"_id": "id-1", "username": "alice"}, {"_id": "id-2", "username": "bob", "password": "h"}]),
        encoding="utf-8",
    )

    repo = JsonFileUserRepository(users_path)

    assert repo.find_by_username("alice") is None
    assert repo.find_by_username("bob") is not None


def test_malformed_row_username_still_counts_as_taken(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    original = [{"_id": "old", "username": "alice", "password": None, "extra": 1}]
    users_path.write_text(json.dumps(original), encoding="utf-8")

    with pytest.raises(UserAlreadyExistsError):
        JsonFileUserRepository(users_path).insert(_record())

    assert json.loads(users_path.read_text(encoding="utf-8")) == original


def test_insert_keeps_malformed_rows_on_disk(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    malformed = {"_id": "old", "username": "alice", "extra": 1}
    users_path.write_text(json.dumps([malformed]), encoding="utf-8")

    JsonFileUserRepository(users_path).insert(_record(username="bob", user_id="id-2"))

    assert json.loads(users_path.read_text(encoding="utf-8")) == [
        malformed,
        {"_id": "id-2", "username": "bob", "password": "$2b$04$hash"},
    ]


def test_non_object_entry_raises_store_error(users_path: Path) -> None:
    users_path.parent.mkdir(parents=True)
    users_path.write_text('[{"_id": "id-1", "username": "bob", "password": "h"}, "stray"]', encoding="utf-8")

    repo = JsonFileUserRepository(users_path)

    with pytest.raises(StoreCorruptedError):
        repo.insert(_record())
    assert "stray" in users_path.read_text(encoding="utf-8")

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from sessionauth.domain.users.entities import UserRecord
from sessionauth.domain.users.exceptions import StoreCorruptedError, UserAlreadyExistsError
from sessionauth.domain.users.repositories import UserRepository
from sessionauth.shared.logging import logger
from sessionauth.utils.jsonio import JsonShapeError, read_json_list_of_dicts, write_json_list


def _to_row(record: UserRecord) -> dict[str, Any]:
    return {"_id": record.id, "username": record.username, "password": record.password_hash}


def _from_row(row: dict[str, Any]) -> UserRecord | None:
    user_id = row.get("_id")
    username = row.get("username")
    password_hash = row.get("password")
    if not all(isinstance(v, str) for v in (user_id, username, password_hash)):
        return None
    return UserRecord(id=user_id, username=username, password_hash=password_hash)


class JsonFileUserRepository(UserRepository):
    """User records kept in a single JSON array on local disk.

    Rows that do not parse into a record are never served, but they are kept
    on disk as-is and their username still counts as taken.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        logger.debug(f"JsonFileUserRepository: initialized path={self._path}")

    @property
    def path(self) -> Path:
        return self._path

    def _load_rows(self) -> list[dict[str, Any]]:
        try:
            return read_json_list_of_dicts(self._path)
        except (JsonShapeError, OSError) as exc:
            logger.error(f"JsonFileUserRepository: unreadable store path={self._path}: {exc}")
            raise StoreCorruptedError(context={"path": str(self._path)}) from exc

    def _load(self) -> list[UserRecord]:
        records = []
        for row in self._load_rows():
            record = _from_row(row)
            if record is None:
                logger.warning(f"JsonFileUserRepository: skipping malformed row in {self._path}")
                continue
            records.append(record)
        return records

    def find_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            return next((r for r in self._load() if r.username == username), None)

    def insert(self, record: UserRecord) -> UserRecord:
        with self._lock:
            rows = self._load_rows()
            if any(row.get("username") == record.username for row in rows):
                raise UserAlreadyExistsError(context={"username": record.username})
            write_json_list(self._path, [*rows, _to_row(record)])
        logger.debug(f"JsonFileUserRepository: inserted user_id={record.id}")
        return record

    def count(self) -> int:
        with self._lock:
            return len(self._load())

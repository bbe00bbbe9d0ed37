# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionClaims, UserRecord


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> UserRecord | None: ...
    def insert(self, record: UserRecord) -> UserRecord: ...
    def count(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionIssuer(Protocol):
    def issue(self, user_id: str, username: str) -> str: ...
    def verify(self, token: str) -> SessionClaims: ...

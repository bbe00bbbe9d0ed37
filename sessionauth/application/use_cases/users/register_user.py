# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from sessionauth.domain.users.entities import PublicUser, UserRecord
from sessionauth.domain.users.exceptions import UserAlreadyExistsError
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository
from sessionauth.domain.users.validation import validate_password, validate_username
from sessionauth.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> PublicUser:
        validate_username(username)
        validate_password(password)

        if self._users.find_by_username(username) is not None:
            raise UserAlreadyExistsError(context={"username": username})

        record = UserRecord(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=self._password_hasher.hash(password),
        )
        persisted = self._users.insert(record)
        logger.info(f"users.register: created user_id={persisted.id}")
        return persisted.to_public()

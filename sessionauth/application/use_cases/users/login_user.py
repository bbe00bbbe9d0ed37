# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.domain.users.entities import PublicUser
from sessionauth.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository
from sessionauth.domain.users.validation import validate_password, validate_username
from sessionauth.shared.logging import logger


class LoginUserUseCase:
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

        user = self._users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(context={"username": username})

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning(f"users.login: password mismatch user_id={user.id}")
            raise InvalidCredentialsError()

        return user.to_public()

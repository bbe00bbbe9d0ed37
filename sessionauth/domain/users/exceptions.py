# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.shared.errors.base import (
    AuthError,
    ConflictError,
    InfrastructureError,
    NotFoundError,
)


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "Username is already taken"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    message = "User not found"


class InvalidCredentialsError(AuthError):
    code = "invalid_credentials"
    message = "Incorrect password"


class InvalidTokenError(AuthError):
    code = "invalid_token"
    message = "Session token is invalid"


class TokenExpiredError(InvalidTokenError):
    code = "token_expired"
    message = "Session token has expired"


class StoreCorruptedError(InfrastructureError):
    code = "store_corrupted"
    message = "Credential store could not be read"

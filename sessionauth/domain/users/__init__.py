# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import PublicUser, SessionClaims, UserRecord
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    StoreCorruptedError,
    TokenExpiredError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .validation import validate_password, validate_username

__all__ = [
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PublicUser",
    "SessionClaims",
    "StoreCorruptedError",
    "TokenExpiredError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRecord",
    "validate_password",
    "validate_username",
]

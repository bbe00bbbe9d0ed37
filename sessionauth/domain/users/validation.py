# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shape checks applied to credentials before they reach the store."""

from __future__ import annotations

from typing import Any

from sessionauth.shared.errors.base import ValidationError

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


def validate_username(username: Any) -> None:
    if not isinstance(username, str):
        raise ValidationError("Username must be a string", field="username")
    if len(username) < USERNAME_MIN_LENGTH:
        raise ValidationError(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long",
            field="username",
        )


def validate_password(password: Any) -> None:
    if not isinstance(password, str):
        raise ValidationError("Password must be a string", field="password")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
            field="password",
        )

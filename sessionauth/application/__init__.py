# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import BcryptPasswordHasher, JwtSessionIssuer
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "BcryptPasswordHasher",
    "JwtSessionIssuer",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]

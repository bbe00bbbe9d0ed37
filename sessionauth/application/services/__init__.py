# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import BcryptPasswordHasher
from .session_tokens import JwtSessionIssuer

__all__ = ["BcryptPasswordHasher", "JwtSessionIssuer"]

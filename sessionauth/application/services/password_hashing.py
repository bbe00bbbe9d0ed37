"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from sessionauth.domain.users.repositories import PasswordHasher

# bcrypt only consumes the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(bcrypt.checkpw(_encode(password), hashed.encode("utf-8")))
        except ValueError:
            return False

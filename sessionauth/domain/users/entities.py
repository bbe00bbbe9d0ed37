# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class UserRecord:

    id: str
    username: str
    password_hash: str

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class PublicUser:

    id: str
    username: str


@dataclass(slots=True, frozen=True)
class SessionClaims:

    user_id: str
    username: str
    issued_at: datetime
    expires_at: datetime

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.user_id, username=self.username)

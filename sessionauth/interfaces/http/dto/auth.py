from __future__ import annotations

from typing import Any

from flask import Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sessionauth.shared.errors.validation import raise_validation_error


class CredentialsRequestDTO(BaseModel):
    """Username/password pair; length rules live in the domain validator."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

    model_config = ConfigDict(strict=True, extra="ignore")

    @classmethod
    def from_request(cls, req: Request) -> CredentialsRequestDTO:
        raw: dict[str, Any] = req.get_json(silent=True) or req.form.to_dict()
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise_validation_error(exc)


class RegisterRequestDTO(CredentialsRequestDTO):
    pass


class LoginRequestDTO(CredentialsRequestDTO):
    pass


class AuthSuccessDTO(BaseModel):
    success: bool = True
    username: str | None = None
    redirect: str | None = None


class LogoutSuccessDTO(BaseModel):
    success: bool = True

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, jsonify, redirect, request

from sessionauth.domain.users.entities import SessionClaims
from sessionauth.domain.users.exceptions import InvalidTokenError
from sessionauth.domain.users.repositories import SessionIssuer
from sessionauth.shared.logging import logger

AUTH_COOKIE = "auth_token"
LOGIN_PAGE = "/"

F = TypeVar("F", bound=Callable[..., Any])


def authed_user() -> SessionClaims:
    """Return the identity attached by ``auth_required``."""
    return cast(SessionClaims, g.user)


def _wants_json() -> bool:
    return request.accept_mimetypes.best == "application/json"


def _deny(reason: str):
    logger.warning(f"auth.gate: {reason} on {request.method} {request.path}")
    if _wants_json():
        return jsonify({"error": "unauthorized"}), 401
    return redirect(LOGIN_PAGE)


def read_session(issuer: SessionIssuer, cookie_name: str = AUTH_COOKIE) -> SessionClaims | None:
    token = request.cookies.get(cookie_name, "")
    if not token:
        return None
    try:
        return issuer.verify(token)
    except InvalidTokenError as exc:
        logger.info(f"auth.gate: rejected token ({exc.code}) on {request.path}")
        return None


def auth_required(issuer: SessionIssuer, cookie_name: str = AUTH_COOKIE) -> Callable[[F], F]:
    def decorator(f: F) -> F:
        @wraps(f)
        def inner(*a, **kw):
            token = request.cookies.get(cookie_name, "")
            if not token:
                return _deny("no auth cookie")

            try:
                claims = issuer.verify(token)
            except InvalidTokenError as exc:
                return _deny(f"token rejected ({exc.code})")

            g.user = claims
            g.user_id = claims.user_id
            logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return cast(F, inner)

    return decorator


__all__ = [
    "AUTH_COOKIE",
    "auth_required",
    "authed_user",
    "read_session",
]

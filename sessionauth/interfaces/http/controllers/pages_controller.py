# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, render_template

from sessionauth.domain.users.repositories import SessionIssuer
from sessionauth.interfaces.http.auth_gate import AUTH_COOKIE, auth_required, authed_user, read_session


class PagesController:
    def __init__(self, *, sessions: SessionIssuer, cookie_name: str = AUTH_COOKIE) -> None:
        self._sessions = sessions
        self._cookie_name = cookie_name

    def index(self) -> str:
        claims = read_session(self._sessions, self._cookie_name)
        return render_template("index.html", username=claims.username if claims else None)

    def protected(self) -> str:
        return render_template("protected.html", user=authed_user())

    def as_blueprint(self) -> Blueprint:
        gate = auth_required(self._sessions, self._cookie_name)
        bp = Blueprint("pages", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/protected", view_func=gate(self.protected), methods=["GET"])
        return bp

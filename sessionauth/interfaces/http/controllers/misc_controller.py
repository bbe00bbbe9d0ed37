# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from sessionauth.domain.users.repositories import UserRepository
from sessionauth.shared.errors.base import AppError


class MiscController:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            status["users"] = self._users.count()
        except AppError as exc:
            status["ok"] = False
            status["store"] = exc.code
            return jsonify(status), 503
        return jsonify(status)

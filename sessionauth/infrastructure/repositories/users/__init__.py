# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .json_user_repository import JsonFileUserRepository

__all__ = ["JsonFileUserRepository"]

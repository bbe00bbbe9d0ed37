# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import (
    AppConfig,
    HashingConfig,
    SecurityConfig,
    SessionConfig,
    StorageConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "HashingConfig",
    "SecurityConfig",
    "SessionConfig",
    "StorageConfig",
    "load_config",
]

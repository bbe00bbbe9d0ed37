# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cookie-based credential authentication service."""

__version__ = "1.0.0"

# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Utility functions for HamNorm: logging infrastructure.

File: hamnorm/utils/__init__.py
Date: October, 2026
"""

from .monitor import (
    RunContext,
    get_logger,
)

__all__ = [
    "RunContext",
    "get_logger",
]

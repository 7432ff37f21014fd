# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Console logging built on rich.

One named logger ("hamnorm") with a RichHandler on a themed console. Plain
messages go through unchanged; RunContext adds styled headers and key-value
lines.

File: hamnorm/utils/monitor.py
Date: October, 2026
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


# ============================================================================
# Console Theme (Two-Color Scheme)
# ============================================================================

HAMNORM_THEME = Theme({
    "hamnorm.main": "cyan",            # Labels and headers
    "hamnorm.accent": "bright_yellow", # Values
})

LOGGER_NAME = "hamnorm"


def get_logger(
    level: Optional[int] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Return the package logger, attaching the rich handler on first use.

    Args:
        level: Logging level to apply (unchanged if None; INFO on first use)
        console: Console for the handler (only used on first use)
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        rich_h = RichHandler(
            console=console or Console(theme=HAMNORM_THEME),
            show_path=False,
            show_time=False,
            show_level=False,
            omit_repeated_times=False,
            markup=False,
        )
        rich_h.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(rich_h)
        if level is None:
            level = logging.INFO

    if level is not None:
        logger.setLevel(level)
    return logger


class RunContext:
    """Logging front-end shared by the CLI and the exporters."""

    def __init__(self, console: Console, logger: logging.Logger):
        self.console = console
        self.logger = logger

    @classmethod
    def create(cls, level: int = logging.INFO) -> RunContext:
        logger = get_logger(level)
        console = next(
            (h.console for h in logger.handlers if isinstance(h, RichHandler)),
            Console(theme=HAMNORM_THEME),
        )
        return cls(console, logger)

    # ========================================================================
    # Logging API
    # ========================================================================

    def header(self, title: str) -> None:
        """Styled section separator (suppressed below INFO)."""
        if self.logger.isEnabledFor(logging.INFO):
            self.console.rule(f"[hamnorm.main]{title}[/]")

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def log_text(self, msg: str) -> None:
        """Output with rich markup support."""
        self.logger.info(msg, extra={"markup": True})

    def log_kv(self, label: str, value: str) -> None:
        """Key-value pair: label in main, value in accent."""
        self.log_text(f"[hamnorm.main]{label}:[/] [hamnorm.accent]{value}[/]")

    def warn(self, msg: str) -> None:
        self.logger.warning(msg)


__all__ = ["HAMNORM_THEME", "LOGGER_NAME", "get_logger", "RunContext"]

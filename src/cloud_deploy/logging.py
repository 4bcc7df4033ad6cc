# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be a TTY."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - detached streams
        return False


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    console: Console,
    msg: str,
    *,
    style: str | None,
    use_color: bool | None = None,
) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(console: Console, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(console, f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_color=use_color)


def warn(console: Console, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(console, f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_color=use_color)


@dataclass(slots=True)
class CLILogger:
    """Adapter around the message helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _debug_style: str = field(default="dim", repr=False)

    def ok(self, message: str) -> None:
        ok(self.console, message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        warn(self.console, message, use_emoji=self.use_emoji)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled."""

        if self.debug_enabled:
            text = Text("[debug] ", style="bold cyan")
            text.append(message, style=self._debug_style)
            self.console.print(text)


def build_cli_logger(*, console: Console, emoji: bool, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to ``console`` for the provided emoji preference.

    Args:
        console: Rich console receiving every message.
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger instance bound to the console.
    """

    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


__all__ = [
    "CLILogger",
    "build_cli_logger",
    "detect_tty",
    "emoji",
    "ok",
    "warn",
]

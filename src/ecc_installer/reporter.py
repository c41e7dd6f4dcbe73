"""
Operator-facing console output for the installer.

Each message is printed with a colored marker and mirrored to the
package logger so --verbose runs show the same story in the log stream.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from .logging_config import get_logger

logger = get_logger(__name__)

INSTALLER_THEME = Theme({
    "step": "blue",
    "success": "green",
    "warn": "yellow",
    "error": "red",
    "accent": "cyan",
    "dim": "dim white",
})


class InstallReporter:
    """Rich-based printer for installer steps, warnings and summaries."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=INSTALLER_THEME, highlight=False)
        self.warnings: list[str] = []

    def step(self, message: str):
        logger.info(message)
        self.console.print(f"[step][*][/step] {escape(message)}")

    def success(self, message: str):
        logger.info(message)
        self.console.print(f"[success][✓][/success] {escape(message)}")

    def warning(self, message: str):
        logger.warning(message)
        self.warnings.append(message)
        self.console.print(f"[warn][!][/warn] {escape(message)}")

    def error(self, message: str):
        logger.error(message)
        self.console.print(f"[error][✗][/error] {escape(message)}")

    def detail(self, message: str):
        """Indented follow-up line (accepts rich markup)."""
        self.console.print(f"    {message}")

    def line(self, message: str = ""):
        """Plain line (accepts rich markup)."""
        self.console.print(message)

    def banner(self):
        border = "═" * 62
        for text in (
            f"╔{border}╗",
            "║        Everything Claude Code - Universal Installer          ║",
            "║     Language-agnostic configurations for Claude Code         ║",
            f"╚{border}╝",
        ):
            self.console.print(f"[accent]{text}[/accent]")

    def rule(self, title: str, style: str = "success"):
        self.console.rule(f"[{style}]{title}[/{style}]", style=style)

"""
Real implementations of protocol interfaces.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape


class ConsolePrompter:
    """Production implementation of PromptInterface on a rich Console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def ask(self, message: str) -> str:
        try:
            # Prompts contain literal brackets such as [y/N]
            return self.console.input(escape(message))
        except EOFError:
            self.console.print()
            return ""

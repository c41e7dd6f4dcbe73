"""
Protocol definitions for operator interaction.

The interactive selector only talks to a PromptInterface, so tests can
feed scripted answers instead of reading the console.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PromptInterface(Protocol):
    """Interface for blocking line-oriented prompts"""

    def ask(self, message: str) -> str:
        """Show a prompt and return the operator's answer.

        Args:
            message: Prompt text, shown verbatim

        Returns:
            The answer without the trailing newline. End of input
            is reported as an empty string.
        """
        ...

"""
Installation plans and language selection parsing.

An InstallPlan is the transient record of what one invocation will
install. It is built from CLI flags or by the interactive selector and
consumed once by the Installer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .settings import AVAILABLE_LANGUAGES

# Install-type menu
MODE_FULL = "full"
MODE_CORE = "core"
MODE_CUSTOM = "custom"

ALL_TOKENS = {"a", "all"}
NONE_TOKENS = {"n", "none"}


def unique_in_order(items: Iterable[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence of each item."""
    seen: set[str] = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def parse_language_choices(
    answer: Optional[str],
    options: Sequence[str] = AVAILABLE_LANGUAGES,
) -> list[str]:
    """Turn a multi-select answer into an ordered list of identifiers.

    Accepts space-separated 1-based indices into ``options``, or one of the
    all/none tokens. Non-numeric and out-of-range tokens are ignored,
    duplicates collapse to their first position.

    Examples:
        "1 3"   -> ["typescript", "go"]
        "a"     -> every option
        "n", "" -> []
        "2 2 99 x 1" -> ["python", "typescript"]
    """
    text = (answer or "").strip()
    if not text or text.lower() in NONE_TOKENS:
        return []
    if text.lower() in ALL_TOKENS:
        return list(options)

    chosen = []
    for token in text.split():
        if not token.isdigit():
            continue
        index = int(token)
        if 1 <= index <= len(options):
            chosen.append(options[index - 1])
    return unique_in_order(chosen)


def is_yes(answer: Optional[str]) -> bool:
    """True for y/yes in any case; everything else means no."""
    return (answer or "").strip().lower() in ("y", "yes")


@dataclass
class InstallPlan:
    """Which components and language skills one run installs."""

    mode: str = MODE_FULL
    agents: bool = False
    commands: bool = False
    skills: bool = False
    rules: bool = False
    user_config: bool = False
    hooks: bool = False
    mcp: bool = True
    languages: list[str] = field(default_factory=list)
    # True when languages are still to be asked interactively
    prompt_languages: bool = False

    @classmethod
    def full(cls, languages: Optional[Iterable[str]] = None) -> InstallPlan:
        """Every component. Without an explicit list, languages are prompted."""
        return cls(
            mode=MODE_FULL,
            agents=True,
            commands=True,
            skills=True,
            rules=True,
            user_config=True,
            hooks=True,
            languages=unique_in_order(languages or []),
            prompt_languages=languages is None,
        )

    @classmethod
    def core(cls) -> InstallPlan:
        """Every language-agnostic component, no language skills."""
        return cls(
            mode=MODE_CORE,
            agents=True,
            commands=True,
            skills=True,
            rules=True,
            user_config=True,
            hooks=True,
        )

    @classmethod
    def custom(cls, **components: bool) -> InstallPlan:
        return cls(mode=MODE_CUSTOM, **components)

    def selected_components(self) -> list[str]:
        """Names of the selected components, in installation order."""
        flags = [
            ("agents", self.agents),
            ("commands", self.commands),
            ("skills", self.skills),
            ("rules", self.rules),
            ("CLAUDE.md", self.user_config),
            ("hooks", self.hooks),
        ]
        return [name for name, enabled in flags if enabled]

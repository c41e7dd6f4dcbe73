"""
Test fixtures and factories for installer unit tests.

Builds small Source Bundles on disk and scripted prompters so installer
flows run without a console or the real ~/.claude.
"""

import json
from pathlib import Path
from typing import Iterable, List, Optional

from ecc_installer.settings import AVAILABLE_LANGUAGES

HOOKS_CONTENT = {
    "hooks": {
        "PreToolUse": [
            {"matcher": "Bash", "hooks": [{"type": "command", "command": "echo pre"}]}
        ],
        "PostToolUse": [
            {"matcher": "Edit", "hooks": [{"type": "command", "command": "echo post"}]}
        ],
    }
}


def create_bundle(
    root: Path,
    components: Iterable[str] = ("agents", "commands", "skills", "rules"),
    languages: Iterable[str] = AVAILABLE_LANGUAGES,
    hooks: bool = True,
    user_config: bool = True,
    mcp: bool = True,
) -> Path:
    """Write a Source Bundle under ``root`` and return it.

    Each component directory gets two markdown files; skills also gets
    skills/languages/<lang>.md for every language given.
    """
    root.mkdir(parents=True, exist_ok=True)
    for component in components:
        directory = root / component
        directory.mkdir(parents=True, exist_ok=True)
        for stem in ("alpha", "beta"):
            (directory / f"{stem}.md").write_text(f"# {component} {stem}\n")

    if "skills" in components:
        languages_dir = root / "skills" / "languages"
        languages_dir.mkdir(parents=True, exist_ok=True)
        for lang in languages:
            (languages_dir / f"{lang}.md").write_text(f"# {lang} patterns\n")

    if hooks:
        (root / "hooks").mkdir(exist_ok=True)
        (root / "hooks" / "hooks.json").write_text(json.dumps(HOOKS_CONTENT, indent=2) + "\n")

    if user_config:
        (root / "examples").mkdir(exist_ok=True)
        (root / "examples" / "user-CLAUDE.md").write_text("# User config\n")

    if mcp:
        (root / "mcp-configs").mkdir(exist_ok=True)
        (root / "mcp-configs" / "mcp-servers.json").write_text('{"mcpServers": {}}\n')

    return root


def snapshot_tree(root: Path, exclude: Iterable[str] = ("backups",)) -> dict:
    """Map relative file path -> bytes for every file under root."""
    excluded = set(exclude)
    tree = {}
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root)
        if relative.parts and relative.parts[0] in excluded:
            continue
        if path.is_file():
            tree[relative.as_posix()] = path.read_bytes()
    return tree


class ScriptedPrompter:
    """PromptInterface that replays canned answers in order."""

    def __init__(self, answers: Optional[List[str]] = None):
        self.answers = list(answers or [])
        self.prompts: List[str] = []

    def ask(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            return ""
        return self.answers.pop(0)

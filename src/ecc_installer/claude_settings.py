"""Read Claude Code settings and hooks JSON files.

Used to report which hook events a hooks file declares and which ones an
existing settings.json already configures. The installer never writes
merged settings; these files are only inspected.
"""

from __future__ import annotations

import json
from pathlib import Path


class ClaudeSettingsFile:
    """Read-only view of a Claude Code settings.json or hooks.json file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> dict:
        """Load settings from file.

        Returns empty dict if file doesn't exist.
        Raises ValueError on invalid JSON or non-object content.
        """
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} contains non-object JSON")
        return data

    def hook_events(self) -> list[str]:
        """Event names under the top-level "hooks" key, in file order."""
        hooks = self.load().get("hooks", {})
        if not isinstance(hooks, dict):
            return []
        return [event for event, entries in hooks.items() if entries]

"""
Installer settings: fixed component names, supported languages and paths.

All filesystem locations are carried by an InstallPaths value so every
installer step can be pointed at temporary directories in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


# Closed set of language identifiers with a skills/languages/<id>.md file
AVAILABLE_LANGUAGES: tuple[str, ...] = (
    "typescript",
    "python",
    "go",
    "rust",
    "java",
    "csharp",
    "ruby",
    "php",
    "swift",
    "cpp",
)

# Target entries snapshotted before any destructive step
WATCHED_ENTRIES: tuple[str, ...] = (
    "agents",
    "commands",
    "skills",
    "rules",
    "CLAUDE.md",
    "settings.json",
)

# Directories removed by uninstall (CLAUDE.md and settings.json are kept)
UNINSTALL_COMPONENTS: tuple[str, ...] = ("agents", "commands", "skills", "rules")

# Source directories that must exist for the bundle to be usable
REQUIRED_SOURCE_COMPONENTS: tuple[str, ...] = ("agents", "commands")

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

LANGUAGE_FILE_SUFFIX = ".md"


def is_bundle_root(directory: Path) -> bool:
    """True if ``directory`` holds the required component directories."""
    return all((directory / name).is_dir() for name in REQUIRED_SOURCE_COMPONENTS)


def get_bundle_root() -> Path:
    """Locate the Source Bundle when --source is not given.

    Prefers the repository checkout the package runs from (editable
    install, src layout), then the current working directory. Falls back
    to the working directory so the bundle check reports where it looked.
    """
    checkout = Path(__file__).resolve().parent.parent.parent
    if is_bundle_root(checkout):
        return checkout
    return Path.cwd()


@dataclass(frozen=True)
class InstallPaths:
    """Source Bundle and Target Installation Directory locations."""

    source_root: Path
    target_root: Path

    @classmethod
    def default(cls, source_root: Path | None = None) -> InstallPaths:
        """Paths for the current operator (~/.claude)."""
        return cls(
            source_root=Path(source_root) if source_root else get_bundle_root(),
            target_root=Path.home() / ".claude",
        )

    @property
    def backup_root(self) -> Path:
        return self.target_root / "backups"

    @property
    def source_languages_dir(self) -> Path:
        return self.source_root / "skills" / "languages"

    @property
    def target_languages_dir(self) -> Path:
        return self.target_root / "skills" / "languages"

    @property
    def source_hooks_file(self) -> Path:
        return self.source_root / "hooks" / "hooks.json"

    @property
    def settings_file(self) -> Path:
        return self.target_root / "settings.json"

    @property
    def hooks_example_file(self) -> Path:
        return self.target_root / "hooks.json.example"

    @property
    def source_user_config(self) -> Path:
        return self.source_root / "examples" / "user-CLAUDE.md"

    @property
    def user_config(self) -> Path:
        return self.target_root / "CLAUDE.md"

    @property
    def source_mcp_config(self) -> Path:
        return self.source_root / "mcp-configs" / "mcp-servers.json"

    @property
    def mcp_example_file(self) -> Path:
        return self.target_root / "mcp-servers.example.json"

    def source(self, component: str) -> Path:
        return self.source_root / component

    def target(self, component: str) -> Path:
        return self.target_root / component

"""
Copy Source Bundle components into the Target Installation Directory.

Every step overwrites same-named files and never deletes anything, so
running an installation twice leaves the same tree behind. Missing source
pieces are warnings, filesystem failures propagate.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable

from rich.markup import escape

from .claude_settings import ClaudeSettingsFile
from .logging_config import get_logger
from .reporter import InstallReporter
from .settings import LANGUAGE_FILE_SUFFIX, InstallPaths

logger = get_logger(__name__)


def count_files(directory: Path) -> int:
    """Number of regular files below a directory (recursive)."""
    return sum(1 for path in directory.rglob("*") if path.is_file())


def copy_entries(source: Path, target: Path) -> None:
    """Copy every entry of ``source`` into ``target``, overwriting files."""
    target.mkdir(parents=True, exist_ok=True)
    for entry in sorted(source.iterdir()):
        destination = target / entry.name
        logger.debug("Copying %s -> %s", entry, destination)
        if entry.is_dir():
            shutil.copytree(entry, destination, dirs_exist_ok=True)
        else:
            shutil.copy2(entry, destination)


def is_plain_name(identifier: str) -> bool:
    """True if the identifier can only name a file directly inside a directory."""
    if not identifier or identifier.startswith("."):
        return False
    return "/" not in identifier and "\\" not in identifier


class ComponentInstaller:
    """Installs the individual pieces of the Source Bundle."""

    def __init__(self, paths: InstallPaths, reporter: InstallReporter):
        self.paths = paths
        self.reporter = reporter

    def install_component(self, component: str) -> int:
        """Copy a whole component directory (e.g. ``agents``) into the target.

        Returns:
            Number of files in the source component, 0 when it is missing
        """
        source = self.paths.source(component)
        if not source.is_dir():
            self.reporter.warning(f"Source directory not found: {source}")
            return 0

        copy_entries(source, self.paths.target(component))
        count = count_files(source)
        self.reporter.success(f"Installed {component} ({count} files)")
        return count

    def install_base_skills(self) -> int:
        """Copy the top-level skills/*.md files, leaving languages/ out."""
        source = self.paths.source("skills")
        if not source.is_dir():
            self.reporter.warning(f"Source directory not found: {source}")
            return 0

        target = self.paths.target("skills")
        target.mkdir(parents=True, exist_ok=True)
        copied = 0
        for skill_file in sorted(source.glob("*.md")):
            if skill_file.is_file():
                shutil.copy2(skill_file, target / skill_file.name)
                copied += 1
        self.reporter.success(f"Installed skills (universal patterns, {copied} files)")
        return copied

    def install_language_skills(self, languages: Iterable[str]) -> list[str]:
        """Copy skills/languages/<id>.md for each identifier, in order.

        Unknown identifiers are reported and skipped.

        Returns:
            Identifiers that were installed
        """
        languages = list(languages)
        if not languages:
            return []

        target = self.paths.target_languages_dir
        target.mkdir(parents=True, exist_ok=True)

        installed = []
        for lang in languages:
            source_file = self.paths.source_languages_dir / f"{lang}{LANGUAGE_FILE_SUFFIX}"
            if not is_plain_name(lang) or not source_file.is_file():
                self.reporter.warning(f"Language skill not found: {lang}")
                continue
            shutil.copy2(source_file, target / source_file.name)
            installed.append(lang)
            self.reporter.success(f"Installed language skill: {lang}")
        return installed

    def install_user_config(self) -> bool:
        """Copy examples/user-CLAUDE.md to <target>/CLAUDE.md if shipped."""
        source = self.paths.source_user_config
        if not source.is_file():
            logger.debug("No user config in bundle: %s", source)
            return False
        shutil.copy2(source, self.paths.user_config)
        self.reporter.success("Installed CLAUDE.md (user-level configuration)")
        return True

    def install_hooks(self) -> Path | None:
        """Install hooks.json as settings.json, or next to it as an example.

        An existing settings.json is never modified; the operator merges
        the example file by hand.

        Returns:
            The file written, or None when the bundle has no hooks file
        """
        source = self.paths.source_hooks_file
        if not source.is_file():
            logger.debug("No hooks file in bundle: %s", source)
            return None

        settings = self.paths.settings_file
        if settings.is_file() and settings.read_bytes() == source.read_bytes():
            self.reporter.success("Hooks already installed in settings.json")
            return settings

        if settings.exists():
            destination = self.paths.hooks_example_file
            shutil.copy2(source, destination)
            self.reporter.warning("settings.json already exists.")
            self.reporter.detail(f"Hooks configuration saved to: [accent]{escape(str(destination))}[/accent]")
            self.reporter.detail("Please manually merge hooks into your settings.json")
            self._report_hook_events(source, existing=settings)
        else:
            destination = settings
            shutil.copy2(source, destination)
            self.reporter.success("Installed hooks to settings.json")
            self._report_hook_events(source)
        return destination

    def _report_hook_events(self, hooks_file: Path, existing: Path | None = None) -> None:
        try:
            events = ClaudeSettingsFile(hooks_file).hook_events()
            configured = ClaudeSettingsFile(existing).hook_events() if existing else []
        except ValueError as e:
            self.reporter.warning(f"Could not read hook events: {e}")
            return

        if events:
            self.reporter.detail(f"[dim]Hook events: {', '.join(events)}[/dim]")
        overlap = [event for event in events if event in configured]
        if overlap:
            self.reporter.detail(
                f"[dim]Already configured in settings.json: {', '.join(overlap)}[/dim]"
            )

    def install_mcp_example(self) -> bool:
        """Copy the MCP server reference config and print setup instructions."""
        self.reporter.line()
        self.reporter.step("MCP Server Configuration")
        self.reporter.detail("MCP servers require API keys and manual configuration.")
        self.reporter.detail(
            f"Reference file copied to: [accent]{escape(str(self.paths.mcp_example_file))}[/accent]"
        )
        self.reporter.line()
        self.reporter.detail("To configure MCP servers:")
        self.reporter.detail("1. Open [accent]~/.claude.json[/accent]")
        self.reporter.detail("2. Add desired servers from the example file")
        self.reporter.detail("3. Replace [warn]YOUR_*_HERE[/warn] placeholders with actual values")
        self.reporter.line()

        source = self.paths.source_mcp_config
        if not source.is_file():
            return False
        shutil.copy2(source, self.paths.mcp_example_file)
        return True

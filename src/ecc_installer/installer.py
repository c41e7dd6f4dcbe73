"""
Run installation plans and uninstalls against the Target directory.

Control flow for an install: make sure the target root exists, snapshot
what is there, copy the selected components in a fixed order, then print
the summary. Uninstall snapshots first and removes only the component
directories.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.markup import escape

from .backup import BackupManager
from .components import ComponentInstaller
from .exceptions import SourceBundleNotFoundError
from .logging_config import get_logger
from .plan import InstallPlan, is_yes
from .protocols import PromptInterface
from .reporter import InstallReporter
from .settings import REQUIRED_SOURCE_COMPONENTS, UNINSTALL_COMPONENTS, InstallPaths

logger = get_logger(__name__)


@dataclass
class InstallResult:
    """What one installation run produced."""

    plan: InstallPlan
    backup_dir: Optional[Path] = None
    installed_languages: list[str] = field(default_factory=list)
    hooks_file: Optional[Path] = None


@dataclass
class UninstallResult:
    confirmed: bool
    backup_dir: Optional[Path] = None
    removed: list[str] = field(default_factory=list)


class Installer:
    """Executes InstallPlans for one set of paths."""

    def __init__(
        self,
        paths: InstallPaths,
        reporter: Optional[InstallReporter] = None,
        backup: Optional[BackupManager] = None,
    ):
        self.paths = paths
        self.reporter = reporter or InstallReporter()
        self.backup = backup or BackupManager(paths, self.reporter)
        self.components = ComponentInstaller(paths, self.reporter)

    def check_source_files(self) -> None:
        """Raise SourceBundleNotFoundError unless agents/ and commands/ exist."""
        missing = [
            name for name in REQUIRED_SOURCE_COMPONENTS
            if not self.paths.source(name).is_dir()
        ]
        if missing:
            raise SourceBundleNotFoundError(self.paths.source_root, missing)

    def install(self, plan: InstallPlan) -> InstallResult:
        """Back up the target, then install everything the plan selects.

        Languages must already be resolved (see InteractiveSelector).
        """
        logger.debug("Installing plan %s into %s", plan, self.paths.target_root)
        self.paths.target_root.mkdir(parents=True, exist_ok=True)
        result = InstallResult(plan=plan)
        result.backup_dir = self.backup.create_backup()

        if plan.agents:
            self.components.install_component("agents")
        if plan.commands:
            self.components.install_component("commands")
        if plan.skills:
            self.components.install_base_skills()
            result.installed_languages = self.components.install_language_skills(plan.languages)
        if plan.rules:
            self.components.install_component("rules")
        if plan.user_config:
            self.components.install_user_config()
        if plan.hooks:
            result.hooks_file = self.components.install_hooks()
        if plan.mcp:
            self.components.install_mcp_example()

        return result

    def show_summary(self, result: InstallResult) -> None:
        out = self.reporter
        out.line()
        out.rule("Installation Complete!")
        out.line()
        out.line(f"Installed to: [accent]{escape(str(self.paths.target_root))}[/accent]")
        out.line(f"Installation type: [accent]{result.plan.mode}[/accent]")
        components = result.plan.selected_components()
        out.line(f"Components: {', '.join(components) if components else 'none'}")
        out.line()

        if result.installed_languages:
            out.line("[accent]Installed language skills:[/accent]")
            for lang in result.installed_languages:
                out.line(f"  - {lang}")
            out.line()

        if self.reporter.warnings:
            out.line(f"[warn]Warnings ({len(self.reporter.warnings)}):[/warn]")
            for message in self.reporter.warnings:
                out.line(f"  - {escape(message)}")
            out.line()

        out.line("[warn]Important:[/warn]")
        out.line("  - Read the guide before using: https://x.com/affaanmustafa")
        out.line("  - Customize CLAUDE.md for your preferences")
        out.line("  - Configure MCP servers with your API keys")
        out.line()
        out.line("[accent]Directory structure:[/accent]")
        out.line("  ~/.claude/")
        out.line("  ├── agents/           # Specialized subagents")
        out.line("  ├── commands/         # Slash commands")
        out.line("  ├── skills/           # Universal patterns")
        out.line("  │   └── languages/    # Language-specific patterns")
        out.line("  ├── rules/            # Mandatory guidelines")
        out.line("  ├── CLAUDE.md         # User-level config")
        out.line("  └── settings.json     # Hooks configuration")
        out.line()
        out.line("[accent]Quick start:[/accent]")
        out.line("  - Use /plan to create implementation plans")
        out.line("  - Use /tdd for test-driven development")
        out.line("  - Use /code-review for code reviews")
        out.line()
        out.line("[accent]Supported languages (skills):[/accent]")
        out.line("  TypeScript/JavaScript, Python, Go, Rust, Java/Kotlin,")
        out.line("  C#/.NET, Ruby, PHP, Swift, C/C++")
        out.line()
        out.line("[accent]Hooks auto-format & lint support:[/accent]")
        out.line("  TS/JS, Python, Go, Rust, Ruby, Java, Kotlin, C#, PHP, Swift, C/C++")
        out.line()

    def uninstall(self, prompter: PromptInterface) -> UninstallResult:
        """Remove installed component directories after confirmation.

        CLAUDE.md and settings.json are left in place.
        """
        self.reporter.line()
        self.reporter.warning("This will remove all Everything Claude Code configurations.")
        if not is_yes(prompter.ask("Are you sure? [y/N]: ")):
            self.reporter.step("Uninstallation cancelled.")
            return UninstallResult(confirmed=False)

        result = UninstallResult(confirmed=True)
        result.backup_dir = self.backup.create_backup()

        for name in UNINSTALL_COMPONENTS:
            target = self.paths.target(name)
            if target.is_dir():
                logger.debug("Removing %s", target)
                shutil.rmtree(target)
                result.removed.append(name)
                self.reporter.success(f"Removed {name}")

        self.reporter.warning("CLAUDE.md and settings.json preserved (may contain custom settings)")
        if result.backup_dir:
            self.reporter.success(f"Uninstallation complete. Backup saved to: {result.backup_dir}")
        else:
            self.reporter.success("Uninstallation complete. Nothing needed a backup.")
        return result

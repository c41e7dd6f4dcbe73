"""
CLI interface for the installer using Typer.

Without flags the interactive menu runs. Flags are checked in the order
uninstall, full, core, lang; the first one set decides the run.
"""

from pathlib import Path
from typing import Annotated, List, Optional

import typer

from .exceptions import InstallerError
from .implementations import ConsolePrompter
from .installer import Installer
from .logging_config import setup_cli_logging
from .plan import InstallPlan
from .reporter import InstallReporter
from .selector import InteractiveSelector
from .settings import AVAILABLE_LANGUAGES, InstallPaths

app = typer.Typer(
    name="ecc-install",
    help="Install Everything Claude Code configurations into ~/.claude",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command(
    epilog=f"Available languages: {' '.join(AVAILABLE_LANGUAGES)}\n\n"
    "Without options, runs interactive installer.",
)
def install(
    languages: Annotated[
        Optional[List[str]],
        typer.Argument(
            help="Language identifiers for --lang (e.g. typescript python)",
            show_default=False,
        ),
    ] = None,
    full: Annotated[
        bool,
        typer.Option("--full", "-f", help="Full installation with language selection (interactive)"),
    ] = False,
    core: Annotated[
        bool,
        typer.Option("--core", "-c", help="Core installation (language-agnostic only)"),
    ] = False,
    lang: Annotated[
        bool,
        typer.Option("--lang", "-l", help="Full installation with the given languages"),
    ] = False,
    uninstall: Annotated[
        bool,
        typer.Option("--uninstall", "-u", help="Remove installed configurations"),
    ] = False,
    source: Annotated[
        Optional[Path],
        typer.Option("--source", "-s", help="Source bundle root (defaults to the repository checkout or the current directory)"),
    ] = None,
    target: Annotated[
        Optional[Path],
        typer.Option("--target", hidden=True, help="Target root instead of ~/.claude"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", hidden=True, help="Log file operations"),
    ] = False,
):
    """Install agents, commands, skills, rules and hooks for Claude Code.

    Example: [bold]ecc-install -l typescript python[/bold]
    """
    if languages and not lang:
        raise typer.BadParameter("language identifiers are only accepted with --lang", param_hint="LANGUAGES")

    setup_cli_logging(verbose)
    reporter = InstallReporter()
    reporter.banner()

    paths = InstallPaths.default(source)
    if target is not None:
        paths = InstallPaths(source_root=paths.source_root, target_root=target)

    installer = Installer(paths, reporter)
    prompter = ConsolePrompter(reporter.console)

    try:
        if uninstall:
            installer.uninstall(prompter)
            return

        installer.check_source_files()
        selector = InteractiveSelector(prompter, reporter)

        if full:
            plan = selector.resolve_languages(InstallPlan.full())
        elif core:
            plan = InstallPlan.core()
        elif lang:
            plan = InstallPlan.full(languages or [])
        else:
            plan = selector.build_plan()
            if plan is None:
                reporter.step("Installation cancelled.")
                return

        result = installer.install(plan)
        installer.show_summary(result)
    except InstallerError as e:
        reporter.error(str(e))
        raise typer.Exit(1)
    except OSError as e:
        reporter.error(f"Filesystem error: {e}")
        raise typer.Exit(1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

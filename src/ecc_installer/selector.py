"""
Interactive selection of what to install.

Three screens, asked in order with no way back: the install-type menu,
the per-component prompts (custom mode only) and the language
multi-select. The result is an InstallPlan; nothing is installed here.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .exceptions import InvalidMenuChoiceError
from .plan import MODE_CORE, MODE_CUSTOM, MODE_FULL, InstallPlan, is_yes, parse_language_choices
from .protocols import PromptInterface
from .reporter import InstallReporter
from .settings import AVAILABLE_LANGUAGES

MENU_CHOICES = {
    "1": MODE_FULL,
    "2": MODE_CORE,
    "3": MODE_CUSTOM,
    "4": None,  # cancel
}

# (plan attribute, prompt label) in the order the operator is asked
COMPONENT_PROMPTS = (
    ("agents", "agents"),
    ("commands", "commands"),
    ("skills", "skills (universal patterns)"),
    ("rules", "rules"),
    ("user_config", "CLAUDE.md (user config)"),
    ("hooks", "hooks"),
)


class InteractiveSelector:
    """Builds an InstallPlan from operator answers."""

    def __init__(
        self,
        prompter: PromptInterface,
        reporter: InstallReporter,
        languages: Sequence[str] = AVAILABLE_LANGUAGES,
    ):
        self.prompter = prompter
        self.reporter = reporter
        self.languages = tuple(languages)

    def choose_install_type(self) -> Optional[str]:
        """Show the install-type menu.

        Returns:
            MODE_FULL, MODE_CORE, MODE_CUSTOM, or None if the operator cancels

        Raises:
            InvalidMenuChoiceError: For anything other than 1-4
        """
        out = self.reporter
        out.line()
        out.line("[accent]Select installation type:[/accent]")
        out.line()
        out.line("  1) Full installation (recommended)")
        out.line("     - All components + language selection")
        out.line()
        out.line("  2) Core only (language-agnostic)")
        out.line("     - Universal patterns without language-specific skills")
        out.line()
        out.line("  3) Custom selection")
        out.line("     - Choose individual components")
        out.line()
        out.line("  4) Cancel")
        out.line()
        answer = self.prompter.ask("Enter your choice [1-4]: ").strip()
        out.line()

        if answer not in MENU_CHOICES:
            raise InvalidMenuChoiceError(answer)
        return MENU_CHOICES[answer]

    def select_languages(self) -> list[str]:
        """Numbered multi-select over the supported languages."""
        out = self.reporter
        out.line()
        out.line("[accent]Select programming languages to install:[/accent]")
        out.line()
        out.line("Available languages:")
        for index, lang in enumerate(self.languages, start=1):
            out.line(f"  {index}) {lang}")
        out.line("  a) All languages")
        out.line("  n) None (skip language-specific skills)")
        out.line()
        answer = self.prompter.ask("Enter choices (e.g., '1 2 3' or 'a' for all): ")
        return parse_language_choices(answer, self.languages)

    def custom_selection(self) -> InstallPlan:
        """Ask yes/no for every component, then about language skills."""
        self.reporter.line("[accent]Select components (y/n):[/accent]")
        self.reporter.line()

        flags = {}
        for attribute, label in COMPONENT_PROMPTS:
            flags[attribute] = is_yes(self.prompter.ask(f"  Install {label}? [y/N]: "))
        self.reporter.line()

        plan = InstallPlan.custom(**flags)
        if plan.skills and is_yes(self.prompter.ask("  Install language-specific skills? [y/N]: ")):
            plan.languages = self.select_languages()
        return plan

    def build_plan(self) -> Optional[InstallPlan]:
        """Run the whole interactive flow.

        Returns:
            The plan, or None if the operator cancelled
        """
        mode = self.choose_install_type()
        if mode is None:
            return None
        if mode == MODE_CORE:
            return InstallPlan.core()
        if mode == MODE_CUSTOM:
            return self.custom_selection()
        return self.resolve_languages(InstallPlan.full())

    def resolve_languages(self, plan: InstallPlan) -> InstallPlan:
        """Ask for languages if the plan still needs them."""
        if plan.prompt_languages:
            plan.languages = self.select_languages()
            plan.prompt_languages = False
        return plan

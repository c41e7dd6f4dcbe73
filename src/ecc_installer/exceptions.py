"""
Exceptions raised by the installer.

The CLI turns these into a red error line and exit status 1.
"""


class InstallerError(Exception):
    """Base class for installer failures that abort the invocation."""


class SourceBundleNotFoundError(InstallerError):
    """The Source Bundle is missing a required component directory."""

    def __init__(self, source_root, missing):
        self.source_root = source_root
        self.missing = list(missing)
        super().__init__(
            f"Source files not found in {source_root} (missing: {', '.join(self.missing)}). "
            "Run the installer from the repository directory or pass --source PATH."
        )


class InvalidMenuChoiceError(InstallerError):
    """The install-type menu received something other than 1-4."""

    def __init__(self, choice: str):
        self.choice = choice
        super().__init__(f"Invalid choice '{choice}'. Please run the installer again.")

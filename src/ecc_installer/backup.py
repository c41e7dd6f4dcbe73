"""
Backup snapshots of the Target Installation Directory.

A snapshot is a timestamped copy of whichever watched entries exist right
before an install or uninstall. Snapshots are written once and never read,
changed or pruned by the installer; restoring is a manual step.
"""

from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .logging_config import get_logger
from .reporter import InstallReporter
from .settings import BACKUP_TIMESTAMP_FORMAT, WATCHED_ENTRIES, InstallPaths

logger = get_logger(__name__)


class BackupManager:
    """Creates at most one snapshot per invocation."""

    def __init__(
        self,
        paths: InstallPaths,
        reporter: InstallReporter,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.paths = paths
        self.reporter = reporter
        self._clock = clock
        self.snapshot_dir: Optional[Path] = None

    def existing_entries(self) -> list[str]:
        """Watched entries currently present in the target."""
        return [name for name in WATCHED_ENTRIES if (self.paths.target_root / name).exists()]

    def _new_snapshot_dir(self) -> Path:
        stamp = self._clock().strftime(BACKUP_TIMESTAMP_FORMAT)
        candidate = self.paths.backup_root / stamp
        suffix = 0
        # Never write into an earlier snapshot taken within the same second
        while candidate.exists():
            suffix += 1
            candidate = self.paths.backup_root / f"{stamp}_{suffix}"
        return candidate

    def create_backup(self) -> Optional[Path]:
        """Snapshot the watched entries that exist.

        Returns:
            The snapshot directory, or None when there was nothing to back up.
            A second call in the same invocation returns the first snapshot.

        Raises:
            OSError: If the snapshot cannot be written
        """
        if self.snapshot_dir is not None:
            return self.snapshot_dir

        existing = self.existing_entries()
        if not existing:
            logger.debug("Nothing to back up in %s", self.paths.target_root)
            return None

        self.reporter.step("Creating backup of existing configurations...")
        snapshot = self._new_snapshot_dir()
        snapshot.mkdir(parents=True)

        for name in existing:
            source = self.paths.target_root / name
            destination = snapshot / name
            logger.debug("Backing up %s -> %s", source, destination)
            if source.is_dir():
                shutil.copytree(source, destination, symlinks=True)
            else:
                shutil.copy2(source, destination)

        self.snapshot_dir = snapshot
        self.reporter.success(f"Backup created at: {snapshot}")
        return snapshot

"""Filesystem deletion operator.

Handles removal of snapped paths with dry-run support. Deletion is
best-effort: targets that already vanished are skipped and failures
are reported per path instead of being raised.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilesystemActionResult:
    """Result of a single filesystem deletion operation.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed without error.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
        skipped: Whether the path no longer existed and nothing was done.
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False
    skipped: bool = False

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def deleted(self) -> bool:
        """Whether the path was actually removed from disk."""
        return self.success and not self.dry_run and not self.skipped


class FilesystemOperator:
    """Deletes files and directory trees.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the FilesystemOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def delete_many(self, paths: list[str]) -> list[FilesystemActionResult]:
        """Delete multiple paths in order, isolating failures per path.

        Args:
            paths: Paths to delete.

        Returns:
            List of FilesystemActionResult, one per input path.
        """
        return [self.delete(path) for path in paths]

    def delete(self, path: str) -> FilesystemActionResult:
        """Delete a single path.

        Dispatches on what the path currently is:
        - Directories: removed depth-first, contents before the directory
        - Files, symlinks and dead symlinks: Path.unlink
        - Missing paths: skipped

        Args:
            path: Filesystem path to delete.

        Returns:
            FilesystemActionResult describing the outcome.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return FilesystemActionResult(path=path, success=True, dry_run=True)

        target = Path(path)

        try:
            # Directories (but not symlinks to directories)
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
                logger.info("Deleted directory %s", path)
                return FilesystemActionResult(path=path, success=True)

            if target.exists() or target.is_symlink():
                target.unlink()
                logger.info("Deleted file %s", path)
                return FilesystemActionResult(path=path, success=True)

        except FileNotFoundError:
            # Removed concurrently between the check and the delete
            pass
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return FilesystemActionResult(path=path, success=False, error=str(e))

        logger.debug("Path no longer exists, skipping: %s", path)
        return FilesystemActionResult(path=path, success=True, skipped=True)

"""Snap orchestration.

Composes enumeration, sampling and deletion into the single snap
operation: gate on the confirmation flags, enumerate the tree, pick
half of it at random and either report or delete each pick.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console

from gauntlet.filesystem.ignore import PathFilter
from gauntlet.filesystem.operator import FilesystemActionResult, FilesystemOperator
from gauntlet.filesystem.sampler import sample
from gauntlet.filesystem.scanner import TreeScanner
from gauntlet.utils.formatting import print_line, print_warning

logger = logging.getLogger(__name__)

NO_GAUNTLET_MESSAGE = (
    "Without the gauntlet I am nothing, run me with either --dry-run "
    "or if you are ready to face my wrath --with-gauntlet"
)
NO_FILES_MESSAGE = "No files found to snap."


class SnapStatus(str, Enum):
    """How a snap terminated.

    Attributes:
        NO_GAUNTLET: Neither dry-run nor the gauntlet was given; nothing was read.
        NO_FILES: The tree held nothing eligible to snap.
        COMPLETED: Every selected path was reported or processed.
    """

    NO_GAUNTLET = "no_gauntlet"
    NO_FILES = "no_files"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class SnapResult:
    """Outcome of a snap.

    Attributes:
        status: Terminal state reached.
        found: Number of paths enumerated.
        selected: Sampled paths in processing order.
        results: One action result per selected path.
    """

    status: SnapStatus
    found: int = 0
    selected: list[str] = field(default_factory=list)
    results: list[FilesystemActionResult] = field(default_factory=list)

    @property
    def deleted(self) -> list[str]:
        """Paths that were actually removed."""
        return [r.path for r in self.results if r.deleted]

    @property
    def failed(self) -> list[FilesystemActionResult]:
        """Results of deletions that raised an error."""
        return [r for r in self.results if not r.success]


class Gauntlet:
    """Runs snaps against directory trees.

    Args:
        console: Console receiving the per-path lines. Defaults to the
            shared stdout console.
        err_console: Console receiving deletion warnings. Defaults to the
            shared stderr console.
        rng: Random source for sampling, seed it for reproducible runs.
        path_filter: Ignore rules applied during enumeration.
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        err_console: Console | None = None,
        rng: random.Random | None = None,
        path_filter: PathFilter | None = None,
    ) -> None:
        self._console = console
        self._err_console = err_console
        self._rng = rng
        self._scanner = TreeScanner(path_filter)

    def snap(self, path: str, dry_run: bool = False, with_gauntlet: bool = False) -> SnapResult:
        """Snap half of the entries below ``path``.

        Real deletion requires ``with_gauntlet``. With neither flag set
        the filesystem is not touched at all. Selected paths are handled
        in sampled order; a path removed earlier as part of a selected
        directory is skipped silently.

        Args:
            path: Root directory to operate on.
            dry_run: Report what would be deleted without deleting.
            with_gauntlet: Allow real deletion.

        Returns:
            SnapResult describing what happened.
        """
        if not dry_run and not with_gauntlet:
            print_line(NO_GAUNTLET_MESSAGE, "info", self._console)
            return SnapResult(status=SnapStatus.NO_GAUNTLET)

        files = self._scanner.scan(path)
        if not files:
            print_line(NO_FILES_MESSAGE, "info", self._console)
            return SnapResult(status=SnapStatus.NO_FILES)

        selected = sample(files, self._rng)
        logger.info("Selected %d of %d paths under %s", len(selected), len(files), path)

        operator = FilesystemOperator(dry_run=dry_run)
        results: list[FilesystemActionResult] = []

        for target in selected:
            result = operator.delete(target)
            results.append(result)

            if result.dry_run:
                print_line(f"[Dry Run] Would delete: {target}", "dry_run", self._console)
            elif result.skipped:
                continue
            elif result.success:
                print_line(f"Deleted: {target}", "removed", self._console)
            else:
                print_warning(f"Could not delete {target}: {result.error}", self._err_console)

        return SnapResult(
            status=SnapStatus.COMPLETED,
            found=len(files),
            selected=selected,
            results=results,
        )


def snap(path: str, dry_run: bool = False, with_gauntlet: bool = False) -> SnapResult:
    """Snap ``path`` with default settings."""
    return Gauntlet().snap(path, dry_run=dry_run, with_gauntlet=with_gauntlet)

"""Snap command implementation.

Deletes (or, with --dry-run, lists) a random half of the files and
directories below a path.
"""

import random
from pathlib import Path
from typing import Annotated

import typer

from gauntlet.core.snap import Gauntlet


def snap(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to snap."),
    ] = Path("."),
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    with_gauntlet: Annotated[
        bool,
        typer.Option("--with-gauntlet", help="Actually delete the selected paths."),
    ] = False,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed the random selection for reproducible runs."),
    ] = None,
) -> None:
    """Snap half of the files and directories under PATH out of existence."""
    rng = random.Random(seed) if seed is not None else None
    result = Gauntlet(rng=rng).snap(str(path), dry_run=dry_run, with_gauntlet=with_gauntlet)

    if result.failed:
        raise typer.Exit(code=1)

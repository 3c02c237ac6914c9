"""Recursive directory enumeration.

Walks a directory tree and flattens it into a list of paths in
post-order: every directory appears after all of its descendants, so
deleting entries in list order never meets a non-empty directory that
was not selected as a whole.

Directory symlinks are listed as leaves. A plain is_dir() walk would
follow them into their targets; this one never does.
"""

import logging
import os
from pathlib import Path

from gauntlet.filesystem.ignore import PathFilter

logger = logging.getLogger(__name__)


class TreeScanner:
    """Enumerates files and directories below a root directory.

    Ignored entries are skipped together with their subtree. Symbolic
    links are reported as leaves and never followed.

    Args:
        path_filter: Filter deciding which paths to skip. Defaults to
            the built-in ignore rules.
    """

    def __init__(self, path_filter: PathFilter | None = None) -> None:
        self._filter = path_filter or PathFilter()

    def scan(self, root: str) -> list[str]:
        """Enumerate everything below ``root``.

        The root itself is not included. Directories that cannot be
        listed contribute no entries and the walk carries on with their
        siblings.

        Args:
            root: Directory to walk.

        Returns:
            Paths joined onto ``root``, children before their parent.
        """
        result: list[str] = []
        # Each frame holds a directory and its remaining entry names,
        # reversed so pop() yields them in sorted order.
        stack: list[tuple[str, list[str]]] = [(root, self._list_dir(root))]

        while stack:
            directory, names = stack[-1]

            if not names:
                stack.pop()
                if stack:
                    result.append(directory)
                continue

            full_path = os.path.join(directory, names.pop())
            if self._filter.should_ignore(full_path):
                logger.debug("Ignoring %s", full_path)
                continue

            entry = Path(full_path)
            try:
                is_directory = entry.is_dir() and not entry.is_symlink()
            except OSError:
                logger.warning("Cannot determine type of: %s", full_path)
                continue

            if is_directory:
                stack.append((full_path, self._list_dir(full_path)))
            else:
                result.append(full_path)

        return result

    @staticmethod
    def _list_dir(directory: str) -> list[str]:
        """List entry names of a directory, reverse sorted.

        Returns an empty list when the directory cannot be listed.
        """
        try:
            names = os.listdir(directory)
        except FileNotFoundError:
            logger.debug("Directory does not exist: %s", directory)
            return []
        except PermissionError:
            logger.warning("Permission denied listing directory: %s", directory)
            return []
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", directory, e)
            return []

        names.sort(reverse=True)
        return names


def enumerate_tree(root: str) -> list[str]:
    """Enumerate ``root`` with the default ignore rules."""
    return TreeScanner().scan(root)

"""Ignore rules for paths that must never be snapped.

This module defines the fixed set of patterns for version-control
metadata, dependency directories, environment secrets and the
dependency manifest. Matching directories are excluded together with
their entire subtree.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IgnoreRule:
    """A single ignore pattern.

    Attributes:
        pattern: Compiled regular expression matched against a
            forward-slash normalized path.
        description: Human-readable description of what the rule skips.
    """

    pattern: re.Pattern[str]
    description: str

    def matches(self, path: str) -> bool:
        """Check whether a normalized path matches this rule."""
        return self.pattern.search(path) is not None


# Evaluated in order; the first match wins.
IGNORE_PATTERNS: tuple[IgnoreRule, ...] = (
    IgnoreRule(re.compile(r"(^|/)\.git(/|$)"), ".git directories"),
    IgnoreRule(
        re.compile(r"(^|/)(vendor|node_modules)(/|$)"),
        "vendor and node_modules directories",
    ),
    IgnoreRule(re.compile(r"\.env$"), ".env files"),
    IgnoreRule(re.compile(r"composer\.json$"), "composer.json"),
)


def normalize_separators(path: str) -> str:
    """Replace backslashes with forward slashes."""
    return path.replace("\\", "/")


class PathFilter:
    """Decides whether a filesystem path is excluded from snapping.

    Args:
        rules: Ordered ignore rules. Defaults to IGNORE_PATTERNS.
    """

    def __init__(self, rules: tuple[IgnoreRule, ...] = IGNORE_PATTERNS) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[IgnoreRule, ...]:
        """The ordered rules this filter applies."""
        return self._rules

    def should_ignore(self, path: str) -> bool:
        """Check if a path matches any ignore rule.

        Separators are normalized before matching so Windows-style
        paths behave the same as POSIX ones.

        Args:
            path: Relative or absolute filesystem path.

        Returns:
            True if the path (and therefore its subtree) must be skipped.
        """
        normalized = normalize_separators(path)
        return any(rule.matches(normalized) for rule in self._rules)


_default_filter = PathFilter()


def should_ignore(path: str) -> bool:
    """Check a path against the default ignore rules."""
    return _default_filter.should_ignore(path)

"""Tests for snap ignore rules."""

import pytest
from gauntlet.filesystem.ignore import (
    IGNORE_PATTERNS,
    IgnoreRule,
    PathFilter,
    normalize_separators,
    should_ignore,
)


class TestIgnorePatterns:
    """Tests for the IGNORE_PATTERNS constant."""

    def test_has_four_rules_in_order(self) -> None:
        """The rule set is fixed: git, dependencies, env, manifest."""
        assert len(IGNORE_PATTERNS) == 4
        assert IGNORE_PATTERNS[0].description == ".git directories"
        assert IGNORE_PATTERNS[3].description == "composer.json"

    def test_is_immutable(self) -> None:
        """The rule set is a tuple."""
        assert isinstance(IGNORE_PATTERNS, tuple)


class TestShouldIgnore:
    """Tests for should_ignore."""

    @pytest.mark.parametrize(
        "path",
        [
            ".git",
            "a/.git",
            "a/.git/x",
            "/abs/project/.git/objects/ab",
            "vendor",
            "a/vendor/lib.php",
            "node_modules",
            "web/node_modules/react/index.js",
            ".env",
            "a/.env",
            "a/production.env",
            "composer.json",
            "a/composer.json",
        ],
    )
    def test_ignored(self, path: str) -> None:
        """Paths matching a rule are ignored."""
        assert should_ignore(path) is True

    @pytest.mark.parametrize(
        "path",
        [
            "a/gitignore/x",
            "a/.gitignore",
            "a/.github/workflows/ci.yml",
            "a/my.git/x",
            "a/vendors/x",
            "a/node_modules_old",
            "a/.env.example",
            "a/composer.lock",
            "a/composer.json.bak",
            "a/b.txt",
        ],
    )
    def test_not_ignored(self, path: str) -> None:
        """Substrings that are not whole components do not match."""
        assert should_ignore(path) is False

    def test_backslashes_normalized(self) -> None:
        """Windows separators are matched like forward slashes."""
        assert should_ignore("C:\\project\\.git\\config") is True
        assert should_ignore("C:\\project\\vendor") is True
        assert should_ignore("C:\\project\\src\\main.php") is False

    def test_normalize_separators(self) -> None:
        """Only backslashes are rewritten."""
        assert normalize_separators("a\\b/c") == "a/b/c"


class TestPathFilter:
    """Tests for PathFilter with custom rules."""

    def test_default_rules(self) -> None:
        """A filter without arguments uses the built-in rules."""
        assert PathFilter().rules == IGNORE_PATTERNS

    def test_custom_rules(self) -> None:
        """A filter only applies the rules it was given."""
        import re

        path_filter = PathFilter((IgnoreRule(re.compile(r"\.log$"), "logs"),))

        assert path_filter.should_ignore("a/debug.log") is True
        assert path_filter.should_ignore("a/.git/config") is False

    def test_empty_rules_ignore_nothing(self) -> None:
        """No rules means nothing is ignored."""
        assert PathFilter(()).should_ignore("a/.git") is False

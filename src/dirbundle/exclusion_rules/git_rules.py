"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirbundle.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore syntax.

    Paths are matched the way Git matches them, using the pathspec library. All
    standard syntax is supported: basic globs, directory-only patterns ending in
    ``/``, negation with ``!``, ``**`` and comment lines. Rules loaded from files and
    rules added one at a time are combined in the order they arrive, so a later
    negation can re-include a path an earlier rule excluded.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("web/node_modules/index.js")
        True
        >>> rules.exclude("web/index.js")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the combined .gitignore patterns.

        Args:
            path: The path to check, relative to the scanned root.

        Returns:
            bool: True if the last pattern that applies to the path excludes it.
        """
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        return len(self.spec.patterns) > 0

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._patterns().extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern.

        Args:
            rule: A pattern as it would appear on one line of a .gitignore file
                (e.g., "*.pyc", "build/", "!keep.log").
        """
        self._patterns().append(GitWildMatchPattern(rule))

    def _patterns(self) -> list:
        # PathSpec may hold its patterns in an immutable sequence
        if not isinstance(self.spec.patterns, list):
            self.spec.patterns = list(self.spec.patterns)
        return self.spec.patterns

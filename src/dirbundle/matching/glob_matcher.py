"""Shell-style glob matching of whole snapshot paths, backed by pathspec."""

from typing import List

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirbundle.exceptions import PatternError

from .base_matcher import BaseMatcher

# Terminates both the compiled pattern and every candidate path. A path never
# contains it, so git-wildmatch can no longer treat a match of a parent directory
# as a match of everything below it.
_TERMINATOR = "\x00"


def check_pattern_syntax(pattern: str) -> None:
    """Validate the syntax of a glob pattern.

    Args:
        pattern: The glob pattern to check.

    Raises:
        PatternError: If the pattern is empty, ends with a dangling escape, contains
            an unclosed character class, or uses ``**`` anywhere other than as a
            whole path segment.

    Example:
        >>> check_pattern_syntax("src/**/*.py")
        >>> check_pattern_syntax("[!a-c]?.txt")
    """
    if not pattern:
        raise PatternError(pattern, "pattern is empty")

    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "\\":
            if index + 1 >= length:
                raise PatternError(pattern, "dangling escape at end of pattern")
            index += 2
            continue
        if char == "[":
            index = _skip_character_class(pattern, index)
            continue
        if char == "*":
            run_end = index
            while run_end < length and pattern[run_end] == "*":
                run_end += 1
            run = run_end - index
            if run > 2:
                raise PatternError(pattern, "wildcards are either '*' or '**'")
            if run == 2:
                starts_segment = index == 0 or pattern[index - 1] == "/"
                ends_segment = run_end == length or pattern[run_end] == "/"
                if not (starts_segment and ends_segment):
                    raise PatternError(pattern, "'**' must form a whole path segment")
            index = run_end
            continue
        index += 1


def _skip_character_class(pattern: str, start: int) -> int:
    """Return the index just past the character class opened at ``start``."""
    index = start + 1
    if index < len(pattern) and pattern[index] in "!^":
        index += 1
    # A closing bracket right after the opening one is a literal member.
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    while index < len(pattern):
        char = pattern[index]
        if char == "]":
            return index + 1
        if char == "/":
            break
        if char == "\\":
            index += 1
        index += 1
    raise PatternError(pattern, f"unclosed character class at index {start}")


def _anchor(pattern: str) -> str:
    """Rewrite a glob into an anchored, terminated git-wildmatch pattern."""
    segments: List[str] = [segment for segment in pattern.split("/") if segment]
    if not segments:
        raise PatternError(pattern, "pattern names no path segment")
    if segments[-1] == "**":
        segments.append("*")
    segments[-1] += _TERMINATOR
    return "/" + "/".join(segments)


class GlobMatcher(BaseMatcher):
    """Matcher for shell-style glob patterns evaluated against whole paths.

    Patterns are anchored at the snapshot root and matched against the complete
    relative path of a candidate, not just its last segment:

    - ``*`` matches any run of characters except ``/``
    - ``?`` matches exactly one character except ``/``
    - ``[abc]``, ``[a-z]`` and ``[!abc]`` match one character from (or outside) a set
    - ``**`` as a whole segment matches across separators, including zero segments
      when it is followed by more of the pattern
    - ``\\`` escapes the next character

    The pattern is compiled once on construction with the pathspec library's
    git-wildmatch engine and can then be matched against any number of paths.

    Attributes:
        pattern (str): The glob pattern as given by the caller.
        spec (PathSpec): The compiled pathspec matcher.

    Example:
        >>> matcher = GlobMatcher("src/*.py")
        >>> matcher.matches("src/main.py")
        True
        >>> matcher.matches("src/utils/helpers.py")
        False
        >>> GlobMatcher("src/**/*.py").matches("src/utils/helpers.py")
        True
        >>> GlobMatcher("*.txt").matches("docs/notes.txt")
        False
    """

    def __init__(self, pattern: str) -> None:
        """Compile a glob pattern.

        Args:
            pattern: The glob pattern to compile.

        Raises:
            PatternError: If the pattern syntax is invalid.
        """
        check_pattern_syntax(pattern)
        self._pattern = pattern
        anchored = _anchor(pattern)
        try:
            self.spec = PathSpec.from_lines(GitWildMatchPattern, [anchored])
        except ValueError as e:
            # pathspec reports invalid patterns with GitWildMatchPatternError, a ValueError
            raise PatternError(pattern, str(e)) from e

    @property
    def pattern(self) -> str:
        return self._pattern

    def matches(self, path: str) -> bool:
        """Check whether a snapshot path matches the compiled pattern.

        Args:
            path: A normalized path relative to the snapshot root.

        Returns:
            True if the whole path matches. The empty path, which names the snapshot
            root, never matches.
        """
        if not path:
            return False
        return bool(self.spec.match_file(path + _TERMINATOR))

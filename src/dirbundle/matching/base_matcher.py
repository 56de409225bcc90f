from abc import ABC, abstractmethod


class BaseMatcher(ABC):
    """
    Abstract base class for compiled path matchers.

    A matcher is compiled once and then evaluated against many candidate paths while
    a snapshot is walked. Keeping the matching engine behind this interface lets
    callers hand their own matcher to ``Dir.find`` without the walker knowing how
    patterns are interpreted.

    Example:
        >>> class SuffixMatcher(BaseMatcher):
        ...     def __init__(self, suffix: str):
        ...         self._suffix = suffix
        ...     @property
        ...     def pattern(self) -> str:
        ...         return "*" + self._suffix
        ...     def matches(self, path: str) -> bool:
        ...         return path.endswith(self._suffix)
        >>> matcher = SuffixMatcher(".md")
        >>> matcher.matches("docs/index.md")
        True
        >>> matcher.matches("src/main.py")
        False
    """

    @property
    @abstractmethod
    def pattern(self) -> str:
        """The source text the matcher was built from."""
        pass

    @abstractmethod
    def matches(self, path: str) -> bool:
        """
        Determine whether a snapshot path matches.

        Args:
            path (str): A normalized path relative to the snapshot root, using ``/``
                as separator.

        Returns:
            bool: True if the path matches, False otherwise.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r})"

from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirbundle.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for snapshot exclusion rules.

    Exclusion rules decide which entries of a real directory are left out while a
    snapshot is scanned. The scanner hands each candidate's path relative to the
    scanned root to exclude(); directories are checked a second time with a trailing
    slash so that directory-only patterns such as ``build/`` apply to them.

    Loading rules from files and adding individual rules are optional capabilities.

    Example:
        >>> from dirbundle.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be left out of the snapshot.

        Args:
            path (str): The file or directory path to check, relative to the root
                being scanned and using ``/`` as separator.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Returns:
            bool: True unless the implementation knows it has nothing to exclude.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, in the format of the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

"""Composite exclusion rules for combining multiple rule objects."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that combine several rule objects.

    A path is excluded if ANY of the constituent rules excludes it. Rules are
    evaluated in the order given and evaluation stops at the first exclusion.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent exclusion rules.

    Example:
        >>> from dirbundle.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> logs = GitIgnoreExclusionRules()
        >>> logs.add_rule("*.log")
        >>> caches = GitIgnoreExclusionRules()
        >>> caches.add_rule("__pycache__/")
        >>> composite = CompositeExclusionRules([logs, caches])
        >>> composite.exclude("server.log")
        True
        >>> composite.exclude("pkg/__pycache__/")
        True
        >>> composite.exclude("pkg/module.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Exclusion rules to combine.

        Raises:
            ValueError: If no rules are given.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Add another exclusion rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)

"""Pattern matchers applied to snapshot paths."""

from .base_matcher import BaseMatcher
from .glob_matcher import GlobMatcher, check_pattern_syntax

__all__ = [
    "BaseMatcher",
    "GlobMatcher",
    "check_pattern_syntax",
]

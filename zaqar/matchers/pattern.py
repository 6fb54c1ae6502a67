"""
Regular expression matcher for Zaqar.
"""

import re

from zaqar.core import Matcher, MatcherError
from zaqar.registry import register_matcher


@register_matcher("pattern", "regexp")
class PatternMatcher(Matcher):
    """
    Matches lines containing at least one occurrence of a regex.

    The expression is compiled once at construction; a malformed
    expression is a fatal configuration error.

    Criteria:
        A Python regular expression, searched anywhere in the line
    """

    def __init__(self, criteria: str):
        super().__init__(criteria)
        try:
            self.regex = re.compile(criteria)
        except re.error as e:
            raise MatcherError(f"Invalid pattern {criteria!r}: {e}") from e

    def match(self, line: str) -> bool:
        """Return True if the pattern occurs anywhere in the line."""
        return self.regex.search(line) is not None


# Export for dynamic importing
__all__ = ["PatternMatcher"]

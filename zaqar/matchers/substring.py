"""
Literal substring matcher for Zaqar.
"""

from zaqar.core import Matcher
from zaqar.registry import register_matcher


@register_matcher("substring")
class SubstringMatcher(Matcher):
    """
    Matches lines that contain the criteria as a literal substring.

    Criteria:
        Text to look for; compared case-sensitively
    """

    def match(self, line: str) -> bool:
        """Return True if the criteria occurs in the line."""
        return self.criteria in line


# Export for dynamic importing
__all__ = ["SubstringMatcher"]

"""
Placeholder matcher for unrecognized matcher kinds.
"""

from zaqar.core import Matcher


class InertMatcher(Matcher):
    """
    Never matches.

    Stands in for a matcher whose kind is not registered. It is not
    registered itself; the factory hands it out for unknown kinds so the
    rest of the source's matchers keep working.
    """

    def __init__(self, criteria: str, kind: str = ""):
        super().__init__(criteria)
        self.kind = kind

    def match(self, line: str) -> bool:
        return False


__all__ = ["InertMatcher"]

"""
Built-in matcher implementations for Zaqar.

Automatically discovers and imports all matcher modules with validation.
"""

from zaqar.core import Matcher
from zaqar.registry import discover_plugins

__all__ = discover_plugins(__name__, __path__, Matcher, globals())

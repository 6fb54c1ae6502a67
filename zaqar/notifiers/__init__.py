"""
Zaqar Notifiers Submodule.

Automatically discovers and imports all notifier modules with validation.
"""

from zaqar.core import Notifier
from zaqar.registry import discover_plugins

__all__ = discover_plugins(__name__, __path__, Notifier, globals())

"""
Plugin initialization for Zaqar.

This module imports all built-in plugins to register them with the registry.
Import this module to ensure all plugins are available.
"""

# Import all plugin modules to trigger registration decorators
# pylint: disable=unused-import
# ruff: noqa: F401
from zaqar import matchers, notifiers

# Re-export registry functions for convenience
from zaqar.registry import create_matcher, create_notifier, get_registry

__all__ = [
    "create_matcher",
    "create_notifier",
    "get_registry",
]

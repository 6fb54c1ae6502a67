"""
Plugin registry and factory system for Zaqar.

This module provides a centralized registry for matcher kinds and
notifier types, and factory functions to instantiate them from
configuration.
"""

import importlib
import inspect
import pkgutil
from collections.abc import Callable, Iterable
from typing import Any

from zaqar.core import Matcher, Notifier
from zaqar.logging_config import get_logger

logger = get_logger(__name__)


class PluginRegistry:
    """
    Central registry for all plugin types.

    Each category (matchers, notifiers) maintains a mapping of type
    names to implementation classes.
    """

    def __init__(self) -> None:
        self._matchers: dict[str, type[Matcher]] = {}
        self._notifiers: dict[str, type[Notifier]] = {}

    # Matcher registration
    def register_matcher(self, kind: str, cls: type[Matcher]) -> None:
        """Register a matcher implementation."""
        self._matchers[kind] = cls

    def has_matcher(self, kind: str) -> bool:
        """Check whether a matcher kind is registered."""
        return kind in self._matchers

    def get_matcher(self, kind: str) -> type[Matcher]:
        """Get a matcher class by kind."""
        if kind not in self._matchers:
            raise ValueError(f"Unknown matcher kind: {kind}")
        return self._matchers[kind]

    # Notifier registration
    def register_notifier(self, type_name: str, cls: type[Notifier]) -> None:
        """Register a notifier implementation."""
        self._notifiers[type_name] = cls

    def get_notifier(self, type_name: str) -> type[Notifier]:
        """Get a notifier class by type name."""
        if type_name not in self._notifiers:
            raise ValueError(f"Unknown notifier type: {type_name}")
        return self._notifiers[type_name]

    def list_plugins(self) -> dict[str, list[str]]:
        """List all registered plugins by category."""
        return {
            "matchers": list(self._matchers.keys()),
            "notifiers": list(self._notifiers.keys()),
        }


# Global registry instance
_registry = PluginRegistry()


# Factory functions
def create_matcher(kind: str, criteria: str) -> Matcher:
    """
    Create a matcher instance from a kind and its criteria.

    Unknown kinds yield an InertMatcher that never matches. Invalid
    criteria for a known kind raise MatcherError.
    """
    if not _registry.has_matcher(kind):
        # Imported here to avoid a cycle through the matchers package
        from zaqar.matchers.inert import InertMatcher  # pylint: disable=import-outside-toplevel
        return InertMatcher(criteria, kind=kind)
    cls = _registry.get_matcher(kind)
    return cls(criteria)


def create_notifier(type_name: str, config: dict[str, Any]) -> Notifier:
    """Create a notifier instance from configuration."""
    cls = _registry.get_notifier(type_name)
    return cls(config)


# Decorators for easy registration
def register_matcher(*kinds: str) -> Callable[[type[Matcher]], type[Matcher]]:
    """Decorator to register a matcher class under one or more kinds."""
    def decorator(cls: type[Matcher]) -> type[Matcher]:
        for kind in kinds:
            _registry.register_matcher(kind, cls)
        return cls
    return decorator


def register_notifier(type_name: str) -> Callable[[type[Notifier]], type[Notifier]]:
    """Decorator to register a notifier class."""
    def decorator(cls: type[Notifier]) -> type[Notifier]:
        _registry.register_notifier(type_name, cls)
        return cls
    return decorator


def get_registry() -> PluginRegistry:
    """Get the global plugin registry."""
    return _registry


def discover_plugins(
    package_name: str,
    package_path: Iterable[str],
    base_cls: type,
    namespace: dict[str, Any],
) -> list[str]:
    """
    Import every module of a plugin package and collect its exports.

    Each module's ``__all__`` names are validated to be subclasses of
    ``base_cls`` and bound into ``namespace`` (the package's globals).

    Returns:
        The accepted export names, for use as the package's ``__all__``
    """
    exported: list[str] = []
    for module_info in pkgutil.iter_modules(package_path):
        module = importlib.import_module(f"{package_name}.{module_info.name}")

        for name in getattr(module, "__all__", []):
            if name in exported:
                logger.warning(
                    "Duplicate plugin name '%s' in module '%s' - skipping",
                    name,
                    module_info.name
                )
                continue

            cls = getattr(module, name)
            if not inspect.isclass(cls) or not issubclass(cls, base_cls):
                logger.warning(
                    "Export '%s' in module '%s' is not a %s subclass - skipping",
                    name,
                    module_info.name,
                    base_cls.__name__
                )
                continue

            namespace[name] = cls
            exported.append(name)

    return exported

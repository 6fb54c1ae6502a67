"""
Tests for plugin registry and factory system.
"""

import pytest

# Import plugin modules to trigger decorator registration
# pylint: disable=unused-import
# ruff: noqa: F401
import zaqar.matchers
import zaqar.notifiers
from zaqar.core import Matcher, Notifier
from zaqar.registry import (
    PluginRegistry,
    create_matcher,
    create_notifier,
    get_registry,
    register_matcher,
)


class TestPluginRegistry:
    """Tests for PluginRegistry class."""

    def test_register_and_get_matcher(self) -> None:
        """Test registering and retrieving a matcher."""
        registry = PluginRegistry()

        class TestMatcher(Matcher):
            def match(self, line: str) -> bool:
                return True

        registry.register_matcher("test", TestMatcher)

        assert registry.has_matcher("test") is True
        assert registry.get_matcher("test") is TestMatcher

    def test_register_and_get_notifier(self) -> None:
        """Test registering and retrieving a notifier."""
        registry = PluginRegistry()

        class TestNotifier(Notifier):
            def deliver(self, subject: str, body: str) -> bool:
                return True

        registry.register_notifier("test", TestNotifier)

        assert registry.get_notifier("test") is TestNotifier

    def test_get_unknown_matcher(self) -> None:
        """Test that unknown matcher kinds raise ValueError."""
        registry = PluginRegistry()

        assert registry.has_matcher("nonexistent") is False
        with pytest.raises(ValueError, match="Unknown matcher kind"):
            registry.get_matcher("nonexistent")

    def test_get_unknown_notifier(self) -> None:
        """Test that unknown notifier types raise ValueError."""
        registry = PluginRegistry()

        with pytest.raises(ValueError, match="Unknown notifier type"):
            registry.get_notifier("nonexistent")


class TestBuiltinPlugins:
    """Tests for built-in plugin registration."""

    def test_list_plugins(self) -> None:
        """Test that built-in plugins are registered."""
        plugins = get_registry().list_plugins()

        assert {"pattern", "regexp", "substring"} <= set(plugins["matchers"])
        assert {"mailgun", "webhook", "console"} <= set(plugins["notifiers"])

    def test_inert_matcher_not_registered(self) -> None:
        """Test that the placeholder matcher cannot be selected by kind."""
        assert "inert" not in get_registry().list_plugins()["matchers"]

    def test_create_notifier(self) -> None:
        """Test creating a notifier from configuration."""
        notifier = create_notifier("console", {})

        assert isinstance(notifier, zaqar.notifiers.ConsoleNotifier)

    def test_create_unknown_notifier(self) -> None:
        """Test that an unknown notifier type is an error."""
        with pytest.raises(ValueError):
            create_notifier("carrier_pigeon", {})

    def test_register_matcher_decorator(self) -> None:
        """Test registering a matcher with the decorator under several kinds."""

        @register_matcher("test_always", "test_always_alias")
        class AlwaysMatcher(Matcher):
            def match(self, line: str) -> bool:
                return True

        assert isinstance(create_matcher("test_always", ""), AlwaysMatcher)
        assert isinstance(create_matcher("test_always_alias", ""), AlwaysMatcher)

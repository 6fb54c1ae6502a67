"""
Core interfaces and data structures for Zaqar.

This module defines the data model consumed by the scanning pipeline and
the two plugin categories:
- Matchers: Which lines to report
- Notifiers: How to deliver the report
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class ZaqarError(Exception):
    """Base class for all Zaqar errors."""


class MatcherError(ZaqarError):
    """Raised when a matcher cannot be built from its criteria."""


class PipelineError(ZaqarError):
    """Raised when a source file cannot be opened or read."""

    def __init__(self, source_name: str, message: str):
        super().__init__(f"{source_name}: {message}")
        self.source_name = source_name


@dataclass(frozen=True)
class MatcherSpec:
    """Declarative description of a matching rule."""
    kind: str  # "pattern", "substring", ...
    criteria: str


@dataclass(frozen=True)
class Source:
    """One monitored log file plus its configured matchers."""
    name: str
    path: str
    matchers: tuple[MatcherSpec, ...] = field(default_factory=tuple)
    encoding: str = "utf-8"


class Matcher(ABC):
    """
    Base class for all matchers.

    Matchers are pure predicates over a single line of text.
    """

    def __init__(self, criteria: str):
        """
        Initialize the matcher with its criteria.

        Args:
            criteria: Kind-specific criteria string

        Raises:
            MatcherError: If the criteria cannot be compiled
        """
        self.criteria = criteria

    @abstractmethod
    def match(self, line: str) -> bool:
        """
        Test a line against the matcher.

        Args:
            line: One line of log text, without its line terminator

        Returns:
            True if the line should be reported
        """
        raise NotImplementedError


class Notifier(ABC):
    """
    Base class for all notifiers.

    Notifiers deliver the aggregated report for one source to an
    external destination.
    """

    def __init__(self, config: dict[str, Any]):
        """
        Initialize the notifier with configuration.

        Args:
            config: Type-specific configuration dictionary
        """
        self.config = config

    @abstractmethod
    def deliver(self, subject: str, body: str) -> bool:
        """
        Deliver a report.

        Args:
            subject: Report subject, naming the source
            body: Matched lines joined by newlines

        Returns:
            True if the report was delivered successfully, False otherwise
        """
        raise NotImplementedError

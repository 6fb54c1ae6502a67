"""
Matcher workers and the channels that feed them lines.
"""

import queue
import threading
from collections.abc import Iterator

from zaqar.collector import Collector
from zaqar.core import Matcher
from zaqar.logging_config import get_logger
from zaqar.matchers.inert import InertMatcher

logger = get_logger(__name__)

_CLOSED = object()


class LineChannel:
    """
    Bounded single-producer queue of lines that can be closed.

    With the default capacity of 1, ``send`` blocks until the consumer
    has taken the previous line, so a slow consumer holds back the
    producer instead of lines piling up in memory.
    """

    def __init__(self, capacity: int = 1) -> None:
        self._queue: queue.Queue[object] = queue.Queue(maxsize=capacity)
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def send(self, line: str) -> None:
        """Hand a line to the consumer, blocking while the channel is full."""
        if self._closed:
            raise ValueError("send on closed channel")
        self._queue.put(line)

    def close(self) -> None:
        """Signal that no more lines will be sent."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[str]:
        """Yield lines until the channel is closed and drained."""
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            yield item  # type: ignore[misc]


class MatcherWorker(threading.Thread):
    """
    Runs one matcher over every line of one source.

    Each matching line is added to the collector under the source name.
    The worker stops once its channel is closed and drained; it never
    closes the channel itself.
    """

    def __init__(
        self,
        source_name: str,
        matcher: Matcher,
        collector: Collector,
        channel: LineChannel
    ) -> None:
        """
        Initialize the worker.

        Args:
            source_name: Name the matches are recorded under
            matcher: Matcher to apply to each line
            collector: Shared collector for matched lines
            channel: Input lines, fed by the pipeline coordinator
        """
        super().__init__(
            name=f"zaqar-{source_name}-{matcher.__class__.__name__}",
            daemon=True
        )
        self.source_name = source_name
        self.matcher = matcher
        self.collector = collector
        self.channel = channel
        self.matched = 0

    def run(self) -> None:
        """Consume lines until the channel is closed."""
        if isinstance(self.matcher, InertMatcher):
            logger.error(
                "Unknown matcher kind '%s' for '%s', ignoring its lines",
                self.matcher.kind,
                self.source_name
            )
            # Keep draining so the coordinator is never blocked on us
            for _ in self.channel:
                pass
            return

        for line in self.channel:
            if self._match(line):
                self.collector.add(self.source_name, line)
                self.matched += 1

        logger.debug(
            "%s matched %d line(s) for '%s'",
            self.name,
            self.matched,
            self.source_name
        )

    def _match(self, line: str) -> bool:
        try:
            return self.matcher.match(line)
        except Exception:
            logger.error(
                "Matcher %s failed on a line from '%s'",
                self.matcher.__class__.__name__,
                self.source_name,
                exc_info=True
            )
            return False

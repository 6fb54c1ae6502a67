"""
Per-source pipeline that streams a log file through matcher workers.
"""

from pathlib import Path

from zaqar.collector import Collector
from zaqar.core import Matcher, PipelineError, Source
from zaqar.logging_config import get_logger
from zaqar.plugins import create_matcher
from zaqar.worker import LineChannel, MatcherWorker

logger = get_logger(__name__)


def _strip_line_ending(line: str) -> str:
    """Drop one trailing newline and one carriage return before it."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class PipelineCoordinator:
    """
    Coordinates the matcher workers for a single source.

    One worker thread is started per matcher, each fed through its own
    channel of capacity 1. The file is read line by line and every line
    is handed to every worker in matcher order, so reading never gets
    ahead of the slowest matcher by more than one line.
    """

    def __init__(
        self,
        source: Source,
        matchers: list[Matcher],
        collector: Collector,
        channel_capacity: int = 1
    ):
        """
        Initialize the coordinator.

        Args:
            source: Source to scan
            matchers: Matchers built from the source's matcher specs, in order
            collector: Shared collector for matched lines
            channel_capacity: Depth of each worker's input channel
        """
        self.source = source
        self.matchers = matchers
        self.collector = collector
        self.channel_capacity = channel_capacity

    @property
    def name(self) -> str:
        """Name of the source this pipeline scans."""
        return self.source.name

    def _spawn_workers(self) -> list[MatcherWorker]:
        """Start one worker per matcher."""
        workers = []
        for matcher in self.matchers:
            worker = MatcherWorker(
                source_name=self.name,
                matcher=matcher,
                collector=self.collector,
                channel=LineChannel(self.channel_capacity)
            )
            worker.start()
            workers.append(worker)
        logger.debug("Started %d matcher worker(s) for '%s'", len(workers), self.name)
        return workers

    def _stream(self, workers: list[MatcherWorker]) -> int:
        """
        Send every line of the source file to every worker.

        Returns:
            Number of lines read

        Raises:
            PipelineError: If the file cannot be opened or read
        """
        path = Path(self.source.path)
        count = 0
        try:
            with path.open(
                "r", encoding=self.source.encoding, errors="replace", newline="\n"
            ) as f:
                for raw_line in f:
                    line = _strip_line_ending(raw_line)
                    for worker in workers:
                        worker.channel.send(line)
                    count += 1
        except (OSError, LookupError, ValueError) as e:
            raise PipelineError(self.name, f"cannot read {path}: {e}") from e
        return count

    def run(self) -> None:
        """
        Scan the source to end-of-file and send its report.

        Raises:
            PipelineError: If the file cannot be opened or read; no report
                is sent in that case
        """
        logger.info("Scanning '%s' (%s)", self.name, self.source.path)
        workers = self._spawn_workers()
        try:
            lines = self._stream(workers)
        finally:
            for worker in workers:
                worker.channel.close()
            for worker in workers:
                worker.join()

        logger.info(
            "Finished '%s': %d line(s) read, %d matched",
            self.name,
            lines,
            len(self.collector.errors(self.name))
        )
        self.collector.send(self.name)


def create_pipeline(source: Source, collector: Collector) -> PipelineCoordinator:
    """
    Factory function to create a pipeline from a source.

    Every matcher is built here, before any thread starts, so invalid
    criteria fail the run up front.

    Args:
        source: The source to scan
        collector: Shared collector for matched lines

    Returns:
        PipelineCoordinator instance

    Raises:
        MatcherError: If a matcher's criteria are invalid
    """
    matchers = [create_matcher(spec.kind, spec.criteria) for spec in source.matchers]
    return PipelineCoordinator(source=source, matchers=matchers, collector=collector)

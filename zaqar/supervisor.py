"""
Runs one pipeline per source in parallel and waits for all of them.
"""

import queue
import threading

from zaqar.collector import Collector
from zaqar.core import Source
from zaqar.logging_config import get_logger
from zaqar.pipeline import PipelineCoordinator, create_pipeline

logger = get_logger(__name__)


class RunSupervisor:
    """
    Starts every source's pipeline on its own thread.

    Each pipeline reports on a shared completion queue when it ends. The
    first failure is re-raised immediately without waiting for the other
    pipelines; their threads are daemon threads and do not keep the
    process alive.
    """

    def __init__(self, pipelines: list[PipelineCoordinator]) -> None:
        """
        Initialize the supervisor.

        Args:
            pipelines: Fully built pipelines, one per source
        """
        self.pipelines = pipelines
        self.completed: list[str] = []

    def _run_pipeline(
        self,
        pipeline: PipelineCoordinator,
        done: queue.Queue[tuple[str, Exception | None]]
    ) -> None:
        try:
            pipeline.run()
        except Exception as e:  # pylint: disable=broad-exception-caught
            done.put((pipeline.name, e))
            return
        done.put((pipeline.name, None))

    def run(self) -> None:
        """
        Run all pipelines to completion.

        Raises:
            PipelineError: If any source file cannot be opened or read
        """
        done: queue.Queue[tuple[str, Exception | None]] = queue.Queue()

        for pipeline in self.pipelines:
            thread = threading.Thread(
                target=self._run_pipeline,
                args=(pipeline, done),
                name=f"zaqar-{pipeline.name}",
                daemon=True
            )
            thread.start()

        for _ in self.pipelines:
            name, error = done.get()
            if error is not None:
                logger.critical("Pipeline '%s' failed: %s", name, error)
                raise error
            self.completed.append(name)
            logger.debug("Pipeline '%s' completed", name)

        logger.info("All %d source(s) scanned", len(self.completed))


def create_supervisor(sources: list[Source], collector: Collector) -> RunSupervisor:
    """
    Build a pipeline for every source and wrap them in a supervisor.

    Raises:
        MatcherError: If any source has a matcher with invalid criteria
    """
    pipelines = [create_pipeline(source, collector) for source in sources]
    return RunSupervisor(pipelines)

"""
Demo runner for executing catalog demonstrations.

This module provides a DemoRunner class that resolves a demonstration by
name, invokes it against an OutputSink and returns a Result holding the
lines that were written.

Failures raised inside a demonstration never escape the runner: they are
converted to ExecutionError (or kept as SinkWriteError when a sink backend
failed) and returned in Result.error. Only NotFoundError for an unknown
name reaches the caller, before anything is written.
"""

import asyncio
import logging
import threading
from collections.abc import Callable, Iterable

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.exceptions import (
    DeadlineExceededError,
    DemoError,
    ExecutionError,
    SinkWriteError,
)
from pattern_catalog.sinks import MemorySink, RecordingSink
from pattern_catalog.types import DemoEntry, OutputSink, Result

logger = logging.getLogger(__name__)


class DemoRunner:
    """
    Runs one demonstration at a time and captures its output.

    The runner holds no per-run state, so a single instance can be shared.
    Each run must get its own sink: sinks are not safe for concurrent
    writers.

    Example:
        ```python
        runner = DemoRunner()
        result = runner.run(catalog, "observer", MemorySink())
        if result.success:
            print(result.text)
        ```
    """

    def run(self, catalog: PatternCatalog, name: str, sink: OutputSink) -> Result:
        """
        Run a demonstration synchronously on the caller's thread.

        Args:
            catalog: Catalog to resolve name in
            name: Demonstration to run
            sink: Destination for the demonstration's output

        Returns:
            Result with the lines the sink accepted and the error, if any

        Raises:
            NotFoundError: If name is not registered (sink is not touched)
        """
        entry = catalog.lookup(name)
        recorder = RecordingSink(sink)
        error = self._invoke(entry, recorder)
        return Result(produced_text=recorder.snapshot(), error=error)

    async def run_with_deadline(
        self,
        catalog: PatternCatalog,
        name: str,
        sink: OutputSink,
        timeout: float | None = None,
    ) -> Result:
        """
        Run a demonstration on a daemon thread with a deadline.

        The demonstration itself stays synchronous; it runs on its own
        daemon thread and the caller waits for it with asyncio.wait_for.
        When the deadline passes the recorder is closed, so anything the
        demonstration writes afterwards is dropped instead of reaching the
        sink. The thread is left to finish on its own and never holds up
        interpreter exit.

        Args:
            catalog: Catalog to resolve name in
            name: Demonstration to run
            sink: Destination for the demonstration's output
            timeout: Deadline in seconds, or None for no deadline

        Returns:
            Result; error is DeadlineExceededError when the deadline passed

        Raises:
            NotFoundError: If name is not registered
        """
        entry = catalog.lookup(name)
        recorder = RecordingSink(sink)
        loop = asyncio.get_running_loop()
        done: asyncio.Future[DemoError | None] = loop.create_future()

        def settle(error: DemoError | None) -> None:
            if not done.done():
                done.set_result(error)

        def worker() -> None:
            error = self._invoke(entry, recorder)
            try:
                loop.call_soon_threadsafe(settle, error)
            except RuntimeError:
                # Loop already closed: the caller gave up after the deadline
                logger.debug("Demonstration %r finished after its caller", name)

        threading.Thread(target=worker, name=f"demo-{name}", daemon=True).start()

        try:
            error = await asyncio.wait_for(done, timeout=timeout)
        except asyncio.TimeoutError:
            recorder.close()
            logger.warning("Demonstration %r exceeded %ss deadline", name, timeout)
            error = DeadlineExceededError(name, timeout or 0.0)

        return Result(produced_text=recorder.snapshot(), error=error)

    def run_many(
        self,
        catalog: PatternCatalog,
        names: Iterable[str] | None = None,
        sink_factory: Callable[[], OutputSink] = MemorySink,
    ) -> dict[str, Result]:
        """
        Run several demonstrations, each with a fresh sink.

        Args:
            catalog: Catalog to resolve names in
            names: Demonstrations to run (default: every registered name)
            sink_factory: Builds the sink for each run

        Returns:
            Results keyed by name, in run order

        Raises:
            NotFoundError: On the first unknown name
        """
        selected = list(catalog.names() if names is None else names)
        return {name: self.run(catalog, name, sink_factory()) for name in selected}

    def _invoke(self, entry: DemoEntry, sink: OutputSink) -> DemoError | None:
        """
        Call the entry's run function and convert failures to values.

        Returns:
            None on success, otherwise the DemoError describing the failure
        """
        logger.debug("Running demonstration %r", entry.name)
        try:
            entry.run(sink)
        except SinkWriteError as e:
            logger.warning("Demonstration %r could not write output: %s", entry.name, e)
            return e
        except Exception as e:
            logger.warning("Demonstration %r failed: %s", entry.name, e)
            return ExecutionError(entry.name, e)

        logger.debug("Demonstration %r completed", entry.name)
        return None

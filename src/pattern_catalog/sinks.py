"""
Output sinks for demonstration text.

This module implements the three OutputSink backends:
- MemorySink: list-backed sink for tests and captured runs
- ConsoleSink: forwards lines to a Rich console
- FileSink: appends lines to a text file

RecordingSink wraps any of them and keeps the lines a run produced.
Sinks are not safe for concurrent writers: give each run its own instance.
"""

import threading
from collections.abc import Iterator
from pathlib import Path

from rich.console import Console

from pattern_catalog.exceptions import SinkWriteError
from pattern_catalog.types import OutputSink


class MemorySink:
    """
    In-memory sink that keeps every line written to it. Never fails.

    Example:
        sink = MemorySink()
        sink.write_line("line 1")
        sink.write_line("line 2")
        sink.text  # "line 1\\nline 2"
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write_line(self, text: str) -> None:
        self._lines.append(text.rstrip("\n"))

    @property
    def lines(self) -> list[str]:
        """Copy of the lines written so far, oldest first."""
        return list(self._lines)

    @property
    def text(self) -> str:
        """Lines joined with newlines."""
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


class ConsoleSink:
    """
    Sink that prints each line to a Rich console.

    Markup, emoji codes and highlighting are disabled so demonstration
    text appears exactly as written.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def write_line(self, text: str) -> None:
        try:
            self.console.print(
                text.rstrip("\n"),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        except OSError as e:
            raise SinkWriteError("console", e) from e


class FileSink:
    """
    Sink that appends each line to a text file.

    The file is opened in append mode for every write, so no handle is
    held between lines and earlier content is preserved.

    Attributes:
        path: File receiving the output
        encoding: Text encoding used for writes
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def write_line(self, text: str) -> None:
        """
        Append one line plus newline to the file.

        Raises:
            SinkWriteError: If the file cannot be opened or written
        """
        try:
            with self.path.open("a", encoding=self.encoding) as f:
                f.write(text.rstrip("\n") + "\n")
        except OSError as e:
            raise SinkWriteError(str(self.path), e) from e


class RecordingSink:
    """
    Wraps another sink and records every line it accepted.

    A line is recorded only after the wrapped sink's write_line returned,
    so a failed write never shows up as produced text. Once closed, further
    lines are dropped without reaching the wrapped sink; close() waits for
    a write already in progress.
    """

    def __init__(self, target: OutputSink) -> None:
        self._target = target
        self._lines: list[str] = []
        self._closed = False
        self._lock = threading.Lock()

    def write_line(self, text: str) -> None:
        with self._lock:
            if self._closed:
                return
            self._target.write_line(text)
            self._lines.append(text.rstrip("\n"))

    def close(self) -> None:
        """Stop forwarding and recording lines."""
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> tuple[str, ...]:
        """Lines recorded so far."""
        with self._lock:
            return tuple(self._lines)

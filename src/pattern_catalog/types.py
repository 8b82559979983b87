"""
Shared types for the pattern catalog.

This module defines:
- Category: Grouping of demonstrations (behavioral, structural, ...)
- ErrorKind: Classification of failures reported in a Result
- OutputSink: Protocol for anything that accepts lines of demo output
- DemoEntry: Immutable named demonstration with its run callable
- DemoInfo: Serialisable summary of a DemoEntry for listings
- Result: Outcome of a single demonstration run

These types let the catalog host any demonstration without knowing what
pattern it illustrates: a demonstration is just a callable that writes
lines to an OutputSink.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from pattern_catalog.exceptions import DemoError


class Category(Enum):
    """Pattern family a demonstration belongs to."""

    BEHAVIORAL = "behavioral"
    STRUCTURAL = "structural"
    CREATIONAL = "creational"
    PRINCIPLES = "principles"
    GENERAL = "general"


class ErrorKind(Enum):
    """
    Kinds of failure a demonstration run can report.

    EXECUTION covers anything raised by the demonstration itself, IO covers
    sink backends that could not write, TIMEOUT covers runs that exceeded
    their deadline.
    """

    EXECUTION = "execution"
    IO = "io"
    TIMEOUT = "timeout"


@runtime_checkable
class OutputSink(Protocol):
    """
    Protocol for demonstration output destinations.

    A sink accepts one line of text at a time and keeps it in order.
    In-memory sinks never fail; console and file sinks may raise
    SinkWriteError when the underlying stream cannot be written.
    """

    def write_line(self, text: str) -> None:
        """
        Append a line of output.

        Args:
            text: Line of text without trailing newline
        """
        ...


DemoFn = Callable[[OutputSink], object]


@dataclass(frozen=True)
class DemoEntry:
    """
    Immutable demonstration definition.

    Attributes:
        name: Unique catalog key (e.g., "observer")
        run: Callable that writes the demonstration's output to a sink.
            Its return value is ignored.
        description: One-line summary shown in listings
        category: Pattern family for grouping
    """

    name: str
    run: DemoFn
    description: str = ""
    category: Category = Category.GENERAL

    def info(self) -> "DemoInfo":
        """Build the serialisable summary for this entry."""
        return DemoInfo(
            name=self.name,
            description=self.description,
            category=self.category,
        )


class DemoInfo(BaseModel):
    """
    Serialisable summary of a registered demonstration.

    Attributes:
        name: Catalog key
        description: One-line summary
        category: Pattern family
    """

    name: str = Field(..., description="Catalog key")
    description: str = Field(default="", description="One-line summary")
    category: Category = Field(
        default=Category.GENERAL, description="Pattern family"
    )


@dataclass(frozen=True)
class Result:
    """
    Outcome of one demonstration run.

    Attributes:
        produced_text: Lines accepted by the sink, in order. When the run
            failed this holds whatever was written before the failure.
        error: The failure, or None if the run completed
    """

    produced_text: tuple[str, ...] = ()
    error: "DemoError | None" = None

    @property
    def success(self) -> bool:
        """True when the run completed without error."""
        return self.error is None

    @property
    def text(self) -> str:
        """Produced lines joined with newlines."""
        return "\n".join(self.produced_text)

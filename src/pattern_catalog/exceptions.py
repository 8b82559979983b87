"""
Exception classes for catalog registration and demonstration runs.

Catalog errors surface directly to the caller:
- DuplicateNameError: A name was registered twice
- NotFoundError: A name is not registered

Demo errors are captured by DemoRunner and returned in Result.error:
- ExecutionError: The demonstration itself raised
- SinkWriteError: A console or file sink could not write
- DeadlineExceededError: The run outlived its deadline

Each exception stores its context in attributes and carries a
descriptive message.
"""

from collections.abc import Iterable

from pattern_catalog.types import ErrorKind


class CatalogError(Exception):
    """Base class for catalog registration and lookup failures."""


class DuplicateNameError(CatalogError):
    """
    Raised when registering a name that is already in the catalog.

    Attributes:
        name: The name that was registered twice
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Demonstration '{name}' is already registered")


class NotFoundError(CatalogError):
    """
    Raised when looking up a name that is not registered.

    Attributes:
        name: The requested name
        available: Names registered at the time of the lookup
    """

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        message = f"Unknown demonstration '{name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


class DemoError(Exception):
    """
    Base class for failures recorded in Result.error.

    Attributes:
        kind: ErrorKind classifying the failure
    """

    kind: ErrorKind = ErrorKind.EXECUTION


class ExecutionError(DemoError):
    """
    Wraps an exception raised inside a demonstration's run callable.

    Attributes:
        name: Demonstration that failed
        cause: The original exception (also set as __cause__)
    """

    kind = ErrorKind.EXECUTION

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(
            f"Demonstration '{name}' failed: {type(cause).__name__}: {cause}"
        )
        self.__cause__ = cause


class SinkWriteError(DemoError):
    """
    Raised by console and file sinks when a line cannot be written.

    Attributes:
        target: Human-readable description of the sink destination
        cause: The underlying OSError
    """

    kind = ErrorKind.IO

    def __init__(self, target: str, cause: OSError) -> None:
        self.target = target
        self.cause = cause
        super().__init__(f"Could not write to {target}: {cause}")
        self.__cause__ = cause


class DeadlineExceededError(DemoError):
    """
    Recorded when a demonstration does not finish within its deadline.

    Attributes:
        name: Demonstration that timed out
        timeout: Deadline in seconds
    """

    kind = ErrorKind.TIMEOUT

    def __init__(self, name: str, timeout: float) -> None:
        self.name = name
        self.timeout = timeout
        super().__init__(
            f"Demonstration '{name}' timed out after {timeout:g}s"
        )

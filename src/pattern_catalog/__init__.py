"""
Pattern Catalog

Runnable catalog of object-oriented design pattern demonstrations.
This package provides:

- PatternCatalog: Registry mapping names to demonstrations
- DemoRunner: Runs a demonstration and captures its output as a Result
- Sinks: MemorySink, ConsoleSink and FileSink output destinations
- Built-in demonstrations for behavioral, structural and creational
  patterns plus a SOLID walkthrough
- CLI infrastructure: Typer-based command structure
"""

__version__ = "0.1.0"

from pattern_catalog.catalog import (
    CatalogNames,
    PatternCatalog,
    default_catalog,
    reset_default_catalog,
)
from pattern_catalog.exceptions import (
    CatalogError,
    DeadlineExceededError,
    DemoError,
    DuplicateNameError,
    ExecutionError,
    NotFoundError,
    SinkWriteError,
)
from pattern_catalog.runner import DemoRunner
from pattern_catalog.sinks import ConsoleSink, FileSink, MemorySink
from pattern_catalog.types import (
    Category,
    DemoEntry,
    DemoInfo,
    ErrorKind,
    OutputSink,
    Result,
)

__all__ = [
    "__version__",
    # Catalog
    "PatternCatalog",
    "CatalogNames",
    "default_catalog",
    "reset_default_catalog",
    # Runner
    "DemoRunner",
    # Sinks
    "OutputSink",
    "MemorySink",
    "ConsoleSink",
    "FileSink",
    # Data Types
    "Category",
    "DemoEntry",
    "DemoInfo",
    "ErrorKind",
    "Result",
    # Errors
    "CatalogError",
    "DuplicateNameError",
    "NotFoundError",
    "DemoError",
    "ExecutionError",
    "SinkWriteError",
    "DeadlineExceededError",
]

"""
Pattern catalog for demonstration registration and lookup.

This module provides:
- PatternCatalog: Name-to-DemoEntry mapping with unique names
- CatalogNames: Lazy, restartable view over registered names
- default_catalog: Process-wide catalog populated once with built-ins

Registration is serialised by a lock so only one writer mutates the
mapping at a time. Lookups read the mapping without locking; they are
safe once registration has completed.

Example:
    ```python
    catalog = PatternCatalog()
    catalog.register("echo", lambda sink: sink.write_line("hello"))

    entry = catalog.lookup("echo")
    for name in catalog.names():
        print(name)
    ```
"""

import logging
import threading
from collections.abc import Callable, Iterator

from pattern_catalog.exceptions import DuplicateNameError, NotFoundError
from pattern_catalog.types import Category, DemoEntry, DemoFn, DemoInfo

logger = logging.getLogger(__name__)


class CatalogNames:
    """
    Iterable over a catalog's names in registration order.

    Nothing is copied until iteration starts. Every call to iter() takes
    a fresh snapshot, so the view can be iterated any number of times and
    registrations made during an iteration never break it.
    """

    def __init__(self, catalog: "PatternCatalog") -> None:
        self._catalog = catalog

    def __iter__(self) -> Iterator[str]:
        yield from tuple(self._catalog._entries)

    def __len__(self) -> int:
        return len(self._catalog)

    def __repr__(self) -> str:
        return f"CatalogNames({list(self)!r})"


class PatternCatalog:
    """
    Registry mapping demonstration names to their entries.

    Names are unique: registering an existing name raises
    DuplicateNameError and leaves the original entry in place. Entries are
    immutable, so lookup returns the same object for a name every time.

    Example:
        ```python
        catalog = PatternCatalog()

        @catalog.demonstration("observer", category=Category.BEHAVIORAL)
        def observer_demo(sink):
            sink.write_line("notified")

        catalog.lookup("observer").run is observer_demo  # True
        ```
    """

    def __init__(self) -> None:
        self._entries: dict[str, DemoEntry] = {}
        self._write_lock = threading.Lock()

    def register(
        self,
        name: str,
        run: DemoFn,
        *,
        description: str = "",
        category: Category = Category.GENERAL,
    ) -> DemoEntry:
        """
        Register a demonstration under a unique name.

        Args:
            name: Catalog key
            run: Callable that writes the demonstration's output to a sink
            description: One-line summary for listings
            category: Pattern family

        Returns:
            The stored DemoEntry

        Raises:
            DuplicateNameError: If name is already registered
        """
        entry = DemoEntry(
            name=name, run=run, description=description, category=category
        )
        return self.add(entry)

    def add(self, entry: DemoEntry) -> DemoEntry:
        """
        Register a prebuilt entry.

        Raises:
            DuplicateNameError: If entry.name is already registered
        """
        with self._write_lock:
            if entry.name in self._entries:
                raise DuplicateNameError(entry.name)
            self._entries[entry.name] = entry
        logger.debug("Registered demonstration %r", entry.name)
        return entry

    def demonstration(
        self,
        name: str,
        *,
        description: str = "",
        category: Category = Category.GENERAL,
    ) -> Callable[[DemoFn], DemoFn]:
        """Decorator that registers the decorated function under name."""

        def decorator(fn: DemoFn) -> DemoFn:
            self.register(name, fn, description=description, category=category)
            return fn

        return decorator

    def lookup(self, name: str) -> DemoEntry:
        """
        Find a demonstration by name.

        Raises:
            NotFoundError: If name is not registered
        """
        entry = self._entries.get(name)
        if entry is None:
            raise NotFoundError(name, self.names())
        return entry

    def names(self) -> CatalogNames:
        """Registered names in registration order."""
        return CatalogNames(self)

    def describe(self, category: Category | None = None) -> list[DemoInfo]:
        """
        Summaries of registered demonstrations.

        Args:
            category: Only include entries of this category when given

        Returns:
            DemoInfo list in registration order
        """
        entries = tuple(self._entries.values())
        return [
            entry.info()
            for entry in entries
            if category is None or entry.category is category
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_default_catalog: PatternCatalog | None = None
_default_initialized = False
_default_lock = threading.Lock()


def default_catalog() -> PatternCatalog:
    """
    Process-wide catalog holding the built-in demonstrations.

    Built on first call and populated exactly once; concurrent first
    callers wait on the lock and receive the same instance.
    """
    global _default_catalog, _default_initialized

    if _default_initialized:
        return _default_catalog  # type: ignore[return-value]

    with _default_lock:
        if not _default_initialized:
            from pattern_catalog.demos import register_builtin

            catalog = PatternCatalog()
            register_builtin(catalog)
            _default_catalog = catalog
            _default_initialized = True
            logger.debug(
                "Default catalog initialized with %d demonstrations", len(catalog)
            )
    return _default_catalog  # type: ignore[return-value]


def reset_default_catalog() -> None:
    """Drop the process-wide catalog so the next call rebuilds it."""
    global _default_catalog, _default_initialized

    with _default_lock:
        _default_catalog = None
        _default_initialized = False

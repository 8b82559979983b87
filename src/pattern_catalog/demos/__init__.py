"""
Built-in design pattern demonstrations.

Each submodule exposes register(catalog) which adds its demonstrations:
- behavioral: Mediator, Chain of Responsibility, State, Memento,
  Strategy, Observer, Command
- structural: Proxy, Composite, Facade, Decorator, Adapter, Bridge
- creational: Abstract Factory, Factory Method, Builder, Singleton
- principles: SOLID walkthrough
"""

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.demos import behavioral, creational, principles, structural


def register_builtin(catalog: PatternCatalog) -> None:
    """Register every built-in demonstration into catalog."""
    behavioral.register(catalog)
    structural.register(catalog)
    creational.register(catalog)
    principles.register(catalog)


__all__ = ["register_builtin"]

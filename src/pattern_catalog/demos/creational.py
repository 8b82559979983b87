"""
Creational pattern demonstrations.

Abstract Factory, Factory Method, Builder and Singleton. The Singleton
demonstration uses a guarded one-time initializer (lock plus flag), the
same scheme the process-wide default catalog uses.
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.types import Category, OutputSink


# Abstract Factory


class Button(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class LightButton(Button):
    def paint(self) -> str:
        return "light button"


class LightCheckbox(Checkbox):
    def paint(self) -> str:
        return "light checkbox"


class DarkButton(Button):
    def paint(self) -> str:
        return "dark button"


class DarkCheckbox(Checkbox):
    def paint(self) -> str:
        return "dark checkbox"


class WidgetFactory(ABC):
    """Creates a family of widgets that belong together."""

    @abstractmethod
    def button(self) -> Button: ...

    @abstractmethod
    def checkbox(self) -> Checkbox: ...


class LightTheme(WidgetFactory):
    def button(self) -> Button:
        return LightButton()

    def checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkTheme(WidgetFactory):
    def button(self) -> Button:
        return DarkButton()

    def checkbox(self) -> Checkbox:
        return DarkCheckbox()


def abstract_factory_demo(sink: OutputSink) -> None:
    for factory in (LightTheme(), DarkTheme()):
        widgets = [factory.button().paint(), factory.checkbox().paint()]
        sink.write_line(f"{type(factory).__name__}: {', '.join(widgets)}")


# Factory Method


class Transport(ABC):
    @abstractmethod
    def deliver(self, cargo: str) -> str: ...


class Truck(Transport):
    def deliver(self, cargo: str) -> str:
        return f"truck delivers {cargo} by road"


class Ship(Transport):
    def deliver(self, cargo: str) -> str:
        return f"ship delivers {cargo} by sea"


class Logistics(ABC):
    """Subclasses decide which Transport to create."""

    @abstractmethod
    def create_transport(self) -> Transport: ...

    def plan(self, cargo: str) -> str:
        return self.create_transport().deliver(cargo)


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def factory_method_demo(sink: OutputSink) -> None:
    for logistics in (RoadLogistics(), SeaLogistics()):
        sink.write_line(logistics.plan("books"))


# Builder


@dataclass
class Vehicle:
    kind: str = ""
    wheels: int = 0
    doors: int = 0
    extras: list[str] = field(default_factory=list)

    def describe(self) -> str:
        text = f"{self.kind}: {self.wheels} wheels, {self.doors} doors"
        if self.extras:
            text += f", extras: {', '.join(self.extras)}"
        return text


class VehicleBuilder:
    """Step-by-step construction with a fluent interface."""

    def __init__(self, kind: str) -> None:
        self._vehicle = Vehicle(kind=kind)

    def wheels(self, count: int) -> "VehicleBuilder":
        self._vehicle.wheels = count
        return self

    def doors(self, count: int) -> "VehicleBuilder":
        self._vehicle.doors = count
        return self

    def extra(self, name: str) -> "VehicleBuilder":
        self._vehicle.extras.append(name)
        return self

    def build(self) -> Vehicle:
        return self._vehicle


class Manufacturer:
    """Director: knows the build steps for standard models."""

    def car(self) -> Vehicle:
        return VehicleBuilder("car").wheels(4).doors(4).extra("radio").build()

    def bike(self) -> Vehicle:
        return VehicleBuilder("bike").wheels(2).build()


def builder_demo(sink: OutputSink) -> None:
    manufacturer = Manufacturer()
    sink.write_line(manufacturer.car().describe())
    sink.write_line(manufacturer.bike().describe())
    custom = VehicleBuilder("van").wheels(4).doors(3).extra("roof rack").build()
    sink.write_line(custom.describe())


# Singleton


class Configuration:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}


class SingletonHolder:
    """
    Guarded one-time initializer for a Configuration.

    The first get() builds the instance under the lock; later calls read
    the flag and return it without locking. Each holder owns its own lock,
    flag and instance, so separate holders never share state.
    """

    def __init__(self) -> None:
        self._instance: Configuration | None = None
        self._initialized = False
        self._lock = threading.Lock()
        self.init_count = 0

    def get(self) -> Configuration:
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._instance = Configuration()
                    self.init_count += 1
                    self._initialized = True
        return self._instance  # type: ignore[return-value]


def singleton_demo(sink: OutputSink) -> None:
    holder = SingletonHolder()

    instances: list[Configuration] = []
    threads = [
        threading.Thread(target=lambda: instances.append(holder.get()))
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    first = holder.get()
    first.values["theme"] = "dark"
    second = holder.get()

    sink.write_line(f"threads asked for the instance: {len(instances)}")
    sink.write_line(f"initializations: {holder.init_count}")
    sink.write_line(f"all the same object: {all(i is first for i in instances)}")
    sink.write_line(f"theme seen through second reference: {second.values['theme']}")


def register(catalog: PatternCatalog) -> None:
    """Register every creational demonstration."""
    demos = [
        (
            "abstract-factory",
            abstract_factory_demo,
            "Create families of related objects",
        ),
        (
            "factory-method",
            factory_method_demo,
            "Let subclasses choose the class to instantiate",
        ),
        ("builder", builder_demo, "Construct complex objects step by step"),
        ("singleton", singleton_demo, "One shared instance, initialised once"),
    ]
    for name, fn, description in demos:
        catalog.register(
            name, fn, description=description, category=Category.CREATIONAL
        )

"""
Structural pattern demonstrations.

Proxy, Composite, Facade, Decorator, Adapter and Bridge.
"""

import functools
from abc import ABC, abstractmethod
from typing import Callable

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.types import Category, OutputSink


# Proxy


class Image(ABC):
    @abstractmethod
    def display(self) -> str: ...


class RealImage(Image):
    def __init__(self, filename: str, sink: OutputSink) -> None:
        self.filename = filename
        sink.write_line(f"loading {filename} from disk")

    def display(self) -> str:
        return f"showing {self.filename}"


class LazyImage(Image):
    """Virtual proxy: the real image is loaded on first display."""

    def __init__(self, filename: str, sink: OutputSink) -> None:
        self.filename = filename
        self._sink = sink
        self._real: RealImage | None = None

    def display(self) -> str:
        if self._real is None:
            self._real = RealImage(self.filename, self._sink)
        return self._real.display()


def proxy_demo(sink: OutputSink) -> None:
    image = LazyImage("diagram.png", sink)
    sink.write_line("proxy created, nothing loaded yet")
    sink.write_line(image.display())
    sink.write_line(image.display())


# Composite


class Node(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def render(self, depth: int = 0) -> list[str]: ...


class File(Node):
    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size

    def render(self, depth: int = 0) -> list[str]:
        return [f"{'  ' * depth}{self.name} ({self._size})"]


class Directory(Node):
    def __init__(self, name: str, children: list[Node] | None = None) -> None:
        super().__init__(name)
        self.children = children or []

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def render(self, depth: int = 0) -> list[str]:
        lines = [f"{'  ' * depth}{self.name}/ ({self.size()})"]
        for child in self.children:
            lines.extend(child.render(depth + 1))
        return lines


def composite_demo(sink: OutputSink) -> None:
    tree = Directory(
        "project",
        [
            File("README.md", 120),
            Directory("src", [File("main.py", 300), File("util.py", 80)]),
            Directory("empty"),
        ],
    )
    for line in tree.render():
        sink.write_line(line)


# Facade


class Battery:
    def __init__(self, charge: int) -> None:
        self.charge = charge


class StarterMotor:
    def turn(self, battery: Battery) -> bool:
        return battery.charge >= 20


class Engine:
    def __init__(self) -> None:
        self.running = False


class Car:
    """Facade over battery, starter motor and engine."""

    def __init__(self, charge: int) -> None:
        self.battery = Battery(charge)
        self.starter = StarterMotor()
        self.engine = Engine()

    def start(self) -> str:
        if self.starter.turn(self.battery):
            self.engine.running = True
            return "engine started"
        return "engine not started"


def facade_demo(sink: OutputSink) -> None:
    for charge in (80, 5):
        car = Car(charge)
        sink.write_line(f"battery {charge}%: {car.start()}")


# Decorator


def bold(fn: Callable[[], str]) -> Callable[[], str]:
    @functools.wraps(fn)
    def wrapper() -> str:
        return f"<b>{fn()}</b>"

    return wrapper


def italic(fn: Callable[[], str]) -> Callable[[], str]:
    @functools.wraps(fn)
    def wrapper() -> str:
        return f"<i>{fn()}</i>"

    return wrapper


class Coffee:
    def cost(self) -> float:
        return 2.0

    def label(self) -> str:
        return "coffee"


class CoffeeDecorator(Coffee):
    extra_cost = 0.0
    extra_label = ""

    def __init__(self, inner: Coffee) -> None:
        self.inner = inner

    def cost(self) -> float:
        return self.inner.cost() + self.extra_cost

    def label(self) -> str:
        return f"{self.inner.label()} + {self.extra_label}"


class Milk(CoffeeDecorator):
    extra_cost = 0.5
    extra_label = "milk"


class Syrup(CoffeeDecorator):
    extra_cost = 0.75
    extra_label = "syrup"


def decorator_demo(sink: OutputSink) -> None:
    @bold
    @italic
    def greeting() -> str:
        return "hello"

    sink.write_line(f"function decorators: {greeting()}")

    order = Syrup(Milk(Coffee()))
    sink.write_line(f"object decorators: {order.label()} = {order.cost():.2f}")


# Adapter


class RCCar:
    """Adaptee with an interface the remote control does not expect."""

    def __init__(self) -> None:
        self.speed = 0

    def set_speed(self, speed: int) -> None:
        self.speed = speed


class Vehicle(ABC):
    @abstractmethod
    def forward(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...


class RCAdapter(Vehicle):
    def __init__(self, car: RCCar) -> None:
        self.car = car

    def forward(self) -> None:
        self.car.set_speed(10)

    def stop(self) -> None:
        self.car.set_speed(0)


def adapter_demo(sink: OutputSink) -> None:
    car = RCCar()
    vehicle: Vehicle = RCAdapter(car)
    vehicle.forward()
    sink.write_line(f"forward: speed {car.speed}")
    vehicle.stop()
    sink.write_line(f"stop: speed {car.speed}")


# Bridge


class Renderer(ABC):
    @abstractmethod
    def circle(self, radius: float) -> str: ...


class VectorRenderer(Renderer):
    def circle(self, radius: float) -> str:
        return f"vector circle r={radius:g}"


class RasterRenderer(Renderer):
    def circle(self, radius: float) -> str:
        return f"raster circle of {int(radius * 2)}px"


class Circle:
    """Abstraction holding a reference to its implementation."""

    def __init__(self, renderer: Renderer, radius: float) -> None:
        self.renderer = renderer
        self.radius = radius

    def draw(self) -> str:
        return self.renderer.circle(self.radius)

    def resize(self, factor: float) -> None:
        self.radius *= factor


def bridge_demo(sink: OutputSink) -> None:
    for renderer in (VectorRenderer(), RasterRenderer()):
        circle = Circle(renderer, 5)
        circle.resize(2)
        sink.write_line(circle.draw())


def register(catalog: PatternCatalog) -> None:
    """Register every structural demonstration."""
    demos = [
        ("proxy", proxy_demo, "A stand-in controls access to the real object"),
        ("composite", composite_demo, "Treat trees of objects like single objects"),
        ("facade", facade_demo, "One simple interface over a subsystem"),
        ("decorator", decorator_demo, "Wrap objects to add behaviour"),
        ("adapter", adapter_demo, "Make an incompatible interface fit"),
        ("bridge", bridge_demo, "Separate abstraction from implementation"),
    ]
    for name, fn, description in demos:
        catalog.register(
            name, fn, description=description, category=Category.STRUCTURAL
        )

"""SOLID principles walkthrough."""

from abc import ABC, abstractmethod
from typing import Protocol

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.types import Category, OutputSink


# Single responsibility: totals and formatting live in separate classes


class Invoice:
    def __init__(self, items: dict[str, float]) -> None:
        self.items = items

    def total(self) -> float:
        return sum(self.items.values())


class InvoicePrinter:
    def format(self, invoice: Invoice) -> str:
        return f"invoice total: {invoice.total():.2f}"


# Open/closed: new discounts are added without touching checkout


class Discount(ABC):
    @abstractmethod
    def apply(self, amount: float) -> float: ...


class NoDiscount(Discount):
    def apply(self, amount: float) -> float:
        return amount


class PercentOff(Discount):
    def __init__(self, percent: float) -> None:
        self.percent = percent

    def apply(self, amount: float) -> float:
        return amount * (1 - self.percent / 100)


def checkout(amount: float, discount: Discount) -> float:
    return discount.apply(amount)


# Liskov substitution: any Shape works where a Shape is expected


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Rectangle(Shape):
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Square(Shape):
    def __init__(self, side: float) -> None:
        self.side = side

    def area(self) -> float:
        return self.side * self.side


# Interface segregation: small protocols instead of one fat interface


class Printer(Protocol):
    def print_document(self, doc: str) -> str: ...


class Scanner(Protocol):
    def scan(self) -> str: ...


class SimplePrinter:
    def print_document(self, doc: str) -> str:
        return f"printed {doc}"


class OfficeMachine:
    def print_document(self, doc: str) -> str:
        return f"printed {doc}"

    def scan(self) -> str:
        return "scanned page"


# Dependency inversion: the service depends on an abstraction


class Storage(ABC):
    @abstractmethod
    def save(self, key: str, value: str) -> str: ...


class MemoryStorage(Storage):
    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def save(self, key: str, value: str) -> str:
        self.data[key] = value
        return f"memory[{key}] = {value}"


class UserService:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def register(self, name: str) -> str:
        return self.storage.save("user", name)


def solid_demo(sink: OutputSink) -> None:
    invoice = Invoice({"book": 12.5, "pen": 2.5})
    sink.write_line(f"S: {InvoicePrinter().format(invoice)}")

    for discount in (NoDiscount(), PercentOff(10)):
        price = checkout(100.0, discount)
        sink.write_line(f"O: {type(discount).__name__} -> {price:.2f}")

    shapes: list[Shape] = [Rectangle(2, 3), Square(3)]
    sink.write_line(f"L: total area {sum(s.area() for s in shapes):g}")

    printers: list[Printer] = [SimplePrinter(), OfficeMachine()]
    scanner: Scanner = OfficeMachine()
    for printer in printers:
        sink.write_line(f"I: {type(printer).__name__} {printer.print_document('report')}")
    sink.write_line(f"I: OfficeMachine {scanner.scan()}")

    service = UserService(MemoryStorage())
    sink.write_line(f"D: {service.register('ada')}")


def register(catalog: PatternCatalog) -> None:
    """Register the SOLID walkthrough."""
    catalog.register(
        "solid",
        solid_demo,
        description="The five SOLID principles in small examples",
        category=Category.PRINCIPLES,
    )

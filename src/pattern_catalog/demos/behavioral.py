"""
Behavioral pattern demonstrations.

Mediator, Chain of Responsibility, State, Memento, Strategy, Observer and
Command. Each demonstration builds its own objects and writes what happens
to the sink, so repeated runs produce identical output.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.types import Category, OutputSink


# Mediator


class ChatRoom:
    """Mediator: participants talk through the room, never to each other."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink
        self._members: dict[str, "Participant"] = {}

    def join(self, member: "Participant") -> None:
        self._members[member.name] = member
        member.room = self

    def send(self, sender: str, to: str, message: str) -> None:
        recipient = self._members.get(to)
        if recipient is None:
            self._sink.write_line(f"room: no member named {to}")
            return
        recipient.receive(sender, message)


class Participant:
    def __init__(self, name: str, sink: OutputSink) -> None:
        self.name = name
        self.room: ChatRoom | None = None
        self._sink = sink

    def send(self, to: str, message: str) -> None:
        if self.room is not None:
            self.room.send(self.name, to, message)

    def receive(self, sender: str, message: str) -> None:
        self._sink.write_line(f"{sender} -> {self.name}: {message}")


def mediator_demo(sink: OutputSink) -> None:
    room = ChatRoom(sink)
    alice = Participant("alice", sink)
    bob = Participant("bob", sink)
    room.join(alice)
    room.join(bob)

    alice.send("bob", "hi bob")
    bob.send("alice", "hello alice")
    bob.send("carol", "are you there?")


# Chain of Responsibility


class Handler(ABC):
    def __init__(self, successor: "Handler | None" = None) -> None:
        self._successor = successor

    def handle(self, amount: int, sink: OutputSink) -> None:
        if self.can_approve(amount):
            sink.write_line(f"{type(self).__name__} approves {amount}")
        elif self._successor is not None:
            self._successor.handle(amount, sink)
        else:
            sink.write_line(f"nobody can approve {amount}")

    @abstractmethod
    def can_approve(self, amount: int) -> bool: ...


class Clerk(Handler):
    def can_approve(self, amount: int) -> bool:
        return amount <= 100


class Manager(Handler):
    def can_approve(self, amount: int) -> bool:
        return amount <= 1000


class Director(Handler):
    def can_approve(self, amount: int) -> bool:
        return amount <= 10000


def chain_of_responsibility_demo(sink: OutputSink) -> None:
    chain = Clerk(Manager(Director()))
    for amount in (50, 500, 5000, 50000):
        chain.handle(amount, sink)


# State


class DoorState(ABC):
    name = ""

    @abstractmethod
    def push(self, door: "Door") -> None: ...


class Closed(DoorState):
    name = "closed"

    def push(self, door: "Door") -> None:
        door.state = Opened()


class Opened(DoorState):
    name = "opened"

    def push(self, door: "Door") -> None:
        door.state = Closed()


class Locked(DoorState):
    name = "locked"

    def push(self, door: "Door") -> None:
        pass


class Door:
    """Context whose behaviour depends on its current state object."""

    def __init__(self) -> None:
        self.state: DoorState = Closed()

    def push(self, sink: OutputSink) -> None:
        before = self.state.name
        self.state.push(self)
        sink.write_line(f"push: {before} -> {self.state.name}")


def state_demo(sink: OutputSink) -> None:
    door = Door()
    door.push(sink)
    door.push(sink)
    door.state = Locked()
    door.push(sink)


# Memento


@dataclass(frozen=True)
class EditorMemento:
    content: str


class Editor:
    def __init__(self) -> None:
        self.content = ""

    def type(self, text: str) -> None:
        self.content += text

    def save(self) -> EditorMemento:
        return EditorMemento(self.content)

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content


def memento_demo(sink: OutputSink) -> None:
    editor = Editor()
    history: list[EditorMemento] = []

    for word in ("Design", " patterns", " are", " fun"):
        history.append(editor.save())
        editor.type(word)
        sink.write_line(f"typed: {editor.content!r}")

    while history:
        editor.restore(history.pop())
        sink.write_line(f"undo:  {editor.content!r}")


# Strategy


def _trial_division(limit: int) -> list[int]:
    return [n for n in range(2, limit) if all(n % d for d in range(2, n))]


def _sieve(limit: int) -> list[int]:
    flags = [True] * limit
    primes = []
    for n in range(2, limit):
        if flags[n]:
            primes.append(n)
            for multiple in range(n * n, limit, n):
                flags[multiple] = False
    return primes


class PrimeFinder:
    """Context that delegates the algorithm to a swappable strategy."""

    def __init__(self, algorithm: Callable[[int], list[int]]) -> None:
        self.algorithm = algorithm

    def find(self, limit: int) -> list[int]:
        return self.algorithm(limit)


def strategy_demo(sink: OutputSink) -> None:
    finder = PrimeFinder(_trial_division)
    for algorithm in (_trial_division, _sieve):
        finder.algorithm = algorithm
        primes = finder.find(30)
        sink.write_line(f"{algorithm.__name__.lstrip('_')}: {primes}")


# Observer


@dataclass
class WeatherStation:
    observers: list[Callable[[float], None]] = field(default_factory=list)
    temperature: float = 0.0

    def subscribe(self, observer: Callable[[float], None]) -> None:
        self.observers.append(observer)

    def unsubscribe(self, observer: Callable[[float], None]) -> None:
        self.observers.remove(observer)

    def set_temperature(self, value: float) -> None:
        self.temperature = value
        for observer in self.observers:
            observer(value)


def observer_demo(sink: OutputSink) -> None:
    station = WeatherStation()

    def display(value: float) -> None:
        sink.write_line(f"display: {value:.1f}C")

    def alarm(value: float) -> None:
        if value > 30:
            sink.write_line(f"alarm: too hot ({value:.1f}C)")

    station.subscribe(display)
    station.subscribe(alarm)
    station.set_temperature(21.5)
    station.set_temperature(33.0)

    station.unsubscribe(alarm)
    station.set_temperature(35.0)


# Command


class Light:
    def __init__(self) -> None:
        self.on = False


class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...


class SwitchOn(Command):
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> None:
        self.light.on = True

    def undo(self) -> None:
        self.light.on = False


class SwitchOff(Command):
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> None:
        self.light.on = False

    def undo(self) -> None:
        self.light.on = True


class RemoteControl:
    """Invoker: runs commands and keeps them for undo."""

    def __init__(self) -> None:
        self.history: list[Command] = []

    def press(self, command: Command) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> None:
        if self.history:
            self.history.pop().undo()


def command_demo(sink: OutputSink) -> None:
    light = Light()
    remote = RemoteControl()

    def report(action: str) -> None:
        sink.write_line(f"{action}: light is {'on' if light.on else 'off'}")

    remote.press(SwitchOn(light))
    report("on")
    remote.press(SwitchOff(light))
    report("off")
    remote.undo()
    report("undo")
    remote.undo()
    report("undo")


def register(catalog: PatternCatalog) -> None:
    """Register every behavioral demonstration."""
    demos = [
        ("mediator", mediator_demo, "Objects communicate through a central mediator"),
        (
            "chain-of-responsibility",
            chain_of_responsibility_demo,
            "A request travels along a chain until a handler accepts it",
        ),
        ("state", state_demo, "Behaviour changes with the object's internal state"),
        ("memento", memento_demo, "Capture and restore state for undo"),
        ("strategy", strategy_demo, "Swap algorithms behind a common interface"),
        ("observer", observer_demo, "Subscribers are notified of state changes"),
        ("command", command_demo, "Requests as objects with execute and undo"),
    ]
    for name, fn, description in demos:
        catalog.register(
            name, fn, description=description, category=Category.BEHAVIORAL
        )

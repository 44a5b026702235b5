"""Scoped files, polymorphic shapes, diamond inheritance and weak observers."""

from __future__ import annotations

import abc
import argparse
import itertools
import os
import tempfile
import weakref
from functools import reduce
from operator import add
from typing import TextIO


def _num(value: float) -> str:
    """Shortest round-trip text for a number, without a trailing ``.0``."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class FileGuard:
    """A file opened for writing that is always closed when the guard ends."""

    def __init__(self, path: str, stream: TextIO) -> None:
        self._path = path
        self._stream = stream

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> FileGuard:
        """Open ``path`` for writing, truncating it; raise ``OSError`` on failure."""
        path = os.fspath(path)
        try:
            stream = open(path, "w", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Cannot open '{path}'") from exc
        print(f"[RAII] FileGuard acquired: {path}")
        return cls(path, stream)

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def write(self, text: str) -> int:
        """Write ``text``; raise ``ValueError`` once the guard is closed."""
        if self._stream.closed:
            raise ValueError("write to a closed FileGuard")
        return self._stream.write(text)

    def close(self) -> None:
        """Close the file; later calls do nothing."""
        if not self._stream.closed:
            self._stream.close()
            print(f"[RAII] FileGuard released: {self._path}")

    def __enter__(self) -> FileGuard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Shape(abc.ABC):
    """A named plane figure with an area."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abc.abstractmethod
    def area(self) -> float:
        """Return the figure's area."""

    @abc.abstractmethod
    def kind(self) -> str:
        """Return a short description including the dimensions."""

    def describe(self) -> str:
        """Return a one-line summary of kind and area."""
        return f"[vtable] {self.kind():>12}  area = {self.area():8.3f}"


class Circle(Shape):
    def __init__(self, r: float) -> None:
        super().__init__("Circle")
        self.r = r

    def area(self) -> float:
        return 3.14159265358979 * self.r * self.r

    def kind(self) -> str:
        return f"Circle(r={self.r:.1f})"


class Rectangle(Shape):
    def __init__(self, w: float, h: float) -> None:
        super().__init__("Rectangle")
        self.w = w
        self.h = h

    def area(self) -> float:
        return self.w * self.h

    def kind(self) -> str:
        return f"Rect({_num(self.w)}×{_num(self.h)})"


class Triangle(Shape):
    def __init__(self, b: float, h: float) -> None:
        super().__init__("Triangle")
        self.b = b
        self.h = h

    def area(self) -> float:
        return 0.5 * self.b * self.h

    def kind(self) -> str:
        return f"Tri(b={_num(self.b)},h={_num(self.h)})"


class Device:
    """Base of the device hierarchy; constructed once per object.

    ``trace`` records the order in which the initialisers ran.
    """

    def __init__(self, device_id: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.device_id = device_id
        self.trace = [f"Device ctor  id={device_id}"]

    def status(self) -> str:
        return f"  Device id={self.device_id}"


class Wireless(Device):
    def __init__(self, device_id: str, freq: int, **kwargs) -> None:
        super().__init__(device_id=device_id, **kwargs)
        self.freq = freq
        self.trace.append(f"Wireless ctor  freq={freq} MHz")

    def status(self) -> str:
        return f"{Device.status(self)}\n  Wireless freq={self.freq} MHz"


class Sensor(Device):
    def __init__(self, device_id: str, sensor_type: str, **kwargs) -> None:
        super().__init__(device_id=device_id, **kwargs)
        self.sensor_type = sensor_type
        self.trace.append(f"Sensor ctor  type={sensor_type}")

    def status(self) -> str:
        return f"{Device.status(self)}\n  Sensor type={self.sensor_type}"


class SmartSensor(Wireless, Sensor):
    """A wireless sensor sharing a single :class:`Device` base."""

    def __init__(self, device_id: str, freq: int, sensor_type: str) -> None:
        super().__init__(device_id=device_id, freq=freq, sensor_type=sensor_type)
        self.trace.append("SmartSensor ctor")

    def status(self) -> str:
        return (
            f"[SmartSensor] id={self.device_id}  freq={self.freq} MHz  "
            f"type={self.sensor_type}"
        )


def parse_int(s: str) -> int:
    """Parse a string of ASCII digits; raise ``ValueError`` on any other character."""
    result = 0
    for ch in s:
        if not "0" <= ch <= "9":
            raise ValueError(f"'{ch}' is not a digit in '{s}'")
        result = result * 10 + (ord(ch) - ord("0"))
    return result


class EventBus:
    """Collects posted messages in order."""

    def __init__(self) -> None:
        self.log: list[str] = []

    def post(self, msg: str) -> None:
        self.log.append(msg)
        print(f"[EventBus] {msg}")


class Subscriber:
    """Posts to a bus it refers to weakly, so it never keeps the bus alive."""

    def __init__(self, name: str, bus: EventBus | None = None) -> None:
        self.name = name
        self.bus = bus

    @property
    def bus(self) -> EventBus | None:
        return self._bus_ref() if self._bus_ref is not None else None

    @bus.setter
    def bus(self, bus: EventBus | None) -> None:
        self._bus_ref = weakref.ref(bus) if bus is not None else None

    def try_post(self, msg: str) -> bool:
        """Post ``msg`` prefixed with the name; return ``False`` if the bus is gone."""
        bus = self.bus
        if bus is None:
            print(f"[Subscriber] {self.name} — bus is gone, dropping '{msg}'")
            return False
        bus.post(f"{self.name}: {msg}")
        return True


def header(title: str) -> str:
    """Return a three-line box around ``title``."""
    bar = "═" * 47
    return "\n".join((f"╔{bar}╗", f"║  {title:44} ║", f"╚{bar}╝"))


def _section(title: str) -> None:
    print()
    print(header(title))


def main(argv: list[str] | None = None) -> int:
    """Walk through each feature in turn, printing what happens."""
    parser = argparse.ArgumentParser(description="Language feature showcase.")
    parser.add_argument(
        "--output",
        default=os.path.join(tempfile.gettempdir(), "raii_demo.txt"),
        help="file written by the scoped-file section",
    )
    args = parser.parse_args(argv)

    _section("Scoped files + error results")
    try:
        with FileGuard.open(args.output) as guard:
            guard.write("Written safely via RAII\n")
    except OSError as exc:
        print(f"[RAII] error: {exc}")
    try:
        with FileGuard.open("/no/such/path/file.txt"):
            msg = "opened!"
    except OSError as exc:
        msg = f"{exc} [handled]"
    print(f"[expected] result: {msg}")

    _section("Error propagation while parsing")
    for text in ("42", "3x7", "100"):
        try:
            squared = parse_int(text) ** 2
        except ValueError as exc:
            print(f"  parse_int({text:>5}) → ✗ {exc}")
        else:
            print(f"  parse_int({text:>5}) → {text}² = {squared}")

    _section("Optional lookups")
    names = {1: "Alice", 2: "Bob"}
    for key in (1, 2, 3):
        name = names.get(key)
        greeting = f"Hello, {name}!" if name is not None else "Hello, stranger!"
        print(f"  key={key} → {greeting}")

    _section("Lazy pipelines")
    pipeline = itertools.islice((n * n for n in range(1, 20) if n % 3 == 0), 5)
    print(f"  first 5 squares of multiples of 3: {list(pipeline)}")
    print(f"  fold_left sum of 1..5 = {reduce(add, [1, 2, 3, 4, 5], 0)}")
    print(f"  squares 1..5 collected: {[n * n for n in range(1, 6)]}")

    _section("Views over sequences")
    raw = [1.1, 2.2, 3.3, 4.4, 5.5]
    vec = [9.9, 8.8, 7.7]
    for label, view in (("C-array", raw), ("vector ", vec), ("subspan", raw[1:4])):
        print(f"  {label} [{len(view)}]: {view}")

    _section("Virtual dispatch")
    shapes: list[Shape] = [Circle(5.0), Rectangle(4.0, 6.0), Triangle(3.0, 8.0)]
    for shape in shapes:
        print(shape.describe())
    print(f"  total area = {sum(s.area() for s in shapes):.3f}")

    _section("Diamond inheritance (one Device)")
    sensor = SmartSensor("dev-42", 2400, "temperature")
    for line in sensor.trace:
        print(f"[Diamond] {line}")
    print("\n-- polymorphic call via Device --")
    device: Device = sensor
    print(device.status())

    _section("Owned, shared and weak references")
    circle = Circle(3.0)
    print(f"[owned] area = {circle.area():.3f}")
    bus = EventBus()
    alice = Subscriber("Alice", bus)
    bob = Subscriber("Bob", bus)
    alice.try_post("Hello from Alice")
    bob.try_post("Hello from Bob")
    print(f"[shared] dropping the last strong owner ({len(bus.log)} events logged)")
    del bus
    alice.try_post("Is anyone still there?")

    print("\n✓ All done.\n")
    return 0
"""Narrowing: isinstance, hasattr, None checks, TypeGuard and match statements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, TypeGuard, Union


def process_value(value: Union[str, float]) -> str:
    if isinstance(value, str):
        return value.upper()
    return f"{value:.2f}"


class Dog:
    def bark(self) -> str:
        return "Woof!"


class Cat:
    def meow(self) -> str:
        return "Meow!"


def make_sound(animal: Union[Dog, Cat]) -> str:
    if isinstance(animal, Dog):
        return animal.bark()
    return animal.meow()


@dataclass
class Car:
    wheels: int

    def drive(self) -> str:
        return "vroom"


@dataclass
class Boat:
    anchors: int

    def sail(self) -> str:
        return "whoosh"


def operate_vehicle(vehicle: Union[Car, Boat]) -> str:
    if hasattr(vehicle, "drive"):
        return f"Driving with {vehicle.wheels} wheels"  # type: ignore[union-attr]
    return f"Sailing with {vehicle.anchors} anchors"  # type: ignore[union-attr]


def is_str_list(values: list[Any]) -> TypeGuard[list[str]]:
    return all(isinstance(v, str) for v in values)


def describe_length(name: Optional[str]) -> str:
    if name is None:
        return "No name given"
    return f"{name} has {len(name)} characters"


@dataclass
class Circle:
    kind: Literal["circle"]
    radius: float


@dataclass
class Square:
    kind: Literal["square"]
    side: float


Shape = Union[Circle, Square]


def area(shape: Shape) -> float:
    match shape:
        case Circle(radius=r):
            return 3.14159 * r * r
        case Square(side=s):
            return s * s
    raise TypeError(f"unknown shape {shape!r}")


def parse(raw: object) -> str:
    match raw:
        case int() | float():
            return f"number {raw}"
        case str() if raw.isdigit():
            return f"numeric string {raw!r}"
        case str():
            return f"string {raw!r}"
        case [first, *_]:
            return f"sequence starting with {first!r}"
        case {"type": kind}:
            return f"mapping of type {kind!r}"
        case _:
            return "unknown"


def main() -> None:
    print("=== isinstance guards ===")
    print(process_value("hello"))
    print(process_value(3.14159))
    print(make_sound(Dog()))
    print(make_sound(Cat()))

    print("\n=== hasattr guards ===")
    print(operate_vehicle(Car(4)))
    print(operate_vehicle(Boat(2)))

    print("\n=== TypeGuard ===")
    for values in (["a", "b"], ["a", 1]):
        if is_str_list(values):
            print(f"{values} -> joined: {', '.join(values)}")
        else:
            print(f"{values} -> not all strings")

    print("\n=== None checks ===")
    print(describe_length("Alice"))
    print(describe_length(None))

    print("\n=== Discriminated unions with match ===")
    for shape in (Circle("circle", 2), Square("square", 3)):
        print(f"{shape.kind}: area={area(shape):.2f}")

    print("\n=== Structural pattern matching ===")
    for raw in (42, "123", "abc", [9, 8], {"type": "event"}, None):
        print(f"{raw!r:>18} -> {parse(raw)}")


if __name__ == "__main__":
    main()

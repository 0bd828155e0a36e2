"""Generics: TypeVar, bounded and constrained type variables, generic classes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
Num = TypeVar("Num", int, float)


def identity(arg: T) -> T:
    return arg


def first_element(items: Sequence[T]) -> Optional[T]:
    return items[0] if items else None


def reverse_list(items: list[T]) -> list[T]:
    return items[::-1]


@dataclass
class Box(Generic[T]):
    value: T

    def get_value(self) -> T:
        return self.value


@dataclass
class Pair(Generic[K, V]):
    key: K
    value: V


class DataStore(Generic[T]):
    def __init__(self) -> None:
        self._data: list[T] = []

    def add_item(self, item: T) -> None:
        self._data.append(item)

    def remove_item(self, item: T) -> None:
        if item in self._data:
            self._data.remove(item)

    def items(self) -> list[T]:
        return list(self._data)


class HasLength(Protocol):
    def __len__(self) -> int: ...


L = TypeVar("L", bound=HasLength)


def longest(a: L, b: L) -> L:
    return a if len(a) >= len(b) else b


def total(values: Iterable[Num]) -> Num:
    result = 0
    for v in values:
        result += v
    return result  # type: ignore[return-value]


def group_by(items: Iterable[V], key_fn) -> dict:
    groups: dict = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def main() -> None:
    print("=== Generic functions ===")
    print(f"identity(42) = {identity(42)}")
    print(f"identity('hi') = {identity('hi')}")
    print(f"first_element([10, 20]) = {first_element([10, 20])}")
    print(f"first_element([]) = {first_element([])}")
    print(f"reverse_list(['a', 'b', 'c']) = {reverse_list(['a', 'b', 'c'])}")

    print("\n=== Generic classes ===")
    box = Box(3.5)
    print(f"Box value: {box.get_value()}")
    pair = Pair("answer", 42)
    print(f"Pair: {pair.key} -> {pair.value}")

    store: DataStore[str] = DataStore()
    for fruit in ("apple", "banana", "cherry"):
        store.add_item(fruit)
    store.remove_item("banana")
    print(f"DataStore items: {store.items()}")

    print("\n=== Bounded type variables ===")
    print(f"longest('abc', 'de') = {longest('abc', 'de')}")
    print(f"longest([1], [1, 2, 3]) = {longest([1], [1, 2, 3])}")

    print("\n=== Constrained type variables ===")
    print(f"total([1, 2, 3]) = {total([1, 2, 3])}")
    print(f"total([1.5, 2.5]) = {total([1.5, 2.5])}")

    print("\n=== Generic helpers ===")
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    print(f"group_by first letter: {group_by(words, lambda w: w[0])}")


if __name__ == "__main__":
    main()

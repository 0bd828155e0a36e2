"""Interfaces: Protocols for structural typing, ABCs for nominal contracts."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Protocol, TypedDict, runtime_checkable


class User(TypedDict):
    id: int
    name: str
    email: str
    is_active: bool


class Movie(TypedDict, total=False):
    title: str
    director: str
    length: int
    rating: float


@dataclass(frozen=True)
class Config:
    api_key: str
    environment: str
    timeout: int = 30


@runtime_checkable
class Greeter(Protocol):
    def greet(self, name: str) -> str: ...


class EnglishGreeter:
    def greet(self, name: str) -> str:
        return f"Hello, {name}"


class FrenchGreeter:
    def greet(self, name: str) -> str:
        return f"Bonjour, {name}"


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...

    def describe(self) -> str:
        return f"{type(self).__name__} with area {self.area():.2f}"


@dataclass
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return 3.14159 * self.radius ** 2


@dataclass
class Book:
    title: str
    author: str
    pages: int
    isbn: Optional[str] = None
    tags: list[str] = field(default_factory=list)


def welcome(greeter: Greeter, name: str) -> None:
    print(greeter.greet(name))


def main() -> None:
    print("=== TypedDict ===")
    user: User = {"id": 1, "name": "Alice", "email": "alice@example.com", "is_active": True}
    print(f"User: {user['name']} <{user['email']}> active={user['is_active']}")

    movie: Movie = {"title": "Inception", "director": "Nolan"}
    print(f"Movie: {movie['title']} rating={movie.get('rating', 'n/a')}")

    print("\n=== Frozen dataclass (readonly fields) ===")
    cfg = Config(api_key="secret", environment="dev")
    print(cfg)
    try:
        cfg.api_key = "changed"  # type: ignore[misc]
    except AttributeError as e:
        print(f"Cannot modify: {type(e).__name__}")

    print("\n=== Protocols ===")
    for g in (EnglishGreeter(), FrenchGreeter()):
        welcome(g, "Bob")
    print(f"EnglishGreeter is a Greeter: {isinstance(EnglishGreeter(), Greeter)}")
    print(f"str is a Greeter: {isinstance('text', Greeter)}")

    print("\n=== Abstract base classes ===")
    shapes: list[Shape] = [Rectangle(3, 4), Circle(2)]
    for s in shapes:
        print(s.describe())
    try:
        Shape()  # type: ignore[abstract]
    except TypeError as e:
        print(f"Cannot instantiate Shape: {e}")

    print("\n=== Optional fields ===")
    book = Book("Dune", "Herbert", 412)
    print(book)
    book.tags.append("sci-fi")
    print(f"isbn={book.isbn}, tags={book.tags}")


if __name__ == "__main__":
    main()

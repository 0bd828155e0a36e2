"""Functions: defaults, keyword-only args, *args/**kwargs, closures, decorators."""
from __future__ import annotations

import functools
from datetime import datetime
from typing import Callable, Optional


def add(a: int, b: int) -> int:
    return a + b


def greet_user(name: str) -> None:
    print(f"Hello, {name}!")


multiply: Callable[[float, float], float] = lambda a, b: a * b
square = lambda n: n * n


def create_greeting(name: str, greeting: str = "Hello") -> str:
    return f"{greeting}, {name}!"


def calculate_price(price: float, tax: float = 0.2, discount: float = 0) -> float:
    return price * (1 + tax) * (1 - discount)


def build_name(first_name: str, last_name: Optional[str] = None) -> str:
    return f"{first_name} {last_name}" if last_name else first_name


def log_message(message: str, *, timestamp: Optional[datetime] = None) -> None:
    when = timestamp.isoformat() if timestamp else "No timestamp"
    print(f"[{when}] {message}")


def total(*numbers: float) -> float:
    return sum(numbers)


def describe(**fields: object) -> str:
    return ", ".join(f"{k}={v!r}" for k, v in fields.items())


def make_counter() -> Callable[[], int]:
    count = 0

    def increment() -> int:
        nonlocal count
        count += 1
        return count

    return increment


def shout(func: Callable[..., str]) -> Callable[..., str]:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> str:
        return func(*args, **kwargs).upper() + "!"

    return wrapper


@shout
def whisper(text: str) -> str:
    """Returns the text unchanged."""
    return text


def apply_twice(f: Callable[[int], int], x: int) -> int:
    return f(f(x))


def main() -> None:
    print("=== Basic Functions ===")
    print(f"add(5, 3) = {add(5, 3)}")
    greet_user("Alice")

    print("\n=== Lambdas ===")
    print(f"multiply(4, 5) = {multiply(4, 5)}")
    print(f"square(7) = {square(7)}")

    print("\n=== Default & Optional Parameters ===")
    print(create_greeting("Bob"))
    print(create_greeting("Bob", "Good morning"))
    print(f"Price with defaults: {calculate_price(100):.2f}")
    print(f"Price with discount: {calculate_price(100, discount=0.1):.2f}")
    print(build_name("Ada"))
    print(build_name("Ada", "Lovelace"))

    print("\n=== Keyword-only ===")
    log_message("No time given")
    log_message("Fixed time", timestamp=datetime(2024, 1, 1, 12, 0))

    print("\n=== *args and **kwargs ===")
    print(f"total(1, 2, 3, 4) = {total(1, 2, 3, 4)}")
    print(f"describe(...) -> {describe(name='Widget', price=9.99)}")

    print("\n=== Closures ===")
    counter = make_counter()
    print(f"counter() -> {counter()}, {counter()}, {counter()}")

    print("\n=== Decorators ===")
    print(whisper("quiet please"))
    print(f"wrapped name: {whisper.__name__}, doc: {whisper.__doc__}")

    print("\n=== Higher-order ===")
    print(f"apply_twice(square, 3) = {apply_twice(square, 3)}")
    print(f"map: {list(map(square, [1, 2, 3]))}")
    print(f"sorted by length: {sorted(['ccc', 'a', 'bb'], key=len)}")
    print(f"reduce: {functools.reduce(add, [1, 2, 3, 4])}")


if __name__ == "__main__":
    main()

"""Basic syntax: literals, collections, unpacking, annotations, control flow."""
from __future__ import annotations

from typing import Literal, Union

# Basic types
is_done: bool = True
decimal: int = 42
hexadecimal: int = 0xF00D
binary: int = 0b1010
octal: int = 0o744
big: int = 1_000_000
ratio: float = 3.14
user_name: str = "Alice"
not_present: None = None

# Collections
numbers: list[int] = [1, 2, 3, 4, 5]
names: list[str] = ["Alice", "Bob", "Charlie"]
mixed: list[Union[str, int]] = ["one", 2, "three", 4]
unique: set[str] = {"a", "b", "a"}
ages: dict[str, int] = {"Alice": 30, "Bob": 25}

# Tuples
record: tuple[str, int, bool] = ("Python", 2024, True)
coordinates: tuple[float, float] = (51.5074, -0.1278)

# Literal and union aliases
Status = Literal["active", "inactive", "pending"]
ID = Union[str, int]


def print_status(status: Status) -> None:
    print(f"Status: {status}")


def print_id(value: ID) -> None:
    if isinstance(value, str):
        print(f"String ID: {value.upper()}")
    else:
        print(f"Numeric ID: {value}")


def main() -> None:
    print("=== Basic Types ===")
    print(f"Boolean: {is_done}")
    print(f"Decimal: {decimal}, Hex: {hexadecimal}, Binary: {binary}, Octal: {octal}")
    print(f"Underscored literal: {big}")
    print(f"Float: {ratio}")
    print(f"String: {user_name}")
    print(f"None: {not_present}")

    print("\n=== Collections ===")
    print(f"Numbers: {numbers}")
    print(f"Names: {names}")
    print(f"Mixed: {mixed}")
    print(f"Set (duplicates removed): {sorted(unique)}")
    print(f"Dict: {ages}")

    print("\n=== Tuples & Unpacking ===")
    language, year, active = record
    print(f"Tuple: {record} -> language={language}, year={year}, active={active}")
    lat, lon = coordinates
    print(f"Coordinates: lat={lat}, lon={lon}")
    first, *rest = numbers
    print(f"first={first}, rest={rest}")

    print("\n=== Literal & Union ===")
    print_status("active")
    print_id("abc-123")
    print_id(42)

    print("\n=== Strings ===")
    template = f"{user_name} is {ages[user_name]} years old"
    print(template)
    print(f"Debug format: {decimal=}")
    print(f"Slicing: {user_name[:3]!r}, reversed: {user_name[::-1]!r}")

    print("\n=== Control Flow ===")
    for n in numbers:
        kind = "even" if n % 2 == 0 else "odd"
        print(f"{n} is {kind}")

    if (count := len(names)) > 2:
        print(f"Walrus: {count} names")

    match record:
        case (str(lang), int(yr), True):
            print(f"match: active language {lang} from {yr}")
        case _:
            print("match: something else")

    squares = [n * n for n in numbers if n % 2]
    print(f"Comprehension (odd squares): {squares}")


if __name__ == "__main__":
    main()

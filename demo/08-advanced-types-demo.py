"""Advanced typing: unions, Literal, TypedDict results, NewType, Callable, overloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Literal, NewType, Protocol, TypedDict, Union, overload

UserId = NewType("UserId", int)
MAX_RETRIES: Final = 3


class Printable(Protocol):
    def print_it(self) -> None: ...


class Loggable(Protocol):
    def log(self) -> None: ...


class DocumentHandler:
    """Satisfies both Printable and Loggable."""

    def print_it(self) -> None:
        print("Printing document...")

    def log(self) -> None:
        print("Logging document...")


def handle(doc: DocumentHandler) -> None:
    printable: Printable = doc
    loggable: Loggable = doc
    printable.print_it()
    loggable.log()


class Success(TypedDict):
    success: Literal[True]
    data: str


class Failure(TypedDict):
    success: Literal[False]
    error: str


Result = Union[Success, Failure]


def handle_result(result: Result) -> str:
    if result["success"]:
        return f"Success: {result['data']}"  # type: ignore[typeddict-item]
    return f"Error: {result['error']}"  # type: ignore[typeddict-item]


StringOrNumber = Union[str, int, float]
Transform = Callable[[str], str]


def process_input(value: StringOrNumber) -> str:
    return value.upper() if isinstance(value, str) else str(value)


@overload
def double(x: int) -> int: ...
@overload
def double(x: str) -> str: ...
def double(x):
    return x * 2


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def pipeline(*steps: Transform) -> Transform:
    def run(text: str) -> str:
        for step in steps:
            text = step(text)
        return text

    return run


def lookup(user_id: UserId) -> str:
    return f"user#{user_id}"


def main() -> None:
    print("=== Intersection-like protocols ===")
    handle(DocumentHandler())

    print("\n=== Tagged unions ===")
    print(handle_result({"success": True, "data": "42 rows"}))
    print(handle_result({"success": False, "error": "timeout"}))

    print("\n=== Union aliases ===")
    for v in ("hello", 7, 2.5):
        print(f"process_input({v!r}) = {process_input(v)!r}")

    print("\n=== Overloads ===")
    print(f"double(21) = {double(21)}")
    print(f"double('ab') = {double('ab')!r}")

    print("\n=== Callable aliases ===")
    shout = pipeline(str.strip, str.upper, lambda s: s + "!")
    print(shout("  hello there  "))

    print("\n=== NewType & Final ===")
    uid = UserId(7)
    print(f"{lookup(uid)} (runtime type: {type(uid).__name__})")
    print(f"MAX_RETRIES = {MAX_RETRIES}")

    print("\n=== Frozen value types ===")
    p = Point(1, 2)
    print(f"{p}, hashable: {hash(p) == hash(Point(1, 2))}")


if __name__ == "__main__":
    main()

"""Enums: Enum, IntEnum, StrEnum-style members, Flag and auto()."""
from __future__ import annotations

from enum import Enum, Flag, IntEnum, auto, unique


class Direction(IntEnum):
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class Status(Enum):
    PENDING = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()
    CANCELLED = auto()


@unique
class LogLevel(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Permission(Flag):
    READ = auto()
    WRITE = auto()
    EXECUTE = auto()
    ALL = READ | WRITE | EXECUTE


class Planet(Enum):
    MERCURY = (3.303e23, 2.4397e6)
    EARTH = (5.976e24, 6.37814e6)

    def __init__(self, mass: float, radius: float):
        self.mass = mass
        self.radius = radius

    @property
    def surface_gravity(self) -> float:
        g = 6.673e-11
        return g * self.mass / (self.radius * self.radius)


# Debug labels kept in an explicit table instead of reflecting over the enum
STATUS_LABELS: dict[Status, str] = {
    Status.PENDING: "Waiting to start",
    Status.IN_PROGRESS: "Being worked on",
    Status.COMPLETED: "Done",
    Status.CANCELLED: "Abandoned",
}


def move(direction: Direction) -> str:
    match direction:
        case Direction.UP:
            return "Moving up"
        case Direction.DOWN:
            return "Moving down"
        case Direction.LEFT:
            return "Moving left"
        case Direction.RIGHT:
            return "Moving right"


def log_message(level: LogLevel, message: str) -> str:
    return f"[{level.value}] {message}"


def main() -> None:
    print("=== IntEnum ===")
    for d in Direction:
        print(f"{d.name}={int(d)}: {move(d)}")
    print(f"Direction(3) -> {Direction(3).name}")
    print(f"Direction.UP < Direction.RIGHT: {Direction.UP < Direction.RIGHT}")

    print("\n=== auto() values ===")
    for s in Status:
        print(f"{s.name}: value={s.value}, label={STATUS_LABELS[s]!r}")

    print("\n=== String enums ===")
    print(log_message(LogLevel.ERROR, "Disk full"))
    print(log_message(LogLevel.INFO, "Started"))
    print(f"LogLevel('DEBUG') is LogLevel.DEBUG: {LogLevel('DEBUG') is LogLevel.DEBUG}")
    print(f"HttpMethod.GET == 'GET': {HttpMethod.GET == 'GET'}")
    print(f"Methods: {[m.value for m in HttpMethod]}")

    print("\n=== Flags ===")
    perms = Permission.READ | Permission.WRITE
    print(f"READ|WRITE has WRITE: {Permission.WRITE in perms}")
    print(f"READ|WRITE has EXECUTE: {Permission.EXECUTE in perms}")
    print(f"ALL includes READ|WRITE: {perms in Permission.ALL}")

    print("\n=== Enums with data ===")
    for p in Planet:
        print(f"{p.name.title()}: surface gravity {p.surface_gravity:.2f} m/s²")

    print("\n=== Lookup errors ===")
    try:
        Direction(9)
    except ValueError as e:
        print(f"ValueError: {e}")
    try:
        Status["UNKNOWN"]
    except KeyError as e:
        print(f"KeyError: {e}")


if __name__ == "__main__":
    main()

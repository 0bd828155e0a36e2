######## models.py
########

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DemoUnit:
    id: str                     # zero-padded numeric prefix, e.g. "01"
    name: str                   # "Syntax Demo"
    file: str                   # "01-syntax-demo.py"
    source_path: Path

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "file": self.file}


@dataclass(frozen=True)
class RunResult:
    succeeded: bool
    stdout: str
    stderr: Optional[str]       # None when the run was clean
    exit_code: Optional[int] = None
    timed_out: bool = False
    duration_ms: int = 0

    def to_dict(self) -> dict:
        return {
            "success": self.succeeded,
            "output": self.stdout,
            "error": self.stderr,
            "exit_code": self.exit_code,
            "timed_out": self.timed_out,
            "duration_ms": self.duration_ms,
        }


@dataclass(frozen=True)
class ChangeRecord:
    unit_id: str
    modified_at_millis: float

    def to_dict(self) -> dict:
        return {"id": self.unit_id, "mtime": self.modified_at_millis}

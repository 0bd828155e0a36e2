from __future__ import annotations

import subprocess
import sys
import time
from pathlib import Path
from typing import Optional

import pytest

from demo_viewer.domain.errors import DemoNotFoundError
from demo_viewer.domain.models import DemoUnit
from demo_viewer.repositories.demo_repository import DemoRepository
from demo_viewer.services.execution_service import ExecutionService


# -----------------------------
# Test doubles
# -----------------------------
class FakeDemoRepository:
    def __init__(self, unit: Optional[DemoUnit]):
        self._unit = unit

    def find_unit(self, demo_id: str) -> Optional[DemoUnit]:
        if self._unit is not None and self._unit.id == demo_id:
            return self._unit
        return None


# -----------------------------
# Helpers
# -----------------------------
def make_service(tmp_path: Path, scripts: dict[str, str], timeout: float = 10) -> ExecutionService:
    demo_dir = tmp_path / "demo"
    demo_dir.mkdir()
    for name, body in scripts.items():
        (demo_dir / name).write_text(body, encoding="utf-8")

    return ExecutionService(
        interpreter=sys.executable,
        root_dir=tmp_path,
        timeout_seconds=timeout,
        demo_repo=DemoRepository(demo_dir=demo_dir),
    )


# -----------------------------
# Tests
# -----------------------------
def test_run_success_captures_stdout_without_stderr(tmp_path: Path):
    svc = make_service(tmp_path, {"01-hello-demo.py": "print('hello')\n"})

    result = svc.run("01")

    assert result.succeeded is True
    assert "hello" in result.stdout
    assert result.stderr is None
    assert result.exit_code == 0
    assert result.timed_out is False


def test_run_success_with_stderr_reports_warnings(tmp_path: Path):
    body = "import sys\nprint('out')\nprint('careful', file=sys.stderr)\n"
    svc = make_service(tmp_path, {"01-warn-demo.py": body})

    result = svc.run("01")

    assert result.succeeded is True
    assert result.stdout.strip() == "out"
    assert "careful" in result.stderr


def test_run_nonzero_exit_is_failure_with_stderr(tmp_path: Path):
    body = "print('partial')\nraise SystemExit('boom')\n"
    svc = make_service(tmp_path, {"01-fail-demo.py": body})

    result = svc.run("01")

    assert result.succeeded is False
    assert "partial" in result.stdout
    assert "boom" in result.stderr
    assert result.exit_code == 1


def test_run_nonzero_exit_with_silent_stderr_still_explains(tmp_path: Path):
    svc = make_service(tmp_path, {"01-quiet-demo.py": "import sys\nsys.exit(3)\n"})

    result = svc.run("01")

    assert result.succeeded is False
    assert result.stderr == "Process exited with code 3"
    assert result.exit_code == 3


def test_run_uncaught_exception_includes_traceback(tmp_path: Path):
    svc = make_service(tmp_path, {"01-crash-demo.py": "raise ValueError('bad value')\n"})

    result = svc.run("01")

    assert result.succeeded is False
    assert "Traceback" in result.stderr
    assert "ValueError: bad value" in result.stderr


def test_run_times_out_and_keeps_partial_output(tmp_path: Path):
    body = "import time\nprint('started')\nwhile True:\n    time.sleep(0.1)\n"
    svc = make_service(tmp_path, {"01-hang-demo.py": body}, timeout=1)

    started = time.monotonic()
    result = svc.run("01")
    elapsed = time.monotonic() - started

    assert result.succeeded is False
    assert result.timed_out is True
    assert result.exit_code is None
    assert "timed out" in result.stderr
    assert "started" in result.stdout
    assert elapsed < 6


def test_run_does_not_truncate_output(tmp_path: Path):
    body = "for i in range(5000):\n    print(f'line {i}')\n"
    svc = make_service(tmp_path, {"01-long-demo.py": body})

    result = svc.run("01")

    lines = result.stdout.splitlines()
    assert len(lines) == 5000
    assert lines[0] == "line 0"
    assert lines[-1] == "line 4999"


def test_run_uses_root_dir_as_cwd_and_relative_path(tmp_path: Path):
    body = "import os, sys\nprint(os.getcwd())\nprint(sys.argv[0])\n"
    svc = make_service(tmp_path, {"01-where-demo.py": body})

    result = svc.run("01")

    cwd, argv0 = result.stdout.splitlines()
    assert Path(cwd).resolve() == tmp_path.resolve()
    assert Path(argv0) == Path("demo") / "01-where-demo.py"


def test_run_unknown_id_raises_not_found(tmp_path: Path):
    svc = make_service(tmp_path, {"01-hello-demo.py": "print('hello')\n"})

    with pytest.raises(DemoNotFoundError) as excinfo:
        svc.run("99")

    assert excinfo.value.demo_id == "99"


def test_run_spawn_error_becomes_failed_result(tmp_path: Path):
    script = tmp_path / "01-hello-demo.py"
    script.write_text("print('hello')\n", encoding="utf-8")
    unit = DemoUnit(id="01", name="Hello Demo", file=script.name, source_path=script)

    svc = ExecutionService(
        interpreter=str(tmp_path / "no-such-interpreter"),
        root_dir=tmp_path,
        timeout_seconds=5,
        demo_repo=FakeDemoRepository(unit),
    )

    result = svc.run("01")

    assert result.succeeded is False
    assert result.stdout == ""
    assert result.stderr.startswith("Failed to execute:")
    assert result.exit_code is None


def test_timeout_output_given_as_bytes_is_decoded(tmp_path: Path, monkeypatch):
    svc = make_service(tmp_path, {"01-hello-demo.py": "print('hello')\n"}, timeout=2)

    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"], output=b"half way\n", stderr=b"")

    monkeypatch.setattr(subprocess, "run", fake_run)

    result = svc.run("01")

    assert result.succeeded is False
    assert result.stdout == "half way\n"
    assert result.stderr == "Execution timed out after 2 seconds."


def test_each_run_is_independent(tmp_path: Path):
    body = "import random\nprint(random.random())\n"
    svc = make_service(tmp_path, {"01-rand-demo.py": body})

    a = svc.run("01")
    b = svc.run("01")

    assert a.succeeded and b.succeeded
    assert a.stdout != b.stdout


def test_run_replaces_undecodable_output_bytes(tmp_path: Path):
    body = "import sys\nsys.stdout.buffer.write(b'caf\\xe9\\n')\nsys.stderr.buffer.write(b'\\xff warn\\n')\n"
    svc = make_service(tmp_path, {"01-latin1-demo.py": body})

    result = svc.run("01")

    assert result.succeeded is True
    assert result.stdout == "caf�\n"
    assert "� warn" in result.stderr


def test_unexpected_error_from_subprocess_becomes_failed_result(tmp_path: Path, monkeypatch):
    svc = make_service(tmp_path, {"01-hello-demo.py": "print('hello')\n"})

    def fake_run(cmd, **kwargs):
        raise ValueError("invalid argument")

    monkeypatch.setattr(subprocess, "run", fake_run)

    result = svc.run("01")

    assert result.succeeded is False
    assert result.stderr == "Failed to execute: invalid argument"
    assert result.exit_code is None

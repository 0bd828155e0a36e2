from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from demo_viewer.domain.errors import DemoNotFoundError
from demo_viewer.domain.models import RunResult
from demo_viewer.repositories.demo_repository import DemoRepository

logger = logging.getLogger(__name__)


def _as_text(raw) -> str:
    # TimeoutExpired carries bytes even when the run was started in text mode
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


@dataclass
class ExecutionService:
    """
    Service layer: resolves a demo id and runs it in its own process.
    Every failure of the child process is folded into a RunResult.
    """
    interpreter: str
    root_dir: Path
    timeout_seconds: float
    demo_repo: DemoRepository

    def _command_for(self, source_path: Path) -> list[str]:
        try:
            rel = source_path.resolve().relative_to(self.root_dir.resolve())
        except ValueError:
            rel = source_path
        return [self.interpreter, str(rel)]

    def run(self, demo_id: str) -> RunResult:
        unit = self.demo_repo.find_unit(demo_id)
        if unit is None:
            raise DemoNotFoundError(demo_id)

        cmd = self._command_for(unit.source_path)
        env = dict(os.environ, PYTHONUNBUFFERED="1")

        logger.info("Running demo: %s", unit.file)
        started = time.monotonic()

        def _elapsed_ms() -> int:
            return int((time.monotonic() - started) * 1000)

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                cwd=str(self.root_dir),
                timeout=self.timeout_seconds,
                env=env,
            )
        except subprocess.TimeoutExpired as e:
            duration_ms = _elapsed_ms()
            logger.error("Demo %s timed out after %dms", unit.file, duration_ms)
            message = f"Execution timed out after {self.timeout_seconds:g} seconds."
            partial_err = _as_text(e.stderr).rstrip()
            return RunResult(
                succeeded=False,
                stdout=_as_text(e.stdout),
                stderr=f"{partial_err}\n{message}" if partial_err else message,
                exit_code=None,
                timed_out=True,
                duration_ms=duration_ms,
            )
        except Exception as e:
            duration_ms = _elapsed_ms()
            logger.error("Demo %s failed to execute after %dms: %s", unit.file, duration_ms, e)
            return RunResult(
                succeeded=False,
                stdout="",
                stderr=f"Failed to execute: {e}",
                exit_code=None,
                duration_ms=duration_ms,
            )

        duration_ms = _elapsed_ms()
        stdout = proc.stdout or ""
        stderr: Optional[str] = proc.stderr or None

        if proc.returncode == 0:
            logger.info("Completed %s in %dms", unit.file, duration_ms)
            return RunResult(
                succeeded=True,
                stdout=stdout,
                stderr=stderr,
                exit_code=0,
                duration_ms=duration_ms,
            )

        logger.error("Demo %s failed after %dms (exit=%s)", unit.file, duration_ms, proc.returncode)
        return RunResult(
            succeeded=False,
            stdout=stdout,
            stderr=stderr or f"Process exited with code {proc.returncode}",
            exit_code=proc.returncode,
            duration_ms=duration_ms,
        )

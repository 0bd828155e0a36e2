from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from demo_viewer.client.api import ViewerApi
from demo_viewer.domain.errors import DemoViewerError

logger = logging.getLogger(__name__)

ResultCallback = Callable[[str, Dict[str, Any]], None]
ErrorCallback = Callable[[str, Exception], None]


class PollerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DISPLAYING = "displaying"


@dataclass
class LiveReloadPoller:
    """
    Client-side live reload.

    Idle -> select(U) -> Running(U) -> Displaying(U, mtime).
    Each tick asks for U's mtime; a value strictly newer than the stored one
    re-runs U. The stored mtime starts as None after every run so the first
    observation is only a baseline.
    """
    api: ViewerApi
    on_result: Optional[ResultCallback] = None
    on_error: Optional[ErrorCallback] = None
    enabled: bool = True

    state: PollerState = PollerState.IDLE
    unit_id: Optional[str] = None
    last_mtime: Optional[float] = None

    def select(self, demo_id: str) -> Optional[Dict[str, Any]]:
        self.unit_id = demo_id
        self.last_mtime = None
        self.state = PollerState.RUNNING

        try:
            result = self.api.run(demo_id)
        except DemoViewerError as e:
            if self.unit_id == demo_id:
                self.state = PollerState.DISPLAYING
                if self.on_error:
                    self.on_error(demo_id, e)
            return None

        # A late answer for a unit that is no longer selected is dropped
        if self.unit_id != demo_id:
            logger.debug("Discarding stale run result for %s", demo_id)
            return None

        self.state = PollerState.DISPLAYING
        if self.on_result:
            self.on_result(demo_id, result)

        if result.get("success") and self.enabled:
            try:
                mtime = self.api.mtime(demo_id)
            except DemoViewerError as e:
                logger.warning("Failed to get mtime for %s: %s", demo_id, e)
            else:
                if self.unit_id == demo_id:
                    self.last_mtime = mtime
        return result

    def tick(self) -> bool:
        """One timer firing. Returns True when it triggered a re-run."""
        if not self.enabled or self.unit_id is None:
            return False

        demo_id = self.unit_id
        try:
            mtime = self.api.mtime(demo_id)
        except DemoViewerError as e:
            logger.warning("Live reload check failed for %s: %s", demo_id, e)
            return False

        if self.unit_id != demo_id:
            return False

        if self.last_mtime is not None and mtime > self.last_mtime:
            logger.info("File changed, reloading %s", demo_id)
            self.select(demo_id)
            return True

        self.last_mtime = mtime
        return False

    def set_live_reload(self, enabled: bool) -> None:
        was_enabled = self.enabled
        self.enabled = enabled
        if enabled and not was_enabled:
            self.tick()

    def toggle_live_reload(self) -> bool:
        self.set_live_reload(not self.enabled)
        return self.enabled

    def clear(self) -> None:
        self.state = PollerState.IDLE
        self.unit_id = None
        self.last_mtime = None

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import requests

from demo_viewer.domain.errors import DemoNotFoundError, DemoViewerError


class TransportError(DemoViewerError):
    """The viewer server could not be reached or answered with garbage."""


class ViewerApi:
    """Strategy interface: what the live-reload poller needs from the server."""

    def list_demos(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def run(self, demo_id: str) -> Dict[str, Any]:
        raise NotImplementedError

    def mtime(self, demo_id: str) -> float:
        raise NotImplementedError


@dataclass
class HttpViewerApi(ViewerApi):
    base_url: str = "http://127.0.0.1:3000"
    run_timeout: float = 30.0
    poll_timeout: float = 5.0
    session: requests.Session = field(default_factory=requests.Session)

    def _get(self, path: str, demo_id: str | None, timeout: float) -> Any:
        url = self.base_url.rstrip("/") + path
        try:
            resp = self.session.get(url, timeout=timeout)
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if resp.status_code == 404 and demo_id is not None:
            raise DemoNotFoundError(demo_id)

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError(f"GET {url} returned non-JSON body (HTTP {resp.status_code})") from e

        if not resp.ok:
            detail = body.get("error") if isinstance(body, dict) else None
            raise TransportError(f"GET {url} failed with HTTP {resp.status_code}: {detail or resp.reason}")
        return body

    def list_demos(self) -> List[Dict[str, Any]]:
        return self._get("/api/demos", None, self.poll_timeout)

    def run(self, demo_id: str) -> Dict[str, Any]:
        return self._get(f"/api/run/{demo_id}", demo_id, self.run_timeout)

    def mtime(self, demo_id: str) -> float:
        body = self._get(f"/api/mtime/{demo_id}", demo_id, self.poll_timeout)
        try:
            return float(body["mtime"])
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError(f"Malformed mtime response: {body!r}") from e

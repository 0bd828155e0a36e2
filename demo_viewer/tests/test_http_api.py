from __future__ import annotations

from typing import Any, Dict, List

import pytest
import requests

from demo_viewer.client.api import HttpViewerApi, TransportError
from demo_viewer.domain.errors import DemoNotFoundError


# -----------------------------
# Test doubles
# -----------------------------
class FakeResponse:
    def __init__(self, status_code: int, body: Any = None, text_only: bool = False):
        self.status_code = status_code
        self._body = body
        self._text_only = text_only
        self.reason = "Reason"

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._text_only:
            raise ValueError("not json")
        return self._body


class FakeSession:
    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.urls: List[str] = []

    def get(self, url: str, timeout: float):
        self.urls.append(url)
        resp = self.responses[url]
        if isinstance(resp, Exception):
            raise resp
        return resp


def make_api(responses: Dict[str, Any]) -> HttpViewerApi:
    return HttpViewerApi(base_url="http://viewer/", session=FakeSession(responses))


# -----------------------------
# Tests
# -----------------------------
def test_list_and_run():
    api = make_api({
        "http://viewer/api/demos": FakeResponse(200, [{"id": "01", "name": "Syntax Demo"}]),
        "http://viewer/api/run/01": FakeResponse(200, {"success": True, "output": "hi\n", "error": None}),
    })

    assert api.list_demos() == [{"id": "01", "name": "Syntax Demo"}]
    assert api.run("01")["output"] == "hi\n"


def test_mtime_returns_float():
    api = make_api({"http://viewer/api/mtime/01": FakeResponse(200, {"id": "01", "mtime": 1700000000123})})

    assert api.mtime("01") == 1700000000123.0


def test_404_maps_to_not_found():
    api = make_api({"http://viewer/api/mtime/02": FakeResponse(404, {"error": "Demo not found"})})

    with pytest.raises(DemoNotFoundError):
        api.mtime("02")


def test_500_maps_to_transport_error_with_detail():
    api = make_api({"http://viewer/api/mtime/01": FakeResponse(500, {"error": "denied"})})

    with pytest.raises(TransportError, match="denied"):
        api.mtime("01")


def test_connection_error_maps_to_transport_error():
    api = make_api({"http://viewer/api/run/01": requests.ConnectionError("refused")})

    with pytest.raises(TransportError, match="refused"):
        api.run("01")


def test_non_json_body_maps_to_transport_error():
    api = make_api({"http://viewer/api/demos": FakeResponse(200, text_only=True)})

    with pytest.raises(TransportError):
        api.list_demos()


def test_malformed_mtime_body():
    api = make_api({"http://viewer/api/mtime/01": FakeResponse(200, {"id": "01"})})

    with pytest.raises(TransportError, match="Malformed"):
        api.mtime("01")

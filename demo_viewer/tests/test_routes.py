from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import pytest

from demo_viewer.app_factory import create_app
from demo_viewer.config.ini_config import AppSettings
from demo_viewer.services.change_service import ChangeService


# -----------------------------
# Helpers
# -----------------------------
def make_settings(root: Path, **overrides) -> AppSettings:
    values = dict(
        root_dir=root,
        demo_dir=root / "demo",
        demo_suffix="demo",
        demo_extensions=frozenset({".py"}),
        interpreter=sys.executable,
        timeout_seconds=5,
        live_reload_enabled=True,
        live_reload_interval_ms=2000,
        flask_host="127.0.0.1",
        flask_port=3000,
        flask_debug=False,
        log_level="INFO",
    )
    values.update(overrides)
    return AppSettings(**values)


@pytest.fixture
def demo_root(tmp_path: Path) -> Path:
    demo_dir = tmp_path / "demo"
    demo_dir.mkdir()
    (demo_dir / "01-hello-demo.py").write_text("print('hello')\n", encoding="utf-8")
    (demo_dir / "02-broken-demo.py").write_text("raise RuntimeError('nope')\n", encoding="utf-8")
    (demo_dir / "notes.md").write_text("# not a demo\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(demo_root: Path):
    app = create_app(make_settings(demo_root))
    app.config["TESTING"] = True
    return app.test_client()


# -----------------------------
# Tests
# -----------------------------
def test_index_renders_page_with_live_reload_config(client):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert 'id="demoList"' in html
    assert '"intervalMs": 2000' in html
    assert "viewer.js" in html


def test_static_script_is_served(client):
    resp = client.get("/static/viewer.js")

    assert resp.status_code == 200
    assert b"/api/mtime/" in resp.data


def test_list_demos(client):
    resp = client.get("/api/demos")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {"id": "01", "name": "Hello Demo", "file": "01-hello-demo.py"},
        {"id": "02", "name": "Broken Demo", "file": "02-broken-demo.py"},
    ]


def test_list_demos_empty_when_directory_missing(tmp_path: Path):
    app = create_app(make_settings(tmp_path))

    resp = app.test_client().get("/api/demos")

    assert resp.status_code == 200
    assert resp.get_json() == []


def test_run_success(client):
    resp = client.get("/api/run/01")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert "hello" in body["output"]
    assert body["error"] is None
    assert body["exit_code"] == 0
    assert body["timed_out"] is False
    assert isinstance(body["duration_ms"], int)


def test_run_failure_is_still_200(client):
    resp = client.get("/api/run/02")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is False
    assert "RuntimeError: nope" in body["error"]


def test_run_unknown_demo_is_404(client):
    resp = client.get("/api/run/99")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Demo not found"}


def test_mtime(client, demo_root: Path):
    t0 = time.time() - 60
    os.utime(demo_root / "demo" / "01-hello-demo.py", (t0, t0))

    resp = client.get("/api/mtime/01")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == "01"
    assert body["mtime"] == pytest.approx(t0 * 1000, abs=1)


def test_mtime_unknown_demo_is_404(client):
    resp = client.get("/api/mtime/02x")

    assert resp.status_code == 404


def test_mtime_stat_failure_is_500(client, monkeypatch):
    def broken_mtime(self, demo_id):
        raise PermissionError("denied")

    monkeypatch.setattr(ChangeService, "mtime", broken_mtime)

    resp = client.get("/api/mtime/01")

    assert resp.status_code == 500
    assert "denied" in resp.get_json()["error"]


def test_end_to_end_listing_and_missing_mtime(tmp_path: Path):
    demo_dir = tmp_path / "demo"
    demo_dir.mkdir()
    (demo_dir / "01-syntax-demo.ts").write_text("console.log('hi');\n", encoding="utf-8")

    app = create_app(make_settings(tmp_path, demo_extensions=None))
    c = app.test_client()

    assert c.get("/api/demos").get_json() == [
        {"id": "01", "name": "Syntax Demo", "file": "01-syntax-demo.ts"},
    ]
    assert c.get("/api/mtime/02").status_code == 404


def test_requests_are_logged(client, caplog):
    with caplog.at_level("INFO"):
        client.get("/api/demos")

    assert "GET /api/demos" in caplog.text


def test_run_timeout_is_flagged_in_body(tmp_path: Path):
    demo_dir = tmp_path / "demo"
    demo_dir.mkdir()
    (demo_dir / "01-hang-demo.py").write_text("import time\nwhile True:\n    time.sleep(0.1)\n", encoding="utf-8")
    app = create_app(make_settings(tmp_path, timeout_seconds=1))

    body = app.test_client().get("/api/run/01").get_json()

    assert body["success"] is False
    assert body["timed_out"] is True
    assert "timed out" in body["error"]

########## ini_config.py

import os
import sys
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "DemoViewer.ini"


@dataclass(frozen=True)
class AppSettings:
    root_dir: Path
    demo_dir: Path

    demo_suffix: str
    demo_extensions: Optional[frozenset]   # None accepts any extension

    interpreter: str
    timeout_seconds: float

    live_reload_enabled: bool
    live_reload_interval_ms: int

    flask_host: str
    flask_port: int
    flask_debug: bool

    log_level: str


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the app/service code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_path(self, section: str, key: str, default: str, base: Path) -> Path:
        """
        Reads a filesystem path from INI and resolves it.
        Relative paths are taken against `base`, not the process cwd.
        """
        raw = (self._cfg.get(section, key, fallback=default) or "").strip() or default
        raw = os.path.expandvars(os.path.expanduser(raw))
        p = Path(raw)
        if not p.is_absolute():
            p = base / p
        return p.resolve()

    def load_settings(self) -> AppSettings:
        ini_dir = Path(self._ini_path).resolve().parent

        # Paths
        root_dir = self._cfg_path("paths", "root_dir", ".", ini_dir)
        demo_dir = self._cfg_path("paths", "demo_dir", "demo", root_dir)

        # Registry
        demo_suffix = (self._cfg.get("registry", "suffix", fallback="demo") or "").strip() or "demo"
        ext_raw = self._cfg.get("registry", "extensions", fallback=".py") or ""
        exts = {
            e.strip().lower() if e.strip().startswith(".") else "." + e.strip().lower()
            for e in ext_raw.split(",")
            if e.strip()
        }
        demo_extensions = frozenset(exts) if exts else None

        # Execution
        interpreter = (self._cfg.get("execution", "interpreter", fallback="") or "").strip() or sys.executable
        timeout_seconds = self._cfg.getfloat("execution", "timeout_seconds", fallback=10.0)

        # Live reload
        live_reload_enabled = self._cfg.getboolean("live_reload", "enabled", fallback=True)
        live_reload_interval_ms = self._cfg.getint("live_reload", "interval_ms", fallback=2000)

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=3000)
        port_env = (os.getenv("PORT") or "").strip()
        if port_env.isdigit():
            flask_port = int(port_env)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"

        # Validate
        if timeout_seconds <= 0:
            raise ValueError(f"execution.timeout_seconds must be positive, got {timeout_seconds}")
        if live_reload_interval_ms <= 0:
            raise ValueError(f"live_reload.interval_ms must be positive, got {live_reload_interval_ms}")

        return AppSettings(
            root_dir=root_dir,
            demo_dir=demo_dir,
            demo_suffix=demo_suffix,
            demo_extensions=demo_extensions,
            interpreter=interpreter,
            timeout_seconds=timeout_seconds,
            live_reload_enabled=live_reload_enabled,
            live_reload_interval_ms=live_reload_interval_ms,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            log_level=log_level,
        )

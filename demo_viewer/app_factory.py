from __future__ import annotations

import logging
from typing import Optional

from flask import Flask

from demo_viewer.config import AppSettings, IniConfig
from demo_viewer.repositories.demo_repository import DemoRepository
from demo_viewer.services.change_service import ChangeService
from demo_viewer.services.execution_service import ExecutionService
from demo_viewer.web.routes import create_blueprint

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("demo_viewer").setLevel(level)


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    configure_logging(settings.log_level)

    demo_repo = DemoRepository(
        demo_dir=settings.demo_dir,
        suffix=settings.demo_suffix,
        extensions=settings.demo_extensions,
    )

    execution_service = ExecutionService(
        interpreter=settings.interpreter,
        root_dir=settings.root_dir,
        timeout_seconds=settings.timeout_seconds,
        demo_repo=demo_repo,
    )

    change_service = ChangeService(demo_repo=demo_repo)

    app = Flask(__name__)
    app.logger.setLevel(settings.log_level)
    app.register_blueprint(
        create_blueprint(
            demo_repo,
            execution_service,
            change_service,
            live_reload_enabled=settings.live_reload_enabled,
            live_reload_interval_ms=settings.live_reload_interval_ms,
        )
    )

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app

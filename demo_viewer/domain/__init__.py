from .errors import DemoNotFoundError, DemoViewerError
from .models import ChangeRecord, DemoUnit, RunResult

__all__ = [
    "ChangeRecord",
    "DemoUnit",
    "RunResult",
    "DemoNotFoundError",
    "DemoViewerError",
]

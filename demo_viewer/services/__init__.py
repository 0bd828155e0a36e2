from .change_service import ChangeService
from .execution_service import ExecutionService

__all__ = [
    "ChangeService",
    "ExecutionService",
]

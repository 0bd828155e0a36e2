from .api import HttpViewerApi, TransportError, ViewerApi
from .poller import LiveReloadPoller, PollerState

__all__ = [
    "HttpViewerApi",
    "TransportError",
    "ViewerApi",
    "LiveReloadPoller",
    "PollerState",
]

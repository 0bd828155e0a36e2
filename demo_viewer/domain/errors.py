class DemoViewerError(Exception):
    """Base class for errors raised by the viewer's services."""


class DemoNotFoundError(DemoViewerError, LookupError):
    def __init__(self, demo_id: str):
        super().__init__(f"Demo not found: {demo_id}")
        self.demo_id = demo_id

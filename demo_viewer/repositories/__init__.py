from .demo_repository import DemoRepository

__all__ = ["DemoRepository"]

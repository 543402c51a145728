from .sink import StatusSink

__all__ = ["StatusSink"]

from .log import get_logger
from .telemetry import EventLog

__all__ = ["get_logger", "EventLog"]

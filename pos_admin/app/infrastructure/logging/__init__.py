from .logger import get_logger, log_action

__all__ = ["get_logger", "log_action"]

from .logging import FORMAT, get_logger_handler

__all__ = ["FORMAT", "get_logger_handler"]

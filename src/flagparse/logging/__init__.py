from flagparse.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_enabled,
    setup_base_logger,
    trace,
)

__all__ = [
    "JsonLogFormatter",
    "get_logger",
    "is_trace_enabled",
    "setup_base_logger",
    "trace",
]

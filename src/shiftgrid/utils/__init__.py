"""Utilities package for shiftgrid."""
from .logging_setup import (
    TRACE,
    get_default_logger,
    get_logger,
    init_logging,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "init_logging",
    "get_default_logger",
    "TRACE",
]

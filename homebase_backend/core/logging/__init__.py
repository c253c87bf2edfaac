"""Logging infrastructure for the Homebase backend."""

from .context import (
    TransactionIdFilter,
    generate_transaction_id,
    get_transaction_id,
    set_transaction_id,
)
from .file_logger import FileLogger
from .logger_config import get_logger, setup_logging, shutdown_logging
from .middleware import LoggingMiddleware, RequestIdMiddleware
from .structured_logger import StructuredFormatter

__all__ = [
    "FileLogger",
    "StructuredFormatter",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "LoggingMiddleware",
    "RequestIdMiddleware",
    "TransactionIdFilter",
    "generate_transaction_id",
    "get_transaction_id",
    "set_transaction_id",
]

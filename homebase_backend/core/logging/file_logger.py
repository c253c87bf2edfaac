"""
Queue-backed rotating file logging.

Handlers run on a QueueListener thread so request handlers never block on
disk writes.
"""

import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler

from .structured_logger import build_console_handler, build_formatter

# Third-party loggers routed through our queue, with their floor level
EXTERNAL_LOGGERS = {
    "sqlalchemy": logging.WARNING,
    "asyncmy": logging.WARNING,
    "alembic": logging.INFO,
    "uvicorn": logging.INFO,
    "fastapi": logging.INFO,
}


class FileLogger:
    """Owns the log queue, its listener and the rotating file handler."""

    def __init__(
        self,
        log_file_path: str = "logs/app.log",
        max_bytes: int = 20 * 1024 * 1024,
        backup_count: int = 5,
        log_level: str = "INFO",
        use_json_format: bool = True,
    ):
        self.log_file_path = log_file_path
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.log_level = log_level
        self.use_json_format = use_json_format
        self._log_queue: queue.Queue = queue.Queue()
        self._listener: QueueListener | None = None
        self._queue_handler: QueueHandler | None = None

        directory = os.path.dirname(log_file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def build_file_handler(self) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            self.log_file_path, maxBytes=self.max_bytes, backupCount=self.backup_count
        )
        handler.setLevel(getattr(logging, self.log_level.upper()))
        handler.setFormatter(build_formatter(self.use_json_format))
        return handler

    def start(self) -> None:
        """Start writing queued records to stdout and the rotating file."""
        handlers = [
            build_console_handler(self.log_level, self.use_json_format),
            self.build_file_handler(),
        ]
        self._listener = QueueListener(
            self._log_queue, *handlers, respect_handler_level=True
        )
        self._listener.start()

    @property
    def queue_handler(self) -> QueueHandler:
        if self._queue_handler is None:
            self._queue_handler = QueueHandler(self._log_queue)
            self._queue_handler.setLevel(getattr(logging, self.log_level.upper()))
        return self._queue_handler

    def stop(self) -> None:
        """Flush pending records and stop the listener thread."""
        if self._listener:
            self._listener.stop()
            self._listener = None


def route_external_loggers(handler: logging.Handler) -> None:
    """Send third-party and root logging through ``handler``."""
    for name, level in EXTERNAL_LOGGERS.items():
        ext_logger = logging.getLogger(name)
        ext_logger.handlers.clear()
        ext_logger.addHandler(handler)
        ext_logger.propagate = False
        ext_logger.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.captureWarnings(True)

"""
Central logging configuration.

Defaults come from the application settings; explicit arguments win.
"""

import logging

from .context import TransactionIdFilter
from .file_logger import FileLogger, route_external_loggers
from .structured_logger import build_console_handler

APP_LOGGER_NAME = "homebase_backend"


class LoggingConfig:
    """Tracks what has been installed so setup/shutdown are idempotent."""

    def __init__(self):
        self.file_logger: FileLogger | None = None
        self._is_configured = False

    @property
    def is_configured(self) -> bool:
        return self._is_configured

    def setup(
        self,
        log_to_file: bool = False,
        log_level: str = "INFO",
        log_file_path: str = "logs/app.log",
        use_json_format: bool = True,
        max_bytes: int = 20 * 1024 * 1024,
        backup_count: int = 5,
    ) -> logging.Logger:
        if self._is_configured:
            return get_logger()

        app_logger = logging.getLogger(APP_LOGGER_NAME)
        app_logger.setLevel(getattr(logging, log_level.upper()))
        app_logger.handlers = []
        transaction_filter = TransactionIdFilter()

        if log_to_file:
            self.file_logger = FileLogger(
                log_file_path=log_file_path,
                max_bytes=max_bytes,
                backup_count=backup_count,
                log_level=log_level,
                use_json_format=use_json_format,
            )
            self.file_logger.start()
            handler = self.file_logger.queue_handler
            handler.addFilter(transaction_filter)
            app_logger.addHandler(handler)
            app_logger.propagate = False
            route_external_loggers(handler)
        else:
            handler = build_console_handler(log_level, use_json_format)
            handler.addFilter(transaction_filter)
            app_logger.addHandler(handler)
            app_logger.propagate = False
            logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

        self._is_configured = True
        return app_logger

    def shutdown(self) -> None:
        if self.file_logger:
            self.file_logger.stop()
            self.file_logger = None
        self._is_configured = False


# Global logging configuration instance
_logging_config = LoggingConfig()


def setup_logging(
    log_to_file: bool | None = None,
    log_level: str | None = None,
    log_file_path: str | None = None,
    use_json_format: bool | None = None,
) -> logging.Logger:
    """
    Set up application logging.

    Args:
        log_to_file: Whether to enable file logging (settings.log_to_file)
        log_level: Logging level (settings.log_level)
        log_file_path: Path to log file (settings.log_file_path)
        use_json_format: JSON output (settings.log_format == "json")

    Returns:
        Configured application logger
    """
    from ...config import settings

    if log_to_file is None:
        log_to_file = settings.log_to_file
    if log_level is None:
        log_level = settings.log_level
    if log_file_path is None:
        log_file_path = settings.log_file_path
    if use_json_format is None:
        use_json_format = settings.log_format.lower() == "json"

    return _logging_config.setup(
        log_to_file=log_to_file,
        log_level=log_level,
        log_file_path=log_file_path,
        use_json_format=use_json_format,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the application namespace.

    Module paths that already start with the package name are used as is.
    """
    if not name:
        return logging.getLogger(APP_LOGGER_NAME)
    if name == APP_LOGGER_NAME or name.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def shutdown_logging() -> None:
    """Shutdown logging gracefully."""
    _logging_config.shutdown()

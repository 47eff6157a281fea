"""
logger.py
Opt-in JSON-lines logging for the opentdb package.

The package logs through the standard `logging` module and installs no
handlers on import. enable_json_logging() routes those records into loguru,
which writes them to logs/YYYY-MM-DD.jsonl.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Protocol

from loguru import logger as _loguru_logger


# Sinks
class BaseSink(Protocol):
    def write(self, message: str) -> None:
        ...

class JSONSink:
    def __init__(self, log_dir: Optional[str] = None, log_file_name: Optional[str] = None) -> None:
        """
        Initialize a JSONSink that writes log entries to a file in a logs/ directory.
        By default, logs are written to ./logs/YYYY-MM-DD.jsonl relative to the working directory.
        Optionally, a custom log_file_name can be provided (e.g., 'test-YYYY-MM-DD.jsonl').
        """
        if log_dir is None:
            log_dir = os.path.join(os.getcwd(), 'logs')
        self.log_dir = os.path.abspath(log_dir)
        Path(self.log_dir).mkdir(parents=True, exist_ok=True)
        if log_file_name is None:
            log_file_name = f"{datetime.now().date()}.jsonl"
        self.file_path = os.path.join(self.log_dir, log_file_name)
        self._file = open(self.file_path, "a", encoding="utf-8")

    def write(self, message: str) -> None:
        self._file.write(message)
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = _loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _loguru_logger.opt(exception=record.exc_info).bind(logger_name=record.name).log(
            level, record.getMessage()
        )


# Singleton logger
_logger_instance: Any = None
_sink: Optional[JSONSink] = None
_sink_id: Optional[int] = None
_handler: Optional[InterceptHandler] = None


def get_logger() -> Any:
    """Return the loguru logger, adding the JSON sink on first use."""
    global _logger_instance, _sink, _sink_id
    if _logger_instance is not None:
        return _logger_instance

    _sink = JSONSink()
    _sink_id = _loguru_logger.add(_sink.write, serialize=True, enqueue=True)
    _logger_instance = _loguru_logger
    return _logger_instance


def enable_json_logging(level: int = logging.INFO) -> Any:
    """Send records from the `opentdb` logger to the JSON sink."""
    global _handler
    log = get_logger()
    package_logger = logging.getLogger("opentdb")
    if _handler is None:
        _handler = InterceptHandler()
        package_logger.addHandler(_handler)
    package_logger.setLevel(level)
    return log


def disable_json_logging() -> None:
    global _handler
    if _handler is not None:
        logging.getLogger("opentdb").removeHandler(_handler)
        _handler = None


def close_logger() -> None:
    """Detach the JSON sink and reset the singleton."""
    global _logger_instance, _sink, _sink_id
    disable_json_logging()
    if _sink_id is not None:
        _loguru_logger.remove(_sink_id)
        _sink_id = None
    if _sink is not None:
        _sink.close()
        _sink = None
    _logger_instance = None

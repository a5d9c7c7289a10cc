"""Handlers for the ``screen_adapt`` logger tree.

Only the package logger is touched; the host application's root logger and
its handlers are left alone. With a file path, records reach the console and
the file through a queue listener thread.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from screen_adapt.api.logging import LoggingConfig
from screen_adapt.runtime.debug_config import resolve_log_file, resolve_log_level_name

PACKAGE_LOGGER = "screen_adapt"

_LISTENERS: dict[str, QueueListener] = {}
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    The leading token of the message is the event key (``adaptation_pass``,
    ``resize_notification``...). Anything passed through ``extra`` is kept
    under ``fields``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": message.split(" ", 1)[0],
            "msg": message,
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_adaptation_logging(config: LoggingConfig) -> logging.Logger:
    """Replace the handlers of ``config.logger_name`` and return that logger."""
    logger = logging.getLogger(config.logger_name)
    _stop_listener(config.logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(_level(config.level_name))
    logger.propagate = config.propagate

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        logger.addHandler(console)
        return logger

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_formatter(config.file_format))

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    logger.addHandler(QueueHandler(records))
    listener = QueueListener(records, console, file_handler, respect_handler_level=True)
    listener.start()
    _LISTENERS[config.logger_name] = listener
    return logger


def setup_adaptation_logging(file_path: str | None = None) -> logging.Logger:
    """Install package handlers unless some are already present.

    ``file_path`` falls back to ``SCREEN_ADAPT_LOG_FILE``; asking for a file
    always reconfigures.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    path = file_path or resolve_log_file()
    if logger.handlers and path is None:
        return logger
    return configure_adaptation_logging(
        LoggingConfig(level_name=resolve_log_level_name(default="INFO"), file_path=path)
    )


def shutdown_adaptation_logging() -> None:
    """Flush and stop every queue listener started by this module."""
    for name in list(_LISTENERS):
        _stop_listener(name)


def _stop_listener(name: str) -> None:
    listener = _LISTENERS.pop(name, None)
    if listener is None:
        return
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def _level(name: str) -> int:
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

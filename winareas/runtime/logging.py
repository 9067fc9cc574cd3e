"""Logging pipeline setup for area diagnostics."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from winareas.api.logging import AreasLoggingConfig
from winareas.runtime.debug_config import load_debug_config

_QUEUE_LISTENER: QueueListener | None = None
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_AREA_FIELDS = ("x", "y", "width", "height")
# Extras emitted by the union trace carry both operands flattened under these prefixes.
_AREA_ROLES = ("self", "other")
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; flattened area extras are regrouped per operand."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = _group_area_fields(
            {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        )
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _group_area_fields(extras: dict[str, object]) -> dict[str, object]:
    """Fold ``self_x``/``self_width``... into ``{"self": {"x": ..., "width": ...}}``."""
    grouped = dict(extras)
    for role in _AREA_ROLES:
        keys = [f"{role}_{name}" for name in _AREA_FIELDS]
        if all(key in grouped for key in keys):
            grouped[role] = {name: grouped.pop(key) for name, key in zip(_AREA_FIELDS, keys)}
    return grouped


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)


def _build_handlers(config: AreasLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        sink.setFormatter(_formatter_for(config.file_format))
        handlers.append(sink)
    return handlers


def configure_logging(config: AreasLoggingConfig) -> None:
    """Route root logging to the console, queueing through a listener when a file sink is added."""
    global _QUEUE_LISTENER

    shutdown_logging()
    handlers = _build_handlers(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _QUEUE_LISTENER = QueueListener(records, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Stop the queued listener, flushing records still in flight."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def setup_logging(file_path: str | None = None) -> None:
    """Configure logging from the env debug config unless handlers already exist."""
    if logging.getLogger().handlers:
        return
    debug_config = load_debug_config()
    level_name = debug_config.log_level
    if debug_config.union_trace_enabled:
        level_name = "DEBUG"
    configure_logging(
        AreasLoggingConfig(
            level_name=level_name,
            console_format=debug_config.log_format,
            file_path=file_path,
        )
    )

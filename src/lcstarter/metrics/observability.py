"""Observability helpers for lcstarter."""

from __future__ import annotations

import json
import time
from typing import Any, Callable, Mapping, MutableMapping, TextIO

import structlog
from prometheus_client import Gauge, Histogram

from lcstarter.config import AppConfig, LogLevel


def _add_severity(_: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event_dict["level"] = method_name
    return event_dict


def _format_payload(data: Any) -> str:
    if isinstance(data, BaseException):
        return f"{type(data).__name__}: {data}"
    if isinstance(data, (Mapping, list, tuple)):
        return json.dumps(data, default=str)
    return str(data)


def _is_empty_payload(data: Any) -> bool:
    # Falsy scalars are dropped like None; empty containers are still shown.
    return data is None or (isinstance(data, (str, int, float)) and not data)


def _render_line(_: Any, __: str, event_dict: MutableMapping[str, Any]) -> str:
    line = f"[{event_dict['timestamp']}] [{event_dict['level'].upper()}] {event_dict['event']}"
    if "data" in event_dict:
        line = f"{line} {_format_payload(event_dict['data'])}"
    return line


class Logger:
    """Console logger filtered by the shared ``config.logging`` section.

    Every call re-reads the configuration, so ``set_log_level`` and
    ``enable_console_logging`` take effect for all components that share
    the same ``AppConfig``.
    """

    def __init__(self, config: AppConfig, stream: TextIO | None = None) -> None:
        self._config = config
        self._log = structlog.wrap_logger(
            structlog.PrintLogger(file=stream),
            processors=[
                _add_severity,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _render_line,
            ],
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
        )

    def _should_log(self, level: LogLevel) -> bool:
        return level.rank >= self._config.logging.log_level.rank

    def _emit(self, level: LogLevel, message: str, data: Any) -> None:
        if not self._config.logging.enable_console_logging:
            return
        if not self._should_log(level):
            return
        if _is_empty_payload(data):
            getattr(self._log, level.value)(message)
        else:
            getattr(self._log, level.value)(message, data=data)

    def debug(self, message: str, data: Any = None) -> None:
        self._emit(LogLevel.DEBUG, message, data)

    def info(self, message: str, data: Any = None) -> None:
        self._emit(LogLevel.INFO, message, data)

    def warn(self, message: str, data: Any = None) -> None:
        self._emit(LogLevel.WARN, message, data)

    def error(self, message: str, data: Any = None) -> None:
        self._emit(LogLevel.ERROR, message, data)

    def set_log_level(self, level: LogLevel | str) -> None:
        self._config.logging.log_level = level

    def enable_console_logging(self, enable: bool) -> None:
        self._config.logging.enable_console_logging = enable


class OperationMetrics:
    """Prometheus metrics for component lifecycle and core operations."""

    operation_latency = Histogram(
        "lcstarter_operation_duration_seconds",
        "Time spent in orchestration core operations.",
        ["operation"],
        buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
    )
    component_ready = Gauge(
        "lcstarter_component_ready",
        "Whether a component finished initialization (1) or not (0).",
        ["component"],
    )

    @classmethod
    def observe(cls, operation: str, duration_seconds: float) -> None:
        cls.operation_latency.labels(operation=operation).observe(duration_seconds)

    @classmethod
    def set_ready(cls, component: str, ready: bool) -> None:
        cls.component_ready.labels(component=component).set(1 if ready else 0)


class TimedSection:
    """Context manager capturing elapsed time for metrics."""

    def __init__(self, callback: Callable[[float], None]) -> None:
        self._callback = callback
        self._start = 0.0

    def __enter__(self) -> "TimedSection":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        duration = time.perf_counter() - self._start
        self._callback(duration)


__all__ = [
    "Logger",
    "OperationMetrics",
    "TimedSection",
]

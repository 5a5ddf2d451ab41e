"""Logging and metrics."""

from .observability import Logger, OperationMetrics, TimedSection

__all__ = ["Logger", "OperationMetrics", "TimedSection"]

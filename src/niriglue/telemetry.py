"""Telemetry - logging factory and metrics facade

Log format: [Component] msg, or [Component:handle] msg for per-pane messages.
Metrics: layout.columns, layout.column_dropped, niri.requests, niri.errors,
editor.inputs, kitty.requests
"""

import logging

from . import config


def get_logger(name: str) -> logging.Logger:
    """Return the module logger.

    Args:
        name: module name (usually ``__name__``)
    """
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """Install the root handler used by the CLI."""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format=config.LOG_FORMAT,
    )


def format_pane_log(component: str, handle: object, msg: str) -> str:
    """Format a message about a single editor pane.

    Returns:
        ``[component:handle] msg``
    """
    return f"[{component}:{handle if handle is not None else 'unknown'}] {msg}"


class Metrics:
    """In-memory counters and gauges.

    Only used for debugging and tests; nothing is exported.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._counters: dict[str, int] = {}
        self._gauges: dict[str, float] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter.

        Args:
            name: metric name (e.g. "niri.requests")
            labels: optional labels (e.g. {"request": "Workspaces"})
            value: increment, default 1
        """
        if not self.enabled:
            return
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def gauge(self, name: str, value: float, labels: dict[str, str] | None = None) -> None:
        """Set a gauge value."""
        if not self.enabled:
            return
        key = self._make_key(name, labels)
        self._gauges[key] = value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self._counters.get(self._make_key(name, labels), 0)

    def get_gauge(self, name: str, labels: dict[str, str] | None = None) -> float:
        return self._gauges.get(self._make_key(name, labels), 0.0)

    def reset(self) -> None:
        """Drop all recorded values (tests)."""
        self._counters.clear()
        self._gauges.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"

    def get_all_counters(self) -> dict[str, int]:
        return dict(self._counters)


metrics = Metrics(enabled=config.METRICS_ENABLED)

"""Logging metrics adapter."""

from ..ports import LoggerPort


class LoggingMetricsAdapter:
    """Writes every metric through the logger at debug level."""

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        self.logger.debug("metric", type="counter", name=name, value=value, **(tags or {}))

    def timing(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.logger.debug("metric", type="timing", name=name, value=f"{value:.6f}", **(tags or {}))

"""Metrics port interface."""

from typing import Protocol


class MetricsPort(Protocol):
    """Port for metrics collection."""

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        """Increment a counter."""
        ...

    def timing(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        """Record a timing in seconds."""
        ...

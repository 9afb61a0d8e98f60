"""No-op metrics adapter."""


class NoopMetricsAdapter:
    """Discards all metrics."""

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        pass

    def timing(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        pass

"""Standard library logging adapter."""

import logging
import sys
from typing import Any


class StdLoggerAdapter:
    """Structured logging over the stdlib logging module.

    Keyword fields are appended to the message as ``key=value`` pairs.
    """

    def __init__(self, name: str = "hashedfs", level: str = "INFO"):
        self.logger = logging.getLogger(name)

        # Level and handler are set once per logger name; later adapters share them.
        if not self.logger.handlers:
            self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        if fields:
            rendered = " ".join(f"{k}={v}" for k, v in fields.items())
            message = f"{message} {rendered}"
        self.logger.log(level, message)

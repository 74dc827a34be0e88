import json
import logging
import sys
from datetime import datetime, timezone


class Log:
    """Centralized logging for the bid leveler with structured metric lines."""

    _logger: logging.Logger = logging.getLogger("bidleveler")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach a stderr handler once and set the level; stdout carries CLI output."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def metric(cls, metric_type: str, **data: object) -> None:
        """Emit one metric line: ``[metric_type] {json payload}``.

        A UTC ``timestamp`` is added unless the caller supplies one.
        """
        payload = {"timestamp": datetime.now(timezone.utc).isoformat(), **data}
        cls._logger.info(f"[{metric_type}] {json.dumps(payload, default=str)}")

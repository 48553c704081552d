"""Logging configuration for feedwriter.

The library itself only emits records through ``logging.getLogger(__name__)``
loggers under the ``feedwriter`` namespace. Applications that want the
library's own formatting call :func:`setup_logging`.
"""

import json
import logging
import sys

from feedwriter.config import get_settings

PACKAGE_LOGGER = "feedwriter"


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Render the record as a single-line JSON object."""
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Attach a stdout handler to the ``feedwriter`` logger.

    Args:
        level: Log level name; defaults to ``Settings.log_level``
        json_output: Force JSON (True) or text (False) output; defaults to
            JSON when ``Settings.env`` is ``prod``
    """
    settings = get_settings()
    if json_output is None:
        json_output = settings.env == "prod"

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel((level or settings.log_level).upper())

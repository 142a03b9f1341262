"""
bootstrap/log.py - Logging setup
"""

from __future__ import annotations
from typing import Optional
import json
import logging
import sys

from errserial.bootstrap.config import LoggingConfig, get_config


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(config: Optional[LoggingConfig] = None, stream=None) -> logging.Logger:
    """
    Configure the errserial logger.

    Args:
        config: Logging settings; the loaded configuration when omitted
        stream: Output stream (defaults to sys.stderr)

    Returns:
        The configured "errserial" logger
    """
    config = config or get_config().logging
    log_level = getattr(logging, config.level.upper(), logging.WARNING)

    if config.json_logs:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(config.format)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    package_logger = logging.getLogger("errserial")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)

    return package_logger

"""
bootstrap/config.py - Library configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from errserial.errors.taxonomy import ConfigError

logger = logging.getLogger("errserial.bootstrap.config")


def _parse_max_depth(raw: Any) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        depth = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(
            f"max_depth must be an integer, got {raw!r}",
            details={"field": "traversal.max_depth", "value": str(raw)},
        ) from None
    if depth < 0:
        raise ConfigError(
            f"max_depth must be >= 0, got {depth}",
            details={"field": "traversal.max_depth", "value": depth},
        )
    # 0 means unlimited
    return depth or None


@dataclass
class TraversalConfig:
    """Traversal engine configuration."""

    # Deepest nesting level (root = 0) copied before DepthLimitError; None = unlimited
    max_depth: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TraversalConfig":
        return cls(
            max_depth=_parse_max_depth(os.getenv("ERRSERIAL_MAX_DEPTH")),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("ERRSERIAL_LOG_LEVEL", "WARNING"),
            format=os.getenv("ERRSERIAL_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            json_logs=os.getenv("ERRSERIAL_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class ErrserialConfig:
    """Root configuration for errserial."""

    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "ErrserialConfig":
        """Create configuration from environment variables."""
        return cls(
            traversal=TraversalConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "ErrserialConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(
                    f"Config file is not valid JSON: {filepath}",
                    details={"path": str(path), "error": str(e)},
                ) from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "ErrserialConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        # Override with file values
        if "traversal" in data:
            for key, value in data["traversal"].items():
                if key == "max_depth":
                    value = _parse_max_depth(value)
                if hasattr(config.traversal, key):
                    setattr(config.traversal, key, value)

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "traversal": {
                "max_depth": self.traversal.max_depth,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[ErrserialConfig] = None


def load_config(filepath: str = None) -> ErrserialConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        ErrserialConfig instance
    """
    global _config

    if filepath:
        _config = ErrserialConfig.from_file(filepath)
    else:
        _config = ErrserialConfig.from_env()

    logger.debug(f"Configuration loaded: max_depth={_config.traversal.max_depth}")
    return _config


def get_config() -> ErrserialConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[ErrserialConfig]) -> None:
    """Replace the current configuration; None reloads on next access."""
    global _config
    _config = config

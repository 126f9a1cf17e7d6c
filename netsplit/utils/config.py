"""
Configuration System for netsplit.

This module provides a small configuration interface backed by a JSON
(or YAML) file, with environment variable overrides for the switches
that are commonly flipped from the shell.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass
from .logging import get_logger, setup_logging

try:
    import yaml

    YAML_AVAILABLE = True
    _LOAD_ERRORS = (OSError, ValueError, yaml.YAMLError)
except ImportError:
    YAML_AVAILABLE = False
    _LOAD_ERRORS = (OSError, ValueError)

logger = get_logger(__name__)


@dataclass
class RewriteConfig:
    """Split insertion pass configuration."""

    # Scan the input for names the pass would synthesize before rewriting
    check_name_collisions: bool = False
    log_splits: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "netsplit.log"


class NetsplitConfig:
    """
    Unified configuration manager for netsplit.

    All options live in a single file; sections missing from the file
    fall back to the dataclass defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.rewrite = self._create_rewrite_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent.parent
        yaml_config = config_dir / "netsplit_config.yaml"
        json_config = config_dir / "netsplit_config.json"

        if YAML_AVAILABLE and yaml_config.exists():
            return yaml_config
        else:
            return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in [".yaml", ".yml"] and YAML_AVAILABLE:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except _LOAD_ERRORS as e:
            logger.error(f"Failed to load configuration from {self.config_file}: {e}")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data or {}

    def _create_rewrite_config(self) -> RewriteConfig:
        """Create rewrite configuration from loaded data."""
        rewrite_data = self._config_data.get("rewrite", {})

        # Check environment variable override
        env_check = os.getenv("NETSPLIT_CHECK_COLLISIONS", "").lower() in ("1", "true", "yes")
        check = env_check or rewrite_data.get("check_name_collisions", False)

        return RewriteConfig(
            check_name_collisions=check,
            log_splits=rewrite_data.get("log_splits", True),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=log_data.get("level", "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "netsplit.log"),
        )

    def configure_logging(self) -> None:
        """Apply the logging section to the netsplit logger."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def is_collision_check_enabled(self) -> bool:
        """Check if the pre-flight name collision scan is enabled."""
        return self.rewrite.check_name_collisions

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "netsplit configuration",
            "rewrite": {
                "check_name_collisions": self.rewrite.check_name_collisions,
                "log_splits": self.rewrite.log_splits,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        with open(self.config_file, "w") as f:
            json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[NetsplitConfig] = None


def get_config() -> NetsplitConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = NetsplitConfig()
    return _global_config


def set_config(config: Optional[NetsplitConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> NetsplitConfig:
    """Load configuration from a specific file."""
    return NetsplitConfig(config_file)

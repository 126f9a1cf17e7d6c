"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
netsplit package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "netsplit"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the netsplit package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("NETSPLIT_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class NetsplitLogger:
    """
    Centralized logging for the split insertion pass.

    Wraps a module logger with helpers for the events the pass reports.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_pass_start(self, net_name: str, layer_count: int) -> None:
        """
        Log beginning of a split insertion pass.

        Args:
            net_name: Name of the network being rewritten
            layer_count: Number of layers in the input network
        """
        self.logger.debug(f"Inserting splits into net '{net_name}' ({layer_count} layers)")

    def log_split_inserted(self, split_name: str, blob_name: str, split_count: int) -> None:
        """
        Log a Split layer emitted for a shared top blob.

        Args:
            split_name: Name of the synthesized Split layer
            blob_name: Top blob being fanned out
            split_count: Number of split outputs
        """
        self.logger.debug(f"Inserted {split_name} for blob '{blob_name}' ({split_count} outputs)")

    def log_pass_summary(self, net_name: str, input_layers: int, split_layers: int) -> None:
        """
        Log the outcome of a pass.

        Args:
            net_name: Name of the network that was rewritten
            input_layers: Layer count before the pass
            split_layers: Number of Split layers inserted
        """
        self.logger.info(
            f"Net '{net_name}': {input_layers} layers, {split_layers} split layers inserted"
        )

    def log_unknown_blob(self, layer_name: str, bottom_index: int, blob_name: str) -> None:
        """
        Log a bottom blob with no producer.

        Args:
            layer_name: Layer consuming the blob
            bottom_index: Bottom slot of the layer
            blob_name: Unresolved blob name
        """
        self.logger.error(
            f"Unknown bottom blob '{blob_name}' (layer '{layer_name}', bottom index {bottom_index})"
        )


# Initialize logging on module import
setup_logging()

"""
Custom exception definitions.

This module defines the exception hierarchy for errors raised while
analyzing and rewriting network definitions.
"""

from typing import Iterable, Optional


class NetsplitError(Exception):
    """
    Base exception for all netsplit errors.

    Every failure of the pass is raised as a subclass of this class so
    callers can abort on a single exception type.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize netsplit error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class UnknownBlobError(NetsplitError):
    """
    Raised when a bottom blob has no producer earlier in the layer list.

    The network is invalid and no rewritten network is produced.
    """

    def __init__(self, layer_name: str, bottom_index: int, blob_name: str):
        """
        Initialize unknown blob error.

        Args:
            layer_name: Name of the consuming layer
            bottom_index: Bottom slot referencing the blob
            blob_name: The unresolved blob name
        """
        message = (
            f"Unknown bottom blob '{blob_name}' "
            f"(layer '{layer_name}', bottom index {bottom_index})"
        )
        super().__init__(message)
        self.layer_name = layer_name
        self.bottom_index = bottom_index
        self.blob_name = blob_name


class SplitNameCollisionError(NetsplitError):
    """Raised when a user-supplied name equals a synthesized split name."""

    def __init__(self, names: Iterable[str]):
        names = sorted(set(names))
        super().__init__(
            "Network names collide with synthesized split names",
            {"names": ", ".join(names)},
        )
        self.names = names


class InvalidGraphError(NetsplitError):
    """
    Raised when a network description is structurally malformed.

    This covers missing layer names and bottom/top fields that are not
    lists of blob names.
    """

    def __init__(self, message: str, layer_index: Optional[int] = None):
        details = {}
        if layer_index is not None:
            details["layer_index"] = layer_index

        super().__init__(message, details)
        self.layer_index = layer_index

"""
Unit tests for the exception hierarchy.
"""

import pytest

from netsplit.utils.exceptions import (
    NetsplitError,
    UnknownBlobError,
    SplitNameCollisionError,
    InvalidGraphError,
)


class TestNetsplitExceptions:
    """Test cases for custom exception classes."""

    def test_netsplit_error_basic(self):
        """Test basic NetsplitError functionality."""
        error = NetsplitError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_netsplit_error_with_details(self):
        """Test NetsplitError with details."""
        error = NetsplitError("Test error", {"key1": "value1", "key2": 42})

        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_unknown_blob_error(self):
        """Test UnknownBlobError carries the offending location."""
        error = UnknownBlobError("conv1", 1, "data")

        assert isinstance(error, NetsplitError)
        assert error.layer_name == "conv1"
        assert error.bottom_index == 1
        assert error.blob_name == "data"
        assert str(error) == "Unknown bottom blob 'data' (layer 'conv1', bottom index 1)"

    def test_split_name_collision_error(self):
        """Test colliding names are sorted and deduplicated."""
        error = SplitNameCollisionError(["x_A_0_split_1", "x_A_0_split", "x_A_0_split"])

        assert error.names == ["x_A_0_split", "x_A_0_split_1"]
        assert "names=x_A_0_split, x_A_0_split_1" in str(error)

    def test_invalid_graph_error(self):
        """Test InvalidGraphError with and without a layer index."""
        assert InvalidGraphError("bad net").details == {}
        assert InvalidGraphError("bad layer", layer_index=2).details == {"layer_index": 2}

    def test_errors_share_base_class(self):
        """Test every error can be caught as NetsplitError."""
        for error in (
            UnknownBlobError("a", 0, "b"),
            SplitNameCollisionError(["n"]),
            InvalidGraphError("bad"),
        ):
            with pytest.raises(NetsplitError):
                raise error

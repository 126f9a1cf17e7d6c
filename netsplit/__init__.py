"""
netsplit: Split Layer Insertion for Network Definitions

Rewrites a layer-list network definition so that every top blob is
consumed by at most one bottom. Shared blobs are fanned out through
explicit Split layers placed right after their producer.

Usage:
    from netsplit import NetGraph, insert_splits

    net = NetGraph.from_dict(net_description)
    split_net = insert_splits(net)
"""

__version__ = "0.1.0"
__author__ = "netsplit Team"
__email__ = "netsplit@example.com"

# Public API exports
from .graph import (
    LayerNode,
    NetGraph,
    GraphAnalyzer,
    AnalysisResult,
    BlobRef,
    SplitRewriter,
    insert_splits,
    rewrite,
    split_layer_name,
    split_blob_name,
    net_from_fx,
)

from .utils import (
    NetsplitError,
    UnknownBlobError,
    SplitNameCollisionError,
    InvalidGraphError,
    NetsplitConfig,
    get_config,
    set_config,
)

__all__ = [
    "LayerNode",
    "NetGraph",
    "GraphAnalyzer",
    "AnalysisResult",
    "BlobRef",
    "SplitRewriter",
    "insert_splits",
    "rewrite",
    "split_layer_name",
    "split_blob_name",
    "net_from_fx",
    "NetsplitError",
    "UnknownBlobError",
    "SplitNameCollisionError",
    "InvalidGraphError",
    "NetsplitConfig",
    "get_config",
    "set_config",
]

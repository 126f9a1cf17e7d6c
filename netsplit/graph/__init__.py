"""
Graph module for network definitions and split insertion.

This module holds the layer/network representation, the def-use
analyzer, split naming, the split rewriter and the torch.fx front end.
"""

from .graph_nodes import LayerNode, NetGraph
from .graph_analyzer import GraphAnalyzer, AnalysisResult, BlobRef
from .split_naming import split_layer_name, split_blob_name, find_name_collisions
from .split_rewriter import (
    SplitRewriter,
    configure_split_layer,
    insert_splits,
    rewrite,
    SPLIT_LAYER_TYPE,
)
from .fx_import import FxGraphImporter, net_from_fx

__all__ = [
    "LayerNode",
    "NetGraph",
    "GraphAnalyzer",
    "AnalysisResult",
    "BlobRef",
    "split_layer_name",
    "split_blob_name",
    "find_name_collisions",
    "SplitRewriter",
    "configure_split_layer",
    "insert_splits",
    "rewrite",
    "SPLIT_LAYER_TYPE",
    "FxGraphImporter",
    "net_from_fx",
]

"""
Split layer insertion.

Rewrites a network so that every top blob feeds at most one bottom.
A top used more than once gets a Split layer right after its producer,
and each consumer is rewired to its own Split output.
"""

from __future__ import annotations

from typing import Optional

from .graph_analyzer import AnalysisResult, BlobRef, GraphAnalyzer
from .graph_nodes import LayerNode, NetGraph
from .split_naming import find_name_collisions, split_blob_name, split_layer_name
from ..utils.config import NetsplitConfig, RewriteConfig, get_config
from ..utils.exceptions import SplitNameCollisionError
from ..utils.logging import NetsplitLogger

log = NetsplitLogger(__name__)

SPLIT_LAYER_TYPE = "Split"


def configure_split_layer(
    layer_name: str,
    blob_name: str,
    blob_idx: int,
    split_count: int,
    loss_weight: float = 0.0,
) -> LayerNode:
    """
    Build the Split layer for one shared top blob.

    Args:
        layer_name: Name of the layer producing the blob
        blob_name: Name of the shared blob
        blob_idx: Top slot of the blob in the producing layer
        split_count: Number of outputs to create
        loss_weight: Objective weight of the blob; when nonzero it moves to
            the first output and every other output gets 0

    Returns:
        The Split LayerNode
    """
    split_layer = LayerNode(
        name=split_layer_name(layer_name, blob_name, blob_idx),
        type=SPLIT_LAYER_TYPE,
        bottoms=[blob_name],
    )
    for k in range(split_count):
        split_layer.tops.append(split_blob_name(layer_name, blob_name, blob_idx, k))
        if loss_weight:
            split_layer.loss_weights.append(loss_weight if k == 0 else 0.0)
    return split_layer


class SplitRewriter:
    """
    Second pass of split insertion.

    Walks the layers in order, renames shared bottoms and emits Split
    layers using a finished AnalysisResult.
    """

    def __init__(self, config: Optional[RewriteConfig] = None):
        """
        Initialize the rewriter.

        Args:
            config: Rewrite options; defaults are used when None
        """
        self.config = config or RewriteConfig()

    def rewrite(self, net: NetGraph, analysis: AnalysisResult) -> NetGraph:
        """
        Produce the rewritten network.

        Args:
            net: Original network, left unmodified
            analysis: Def-use analysis of ``net``

        Returns:
            A new NetGraph with Split layers inserted
        """
        result = net.copy_without_layers()
        # Next free Split output of each shared top
        split_indices: dict[BlobRef, int] = {}

        for i, layer in enumerate(net.layers):
            new_layer = layer.clone()
            result.add_layer(new_layer)

            for j, blob_name in enumerate(layer.bottoms):
                top = analysis.bottom_sources[BlobRef(i, j)]
                if not analysis.needs_split(top):
                    continue
                split_idx = split_indices.get(top, 0)
                new_layer.bottoms[j] = split_blob_name(
                    analysis.layer_names[top.layer_index], blob_name, top.slot, split_idx
                )
                split_indices[top] = split_idx + 1

            for k, blob_name in enumerate(layer.tops):
                top = BlobRef(i, k)
                if not analysis.needs_split(top):
                    continue
                split_count = analysis.split_count(top)
                loss_weight = analysis.loss_weight(top)
                split_layer = configure_split_layer(
                    analysis.layer_names[i], blob_name, k, split_count, loss_weight
                )
                result.add_layer(split_layer)
                if self.config.log_splits:
                    log.log_split_inserted(split_layer.name, blob_name, split_count)

                # The objective keeps Split output 0; consumers start at 1
                if loss_weight:
                    new_layer.loss_weights.clear()
                    split_indices[top] = split_indices.get(top, 0) + 1

        return result


def insert_splits(net: NetGraph, config: Optional[NetsplitConfig] = None) -> NetGraph:
    """
    Rewrite a network so that no top blob has more than one consumer.

    Args:
        net: Network to rewrite; it is not modified
        config: Configuration to use; the global configuration when None

    Returns:
        The rewritten network

    Raises:
        UnknownBlobError: If a bottom blob has no earlier producer
        SplitNameCollisionError: If collision checking is enabled and a
            user-supplied name equals a synthesized one
    """
    if config is None:
        config = get_config()

    log.log_pass_start(net.name, len(net.layers))
    analysis = GraphAnalyzer().analyze(net)

    if config.rewrite.check_name_collisions:
        collisions = find_name_collisions(net, analysis)
        if collisions:
            raise SplitNameCollisionError(collisions)

    result = SplitRewriter(config.rewrite).rewrite(net, analysis)
    log.log_pass_summary(net.name, len(net.layers), len(result.layers) - len(net.layers))
    return result


rewrite = insert_splits

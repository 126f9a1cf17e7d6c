"""
Naming of synthesized Split layers and blobs.

Names are pure functions of the producing layer's name, the blob name,
the top slot and the split output index, so rewriting the same network
twice always yields the same names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graph_analyzer import AnalysisResult
    from .graph_nodes import NetGraph


def split_layer_name(layer_name: str, blob_name: str, blob_idx: int) -> str:
    """
    Name of the Split layer fanning out a top blob.

    Args:
        layer_name: Name of the layer producing the blob
        blob_name: Name of the blob being split
        blob_idx: Top slot of the blob in the producing layer

    Returns:
        ``"{blob}_{layer}_{slot}_split"``
    """
    return f"{blob_name}_{layer_name}_{blob_idx}_split"


def split_blob_name(layer_name: str, blob_name: str, blob_idx: int, split_idx: int) -> str:
    """
    Name of one output of a Split layer.

    Args:
        layer_name: Name of the layer producing the blob
        blob_name: Name of the blob being split
        blob_idx: Top slot of the blob in the producing layer
        split_idx: Index of the output within the Split layer

    Returns:
        ``"{blob}_{layer}_{slot}_split_{split_idx}"``
    """
    return f"{blob_name}_{layer_name}_{blob_idx}_split_{split_idx}"


def find_name_collisions(net: "NetGraph", analysis: "AnalysisResult") -> list[str]:
    """
    Find user-supplied names that the pass would also synthesize.

    Args:
        net: Network about to be rewritten
        analysis: Def-use analysis of ``net``

    Returns:
        Sorted list of colliding names, empty when there are none
    """
    user_names = set()
    for layer in net.layers:
        user_names.add(layer.name)
        user_names.update(layer.bottoms)
        user_names.update(layer.tops)

    synthesized = set()
    for top in analysis.shared_tops():
        layer_name = analysis.layer_names[top.layer_index]
        blob_name = net.layers[top.layer_index].tops[top.slot]
        synthesized.add(split_layer_name(layer_name, blob_name, top.slot))
        for k in range(analysis.split_count(top)):
            synthesized.add(split_blob_name(layer_name, blob_name, top.slot, k))

    return sorted(user_names & synthesized)

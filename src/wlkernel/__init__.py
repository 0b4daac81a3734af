"""
wlkernel: Weisfeiler-Lehman relabeling, cumulative WL subtree kernels,
kernel similarity, and WL-1 isomorphism rejection.
"""

import logging

from .graph import GraphView, NetworkXGraphView, AdjacencyGraph, as_graph_view
from .wl import (
    LabelDictionary,
    LabelStep,
    compute_labels,
    label_classes,
    WLIsomorphismResult,
    wl_isomorphism_test,
    wl_isomorphism_test_shared,
    maybe_isomorphic,
    maybe_isomorphic_shared,
)
from .kernel import (
    HistogramIndex,
    KernelInfo,
    WLSession,
    wl_kernels,
    cosine_similarity,
    jaccard_similarity,
    graph_wl_cosine_similarity,
    graph_wl_jaccard_similarity,
    pairwise_wl_similarity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Graph capability
    "GraphView",
    "NetworkXGraphView",
    "AdjacencyGraph",
    "as_graph_view",
    # Labeling
    "LabelDictionary",
    "LabelStep",
    "compute_labels",
    "label_classes",
    # Isomorphism
    "WLIsomorphismResult",
    "wl_isomorphism_test",
    "wl_isomorphism_test_shared",
    "maybe_isomorphic",
    "maybe_isomorphic_shared",
    # Kernels
    "HistogramIndex",
    "KernelInfo",
    "WLSession",
    "wl_kernels",
    "cosine_similarity",
    "jaccard_similarity",
    "graph_wl_cosine_similarity",
    "graph_wl_jaccard_similarity",
    "pairwise_wl_similarity",
]

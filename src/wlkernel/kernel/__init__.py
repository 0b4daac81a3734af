from .histogram import HistogramIndex
from .session import KernelInfo, WLSession, wl_kernels
from .similarity import (
    cosine_similarity,
    jaccard_similarity,
    graph_wl_cosine_similarity,
    graph_wl_jaccard_similarity,
    pairwise_wl_similarity,
)

__all__ = [
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

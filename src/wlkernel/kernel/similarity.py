"""
Similarity measures over WL kernel vectors.

Both measures need non-negative integer-valued vectors of equal length,
taken from the same session. Cases with a zero denominator raise
ValueError instead of returning NaN.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from wlkernel import config
from .session import check_iterations, wl_kernels


def _as_kernel(u, name: str) -> np.ndarray:
    arr = np.asarray(u)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        if not np.issubdtype(arr.dtype, np.floating) or not np.all(np.isfinite(arr)):
            raise ValueError(f"{name} must be integer-valued, got dtype {arr.dtype}")
        if not np.all(arr == np.floor(arr)):
            raise ValueError(f"{name} must be integer-valued")
    arr = arr.astype(np.int64)
    if np.any(arr < 0):
        raise ValueError(f"{name} must be non-negative")
    return arr


def _kernel_pair(u, v) -> Tuple[np.ndarray, np.ndarray]:
    a, b = _as_kernel(u, "u"), _as_kernel(v, "v")
    if a.shape != b.shape:
        raise ValueError(
            f"kernel vectors must have equal length, got {a.shape[0]} and {b.shape[0]}"
        )
    return a, b


def cosine_similarity(u, v) -> float:
    """(u.v) / sqrt((u.u)(v.v)); raises ValueError if either vector is all zero."""
    a, b = _kernel_pair(u, v)
    ab = int(np.dot(a, b))
    aa = int(np.dot(a, a))
    bb = int(np.dot(b, b))
    if aa == 0 or bb == 0:
        raise ValueError("cosine similarity is undefined for an all-zero kernel vector")
    return ab / math.sqrt(aa * bb)


def jaccard_similarity(u, v) -> float:
    """
    Weighted (multiset) Jaccard index:
      sum(min(u, v)) / (sum(u) + sum(v) - sum(min(u, v)))

    Raises ValueError if both vectors are all zero.
    """
    a, b = _kernel_pair(u, v)
    shared = int(np.minimum(a, b).sum())
    total = int(a.sum()) + int(b.sum())
    if total - shared == 0:
        raise ValueError("Jaccard similarity is undefined when both kernel vectors are all zero")
    return shared / (total - shared)


METRICS: Dict[str, Callable[[Any, Any], float]] = {
    "cosine": cosine_similarity,
    "jaccard": jaccard_similarity,
}


def _resolve_iterations(iterations: Optional[int]) -> int:
    if iterations is None:
        iterations = config.DEFAULT_ITERATIONS
    return check_iterations(iterations)


def graph_wl_cosine_similarity(a, b, iterations: Optional[int] = None) -> float:
    """Cosine similarity of the WL kernels of A and B in a fresh shared session."""
    ka, kb = wl_kernels([a, b], _resolve_iterations(iterations))
    return cosine_similarity(ka.kernel, kb.kernel)


def graph_wl_jaccard_similarity(a, b, iterations: Optional[int] = None) -> float:
    """Jaccard similarity of the WL kernels of A and B in a fresh shared session."""
    ka, kb = wl_kernels([a, b], _resolve_iterations(iterations))
    return jaccard_similarity(ka.kernel, kb.kernel)


def pairwise_wl_similarity(
    graphs: Sequence[Any],
    iterations: Optional[int] = None,
    metric: str = "cosine",
) -> np.ndarray:
    """
    Symmetric matrix of WL similarities, all graphs in one session.

    metric: "cosine" | "jaccard"
    """
    try:
        fn = METRICS[metric]
    except KeyError:
        raise ValueError(
            f"unknown metric {metric!r}; expected one of {sorted(METRICS)}"
        ) from None

    infos = wl_kernels(graphs, _resolve_iterations(iterations))
    n = len(infos)
    out = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i, n):
            out[i, j] = out[j, i] = fn(infos[i].kernel, infos[j].kernel)
    return out

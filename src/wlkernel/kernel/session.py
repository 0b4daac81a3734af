"""Comparison sessions and cumulative WL kernel assembly."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Sequence

import numpy as np

from wlkernel.wl.dictionary import LabelDictionary
from wlkernel.wl.labels import Label, LabelStep, compute_labels
from .histogram import HistogramIndex

logger = logging.getLogger(__name__)


@dataclass
class KernelInfo:
    """
    Per-graph working state of a session.

    kernel:     cumulative label histogram, one int64 entry per dimension
                of the session's HistogramIndex at the last update
    labels:     node -> label after the last round (None before round 1)
    word_count: label -> count for the last round only
    last_step:  full LabelStep of the last round
    """

    graph: Any
    kernel: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.int64))
    labels: Optional[Dict[Hashable, Label]] = None
    word_count: Optional[Dict[Label, int]] = None
    last_step: Optional[LabelStep] = None


def check_iterations(iterations) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise ValueError(f"iterations must be a positive int, got {iterations!r}")
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    return iterations


@dataclass
class WLSession:
    """
    One comparison session: a label dictionary and a histogram index
    shared by every graph refined through it.

    Labels and kernel dimensions are only comparable between graphs of
    the same session. Sessions are not thread-safe.
    """

    dictionary: LabelDictionary = field(default_factory=LabelDictionary)
    histogram: HistogramIndex = field(default_factory=HistogramIndex)
    rounds: int = 0

    def track(self, graphs: Sequence[Any]) -> List[KernelInfo]:
        return [KernelInfo(graph=g) for g in graphs]

    def step(self, items: Sequence[KernelInfo]) -> None:
        """Advance every item by one refinement round and fold its counts into its kernel."""
        for item in items:
            result = compute_labels(item.graph, item.labels, self.dictionary)
            self.histogram.add(result.word_count)
            item.labels = result.labels
            item.word_count = result.word_count
            item.last_step = result
        self._update_kernels(items)
        self.rounds += 1
        logger.debug(
            "round %d: dictionary=%d histogram=%d",
            self.rounds,
            len(self.dictionary),
            len(self.histogram),
        )

    def _update_kernels(self, items: Sequence[KernelInfo]) -> None:
        words = set()
        for item in items:
            words.update(item.word_count)

        size = len(self.histogram)
        for item in items:
            kernel = self.aligned(item.kernel, size)
            for word in words:
                # a word this graph did not produce adds nothing
                kernel[self.histogram.dimension(word)] += item.word_count.get(word, 0)
            item.kernel = kernel

    def aligned(self, kernel: np.ndarray, size: Optional[int] = None) -> np.ndarray:
        """Copy of *kernel* zero-padded to the current histogram size."""
        if size is None:
            size = len(self.histogram)
        if kernel.shape[0] > size:
            raise ValueError(
                f"kernel has {kernel.shape[0]} dimensions, session histogram has {size}"
            )
        out = np.zeros(size, dtype=np.int64)
        out[: kernel.shape[0]] = kernel
        return out


def wl_kernels(
    graphs: Sequence[Any],
    iterations: int,
    session: Optional[WLSession] = None,
) -> List[KernelInfo]:
    """
    Compute cumulative WL subtree kernels for graphs sharing one session.

    Each iteration looks one hop further. The returned kernels are all
    of length len(session.histogram).
    """
    check_iterations(iterations)
    if session is None:
        session = WLSession()
    items = session.track(graphs)
    for _ in range(iterations):
        session.step(items)
    return items

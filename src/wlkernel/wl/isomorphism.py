"""
WL-1 isomorphism rejection.

Two regimes are provided and kept apart on purpose:

  wl_isomorphism_test / maybe_isomorphic
      every graph gets a fresh private dictionary on every round;
      word counts are compared code-by-code.

  wl_isomorphism_test_shared / maybe_isomorphic_shared
      one dictionary is shared by both graphs for the whole test, so
      equal codes always mean equal signatures.

Either way a False verdict is a proof of non-isomorphism and a True
verdict is only a necessary condition.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, Mapping, Optional

from wlkernel import config
from wlkernel.graph.view import GraphView, as_graph_view
from .dictionary import LabelDictionary
from .labels import Label, LabelStep, compute_labels, label_order_key

logger = logging.getLogger(__name__)


StepFn = Callable[[GraphView, Optional[Mapping[Hashable, Label]]], LabelStep]


@dataclass(frozen=True)
class WLIsomorphismResult:
    """
    Outcome of a WL isomorphism test.

    reason: "node_count" | "link_count" | "word_count" | "converged" | "bound"
    witness_label: first label (ascending) whose counts differ, when
                   reason == "word_count"
    word_count_a/b: word counts of the last round computed
    """

    maybe_isomorphic: bool
    rounds: int
    reason: str
    witness_label: Optional[Label] = None
    word_count_a: Dict[Label, int] = field(default_factory=dict)
    word_count_b: Dict[Label, int] = field(default_factory=dict)


def _round_bound(va: GraphView) -> int:
    # WL-1 stabilizes within |V| rounds
    bound = va.node_count()
    if config.MAX_ROUNDS is not None:
        bound = min(bound, config.MAX_ROUNDS)
    return bound


def _witness(wa: Mapping[Label, int], wb: Mapping[Label, int]) -> Optional[Label]:
    for c in sorted(set(wa) | set(wb), key=label_order_key):
        if wa.get(c, 0) != wb.get(c, 0):
            return c
    return None


def _labels_unchanged(step: LabelStep) -> bool:
    return not step.changed


def _partition_stable(step: LabelStep) -> bool:
    # the new partition always refines the old one, so equal class
    # counts mean the partition did not change
    return len(set(step.labels.values())) == len(set(step.prev_labels.values()))


def _refine_pair(
    a,
    b,
    step: StepFn,
    converged: Callable[[LabelStep], bool],
) -> WLIsomorphismResult:
    va, vb = as_graph_view(a), as_graph_view(b)

    if va.node_count() != vb.node_count():
        return WLIsomorphismResult(False, 0, "node_count")
    if va.link_count() != vb.link_count():
        return WLIsomorphismResult(False, 0, "link_count")

    bound = _round_bound(va)
    prev_a: Optional[Mapping[Hashable, Label]] = None
    prev_b: Optional[Mapping[Hashable, Label]] = None
    wa: Dict[Label, int] = {}
    wb: Dict[Label, int] = {}

    for r in range(1, bound + 1):
        step_a = step(va, prev_a)
        step_b = step(vb, prev_b)
        wa, wb = step_a.word_count, step_b.word_count
        logger.debug("round %d: %d vs %d distinct labels", r, len(wa), len(wb))

        if wa != wb:
            return WLIsomorphismResult(False, r, "word_count", _witness(wa, wb), wa, wb)

        if prev_a is not None and converged(step_a) and converged(step_b):
            logger.debug("labels stable after round %d of %d", r, bound)
            return WLIsomorphismResult(True, r, "converged", None, wa, wb)

        prev_a, prev_b = step_a.labels, step_b.labels

    return WLIsomorphismResult(True, bound, "bound", None, wa, wb)


def wl_isomorphism_test(a, b) -> WLIsomorphismResult:
    """
    Independent-dictionary WL test.

    Each round relabels A and B with their own fresh dictionaries and
    compares the code -> count maps. Stops early once neither graph
    changed any label.
    """
    return _refine_pair(a, b, compute_labels, _labels_unchanged)


def wl_isomorphism_test_shared(a, b) -> WLIsomorphismResult:
    """
    Shared-dictionary WL test.

    A and B are relabeled with one dictionary for the whole test, so
    codes never repeat across rounds; convergence is detected when
    neither graph's color partition was split.
    """
    dictionary = LabelDictionary()

    def step(view: GraphView, prev: Optional[Mapping[Hashable, Label]]) -> LabelStep:
        return compute_labels(view, prev, dictionary)

    return _refine_pair(a, b, step, _partition_stable)


def maybe_isomorphic(a, b) -> bool:
    """False means A and B are definitely not isomorphic."""
    return wl_isomorphism_test(a, b).maybe_isomorphic


def maybe_isomorphic_shared(a, b) -> bool:
    """Shared-dictionary counterpart of maybe_isomorphic."""
    return wl_isomorphism_test_shared(a, b).maybe_isomorphic

"""One round of Weisfeiler-Lehman relabeling over a GraphView."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Hashable, List, Mapping, Optional, Tuple

from wlkernel.config import INITIAL_LABEL
from wlkernel.graph.view import as_graph_view
from .dictionary import LabelDictionary


Label = Hashable
Signature = Tuple[Label, Tuple[Label, ...]]


def label_order_key(label: Label) -> Tuple[int, object]:
    """
    Deterministic total order over labels: ints numerically, then
    everything else by textual form.
    """
    if isinstance(label, int):
        return (0, label)
    return (1, str(label))


def _signature_order_key(sig: Signature):
    own, neigh = sig
    return (label_order_key(own), tuple(label_order_key(x) for x in neigh))


@dataclass(frozen=True)
class LabelStep:
    """
    Result of one WL refinement round.

    labels:              node -> new compressed label
    prev_labels:         node -> label the round started from
    uncompressed_labels: node -> sorted previous labels of its neighbors
    word_count:          label -> number of nodes carrying it, ascending by label
    changed:             True iff some node's label differs from prev_labels
    """

    labels: Dict[Hashable, Label]
    prev_labels: Mapping[Hashable, Label]
    uncompressed_labels: Dict[Hashable, List[Label]]
    word_count: Dict[Label, int]
    changed: bool


def _prev_label(prev_labels: Mapping[Hashable, Label], node: Hashable, origin: Hashable) -> Label:
    try:
        return prev_labels[node]
    except KeyError:
        if node == origin:
            msg = f"prev_labels has no label for node {node!r}"
        else:
            msg = f"prev_labels has no label for node {node!r} (neighbor of {origin!r})"
        raise ValueError(msg) from None


def compute_labels(
    graph,
    prev_labels: Optional[Mapping[Hashable, Label]] = None,
    dictionary: Optional[LabelDictionary] = None,
) -> LabelStep:
    """
    Perform one Weisfeiler-Lehman relabeling round.

    Parameters
    ----------
    graph : networkx graph or GraphView
        Neighbors are taken over both link directions.
    prev_labels : mapping, optional
        node -> label from the previous round. Defaults to INITIAL_LABEL
        for every node. Any hashable labels may be supplied here, e.g.
        node attributes.
    dictionary : LabelDictionary, optional
        Interner to compress signatures with. Pass the same instance for
        every graph and round whose labels must be comparable. A private
        dictionary is created when omitted.

    Returns
    -------
    LabelStep

    The signature of a node is (own previous label, sorted previous
    labels of its neighbors), with neighbors sorted by textual form.
    Unseen signatures are interned in sorted signature order, so the
    result does not depend on node enumeration order.
    """
    view = as_graph_view(graph)
    nodes = list(view.nodes())

    if prev_labels is None:
        prev_labels = {v: INITIAL_LABEL for v in nodes}
    if dictionary is None:
        dictionary = LabelDictionary()

    uncompressed: Dict[Hashable, List[Label]] = {}
    signatures: Dict[Hashable, Signature] = {}
    for v in nodes:
        own = _prev_label(prev_labels, v, v)
        neigh = sorted((_prev_label(prev_labels, u, v) for u in view.neighbors(v)), key=str)
        uncompressed[v] = neigh
        signatures[v] = (own, tuple(neigh))

    for sig in sorted(set(signatures.values()), key=_signature_order_key):
        dictionary.lookup_or_insert(sig)

    labels = {v: dictionary[signatures[v]] for v in nodes}
    counts = Counter(labels.values())
    word_count = {w: counts[w] for w in sorted(counts, key=label_order_key)}
    changed = any(labels[v] != prev_labels[v] for v in nodes)

    return LabelStep(
        labels=labels,
        prev_labels=prev_labels,
        uncompressed_labels=uncompressed,
        word_count=word_count,
        changed=changed,
    )


def label_classes(labels: Mapping[Hashable, Label]) -> Dict[Label, List[Hashable]]:
    """Group nodes by label; labels ascending, nodes in mapping order."""
    groups: Dict[Label, List[Hashable]] = {}
    for v, c in labels.items():
        groups.setdefault(c, []).append(v)
    return {c: groups[c] for c in sorted(groups, key=label_order_key)}

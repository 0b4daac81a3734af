from .dictionary import LabelDictionary
from .labels import (
    LabelStep,
    compute_labels,
    label_classes,
    label_order_key,
)
from .isomorphism import (
    WLIsomorphismResult,
    wl_isomorphism_test,
    wl_isomorphism_test_shared,
    maybe_isomorphic,
    maybe_isomorphic_shared,
)

__all__ = [
    "LabelDictionary",
    "LabelStep",
    "compute_labels",
    "label_classes",
    "label_order_key",
    "WLIsomorphismResult",
    "wl_isomorphism_test",
    "wl_isomorphism_test_shared",
    "maybe_isomorphic",
    "maybe_isomorphic_shared",
]

from __future__ import annotations

from typing import Dict, Hashable, Iterator, Mapping

from wlkernel.wl.labels import label_order_key


class HistogramIndex:
    """
    Session-scoped word -> kernel dimension map.

    A word gets the next free dimension the first time any graph in
    the session reports it; dimensions never move afterwards.
    """

    __slots__ = ("_dims",)

    def __init__(self) -> None:
        self._dims: Dict[Hashable, int] = {}

    def add(self, word_count: Mapping[Hashable, int]) -> int:
        """Index every unseen word, ascending by label. Returns how many were new."""
        added = 0
        for word in sorted(word_count, key=label_order_key):
            if word not in self._dims:
                self._dims[word] = len(self._dims)
                added += 1
        return added

    def dimension(self, word: Hashable) -> int:
        try:
            return self._dims[word]
        except KeyError:
            raise KeyError(f"word {word!r} has no histogram dimension") from None

    def words(self) -> Iterator[Hashable]:
        """Words in dimension order."""
        return iter(self._dims)

    def __contains__(self, word: Hashable) -> bool:
        return word in self._dims

    def __len__(self) -> int:
        return len(self._dims)

    def __repr__(self) -> str:
        return f"HistogramIndex(size={len(self._dims)})"

from __future__ import annotations

from typing import Dict, Hashable, Optional


class LabelDictionary:
    """
    Signature -> label interner scoped to one comparison session.

    Codes are positive ints issued in first-seen order starting at 1.
    Entries are never removed or reassigned, so a code is only
    meaningful next to other codes from the same instance.
    """

    __slots__ = ("_codes",)

    def __init__(self) -> None:
        self._codes: Dict[Hashable, int] = {}

    def lookup_or_insert(self, signature: Hashable) -> int:
        code = self._codes.get(signature)
        if code is None:
            code = len(self._codes) + 1
            self._codes[signature] = code
        return code

    def get(self, signature: Hashable) -> Optional[int]:
        return self._codes.get(signature)

    def __getitem__(self, signature: Hashable) -> int:
        return self._codes[signature]

    def __contains__(self, signature: Hashable) -> bool:
        return signature in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"LabelDictionary(size={len(self._codes)})"

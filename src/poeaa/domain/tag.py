"""Tag: single-text value object, usable as a set member or dict key."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from poeaa.domain.value_object import ValueObject


@dataclass(frozen=True, eq=False)
class Tag(ValueObject):
    """
    Tag: equality by text (exact, case-sensitive).
    Hash agrees with equality; None and empty text both hash to 0.
    """

    text: Optional[str]

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, Tag):
            return False
        return self.text == other.text

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        if not self.text:
            return 0
        return hash(self.text)

    def __str__(self) -> str:
        return self.text or ""

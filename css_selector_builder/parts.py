from enum import IntEnum
from typing import Dict, FrozenSet, Tuple

COMBINATORS: FrozenSet[str] = frozenset({" ", "+", "~", ">"})

class PartKind(IntEnum):
    """Compound selector parts, valued by their canonical rank."""
    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def single_shot(self) -> bool:
        return self in SINGLE_SHOT_PARTS

    def render(self, value: str) -> str:
        """Wrap a raw fragment in the delimiters of this part kind."""
        prefix, suffix = DELIMITERS[self]
        return f"{prefix}{value}{suffix}"

SINGLE_SHOT_PARTS: FrozenSet[PartKind] = frozenset({
    PartKind.ELEMENT,
    PartKind.ID,
    PartKind.PSEUDO_ELEMENT,
})

DELIMITERS: Dict[PartKind, Tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

ORDER_DESCRIPTION = ", ".join(kind.label for kind in PartKind)

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple
import logging

from .exceptions import DuplicatePartError, FrozenSelectorError, OrderViolationError
from .parts import ORDER_DESCRIPTION, PartKind

logger = logging.getLogger(__name__)

class Selectable(ABC):
    """Anything that renders to selector text."""

    @abstractmethod
    def stringify(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.stringify()

class CompoundSelector(Selectable):
    """
    A single selector node: element#id.class[attr]:pseudo-class::pseudo-element.

    Parts must be appended in canonical order. Element, id and pseudo-element
    may appear at most once; classes, attributes and pseudo-classes can repeat
    and keep their append order. Every append returns the same instance so
    calls can be chained.
    """

    def __init__(self):
        self._parts: Dict[PartKind, List[str]] = {kind: [] for kind in PartKind}
        self._history: List[PartKind] = []
        self._frozen = False

    @property
    def history(self) -> Tuple[PartKind, ...]:
        return tuple(self._history)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "CompoundSelector":
        self._frozen = True
        return self

    def element(self, value: str) -> "CompoundSelector":
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> "CompoundSelector":
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> "CompoundSelector":
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> "CompoundSelector":
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "CompoundSelector":
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "CompoundSelector":
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    with_element = element
    with_id = id
    with_class = class_
    with_attribute = attr
    with_pseudo_class = pseudo_class
    with_pseudo_element = pseudo_element

    def _append(self, kind: PartKind, value: str) -> "CompoundSelector":
        self._check(kind)
        self._parts[kind].append(value)
        self._history.append(kind)
        return self

    def _check(self, kind: PartKind) -> None:
        """Raise if appending `kind` would break the selector grammar."""
        if self._frozen:
            logger.debug(f"Rejected {kind.label} on frozen selector {self.stringify()!r}")
            raise FrozenSelectorError(
                "Selector is part of a combined selector and can no longer be changed",
                kind
            )

        if kind.single_shot and kind in self._history:
            logger.debug(f"Rejected duplicate {kind.label} on {self.stringify()!r}")
            raise DuplicatePartError(
                "Element, id and pseudo-element should not occur more than one time inside the selector",
                kind
            )

        previous = self._history[-1] if self._history else None
        if previous is not None and kind < previous:
            logger.debug(f"Rejected {kind.label} after {previous.label} on {self.stringify()!r}")
            raise OrderViolationError(
                f"Selector parts should be arranged in the following order: {ORDER_DESCRIPTION}",
                kind,
                previous
            )

    def stringify(self) -> str:
        return "".join(
            kind.render(value)
            for kind in PartKind
            for value in self._parts[kind]
        )

    def __repr__(self) -> str:
        return f"CompoundSelector({self.stringify()!r})"

class CombinedSelector(Selectable):
    """Two selectors joined by a combinator; operands may nest arbitrarily."""

    def __init__(self, left: Selectable, combinator: str, right: Selectable):
        for operand in (left, right):
            if not isinstance(operand, Selectable):
                raise TypeError(f"Expected a selector, got {type(operand).__name__}")
        for operand in (left, right):
            if isinstance(operand, CompoundSelector):
                operand.freeze()
        self._left = left
        self._combinator = combinator
        self._right = right

    @property
    def left(self) -> Selectable:
        return self._left

    @property
    def combinator(self) -> str:
        return self._combinator

    @property
    def right(self) -> Selectable:
        return self._right

    def stringify(self) -> str:
        return f"{self._left.stringify()} {self._combinator} {self._right.stringify()}"

    def __repr__(self) -> str:
        return f"CombinedSelector({self.stringify()!r})"

# css_selector_builder/__init__.py
from .parts import PartKind, COMBINATORS
from .selectors import Selectable, CompoundSelector, CombinedSelector
from .builder import SelectorBuilder, BuilderSettings, css_selector_builder
from .exceptions import (
    ValidationError,
    SelectorBuildError,
    OrderViolationError,
    DuplicatePartError,
    FrozenSelectorError,
    InvalidCombinatorError
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "BuilderSettings",
    "Selectable",
    "CompoundSelector",
    "CombinedSelector",
    "PartKind",

    # Default builder and constants
    "css_selector_builder",
    "COMBINATORS",

    # Exceptions
    "ValidationError",
    "SelectorBuildError",
    "OrderViolationError",
    "DuplicatePartError",
    "FrozenSelectorError",
    "InvalidCombinatorError"
]

class ValidationError(Exception):
    """Base validation error."""
    pass

class SelectorBuildError(ValidationError):
    """A selector part was appended in a way the grammar does not allow."""

    def __init__(self, message: str, kind=None):
        self.kind = kind
        super().__init__(message)

class OrderViolationError(SelectorBuildError):
    """Selector part appended out of canonical order."""

    def __init__(self, message: str, kind=None, previous=None):
        self.previous = previous
        super().__init__(message, kind)

class DuplicatePartError(SelectorBuildError):
    """Element, id or pseudo-element appended more than once."""
    pass

class FrozenSelectorError(SelectorBuildError):
    """Selector already used inside a combined selector."""
    pass

class InvalidCombinatorError(ValidationError):
    """Combinator token outside the allowed set."""

    def __init__(self, message: str, combinator: str = ""):
        self.combinator = combinator
        super().__init__(message)

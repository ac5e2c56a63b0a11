from typing import FrozenSet, Optional
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidCombinatorError
from .parts import COMBINATORS
from .selectors import CombinedSelector, CompoundSelector, Selectable

logger = logging.getLogger(__name__)

class BuilderSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    validate_combinators: bool = Field(default=True)
    allowed_combinators: FrozenSet[str] = Field(default=COMBINATORS)

    @field_validator("allowed_combinators")
    @classmethod
    def check_allowed_combinators(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        if not value:
            raise ValueError("At least one combinator must be allowed")
        if any(not token for token in value):
            raise ValueError("Combinators must be non-empty strings")
        return value

class SelectorBuilder:
    """Facade for building CSS selectors.

    Every part method starts a new compound selector; `combine` joins two
    existing selectors with a combinator.
    """

    def __init__(self, settings: Optional[BuilderSettings] = None):
        self.settings = settings or BuilderSettings()

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(
        self,
        left: Selectable,
        combinator: str,
        right: Selectable
    ) -> CombinedSelector:
        """
        Join two selectors with a combinator.

        Args:
            left: Selector on the left-hand side
            combinator: One of ' ', '+', '~', '>' unless validation is disabled
            right: Selector on the right-hand side

        Returns:
            CombinedSelector rendering as "<left> <combinator> <right>"

        Raises:
            InvalidCombinatorError: If the combinator is not allowed
        """
        if self.settings.validate_combinators and combinator not in self.settings.allowed_combinators:
            logger.debug(f"Rejected combinator {combinator!r}")
            raise InvalidCombinatorError(
                f"Invalid combinator {combinator!r}, expected one of "
                f"{sorted(self.settings.allowed_combinators)}",
                combinator
            )

        combined = CombinedSelector(left, combinator, right)
        logger.debug(f"Combined selector built: {combined.stringify()!r}")
        return combined

css_selector_builder = SelectorBuilder()

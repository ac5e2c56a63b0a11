import pytest
from css_selector_builder import SelectorBuilder, BuilderSettings

@pytest.fixture
def builder():
    """Return a SelectorBuilder with default settings."""
    return SelectorBuilder()

@pytest.fixture
def permissive_builder():
    """Return a SelectorBuilder that accepts any combinator token."""
    return SelectorBuilder(BuilderSettings(validate_combinators=False))

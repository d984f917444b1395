import pytest

from url_builder import URLBuilder


@pytest.fixture
def builder():
    """Fixture providing a fresh URLBuilder."""
    return URLBuilder()

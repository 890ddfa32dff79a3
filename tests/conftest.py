import pytest

from urlicious import Url

BASE_URL = "http://google.com"


@pytest.fixture
def base_url():
    """Root URL shared by the Url tests."""
    return BASE_URL


@pytest.fixture
def url():
    """Fresh Url pointing at the base root."""
    return Url(BASE_URL)

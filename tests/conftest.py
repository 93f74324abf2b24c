import pytest
import requests

from helpers import TEST_CONFIG, FakeClock, FakeComicVine, FakeGetComics
from vanquish import create_app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def network_down():
    return requests.exceptions.ConnectionError("Network Error")


@pytest.fixture
def offline_app(network_down, clock):
    """App whose providers are both unreachable."""
    return create_app(
        config=TEST_CONFIG,
        comicvine=FakeComicVine(error=network_down),
        getcomics=FakeGetComics(error=network_down),
        clock=clock,
    )


@pytest.fixture
def offline_client(offline_app):
    return offline_app.test_client()

import pytest
import requests

from helpers import FakeClock, FakeGetComics, raw_comic
from vanquish.breaker import CLOSED, OPEN, CircuitBreaker
from vanquish.comic_service import ComicService, comic_from_publisher, resolve_publisher
from vanquish.getcomics import Publisher
from vanquish.models import (
    SOURCE_FALLBACK,
    SOURCE_FOUND_BY_ID,
    SOURCE_LIVE,
    comic_from_provider,
)

NETWORK = requests.exceptions.ConnectionError("Network Error")

LATEST = [
    [raw_comic("Batman #135 (2023)"), raw_comic("Saga #66 (2023)")],
    [raw_comic("X-Men #1 (2024)"), raw_comic("Spawn #350 (2024)")],
    [raw_comic("Hellboy #1 (1994)")],
]


def titles(result):
    return [c["title"] for c in result.data]


def make_service(client, clock=None):
    breaker = CircuitBreaker(failure_threshold=3, reset_timeout=300, clock=clock or FakeClock())
    return ComicService(client, breaker, page_size=2)


def test_resolve_publisher():
    assert resolve_publisher("Marvel") is Publisher.MARVEL
    assert resolve_publisher("dark horse") is Publisher.DARK_HORSE
    assert resolve_publisher("boom-studios") is Publisher.BOOM_STUDIOS
    assert resolve_publisher("valiant") is None
    assert resolve_publisher(None) is None


def test_comic_from_publisher_matches_whole_words():
    comic = {"title": "Invincible", "description": "An Imagery study", "additionalInfo": {"Publisher": "Image Comics"}}
    assert comic_from_publisher(comic, Publisher.IMAGE)
    assert not comic_from_publisher({"title": "Imagery", "description": ""}, Publisher.IMAGE)
    assert not comic_from_publisher({"title": "DCeased", "description": ""}, Publisher.DC)


def test_list_comics_fetches_pages_covering_the_window():
    client = FakeGetComics({"latest": LATEST})
    result = make_service(client).list_comics(limit=3, offset=1)

    assert result.source == SOURCE_LIVE
    assert titles(result) == ["Saga #66", "X-Men #1", "Spawn #350"]
    assert client.calls == [("latest", 1), ("latest", 2)]
    assert all(c["_source"] == SOURCE_LIVE for c in result.data)


def test_list_comics_without_limit_returns_the_page_holding_offset():
    client = FakeGetComics({"latest": LATEST})
    result = make_service(client).list_comics(limit=None, offset=2)
    assert titles(result) == ["X-Men #1", "Spawn #350"]
    assert client.calls == [("latest", 2)]


def test_list_comics_stops_at_last_provider_page():
    client = FakeGetComics({"latest": LATEST})
    result = make_service(client).list_comics(limit=10, offset=4)
    assert titles(result) == ["Hellboy #1"]
    assert client.calls == [("latest", 3), ("latest", 4)]


def test_list_comics_by_publisher_uses_category():
    client = FakeGetComics({"marvel": [[raw_comic("X-Men #1 (2024)")]]})
    result = make_service(client).list_comics(limit=2, publisher="marvel")
    assert titles(result) == ["X-Men #1"]
    assert client.calls == [("marvel", 1)]


def test_unknown_publisher_uses_latest():
    client = FakeGetComics({"latest": LATEST})
    make_service(client).list_comics(limit=2, publisher="valiant")
    assert client.calls == [("latest", 1)]


def test_list_comics_skips_entries_that_cannot_be_read():
    client = FakeGetComics({"latest": [[raw_comic("Batman #135 (2023)"), None]]})
    result = make_service(client).list_comics(limit=2)
    assert titles(result) == ["Batman #135"]


def test_list_comics_drops_duplicates():
    repeat = raw_comic("Saga #1 (2012)")
    client = FakeGetComics({"latest": [[repeat, repeat]]})
    assert len(make_service(client).list_comics(limit=2).data) == 1


def test_list_comics_fallback_filters_by_publisher():
    result = make_service(FakeGetComics(error=NETWORK)).list_comics(limit=None, publisher="marvel")
    assert result.source == SOURCE_FALLBACK
    assert result.error == "Network Error"
    assert [c["id"] for c in result.data] == [1, 4, 8, 10]
    assert all(c["_source"] == SOURCE_FALLBACK for c in result.data)


def test_list_comics_fallback_when_provider_is_empty():
    result = make_service(FakeGetComics()).list_comics(limit=3, sort_by="title")
    assert result.from_fallback
    assert titles(result)[0] == "All-Star Superman"
    assert len(result.data) == 3


def test_breaker_opens_after_three_network_failures():
    client = FakeGetComics(error=NETWORK)
    service = make_service(client)
    for _ in range(3):
        assert service.list_comics(limit=2).from_fallback
    assert service.breaker.state == OPEN

    result = service.list_comics(limit=2)
    assert result.from_fallback
    assert len(client.calls) == 3


def test_breaker_recovers_after_reset_timeout():
    clock = FakeClock()
    client = FakeGetComics(error=NETWORK)
    service = make_service(client, clock)
    for _ in range(3):
        service.list_comics(limit=2)

    client.error = None
    client.pages = {"latest": LATEST}
    clock.advance(300)

    result = service.list_comics(limit=2)
    assert result.source == SOURCE_LIVE
    assert service.breaker.state == CLOSED


def test_parse_errors_do_not_open_breaker():
    service = make_service(FakeGetComics(error=ValueError("unexpected markup")))
    for _ in range(5):
        service.list_comics(limit=2)
    assert service.breaker.state == CLOSED


def test_search_comics_live_and_fallback():
    client = FakeGetComics({"search": [[raw_comic("Batman #135 (2023)"), raw_comic("Saga #66 (2023)")]]})
    live = make_service(client).search_comics("batman", limit=5)
    assert titles(live) == ["Batman #135"]
    assert live.source == SOURCE_LIVE

    fallback = make_service(FakeGetComics(error=NETWORK)).search_comics("batman")
    assert [c["id"] for c in fallback.data] == [2]
    assert fallback.from_fallback


def test_search_fallback_matches_description():
    result = make_service(FakeGetComics(error=NETWORK)).search_comics("thanos")
    assert titles(result) == ["The Infinity Gauntlet"]


def test_get_comic_found_in_publisher_listing():
    xmen = raw_comic("X-Men #1 (2024)")
    wanted = comic_from_provider(xmen)["id"]
    client = FakeGetComics({"latest": [[raw_comic("Saga #66 (2023)")]], "marvel": [[xmen]]})

    result = make_service(client).get_comic(wanted)

    assert result.source == SOURCE_LIVE
    assert result.data["title"] == "X-Men #1"
    assert result.data["_source"] == SOURCE_FOUND_BY_ID
    assert client.calls == [("latest", 1), ("marvel", 1)]


def test_get_comic_from_bundled_data():
    result = make_service(FakeGetComics()).get_comic(6)
    assert result.data["title"] == "Saga"
    assert result.data["_source"] == "mock_data"
    assert result.from_fallback


def test_get_comic_placeholder_for_unknown_id():
    result = make_service(FakeGetComics()).get_comic(424242)
    assert result.data["title"] == "Comic #424242"
    assert result.data["_source"] == "placeholder"
    assert result.error == "Comic not found"


@pytest.mark.parametrize("comic_id,expected", [(2, "offline_mock"), (424242, "placeholder")])
def test_get_comic_while_offline_skips_provider(comic_id, expected):
    client = FakeGetComics(error=NETWORK)
    service = make_service(client)
    for _ in range(3):
        service.list_comics(limit=2)
    assert service.breaker.state == OPEN

    result = service.get_comic(comic_id)

    assert result.data["_source"] == expected
    assert len(client.calls) == 3


def test_get_comic_survives_failing_sources():
    result = make_service(FakeGetComics(error=ValueError("boom"))).get_comic(3)
    assert result.data["title"] == "Watchmen"
    assert result.data["_source"] == "mock_data"


def test_zero_limit_is_an_empty_live_window():
    client = FakeGetComics({"latest": LATEST, "search": LATEST})
    service = make_service(client)

    listed = service.list_comics(limit=0)
    searched = service.search_comics("batman", limit=0)

    assert (listed.data, listed.source) == ([], SOURCE_LIVE)
    assert (searched.data, searched.source) == ([], SOURCE_LIVE)
    assert service.breaker.failures == 0

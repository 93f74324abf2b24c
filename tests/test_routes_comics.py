from helpers import TEST_CONFIG, FakeComicVine, FakeGetComics, raw_comic
from vanquish import create_app
from vanquish.models import comic_from_provider


def live_client(clock, pages):
    app = create_app(
        config=TEST_CONFIG,
        comicvine=FakeComicVine(),
        getcomics=FakeGetComics(pages),
        clock=clock,
    )
    return app.test_client()


def test_list_comics_fallback(offline_client):
    resp = offline_client.get("/api/comics")
    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body) == 12
    assert body[0]["_source"] == "fallback"
    assert resp.headers["X-Fallback"] == "true"
    assert resp.headers["X-Error"] == "Network Error"


def test_list_comics_by_publisher_fallback(offline_client):
    resp = offline_client.get("/api/comics?publisher=dc&limit=2")
    assert [c["id"] for c in resp.get_json()] == [2, 3]


def test_list_comics_sorted(offline_client):
    resp = offline_client.get("/api/comics?sortBy=date&sortDirection=desc&limit=1")
    assert resp.get_json()[0]["title"] == "Saga"


def test_list_comics_rejects_bad_parameters(offline_client):
    assert offline_client.get("/api/comics?limit=ten").status_code == 400
    assert offline_client.get("/api/comics?sortBy=power").status_code == 400


def test_list_comics_live(clock):
    client = live_client(clock, {
        "latest": [[raw_comic("Batman #135 (2023)"), raw_comic("Saga #66 (2023)")], [raw_comic("Spawn #350 (2024)")]],
    })
    resp = client.get("/api/comics?limit=3")
    assert [c["title"] for c in resp.get_json()] == ["Batman #135", "Saga #66", "Spawn #350"]
    assert "X-Fallback" not in resp.headers

    # noLimit returns only the first provider page
    resp = client.get("/api/comics?noLimit=true")
    assert len(resp.get_json()) == 2


def test_search_comics(offline_client):
    resp = offline_client.get("/api/comics/search?query=superman")
    assert [c["title"] for c in resp.get_json()] == ["All-Star Superman"]
    assert resp.headers["X-Fallback"] == "true"
    assert offline_client.get("/api/comics/search").status_code == 400


def test_get_comic_by_id(offline_client):
    resp = offline_client.get("/api/comics/5")
    assert resp.status_code == 200
    assert resp.get_json()["title"] == "All-Star Superman"
    assert resp.headers["X-Fallback"] == "true"


def test_get_live_comic_by_id(clock):
    saga = raw_comic("Saga #66 (2023)")
    client = live_client(clock, {"image": [[saga]]})
    resp = client.get(f"/api/comics/{comic_from_provider(saga)['id']}")
    body = resp.get_json()
    assert body["title"] == "Saga #66"
    assert body["_source"] == "found_by_id"
    assert "X-Fallback" not in resp.headers


def test_get_unknown_comic_returns_placeholder(offline_client):
    resp = offline_client.get("/api/comics/987654")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["title"] == "Comic #987654"
    assert body["downloadLinks"] == {"READONLINE": "https://getcomics.info/"}
    assert resp.headers["X-Fallback"] == "true"


def test_get_comic_rejects_non_numeric_id(offline_client):
    resp = offline_client.get("/api/comics/abc")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid comic ID"}


def test_health_reports_breaker_state(offline_client):
    assert offline_client.get("/api/health").get_json() == {"status": "healthy", "comicsProvider": "closed"}
    for _ in range(3):
        offline_client.get("/api/comics")
    assert offline_client.get("/api/health").get_json()["comicsProvider"] == "open"


def test_route_listing(offline_client):
    rules = offline_client.get("/api/__routes").get_json()
    for rule in ("/api/characters", "/api/comics/<comic_id>", "/api/universe/<publisher>", "/api/compare"):
        assert rule in rules


def test_non_ascii_search_reason_header_is_ascii(clock):
    client = live_client(clock, {})
    resp = client.get("/api/comics/search", query_string={"query": "蝙蝠侠"})
    assert resp.status_code == 200
    assert resp.get_json() == []
    reason = resp.headers["X-Error"]
    assert reason.isascii()
    assert reason.startswith("Provider returned no comics for '\\u")


def test_zero_limit_on_live_provider_is_not_fallback(clock):
    client = live_client(clock, {"latest": [[raw_comic("Batman #135 (2023)")]]})
    resp = client.get("/api/comics?limit=0")
    assert resp.status_code == 200
    assert resp.get_json() == []
    assert "X-Fallback" not in resp.headers
    assert "X-Error" not in resp.headers

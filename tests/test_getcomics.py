import pytest
import requests

from vanquish.getcomics import (
    GetComicsClient,
    GetComicsError,
    Publisher,
    link_key,
    parse_detail,
    parse_listing,
)

LISTING_HTML = """
<html><body>
<article class="post type-post">
  <div class="post-header-image">
    <a href="https://getcomics.example/dc/batman-135-2023/">
      <img src="data:image/gif;base64,R0lGOD" data-lazy-src="https://img.example/batman135.jpg">
    </a>
  </div>
  <div class="post-info">
    <h1 class="post-title"><a href="https://getcomics.example/dc/batman-135-2023/">Batman #135 (2023)</a></h1>
    <p class="post-excerpt">The Joker's   endgame begins.</p>
  </div>
</article>
<article class="post type-post">
  <div class="post-header-image"><a href="/marvel/x-men-1-2024/"><img src="/covers/xmen1.jpg"></a></div>
  <div class="post-info">
    <h1 class="post-title"><a href="/marvel/x-men-1-2024/">X-Men #1 (2024)</a></h1>
  </div>
</article>
<article class="post"><div class="post-info"><p>Sponsored</p></div></article>
</body></html>
"""

DETAIL_HTML = """
<html><body>
<section class="post-contents">
  <p>Gotham falls as the Joker's final plan unfolds.</p>
  <p style="text-align: center;"><strong>Year :</strong> 2023 | <strong>Size :</strong> 45 MB</p>
  <div class="aio-pulse"><a href="https://dl.example/batman135.cbz" title="Download Now">DOWNLOAD NOW</a></div>
  <div class="aio-pulse"><a href="https://read.example/batman135" title="Read Online">READ ONLINE</a></div>
  <a class="aio-red" href="https://mega.example/batman135" title="MEGA">MEGA</a>
</section>
</body></html>
"""


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def get(self, url, params=None, timeout=None, **kwargs):
        self.requests.append((url, params))
        handler = self.routes.get(url)
        if handler is None:
            return FakeResponse("", status=404)
        if isinstance(handler, Exception):
            raise handler
        return FakeResponse(handler)


def test_link_key():
    assert link_key("Read Online") == "READONLINE"
    assert link_key("Download Now") == "DOWNLOADNOW"


def test_parse_listing_extracts_posts():
    entries = parse_listing(LISTING_HTML, "https://getcomics.example")
    assert [e["title"] for e in entries] == ["Batman #135 (2023)", "X-Men #1 (2024)"]
    first, second = entries
    assert first["coverPage"] == "https://img.example/batman135.jpg"
    assert first["description"] == "The Joker's endgame begins."
    assert first["url"] == "https://getcomics.example/dc/batman-135-2023/"
    assert second["coverPage"] == "https://getcomics.example/covers/xmen1.jpg"
    assert second["url"] == "https://getcomics.example/marvel/x-men-1-2024/"
    assert second["description"] == ""


def test_parse_detail_extracts_links_and_information():
    detail = parse_detail(DETAIL_HTML)
    assert detail["information"] == {"Year": "2023", "Size": "45 MB"}
    assert detail["downloadLinks"] == {
        "DOWNLOADNOW": "https://dl.example/batman135.cbz",
        "READONLINE": "https://read.example/batman135",
        "MEGA": "https://mega.example/batman135",
    }
    assert detail["description"] == "Gotham falls as the Joker's final plan unfolds."


def test_client_fetches_listing_and_details():
    session = FakeSession({
        "https://getcomics.example/cat/dc/": LISTING_HTML,
        "https://getcomics.example/dc/batman-135-2023/": DETAIL_HTML,
        "https://getcomics.example/marvel/x-men-1-2024/": requests.exceptions.ConnectionError("reset"),
    })
    client = GetComicsClient(base_url="https://getcomics.example", session=session)

    comics = client.publisher_comics(Publisher.DC, 1)

    assert len(comics) == 2
    batman, xmen = comics
    assert batman["downloadLinks"]["READONLINE"] == "https://read.example/batman135"
    assert batman["information"]["Year"] == "2023"
    assert batman["description"] == "The Joker's endgame begins."
    assert "url" not in batman
    # detail page failed: listing data is kept
    assert xmen["downloadLinks"] == {}
    assert xmen["description"] == ""


def test_client_page_urls_and_search_params():
    session = FakeSession({
        "https://getcomics.example/page/3/": LISTING_HTML,
        "https://getcomics.example/": LISTING_HTML,
    })
    client = GetComicsClient(base_url="https://getcomics.example/", fetch_details=False, session=session)

    assert len(client.latest_comics(3)) == 2
    assert len(client.search_comics("batman")) == 2
    assert session.requests == [
        ("https://getcomics.example/page/3/", None),
        ("https://getcomics.example/", {"s": "batman"}),
    ]
    assert client.search_comics("") == []


def test_client_raises_on_http_error():
    client = GetComicsClient(base_url="https://getcomics.example", session=FakeSession({}))
    with pytest.raises(requests.exceptions.HTTPError):
        client.latest_comics(1)


def test_client_rejects_empty_page():
    client = GetComicsClient(base_url="https://getcomics.example", session=FakeSession({"https://getcomics.example/": ""}))
    with pytest.raises(GetComicsError):
        client.latest_comics(1)

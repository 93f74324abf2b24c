"""Fake providers and sample payloads shared by the test modules."""
import copy

from vanquish.models import character_from_comicvine

TEST_CONFIG = {
    "logging": {"level": "WARNING", "file": None},
    "providers": {"getcomics": {"page_size": 2}},
    "breaker": {"failure_threshold": 3, "reset_timeout": 300},
}


def comicvine_character(char_id, name, publisher="Marvel", real_name=None, gender=1):
    return character_from_comicvine({
        "id": char_id,
        "name": name,
        "real_name": real_name,
        "gender": gender,
        "publisher": {"name": publisher},
        "image": {"medium_url": f"https://img.example/{char_id}.jpg"},
    })


def raw_comic(title, cover=None, description="", **information):
    return {
        "title": title,
        "coverPage": cover or f"https://img.example/{title.replace(' ', '_')}.jpg",
        "description": description,
        "downloadLinks": {"READONLINE": "https://read.example/" + title.replace(" ", "-")},
        "information": information,
    }


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeComicVine:
    """Stands in for ComicVineClient; raises ``error`` from every call when set."""

    def __init__(self, characters=None, error=None, total=None):
        self._characters = characters or []
        self.error = error
        self.total = total
        self.calls = []

    def _check(self, name, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error

    def characters(self, limit=None, offset=0):
        self._check("characters", offset)
        return copy.deepcopy(self._characters[offset:])

    def search_characters(self, query, limit=None):
        self._check("search_characters", query)
        return [copy.deepcopy(c) for c in self._characters if query.lower() in c["name"].lower()]

    def character(self, character_id):
        self._check("character", character_id)
        return next((copy.deepcopy(c) for c in self._characters if c["id"] == str(character_id)), None)

    def count_characters(self, query=None):
        self._check("count_characters", query)
        if self.total is not None:
            return self.total
        if query:
            return len(self.search_characters(query))
        return len(self._characters)


class FakeGetComics:
    """Stands in for GetComicsClient.

    ``pages`` maps "latest", a Publisher value or "search" to a list of pages
    (each a list of raw comic dicts).
    """

    def __init__(self, pages=None, error=None):
        self.pages = pages or {}
        self.error = error
        self.calls = []

    def _page(self, key, page):
        self.calls.append((key, page))
        if self.error is not None:
            raise self.error
        pages = self.pages.get(key, [])
        if page - 1 < len(pages):
            return copy.deepcopy(pages[page - 1])
        return []

    def latest_comics(self, page=1):
        return self._page("latest", page)

    def publisher_comics(self, publisher, page=1):
        return self._page(publisher.value, page)

    def search_comics(self, query, page=1):
        return [c for c in self._page("search", page) if query.lower() in c["title"].lower()]

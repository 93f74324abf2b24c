"""
Comic data access on top of the getcomics provider.

Live calls go through a circuit breaker: after repeated network failures the
provider is skipped and the bundled comics are served until the breaker lets
a trial call through again.
"""
from __future__ import annotations

import copy
import logging
import re
from typing import Callable, Dict, List, Optional

from . import fallback
from .breaker import OPEN, CircuitBreaker
from .getcomics import Publisher
from .models import (
    SOURCE_ERROR_FALLBACK,
    SOURCE_FALLBACK,
    SOURCE_FOUND_BY_ID,
    SOURCE_LIVE,
    SOURCE_MOCK_DATA,
    SOURCE_OFFLINE_MOCK,
    FetchResult,
    comic_from_provider,
    placeholder_comic,
    tag_source,
    unique_comics,
)
from .sorting import ASC, COMIC_SORT_FIELDS, paginate, sort_records

# Publisher tag (as sent by clients) -> provider category
PUBLISHER_STRATEGIES: Dict[str, Publisher] = {
    "marvel": Publisher.MARVEL,
    "dc": Publisher.DC,
    "image": Publisher.IMAGE,
    "dark horse": Publisher.DARK_HORSE,
    "dark-horse": Publisher.DARK_HORSE,
    "boom studios": Publisher.BOOM_STUDIOS,
    "boom-studios": Publisher.BOOM_STUDIOS,
    "idw": Publisher.IDW,
    "dynamite": Publisher.DYNAMITE,
}

# Words identifying a publisher's books in the fallback data
PUBLISHER_KEYWORDS: Dict[Publisher, str] = {
    Publisher.MARVEL: "marvel",
    Publisher.DC: "dc",
    Publisher.IMAGE: "image",
    Publisher.DARK_HORSE: "dark horse",
    Publisher.BOOM_STUDIOS: "boom",
    Publisher.IDW: "idw",
    Publisher.DYNAMITE: "dynamite",
}


class ProviderUnavailable(RuntimeError):
    """Raised instead of calling the provider while the breaker is open."""


def resolve_publisher(tag: Optional[str]) -> Optional[Publisher]:
    if not tag:
        return None
    return PUBLISHER_STRATEGIES.get(tag.strip().lower())


def comic_matches(comic: dict, query: str) -> bool:
    needle = query.lower()
    return needle in (comic.get("title") or "").lower() or needle in (comic.get("description") or "").lower()


def comic_from_publisher(comic: dict, publisher: Publisher) -> bool:
    pattern = re.compile(rf"\b{re.escape(PUBLISHER_KEYWORDS[publisher])}\b", re.IGNORECASE)
    info = comic.get("additionalInfo") or {}
    fields = (info.get("Publisher"), comic.get("title"), comic.get("description"))
    return any(f and pattern.search(str(f)) for f in fields)


class ComicService:
    """Comic lookups with circuit breaking and fallback to the bundled dataset"""

    def __init__(
        self,
        client,
        breaker: Optional[CircuitBreaker] = None,
        comics: Optional[List[dict]] = None,
        page_size: int = 12,
    ):
        self.client = client
        self.breaker = breaker or CircuitBreaker(name="comics provider")
        self.page_size = max(1, page_size)
        self.logger = logging.getLogger(__name__)
        self._comics = comics if comics is not None else fallback.COMICS

    # ----- provider plumbing -----
    def _call(self, fetch: Callable[..., List[dict]], *args) -> List[dict]:
        if not self.breaker.allow_request():
            raise ProviderUnavailable("Operating in offline mode - using mock data")
        try:
            raw = fetch(*args)
        except Exception as e:
            self.breaker.record_failure(e)
            raise
        self.breaker.record_success()
        return raw

    def _process(self, raw: List[dict]) -> List[dict]:
        if not isinstance(raw, list):
            self.logger.error(f"Invalid comics data received: {type(raw).__name__}")
            return []
        comics = []
        for item in raw:
            try:
                comics.append(comic_from_provider(item))
            except Exception as e:
                self.logger.error(f"Error transforming comic: {e}")
        return unique_comics(comics)

    def _fetch_window(
        self,
        fetch_page: Callable[[int], List[dict]],
        offset: int,
        limit: Optional[int],
        label: str,
    ) -> List[dict]:
        """Fetch the provider pages covering [offset, offset+limit) and slice them.

        Without a limit only the page holding ``offset`` is returned. Raises
        LookupError when the fetched pages hold no comics; an empty window
        over non-empty pages (limit=0) is a valid live answer.
        """
        first = offset // self.page_size + 1
        skip = offset - (first - 1) * self.page_size
        last = first if limit is None else (offset + max(limit, 1) - 1) // self.page_size + 1

        raw: List[dict] = []
        for page in range(first, last + 1):
            page_items = self._call(fetch_page, page)
            if not page_items:
                break
            raw.extend(page_items)

        comics = self._process(raw)
        if not comics:
            raise LookupError(f"Provider returned no {label}")
        return comics[skip:] if limit is None else comics[skip:skip + limit]

    def _fallback_comics(self) -> List[dict]:
        return [tag_source(c, SOURCE_FALLBACK) for c in copy.deepcopy(self._comics)]

    def _shape(self, comics: List[dict], sort_by: Optional[str], direction: str) -> List[dict]:
        return sort_records(comics, sort_by, direction, COMIC_SORT_FIELDS)

    # ----- data access -----
    def list_comics(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
        publisher: Optional[str] = None,
        sort_by: Optional[str] = None,
        direction: str = ASC,
    ) -> FetchResult:
        """Latest comics, or one publisher's comics when ``publisher`` is a known tag."""
        strategy = resolve_publisher(publisher)
        if strategy is None:
            if publisher:
                self.logger.info(f"No provider category for publisher '{publisher}', using latest comics")
            fetch_page = self.client.latest_comics
            label = "latest comics"
        else:
            def fetch_page(page: int) -> List[dict]:
                return self.client.publisher_comics(strategy, page)
            label = f"{strategy.value} comics"

        self.logger.info(f"Fetching {label} with limit={limit}, offset={offset}")
        try:
            comics = self._fetch_window(fetch_page, offset, limit, label)
            result = self._shape(comics, sort_by, direction)
            self.logger.info(f"Returning {len(result)} comics from provider")
            return FetchResult(result, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error fetching {label}: {e}")
            self.logger.info(f"Using mock data for {label}")
            comics = self._fallback_comics()
            if strategy is not None:
                comics = [c for c in comics if comic_from_publisher(c, strategy)]
            result = paginate(self._shape(comics, sort_by, direction), offset, limit)
            return FetchResult(result, SOURCE_FALLBACK, str(e))

    def search_comics(self, query: str, limit: Optional[int] = None, offset: int = 0) -> FetchResult:
        self.logger.info(f"Searching comics for '{query}' with limit={limit}, offset={offset}")
        try:
            comics = self._fetch_window(
                lambda page: self.client.search_comics(query, page), offset, limit, f"comics for '{query}'"
            )
            self.logger.info(f"Returning {len(comics)} comics from provider search")
            return FetchResult(comics, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error searching comics for '{query}': {e}")
            self.logger.info("Falling back to mock data for search")
            matches = [c for c in self._fallback_comics() if comic_matches(c, query)]
            return FetchResult(paginate(matches, offset, limit), SOURCE_FALLBACK, str(e))

    def _find_fallback(self, comic_id: int) -> Optional[dict]:
        return next((c for c in copy.deepcopy(self._comics) if c["id"] == comic_id), None)

    def get_comic(self, comic_id: int) -> FetchResult:
        """Single comic by id. Never empty: unknown ids get a placeholder record."""
        self.logger.info(f"Looking for comic with ID: {comic_id}")
        try:
            if self.breaker.state == OPEN:
                self.logger.info("Operating in offline mode - using mock data for comic lookup")
                mock = self._find_fallback(comic_id)
                if mock:
                    return FetchResult(tag_source(mock, SOURCE_OFFLINE_MOCK), SOURCE_FALLBACK)

            sources = [
                ("Latest Comics", self.client.latest_comics),
                ("Marvel Comics", lambda page: self.client.publisher_comics(Publisher.MARVEL, page)),
                ("DC Comics", lambda page: self.client.publisher_comics(Publisher.DC, page)),
                ("Image Comics", lambda page: self.client.publisher_comics(Publisher.IMAGE, page)),
            ]
            for name, fetch in sources:
                try:
                    self.logger.debug(f"Searching for comic in {name}...")
                    comics = self._process(self._call(fetch, 1))
                except Exception as e:
                    self.logger.warning(f"Error searching {name}: {e}")
                    continue
                comic = next((c for c in comics if c["id"] == comic_id), None)
                if comic:
                    self.logger.info(f"Found comic in {name}")
                    return FetchResult(tag_source(comic, SOURCE_FOUND_BY_ID), SOURCE_LIVE)

            mock = self._find_fallback(comic_id)
            if mock:
                self.logger.info("Found comic in mock data")
                return FetchResult(tag_source(mock, SOURCE_MOCK_DATA), SOURCE_FALLBACK)

            self.logger.info(f"Creating placeholder comic with ID: {comic_id}")
            return FetchResult(placeholder_comic(comic_id), SOURCE_FALLBACK, "Comic not found")
        except Exception as e:
            self.logger.exception(f"Error fetching comic by ID {comic_id}")
            mock = self._find_fallback(comic_id)
            if mock:
                return FetchResult(tag_source(mock, SOURCE_ERROR_FALLBACK), SOURCE_FALLBACK, str(e))
            return FetchResult(placeholder_comic(comic_id, error=True), SOURCE_FALLBACK, str(e))

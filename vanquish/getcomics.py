"""
Client for the getcomics-style comics provider.

The provider has no JSON API; listing pages (latest, per publisher
category, search) are scraped, and each listed post can optionally be
followed to its detail page for download links and file information.
Every capability returns raw entries shaped like
``{title, coverPage, description, downloadLinks, information}``.
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

GETCOMICS_BASE = "https://getcomics.info"

LOG = logging.getLogger(__name__)

_INFO_PAIR_RE = re.compile(r"([A-Za-z][A-Za-z ]*?)\s*:\s*([^|]+)")
_LINK_KEY_RE = re.compile(r"[^A-Z0-9]")


class GetComicsError(RuntimeError):
    """The provider page could not be used."""


class Publisher(Enum):
    """Publishers the provider has a category for; value is the category slug."""

    MARVEL = "marvel"
    DC = "dc"
    IMAGE = "image"
    DARK_HORSE = "dark-horse"
    BOOM_STUDIOS = "boom-studios"
    IDW = "idw"
    DYNAMITE = "dynamite"


def clean_text(value: Optional[str]) -> str:
    return re.sub(r"\s+", " ", value or "").strip()


def link_key(label: str) -> str:
    """'Read Online' -> 'READONLINE', 'Download Now' -> 'DOWNLOADNOW'."""
    return _LINK_KEY_RE.sub("", (label or "").upper())


def _image_src(img) -> Optional[str]:
    if img is None:
        return None
    for attr in ("data-lazy-src", "data-src", "src"):
        value = img.get(attr)
        if value and not value.startswith("data:"):
            return value
    return None


def parse_listing(html: str, base_url: str = GETCOMICS_BASE) -> List[Dict[str, Any]]:
    """Extract the posts of one listing page."""
    soup = BeautifulSoup(html, "html.parser")
    entries: List[Dict[str, Any]] = []

    for article in soup.select("article"):
        title_link = article.select_one(".post-title a, h1 a, h2 a")
        if title_link is None:
            continue
        title = clean_text(title_link.get_text(" ", strip=True))
        if not title:
            continue

        href = title_link.get("href") or ""
        if href and not href.startswith("http"):
            href = urljoin(base_url, href)

        cover = _image_src(article.select_one(".post-header-image img") or article.find("img"))
        if cover and not cover.startswith("http"):
            cover = urljoin(base_url, cover)

        excerpt = article.select_one(".post-excerpt")
        description = clean_text(excerpt.get_text(" ", strip=True)) if excerpt else ""

        entries.append({
            "title": title,
            "coverPage": cover,
            "description": description,
            "downloadLinks": {},
            "information": {},
            "url": href,
        })

    return entries


def parse_detail(html: str) -> Dict[str, Any]:
    """Extract download links, file information and description from a post page."""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.select_one(".post-contents") or soup

    information: Dict[str, str] = {}
    description = ""
    for p in root.find_all("p"):
        text = clean_text(p.get_text(" ", strip=True))
        if not text:
            continue
        if p.find("strong") and ":" in text:
            for key, value in _INFO_PAIR_RE.findall(text):
                information[clean_text(key)] = clean_text(value)
        elif not description:
            description = text

    download_links: Dict[str, str] = {}
    for a in root.select(".aio-pulse a, a.aio-red"):
        href = a.get("href")
        label = a.get("title") or a.get_text(" ", strip=True)
        key = link_key(label)
        if href and key and key not in download_links:
            download_links[key] = href

    return {"downloadLinks": download_links, "information": information, "description": description}


class GetComicsClient:
    def __init__(
        self,
        base_url: str = GETCOMICS_BASE,
        timeout: float = 20,
        page_size: int = 12,
        fetch_details: bool = True,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.fetch_details = fetch_details
        self.session = session or requests.Session()

    def _get_html(self, url: str, params: Dict[str, Any] | None = None) -> str:
        LOG.debug(f"GET {url}")
        r = self.session.get(url, params=params, timeout=self.timeout)
        r.raise_for_status()
        if not r.text:
            raise GetComicsError(f"Empty response from {url}")
        return r.text

    def _page_url(self, prefix: str, page: int) -> str:
        page = max(1, int(page or 1))
        if page == 1:
            return f"{self.base_url}{prefix}/"
        return f"{self.base_url}{prefix}/page/{page}/"

    def _listing(self, url: str, params: Dict[str, Any] | None = None) -> List[Dict[str, Any]]:
        html = self._get_html(url, params)
        entries = parse_listing(html, self.base_url)
        if self.fetch_details:
            for entry in entries:
                self._enrich(entry)
        for entry in entries:
            entry.pop("url", None)
        return entries

    def _enrich(self, entry: Dict[str, Any]) -> None:
        url = entry.get("url")
        if not url:
            return
        try:
            detail = parse_detail(self._get_html(url))
        except (requests.exceptions.RequestException, GetComicsError) as e:
            # a broken detail page keeps the listing data
            LOG.warning(f"Could not fetch comic details for '{entry['title']}': {e}")
            return
        entry["downloadLinks"] = detail["downloadLinks"]
        entry["information"] = detail["information"]
        if not entry.get("description"):
            entry["description"] = detail["description"]

    # ----- capability set -----
    def latest_comics(self, page: int = 1) -> List[Dict[str, Any]]:
        return self._listing(self._page_url("", page))

    def publisher_comics(self, publisher: Publisher, page: int = 1) -> List[Dict[str, Any]]:
        return self._listing(self._page_url(f"/cat/{publisher.value}", page))

    def search_comics(self, query: str, page: int = 1) -> List[Dict[str, Any]]:
        if not query:
            return []
        return self._listing(self._page_url("", page), {"s": query})

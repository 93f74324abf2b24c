from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

POWER_STATS = ("intelligence", "strength", "speed", "durability", "power", "combat")

UNKNOWN = "Unknown"
NO_IMAGE_URL = "https://placehold.co/400x600/111827/ffffff?text=No+Image"
COMIC_COVER_PLACEHOLDER = "https://placehold.co/400x600/111827/ffffff?text=Comic+Cover"
READ_ONLINE_KEY = "READONLINE"
READ_ONLINE_URL = "https://getcomics.info/"

# Where a record came from
SOURCE_LIVE = "live"
SOURCE_FALLBACK = "fallback"
SOURCE_FOUND_BY_ID = "found_by_id"
SOURCE_MOCK_DATA = "mock_data"
SOURCE_OFFLINE_MOCK = "offline_mock"
SOURCE_PLACEHOLDER = "placeholder"
SOURCE_ERROR = "error"
SOURCE_ERROR_FALLBACK = "error_fallback_mock"

GENDERS = {1: "Male", 2: "Female"}

_ISSUE_RE = re.compile(r"#(\d+)")
_TRAILING_YEAR_RE = re.compile(r"\((\d{4})\)\s*$")


@dataclass
class FetchResult:
    """Outcome of a data-access call: the payload plus where it came from."""

    data: Any
    source: str = SOURCE_LIVE
    error: Optional[str] = None

    @property
    def from_fallback(self) -> bool:
        return self.source != SOURCE_LIVE


# ----- characters -----

def _text(value: Any, default: str = UNKNOWN) -> str:
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def character_from_comicvine(item: Mapping[str, Any]) -> dict:
    """Map a ComicVine character resource onto the character record shape."""
    powers = item.get("powers")
    if not isinstance(powers, Mapping):
        # ComicVine lists powers by name, not as numeric stats
        powers = {}
    origin = item.get("origin") if isinstance(item.get("origin"), Mapping) else {}
    publisher = item.get("publisher") if isinstance(item.get("publisher"), Mapping) else {}
    image = item.get("image") if isinstance(item.get("image"), Mapping) else {}
    name = _text(item.get("name"))
    aliases = item.get("aliases")

    return {
        "id": str(item.get("id")),
        "name": name,
        "powerstats": {stat: _stat(powers.get(stat)) for stat in POWER_STATS},
        "biography": {
            "full-name": _text(item.get("real_name"), name),
            "alter-egos": _text(aliases, "No alter egos found."),
            "aliases": [aliases.strip()] if isinstance(aliases, str) and aliases.strip() else ["No aliases"],
            "place-of-birth": _text(origin.get("place_of_birth")),
            "first-appearance": UNKNOWN,
            "publisher": _text(publisher.get("name")),
            "alignment": "good",
        },
        "appearance": {
            "gender": GENDERS.get(item.get("gender"), "Other"),
            "race": UNKNOWN,
            "height": [UNKNOWN],
            "weight": [UNKNOWN],
            "eye-color": UNKNOWN,
            "hair-color": UNKNOWN,
        },
        "work": {"occupation": UNKNOWN, "base": UNKNOWN},
        "connections": {"group-affiliation": UNKNOWN, "relatives": UNKNOWN},
        "image": {"url": image.get("medium_url") or NO_IMAGE_URL},
    }


def _stat(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def character_matches(character: Mapping[str, Any], query: str) -> bool:
    """Case-insensitive substring match on name, full name or publisher."""
    needle = query.lower()
    bio = character.get("biography") or {}
    haystacks = (character.get("name"), bio.get("full-name"), bio.get("publisher"))
    return any(h and needle in str(h).lower() for h in haystacks)


# ----- comics -----

def normalize_cover_url(url: Optional[str]) -> str:
    """Lowercase scheme/host and drop query and fragment so CDN variants agree."""
    if not url:
        return ""
    parts = urlsplit(url.strip())
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path, "", ""))


def comic_id(title: Optional[str], cover_url: Optional[str]) -> int:
    """Stable positive 31-bit id for a comic from its title and cover."""
    key = f"{(title or '').strip()}|{normalize_cover_url(cover_url)}"
    digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
    return (int(digest[:8], 16) & 0x7FFFFFFF) or 1


def extract_issue_number(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    match = _ISSUE_RE.search(title)
    return match.group(1) if match else None


def extract_release_date(title: Optional[str], information: Optional[Mapping[str, Any]]) -> Optional[str]:
    if information and information.get("Year"):
        return f"{str(information['Year']).strip()}-01-01"
    if title:
        match = _TRAILING_YEAR_RE.search(title)
        if match:
            return f"{match.group(1)}-01-01"
    return None


def comic_from_provider(item: Mapping[str, Any]) -> dict:
    """Map a raw comics-provider entry onto the comic record shape."""
    raw_title = item.get("title") or ""
    cover = item.get("coverPage")
    information = item.get("information") or {}
    title = _TRAILING_YEAR_RE.sub("", raw_title).strip() or "Unknown Title"

    return {
        "id": comic_id(raw_title, cover),
        "title": title,
        "issueNumber": extract_issue_number(raw_title),
        "description": item.get("description") or "No description available",
        "coverImageUrl": cover or COMIC_COVER_PLACEHOLDER,
        "releaseDate": extract_release_date(raw_title, information),
        "creators": {"writer": [], "artist": []},
        "featuredCharacters": [],
        "downloadLinks": dict(item.get("downloadLinks") or {}),
        "additionalInfo": dict(information),
        "_source": SOURCE_LIVE,
    }


def unique_comics(comics: List[dict]) -> List[dict]:
    """Drop repeats of the same comic (same id) keeping the first one."""
    seen = set()
    result = []
    for comic in comics:
        if comic["id"] in seen:
            continue
        seen.add(comic["id"])
        result.append(comic)
    return result


def placeholder_comic(comic_id_value: int, error: bool = False) -> dict:
    if error:
        description = "Error loading comic details. Please try again later."
    else:
        description = (
            "We could not find detailed information for this comic. "
            "Try browsing comics by publisher."
        )
    return {
        "id": comic_id_value,
        "title": f"Comic #{comic_id_value}",
        "issueNumber": None if error else "1",
        "description": description,
        "coverImageUrl": COMIC_COVER_PLACEHOLDER,
        "releaseDate": None,
        "creators": {"writer": [], "artist": []},
        "featuredCharacters": [],
        "downloadLinks": {READ_ONLINE_KEY: READ_ONLINE_URL},
        "additionalInfo": {},
        "_source": SOURCE_ERROR if error else SOURCE_PLACEHOLDER,
    }


def tag_source(record: Mapping[str, Any], source: str) -> Dict[str, Any]:
    return {**record, "_source": source}

"""
Character data access: ComicVine first, bundled sample characters on failure.

Every public method returns a FetchResult and never raises; provider and
parsing errors are logged and replaced by the fallback dataset.
"""
from __future__ import annotations

import copy
import logging
from typing import Dict, List, Optional

from . import fallback
from .models import SOURCE_FALLBACK, SOURCE_LIVE, FetchResult, character_matches
from .sorting import ASC, CHARACTER_SORT_FIELDS, paginate, sort_records

DEFAULT_SORT = "name"

# Category key -> publisher name as it appears in character records
PUBLISHERS: Dict[str, str] = {
    "marvel": "Marvel Comics",
    "dc": "DC Comics",
}


class CharacterService:
    """Character lookups with fallback to the bundled dataset"""

    def __init__(self, client, characters: Optional[List[dict]] = None):
        self.client = client
        self.logger = logging.getLogger(__name__)
        self._characters = characters if characters is not None else fallback.CHARACTERS

    def _fallback_characters(self) -> List[dict]:
        return copy.deepcopy(self._characters)

    def _shape(self, records: List[dict], sort_by: str, direction: str) -> List[dict]:
        return sort_records(records, sort_by, direction, CHARACTER_SORT_FIELDS, default=DEFAULT_SORT)

    def list_characters(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
        sort_by: str = DEFAULT_SORT,
        direction: str = ASC,
    ) -> FetchResult:
        self.logger.info(
            f"Fetching characters with limit={limit}, offset={offset}, sortBy={sort_by}, sortDirection={direction}"
        )
        try:
            # the provider applies the offset; sorting covers the returned window
            characters = self.client.characters(offset=offset)
            if not characters:
                raise LookupError("No characters found from ComicVine API")
            result = self._shape(characters, sort_by, direction)
            if limit is not None:
                result = result[:limit]
            self.logger.info(f"Returning {len(result)} characters from ComicVine API")
            return FetchResult(result, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error fetching characters from ComicVine API: {e}")
            self.logger.info("Falling back to mock data")
            result = paginate(self._shape(self._fallback_characters(), sort_by, direction), offset, limit)
            self.logger.info(f"Returning {len(result)} characters from mock data")
            return FetchResult(result, SOURCE_FALLBACK, str(e))

    def get_character(self, character_id: str) -> FetchResult:
        """Single character; ``data`` is None when neither source has it."""
        self.logger.info(f"Fetching character with id {character_id}")
        try:
            character = self.client.character(character_id)
            if not character:
                raise LookupError("Character not found in ComicVine API")
            return FetchResult(character, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error with ComicVine API for character {character_id}: {e}")
            self.logger.info("Falling back to mock data for character details")
            match = next((c for c in self._fallback_characters() if c["id"] == str(character_id)), None)
            return FetchResult(match, SOURCE_FALLBACK, str(e))

    def _fallback_search(self, query: str) -> List[dict]:
        matches = [c for c in self._fallback_characters() if character_matches(c, query)]
        self.logger.info(f"Found {len(matches)} mock characters matching '{query}'")
        # added even when other "silver" characters already matched
        if "silver" in query.lower() and not any(c["name"] == "Silver Sable" for c in matches):
            self.logger.info("Adding Silver Sable for special case search")
            matches.append(copy.deepcopy(fallback.SILVER_SABLE))
        return matches

    def search_characters(
        self,
        query: str,
        limit: Optional[int] = None,
        offset: int = 0,
        sort_by: str = DEFAULT_SORT,
        direction: str = ASC,
    ) -> FetchResult:
        self.logger.info(f"Searching characters for '{query}' with limit={limit}, offset={offset}")
        try:
            characters = self.client.search_characters(query)
            if not characters:
                raise LookupError("No results from ComicVine API")
            self.logger.info(f"ComicVine API found {len(characters)} characters matching '{query}'")
            result = paginate(self._shape(characters, sort_by, direction), offset, limit)
            return FetchResult(result, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error with ComicVine API search for '{query}': {e}")
            self.logger.info("Falling back to mock data for character search")
            result = paginate(self._shape(self._fallback_search(query), sort_by, direction), offset, limit)
            return FetchResult(result, SOURCE_FALLBACK, str(e))

    def list_characters_by_publisher(
        self,
        publisher: str,
        limit: Optional[int] = None,
        offset: int = 0,
        sort_by: str = DEFAULT_SORT,
        direction: str = ASC,
    ) -> FetchResult:
        """Characters of one universe; ``publisher`` is a key of PUBLISHERS (any case).

        An unknown key gives an empty fallback result.
        """
        publisher_name = PUBLISHERS.get((publisher or "").strip().lower())
        if publisher_name is None:
            self.logger.warning(f"Unknown publisher '{publisher}'")
            return FetchResult([], SOURCE_FALLBACK, f"Unknown publisher '{publisher}'")
        self.logger.info(f"Fetching {publisher_name} characters")
        try:
            characters = [
                c for c in self.client.characters()
                if c["biography"]["publisher"] == publisher_name
            ]
            if not characters:
                raise LookupError(f"No {publisher_name} characters from ComicVine API")
            result = paginate(self._shape(characters, sort_by, direction), offset, limit)
            return FetchResult(result, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error fetching {publisher_name} characters from ComicVine API: {e}")
            self.logger.info("Falling back to mock data for publisher characters")
            matches = [
                c for c in self._fallback_characters()
                if c["biography"].get("publisher") == publisher_name
            ]
            result = paginate(self._shape(matches, sort_by, direction), offset, limit)
            return FetchResult(result, SOURCE_FALLBACK, str(e))

    def count_characters(self, query: Optional[str] = None) -> FetchResult:
        try:
            count = self.client.count_characters(query)
            if not count:
                raise LookupError("ComicVine API reported no characters")
            return FetchResult(count, SOURCE_LIVE)
        except Exception as e:
            self.logger.warning(f"Error fetching character count from ComicVine API: {e}")
            if query:
                count = len(self._fallback_search(query))
            else:
                count = len(self._characters)
            return FetchResult(count, SOURCE_FALLBACK, str(e))

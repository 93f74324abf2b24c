from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from .models import character_from_comicvine

COMICVINE_BASE = "https://comicvine.gamespot.com/api"
CHARACTER_FIELDS = "id,name,image,deck,description,publisher,powers,gender,origin,real_name,aliases"
# ComicVine resource type prefix for characters
CHARACTER_TYPE_ID = "4005"

LOG = logging.getLogger(__name__)


class ComicVineError(RuntimeError):
    """ComicVine answered, but not with a usable result."""


class ComicVineClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = COMICVINE_BASE,
        timeout: float = 20,
        page_size: int = 100,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key or os.getenv("COMICVINE_API_KEY")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.session = session or requests.Session()

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        if not self.api_key:
            raise ComicVineError("COMICVINE_API_KEY is not set")
        params = {
            **(params or {}),
            "api_key": self.api_key,
            "format": "json",
            "field_list": CHARACTER_FIELDS,
        }
        url = f"{self.base_url}{path}"
        LOG.debug(f"GET {url}")
        r = self.session.get(url, params=params, headers={"Accept": "application/json"}, timeout=self.timeout)
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, dict) or data.get("status_code") != 1:
            error = data.get("error") if isinstance(data, dict) else "malformed response"
            raise ComicVineError(f"ComicVine error: {error}")
        return data

    # ----- public helpers -----
    def characters(self, limit: Optional[int] = None, offset: int = 0) -> List[dict]:
        data = self._get("/characters/", {"limit": limit or self.page_size, "offset": offset})
        return [self.normalize(r) for r in data.get("results") or []]

    def search_characters(self, query: str, limit: Optional[int] = None) -> List[dict]:
        if not query:
            return []
        data = self._get("/characters/", {"filter": f"name:{query}", "limit": limit or self.page_size})
        return [self.normalize(r) for r in data.get("results") or []]

    def character(self, character_id: str) -> Optional[dict]:
        data = self._get(f"/character/{CHARACTER_TYPE_ID}-{character_id}/")
        result = data.get("results")
        if not isinstance(result, dict) or not result:
            return None
        return self.normalize(result)

    def count_characters(self, query: Optional[str] = None) -> int:
        params: Dict[str, Any] = {"limit": 1}
        if query:
            params["filter"] = f"name:{query}"
        data = self._get("/characters/", params)
        return int(data.get("number_of_total_results") or 0)

    @staticmethod
    def normalize(item: Dict[str, Any]) -> Dict[str, Any]:
        return character_from_comicvine(item)
